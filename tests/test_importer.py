import pytest

from causalgraph.graph import (
    CausalGraph,
    causal_depth,
    from_hypergraph,
    is_causal_predecessor,
    topological_sort,
)
from causalgraph.hypergraph import Hypergraph, HypergraphSource


class _ListSource:
    """Bare collaborator exposing only the two read operations."""

    def __init__(self, vertices, hyperedges) -> None:
        self._vertices = vertices
        self._hyperedges = hyperedges

    def list_vertices(self):
        return list(self._vertices)

    def list_hyperedges(self):
        return [frozenset(e) for e in self._hyperedges]


def test_single_hyperedge_becomes_ordered_chain() -> None:
    hg = Hypergraph.build(["a", "b", "c"], [["c", "a", "b"]])
    g = from_hypergraph(hg)

    assert g.events == {"a", "b", "c"}
    assert g.edges() == [("a", "b"), ("a", "c"), ("b", "c")]
    assert is_causal_predecessor(g, "a", "c")
    assert all(g.event_metadata(v) == {} for v in "abc")


def test_hyperedge_of_size_k_yields_k_choose_2_dependencies() -> None:
    g = from_hypergraph(Hypergraph.build(hyperedges=[range(5)]))
    assert g.dependency_count() == 10
    assert topological_sort(g) == [0, 1, 2, 3, 4]
    assert causal_depth(g, 4) == 4


def test_shared_vertices_compose_transitively() -> None:
    g = from_hypergraph(Hypergraph.build(["a", "b", "c"], [["a", "b"], ["b", "c"]]))
    assert g.edges() == [("a", "b"), ("b", "c")]
    assert is_causal_predecessor(g, "a", "c")


def test_vertices_without_hyperedges_become_isolated_events() -> None:
    g = from_hypergraph(Hypergraph.build(["lonely", "a", "b"], [["a", "b"]]))
    assert g.has_event("lonely")
    assert g.immediate_predecessors("lonely") == frozenset()


def test_import_order_does_not_change_edges() -> None:
    edges = [["a", "b", "c"], ["c", "d"], ["b", "d"]]
    forward = from_hypergraph(_ListSource("abcd", edges))
    backward = from_hypergraph(_ListSource(reversed("abcd"), list(reversed(edges))))
    assert forward == backward


def test_mixed_id_types_use_canonical_order() -> None:
    g = from_hypergraph(_ListSource([2, "x", 1], [[2, "x", 1]]))
    assert g.edges() == [(1, 2), (1, "x"), (2, "x")]


def test_vertices_missing_from_vertex_list_are_added() -> None:
    g = from_hypergraph(_ListSource([], [["a", "b"]]))
    assert g.edges() == [("a", "b")]


def test_list_source_satisfies_protocol() -> None:
    assert isinstance(_ListSource([], []), HypergraphSource)
    assert isinstance(Hypergraph(), HypergraphSource)


def test_hypergraph_rejects_empty_hyperedge() -> None:
    with pytest.raises(ValueError):
        Hypergraph().add_hyperedge([])


def test_empty_hypergraph_gives_empty_graph() -> None:
    assert from_hypergraph(Hypergraph()) == CausalGraph()
