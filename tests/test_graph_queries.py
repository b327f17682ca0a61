import pytest

from causalgraph.errors import CycleDetectedError
from causalgraph.graph import (
    CausalGraph,
    ancestors,
    causal_cone,
    causal_depth,
    causal_width,
    descendants,
    events_at_depth,
    in_degree,
    is_causal_predecessor,
    out_degree,
    sink_events,
    source_events,
    stats,
    to_adjacency_list,
)
from causalgraph.models import GraphStats


def test_chain_depths_and_ancestry(chain_graph: CausalGraph) -> None:
    assert causal_depth(chain_graph, "e1") == 0
    assert causal_depth(chain_graph, "e2") == 1
    assert causal_depth(chain_graph, "e3") == 2
    assert ancestors(chain_graph, "e3") == {"e1", "e2"}
    assert descendants(chain_graph, "e1") == {"e2", "e3"}
    assert ancestors(chain_graph, "e1") == set()


def test_is_causal_predecessor_is_transitive(chain_graph: CausalGraph) -> None:
    assert is_causal_predecessor(chain_graph, "e1", "e2")
    assert is_causal_predecessor(chain_graph, "e2", "e3")
    assert is_causal_predecessor(chain_graph, "e1", "e3")
    assert not is_causal_predecessor(chain_graph, "e3", "e1")


def test_shared_ancestors_are_reported_once(diamond_graph: CausalGraph) -> None:
    assert ancestors(diamond_graph, "d") == {"a", "b", "c"}
    assert descendants(diamond_graph, "a") == {"b", "c", "d"}


def test_traversal_terminates_on_cycles(two_cycle_graph: CausalGraph) -> None:
    assert ancestors(two_cycle_graph, "x") == {"y"}
    assert descendants(two_cycle_graph, "x") == {"y"}
    assert is_causal_predecessor(two_cycle_graph, "x", "y")
    assert is_causal_predecessor(two_cycle_graph, "y", "x")


def test_degrees_sources_and_sinks(diamond_graph: CausalGraph) -> None:
    assert in_degree(diamond_graph, "d") == 2
    assert out_degree(diamond_graph, "a") == 2
    assert in_degree(diamond_graph, "a") == 0
    assert in_degree(diamond_graph, "missing") == 0
    assert out_degree(diamond_graph, "missing") == 0
    assert source_events(diamond_graph) == {"a"}
    assert sink_events(diamond_graph) == {"d"}


def test_isolated_event_is_source_and_sink() -> None:
    g = CausalGraph.build(["e1", "e2", "e3"], [("e1", "e3")])
    assert source_events(g) == {"e1", "e2"}
    assert sink_events(g) == {"e2", "e3"}


def test_depth_takes_longest_path() -> None:
    g = CausalGraph.build(["a", "b", "c"], [("a", "b"), ("b", "c"), ("a", "c")])
    assert causal_depth(g, "c") == 2


def test_depth_of_absent_event_is_zero(chain_graph: CausalGraph) -> None:
    assert causal_depth(chain_graph, "nowhere") == 0


def test_depth_raises_on_cycle(two_cycle_graph: CausalGraph) -> None:
    with pytest.raises(CycleDetectedError) as exc:
        causal_depth(two_cycle_graph, "x")
    assert exc.value.event in {"x", "y"}
    assert "Cycle detected" in str(exc.value)


def test_depth_raises_downstream_of_cycle_only() -> None:
    g = CausalGraph.build(
        ["a", "b", "c", "d"],
        [("a", "b"), ("b", "c"), ("c", "b"), ("c", "d")],
    )
    assert causal_depth(g, "a") == 0
    with pytest.raises(CycleDetectedError):
        causal_depth(g, "d")


def test_self_dependency_is_a_trivial_cycle() -> None:
    g = CausalGraph.build(["a"], [("a", "a")])
    assert ancestors(g, "a") == set()
    with pytest.raises(CycleDetectedError) as exc:
        causal_depth(g, "a")
    assert exc.value.event == "a"


def test_deep_chain_does_not_hit_recursion_limit() -> None:
    n = 3000
    g = CausalGraph.build(range(n), [(i, i + 1) for i in range(n - 1)])
    assert causal_depth(g, n - 1) == n - 1


def test_events_at_depth_and_width(diamond_graph: CausalGraph) -> None:
    assert events_at_depth(diamond_graph, 0) == {"a"}
    assert events_at_depth(diamond_graph, 1) == {"b", "c"}
    assert events_at_depth(diamond_graph, 2) == {"d"}
    assert events_at_depth(diamond_graph, 7) == set()
    assert causal_width(diamond_graph) == {0: 1, 1: 2, 2: 1}


def test_width_of_empty_graph() -> None:
    assert causal_width(CausalGraph()) == {}


def test_width_raises_on_cycle(two_cycle_graph: CausalGraph) -> None:
    with pytest.raises(CycleDetectedError):
        causal_width(two_cycle_graph)


def test_causal_cone() -> None:
    g = CausalGraph.build(
        ["e1", "e2", "e3", "e4"],
        [("e1", "e2"), ("e2", "e3")],
    )
    assert causal_cone(g, "e2") == {"e1", "e3"}
    assert causal_cone(g, "e4") == set()


def test_stats_on_chain(chain_graph: CausalGraph) -> None:
    s = stats(chain_graph)
    assert s.event_count == 3
    assert s.dependency_count == 2
    assert s.source_count == 1
    assert s.sink_count == 1
    assert s.max_causal_depth == 2
    assert s.average_in_degree == pytest.approx(2 / 3)
    assert s.average_out_degree == pytest.approx(2 / 3)
    assert s.is_acyclic is True


def test_stats_on_empty_graph() -> None:
    assert stats(CausalGraph()) == GraphStats(
        event_count=0,
        dependency_count=0,
        source_count=0,
        sink_count=0,
        max_causal_depth=0,
        average_in_degree=0.0,
        average_out_degree=0.0,
        is_acyclic=True,
    )


def test_stats_raises_on_cycle(two_cycle_graph: CausalGraph) -> None:
    with pytest.raises(CycleDetectedError):
        stats(two_cycle_graph)


def test_adjacency_list(diamond_graph: CausalGraph) -> None:
    assert to_adjacency_list(diamond_graph) == {
        "a": ["b", "c"],
        "b": ["d"],
        "c": ["d"],
        "d": [],
    }
