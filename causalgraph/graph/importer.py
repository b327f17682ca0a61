"""Build a causal graph from a hypergraph."""

from __future__ import annotations

import logging
from itertools import combinations

from ..hypergraph import HypergraphSource
from .core import CausalGraph
from .ordering import event_sort_key

logger = logging.getLogger(__name__)


def from_hypergraph(source: HypergraphSource) -> CausalGraph:
    """Treat every vertex as an event and every hyperedge as an ordered chain.

    Members of each hyperedge are sorted by ``event_sort_key``; every earlier
    member becomes a causal predecessor of every later one, so a hyperedge of
    size k contributes k*(k-1)/2 dependencies.
    """
    graph = CausalGraph()
    for vertex in sorted(source.list_vertices(), key=event_sort_key):
        graph = graph.add_event(vertex)

    hyperedges = [sorted(edge, key=event_sort_key) for edge in source.list_hyperedges()]
    for members in sorted(hyperedges, key=lambda m: [event_sort_key(v) for v in m]):
        for vertex in members:
            if not graph.has_event(vertex):
                graph = graph.add_event(vertex)
        for src, dst in combinations(members, 2):
            graph = graph.add_dependency(src, dst)

    logger.debug(
        "Imported hypergraph: %d events, %d dependencies from %d hyperedges",
        graph.event_count(),
        graph.dependency_count(),
        len(hyperedges),
    )
    return graph
