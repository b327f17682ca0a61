"""Causal graph construction, ordering and queries."""

from .core import CausalGraph
from .importer import from_hypergraph
from .ordering import event_sort_key, is_acyclic, topological_sort
from .queries import (
    DepthState,
    ancestors,
    causal_cone,
    causal_depth,
    causal_width,
    depth_table,
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

__all__ = [
    "CausalGraph",
    "DepthState",
    "ancestors",
    "causal_cone",
    "causal_depth",
    "causal_width",
    "depth_table",
    "descendants",
    "event_sort_key",
    "events_at_depth",
    "from_hypergraph",
    "in_degree",
    "is_acyclic",
    "is_causal_predecessor",
    "out_degree",
    "sink_events",
    "source_events",
    "stats",
    "to_adjacency_list",
    "topological_sort",
]
