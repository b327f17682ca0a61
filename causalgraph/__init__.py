"""causalgraph - causal dependency graphs of events."""

__version__ = "0.1.0"

from .config import RenderOptions, load_render_options
from .errors import CausalGraphError, CycleDetectedError, UnknownEventError
from .graph import (
    CausalGraph,
    ancestors,
    causal_cone,
    causal_depth,
    causal_width,
    descendants,
    events_at_depth,
    from_hypergraph,
    in_degree,
    is_acyclic,
    is_causal_predecessor,
    out_degree,
    sink_events,
    source_events,
    stats,
    to_adjacency_list,
    topological_sort,
)
from .hypergraph import Hypergraph, HypergraphSource
from .models import GraphStats
from .render import layout, to_dot, to_svg

__all__ = [
    "__version__",
    "CausalGraph",
    "CausalGraphError",
    "CycleDetectedError",
    "GraphStats",
    "Hypergraph",
    "HypergraphSource",
    "RenderOptions",
    "UnknownEventError",
    "ancestors",
    "causal_cone",
    "causal_depth",
    "causal_width",
    "descendants",
    "events_at_depth",
    "from_hypergraph",
    "in_degree",
    "is_acyclic",
    "is_causal_predecessor",
    "layout",
    "load_render_options",
    "out_degree",
    "sink_events",
    "source_events",
    "stats",
    "to_adjacency_list",
    "to_dot",
    "to_svg",
    "topological_sort",
]
