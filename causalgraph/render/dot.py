"""DOT (Graphviz) emitter."""

from __future__ import annotations

import re

from ..config import RenderOptions
from ..graph.core import CausalGraph
from ..graph.ordering import event_sort_key


_BARE_ID = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
# DOT keywords are case-insensitive and cannot be bare ids
_KEYWORDS = frozenset({"node", "edge", "graph", "digraph", "subgraph", "strict"})


def _esc(s: str) -> str:
    return s.replace("\\", "\\\\").replace('"', '\\"')


def _graph_id(name: str) -> str:
    if _BARE_ID.match(name) and name.lower() not in _KEYWORDS:
        return name
    return f'"{_esc(name)}"'


def to_dot(graph: CausalGraph, options: RenderOptions | None = None) -> str:
    """Render the graph as a top-to-bottom digraph.

    Node labels are the event id, plus the metadata "rule" on a second line.
    """
    opts = options or RenderOptions()

    lines = [
        f"digraph {_graph_id(opts.name)} {{",
        "  rankdir=TB;",
    ]

    for event in sorted(graph.events, key=event_sort_key):
        metadata = graph.event_data.get(event) or {}
        label = _esc(str(event))
        if "rule" in metadata:
            label = f"{label}\\n{_esc(str(metadata['rule']))}"
        lines.append(f'  "{_esc(str(event))}" [label="{label}"];')

    for src, dst in graph.edges():
        lines.append(f'  "{_esc(str(src))}" -> "{_esc(str(dst))}";')

    lines.append("}")
    return "\n".join(lines) + "\n"
