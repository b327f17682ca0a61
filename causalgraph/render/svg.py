"""SVG emitter built on the layered layout (no external deps)."""

from __future__ import annotations

import html
import logging

from ..config import RenderOptions
from ..graph.core import CausalGraph
from ..graph.ordering import event_sort_key
from .layout import Position, layout

logger = logging.getLogger(__name__)

EDGE_COLOR = "#555"
NODE_FILL = "#1f77b4"
NODE_STROKE = "white"


def _esc(s: str) -> str:
    return html.escape(s, quote=True)


def _canvas_size(positions: dict, opts: RenderOptions) -> tuple[int, int]:
    if not positions:
        return opts.margin * 2, opts.margin * 2
    width = max(p.x for p in positions.values()) + opts.margin
    height = max(p.y for p in positions.values()) + opts.margin
    return width, height


def to_svg(graph: CausalGraph, options: RenderOptions | None = None) -> str:
    """Render the graph as a standalone SVG document.

    Events not reached by the layering (e.g. a cycle with no root leading
    into it) are omitted together with their edges.
    """
    opts = options or RenderOptions()

    edges = graph.edges()
    positions: dict[object, Position] = layout(sorted(graph.events, key=event_sort_key), edges, opts)
    width, height = _canvas_size(positions, opts)

    skipped = graph.event_count() - len(positions)
    if skipped:
        logger.debug("SVG render omits %d unpositioned event(s)", skipped)

    parts: list[str] = []
    parts.append(
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">'
    )
    parts.append("<defs>")
    parts.append(
        '<marker id="arrow" markerWidth="10" markerHeight="10" refX="10" refY="3" '
        'orient="auto" markerUnits="strokeWidth">'
    )
    parts.append(f'<path d="M0,0 L0,6 L9,3 z" fill="{EDGE_COLOR}"/>')
    parts.append("</marker>")
    parts.append("</defs>")

    # Edges first (under nodes)
    parts.append('<g id="edges">')
    for src, dst in edges:
        if src not in positions or dst not in positions:
            continue
        a = positions[src]
        b = positions[dst]
        parts.append(
            f'<line x1="{a.x}" y1="{a.y}" x2="{b.x}" y2="{b.y}" stroke="{EDGE_COLOR}" '
            f'stroke-width="2" marker-end="url(#arrow)"/>'
        )
    parts.append("</g>")

    parts.append('<g id="nodes">')
    for event, p in positions.items():
        parts.append("<g>")
        parts.append(
            f'<circle cx="{p.x}" cy="{p.y}" r="{opts.node_radius}" fill="{NODE_FILL}" '
            f'stroke="{NODE_STROKE}" stroke-width="2"/>'
        )
        parts.append(
            f'<text x="{p.x}" y="{p.y + 4}" text-anchor="middle" font-size="12" '
            f'fill="{NODE_STROKE}">{_esc(str(event))}</text>'
        )
        parts.append("</g>")
    parts.append("</g>")

    parts.append("</svg>")
    return "\n".join(parts) + "\n"
