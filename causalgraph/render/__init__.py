"""Layered layout and DOT/SVG text emitters."""

from .dot import to_dot
from .layout import Position, build_layers, layout
from .svg import to_svg

__all__ = ["Position", "build_layers", "layout", "to_dot", "to_svg"]
