"""Layered layout: breadth-first layering from roots, then grid coordinates."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ..config import RenderOptions
from ..models import Event


@dataclass(frozen=True)
class Position:
    x: int
    y: int
    layer: int
    index: int  # left-to-right slot within the layer


def build_layers(events: Sequence[Event], edges: Sequence[tuple[Event, Event]]) -> list[list[Event]]:
    """Group events by breadth-first distance from the nearest root.

    Roots are events with no incoming edge; if every event has one, all events
    are roots. Each event is placed at most once, in discovery order. Events
    unreachable from the roots are left out.
    """
    targets = {dst for _, dst in edges}
    roots = [e for e in events if e not in targets] or list(events)

    layers: list[list[Event]] = []
    visited: set[Event] = set()
    frontier = roots

    while frontier:
        current: list[Event] = []
        for event in frontier:
            if event not in visited:
                visited.add(event)
                current.append(event)
        if not current:
            break
        layers.append(current)

        placed = set(current)
        nxt: list[Event] = []
        seen: set[Event] = set()
        for src, dst in edges:
            if src in placed and dst not in seen:
                seen.add(dst)
                nxt.append(dst)
        frontier = nxt

    return layers


def layout(
    events: Iterable[Event],
    edges: Iterable[tuple[Event, Event]],
    options: RenderOptions | None = None,
) -> dict[Event, Position]:
    """Assign grid coordinates to every event reachable from a root."""
    opts = options or RenderOptions()
    positions: dict[Event, Position] = {}

    for depth, members in enumerate(build_layers(list(events), list(edges))):
        for i, event in enumerate(members):
            positions[event] = Position(
                x=opts.margin + i * opts.x_gap,
                y=opts.margin + depth * opts.y_gap,
                layer=depth,
                index=i,
            )

    return positions
