"""Topological ordering and acyclicity."""

from __future__ import annotations

import logging
from collections import deque
from numbers import Real
from typing import TYPE_CHECKING

from ..models import Event

if TYPE_CHECKING:
    from .core import CausalGraph

logger = logging.getLogger(__name__)


def event_sort_key(event: Event) -> tuple:
    """Total order over heterogeneous event ids: numbers, strings, then the rest by repr."""
    if isinstance(event, Real):
        return (0, event, "")
    if isinstance(event, str):
        return (1, 0, event)
    return (2, type(event).__name__, repr(event))


def topological_sort(graph: "CausalGraph") -> list[Event] | None:
    """Return events in causal order (sources first).

    Uses Kahn's algorithm. Returns None if the graph contains a cycle; an
    empty graph yields an empty list.
    """
    in_degree = {event: len(graph.immediate_predecessors(event)) for event in graph.events}

    queue = deque(sorted((e for e, d in in_degree.items() if d == 0), key=event_sort_key))
    result: list[Event] = []

    while queue:
        current = queue.popleft()
        result.append(current)

        for succ in sorted(graph.immediate_successors(current), key=event_sort_key):
            in_degree[succ] -= 1
            if in_degree[succ] == 0:
                queue.append(succ)

    if len(result) != len(in_degree):
        blocked = len(in_degree) - len(result)
        logger.debug("No topological order: %d event(s) remain on or behind a cycle", blocked)
        return None

    return result


def is_acyclic(graph: "CausalGraph") -> bool:
    return topological_sort(graph) is not None
