"""Read-only queries over a causal graph: ancestry, degrees, depth and width."""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Callable

from ..errors import CycleDetectedError
from ..models import Event, GraphStats
from .core import CausalGraph
from .ordering import event_sort_key, is_acyclic


class DepthState(Enum):
    """Scratch marker for an event whose depth is still being resolved."""

    IN_PROGRESS = "in_progress"


def _reachable(start: Event, neighbors: Callable[[Event], frozenset]) -> set[Event]:
    visited: set[Event] = set()
    stack = [start]

    while stack:
        current = stack.pop()
        for nxt in neighbors(current):
            if nxt not in visited:
                visited.add(nxt)
                stack.append(nxt)

    visited.discard(start)
    return visited


def ancestors(graph: CausalGraph, event: Event) -> set[Event]:
    """All events that must happen before ``event`` (transitive predecessors)."""
    return _reachable(event, graph.immediate_predecessors)


def descendants(graph: CausalGraph, event: Event) -> set[Event]:
    """All events that depend on ``event`` happening (transitive successors)."""
    return _reachable(event, graph.immediate_successors)


def is_causal_predecessor(graph: CausalGraph, src: Event, dst: Event) -> bool:
    return src in ancestors(graph, dst)


def causal_cone(graph: CausalGraph, event: Event) -> set[Event]:
    """Every event causally connected to ``event``, in either direction."""
    return ancestors(graph, event) | descendants(graph, event)


def in_degree(graph: CausalGraph, event: Event) -> int:
    return len(graph.immediate_predecessors(event))


def out_degree(graph: CausalGraph, event: Event) -> int:
    return len(graph.immediate_successors(event))


def source_events(graph: CausalGraph) -> set[Event]:
    return {event for event in graph.events if in_degree(graph, event) == 0}


def sink_events(graph: CausalGraph) -> set[Event]:
    return {event for event in graph.events if out_degree(graph, event) == 0}


def _resolve_depth(graph: CausalGraph, event: Event, memo: dict[Event, int | DepthState]) -> int:
    """Longest path from a source to ``event``, memoized in ``memo``.

    Walks predecessors depth-first with an explicit stack. Reaching an event
    still marked IN_PROGRESS means the walk closed a loop.
    """
    state = memo.get(event)
    if state is DepthState.IN_PROGRESS:
        raise CycleDetectedError(event)
    if state is not None:
        return state

    def preds(e: Event):
        return iter(sorted(graph.immediate_predecessors(e), key=event_sort_key))

    memo[event] = DepthState.IN_PROGRESS
    stack = [(event, preds(event))]

    while stack:
        current, pending = stack[-1]
        for pred in pending:
            pred_state = memo.get(pred)
            if pred_state is DepthState.IN_PROGRESS:
                raise CycleDetectedError(pred)
            if pred_state is None:
                memo[pred] = DepthState.IN_PROGRESS
                stack.append((pred, preds(pred)))
                break
        else:
            stack.pop()
            memo[current] = 1 + max((memo[p] for p in graph.immediate_predecessors(current)), default=-1)

    return memo[event]  # type: ignore[return-value]


def causal_depth(graph: CausalGraph, event: Event) -> int:
    """Length of the longest dependency chain ending at ``event``.

    Sources have depth 0. Raises CycleDetectedError if ``event`` sits on or
    behind a cycle.
    """
    return _resolve_depth(graph, event, {})


def depth_table(graph: CausalGraph) -> dict[Event, int]:
    """Causal depth of every event, sharing one memo across the whole graph."""
    memo: dict[Event, int | DepthState] = {}
    return {
        event: _resolve_depth(graph, event, memo)
        for event in sorted(graph.events, key=event_sort_key)
    }


def events_at_depth(graph: CausalGraph, depth: int) -> set[Event]:
    return {event for event, d in depth_table(graph).items() if d == depth}


def causal_width(graph: CausalGraph) -> dict[int, int]:
    """Number of events at each causal depth."""
    counts = Counter(depth_table(graph).values())
    return dict(sorted(counts.items()))


def to_adjacency_list(graph: CausalGraph) -> dict[Event, list[Event]]:
    """Map every event to its immediate successors."""
    return {
        event: sorted(graph.immediate_successors(event), key=event_sort_key)
        for event in sorted(graph.events, key=event_sort_key)
    }


def stats(graph: CausalGraph) -> GraphStats:
    """Summary statistics. Raises CycleDetectedError on a cyclic graph."""
    count = graph.event_count()
    depths = depth_table(graph)

    if count:
        avg_in = sum(in_degree(graph, e) for e in graph.events) / count
        avg_out = sum(out_degree(graph, e) for e in graph.events) / count
    else:
        avg_in = avg_out = 0.0

    return GraphStats(
        event_count=count,
        dependency_count=graph.dependency_count(),
        source_count=len(source_events(graph)),
        sink_count=len(sink_events(graph)),
        max_causal_depth=max(depths.values(), default=0),
        average_in_degree=avg_in,
        average_out_degree=avg_out,
        is_acyclic=is_acyclic(graph),
    )
