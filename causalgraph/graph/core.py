"""Causal graph aggregate: event store plus bidirectional dependency index."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from ..errors import UnknownEventError
from ..models import Event, EventMetadata
from .ordering import event_sort_key


def _readonly(mapping: Mapping) -> Mapping:
    if isinstance(mapping, MappingProxyType):
        return mapping
    return MappingProxyType(dict(mapping))


def _with_member(index: Mapping[Event, frozenset], key: Event, member: Event) -> dict[Event, frozenset]:
    updated = dict(index)
    updated[key] = index.get(key, frozenset()) | {member}
    return updated


def _without_member(index: Mapping[Event, frozenset], key: Event, member: Event) -> Mapping[Event, frozenset]:
    current = index.get(key)
    if current is None or member not in current:
        return index
    updated = dict(index)
    remaining = current - {member}
    if remaining:
        updated[key] = remaining
    else:
        del updated[key]
    return updated


@dataclass(frozen=True)
class CausalGraph:
    """Immutable graph of events and "must happen before" dependencies.

    ``dependencies`` is keyed by target and holds the sources (predecessors);
    ``dependents`` is its exact inverse. Every mutator returns a new graph.
    """

    events: frozenset = field(default_factory=frozenset)
    # Hashing uses the event set only; the mappings are read-only views.
    dependencies: Mapping[Event, frozenset] = field(default_factory=dict, hash=False)  # target -> sources
    dependents: Mapping[Event, frozenset] = field(default_factory=dict, hash=False)  # source -> targets
    event_data: Mapping[Event, Mapping[str, Any]] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "events", frozenset(self.events))
        object.__setattr__(self, "dependencies", _readonly(self.dependencies))
        object.__setattr__(self, "dependents", _readonly(self.dependents))
        if not isinstance(self.event_data, MappingProxyType):
            event_data = {event: _readonly(meta) for event, meta in self.event_data.items()}
            object.__setattr__(self, "event_data", MappingProxyType(event_data))

    @classmethod
    def build(
        cls,
        events: Iterable[Any] = (),
        dependencies: Iterable[tuple[Event, Event]] = (),
    ) -> "CausalGraph":
        """Build a graph from events and ``(from, to)`` pairs.

        Events may be bare ids or ``(id, metadata)`` pairs.
        """
        graph = cls()
        for item in events:
            if isinstance(item, tuple) and len(item) == 2 and isinstance(item[1], dict):
                graph = graph.add_event(item[0], item[1])
            else:
                graph = graph.add_event(item)
        for src, dst in dependencies:
            graph = graph.add_dependency(src, dst)
        return graph

    # Mutation (each returns a new graph)

    def add_event(self, event: Event, metadata: EventMetadata | None = None) -> "CausalGraph":
        event_data = dict(self.event_data)
        event_data[event] = dict(metadata or {})
        return replace(self, events=self.events | {event}, event_data=event_data)

    def add_dependency(self, src: Event, dst: Event) -> "CausalGraph":
        """Record that ``src`` must happen before ``dst``.

        Both events must already exist.
        """
        for event in (src, dst):
            if event not in self.events:
                raise UnknownEventError(event, f"Both events must exist in the graph (missing {event!r})")
        return replace(
            self,
            dependencies=_with_member(self.dependencies, dst, src),
            dependents=_with_member(self.dependents, src, dst),
        )

    def remove_dependency(self, src: Event, dst: Event) -> "CausalGraph":
        return replace(
            self,
            dependencies=_without_member(self.dependencies, dst, src),
            dependents=_without_member(self.dependents, src, dst),
        )

    def remove_event(self, event: Event) -> "CausalGraph":
        """Drop an event together with every edge touching it."""
        if event not in self.events:
            return self

        dependencies = dict(self.dependencies)
        dependents = dict(self.dependents)

        for pred in self.dependencies.get(event, frozenset()):
            dependents = _without_member(dependents, pred, event)
        for succ in self.dependents.get(event, frozenset()):
            dependencies = _without_member(dependencies, succ, event)
        dependencies.pop(event, None)
        dependents.pop(event, None)

        event_data = dict(self.event_data)
        event_data.pop(event, None)

        return replace(
            self,
            events=self.events - {event},
            dependencies=dependencies,
            dependents=dependents,
            event_data=event_data,
        )

    def update_event_metadata(self, event: Event, metadata: EventMetadata) -> "CausalGraph":
        """Replace (not merge) the metadata of an existing event."""
        if event not in self.events:
            raise UnknownEventError(event)
        event_data = dict(self.event_data)
        event_data[event] = dict(metadata)
        return replace(self, event_data=event_data)

    # Reads

    def has_event(self, event: Event) -> bool:
        return event in self.events

    def event_metadata(self, event: Event) -> EventMetadata | None:
        """Return a copy of the event's metadata, or None if it is absent."""
        if event not in self.events:
            return None
        return dict(self.event_data.get(event, {}))

    def event_count(self) -> int:
        return len(self.events)

    def dependency_count(self) -> int:
        return sum(len(sources) for sources in self.dependencies.values())

    def immediate_predecessors(self, event: Event) -> frozenset:
        return self.dependencies.get(event, frozenset())

    def immediate_successors(self, event: Event) -> frozenset:
        return self.dependents.get(event, frozenset())

    def edges(self) -> list[tuple[Event, Event]]:
        """All ``(from, to)`` pairs, in a deterministic order."""
        pairs = [(src, dst) for dst, sources in self.dependencies.items() for src in sources]
        return sorted(pairs, key=lambda pair: (event_sort_key(pair[0]), event_sort_key(pair[1])))
