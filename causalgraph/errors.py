"""Exceptions raised by causal graph operations."""

from __future__ import annotations

from collections.abc import Hashable


class CausalGraphError(Exception):
    """Base class for causal graph failures."""


class UnknownEventError(CausalGraphError, KeyError):
    """An operation referenced an event that is not in the graph."""

    def __init__(self, event: Hashable, message: str | None = None) -> None:
        self.event = event
        super().__init__(message or f"Event {event!r} does not exist in the graph")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class CycleDetectedError(CausalGraphError, ValueError):
    """A depth computation revisited an event that was still being resolved."""

    def __init__(self, event: Hashable) -> None:
        self.event = event
        super().__init__(f"Cycle detected in causal graph when computing depth for {event!r}")
