"""Hypergraph collaborator interface consumed by the causal graph importer."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Protocol, runtime_checkable

from .models import Event


@runtime_checkable
class HypergraphSource(Protocol):
    """Anything that can list its vertices and hyperedges."""

    def list_vertices(self) -> Iterable[Event]: ...

    def list_hyperedges(self) -> Iterable[frozenset]: ...


@dataclass(frozen=True)
class Hypergraph:
    """Minimal immutable hypergraph: a vertex set plus a set of non-empty hyperedges."""

    vertices: frozenset = field(default_factory=frozenset)
    hyperedges: frozenset = field(default_factory=frozenset)  # frozenset of frozensets

    @classmethod
    def build(cls, vertices: Iterable[Event] = (), hyperedges: Iterable[Iterable[Event]] = ()) -> "Hypergraph":
        hg = cls()
        for vertex in vertices:
            hg = hg.add_vertex(vertex)
        for members in hyperedges:
            hg = hg.add_hyperedge(members)
        return hg

    def add_vertex(self, vertex: Event) -> "Hypergraph":
        return replace(self, vertices=self.vertices | {vertex})

    def add_hyperedge(self, members: Iterable[Event]) -> "Hypergraph":
        """Add a hyperedge, registering any vertices it mentions."""
        edge = frozenset(members)
        if not edge:
            raise ValueError("hyperedge must contain at least one vertex")
        return replace(
            self,
            vertices=self.vertices | edge,
            hyperedges=self.hyperedges | {edge},
        )

    def list_vertices(self) -> list[Event]:
        return list(self.vertices)

    def list_hyperedges(self) -> list[frozenset]:
        return list(self.hyperedges)
