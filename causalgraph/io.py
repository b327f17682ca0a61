"""JSON documents describing causal graphs or hypergraphs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .graph.core import CausalGraph
from .graph.importer import from_hypergraph
from .graph.ordering import event_sort_key
from .hypergraph import Hypergraph
from .models import Event


def _coerce_event(value: Any) -> Event:
    # JSON arrays become tuples so they can serve as ids
    if isinstance(value, list):
        return tuple(_coerce_event(v) for v in value)
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return value
    raise ValueError(f"event id must be a string, number or array, got {value!r}")


def _pair(raw: Any, what: str) -> tuple[Event, Event]:
    if not isinstance(raw, list) or len(raw) != 2:
        raise ValueError(f"{what} must be a [from, to] pair, got {raw!r}")
    return _coerce_event(raw[0]), _coerce_event(raw[1])


def graph_from_dict(data: dict[str, Any]) -> CausalGraph:
    """
    Build a graph from a parsed document.

    A document with a "hypergraph" key is imported through from_hypergraph;
    otherwise "events" and "dependencies" are read directly.
    """
    if not isinstance(data, dict):
        raise ValueError("graph document must be a JSON object")

    if "hypergraph" in data:
        raw = data["hypergraph"]
        if not isinstance(raw, dict):
            raise ValueError("hypergraph must be an object")
        vertices = [_coerce_event(v) for v in raw.get("vertices", [])]
        hyperedges = []
        for edge in raw.get("hyperedges", []):
            if not isinstance(edge, list) or not edge:
                raise ValueError(f"hyperedge must be a non-empty array, got {edge!r}")
            hyperedges.append([_coerce_event(v) for v in edge])
        return from_hypergraph(Hypergraph.build(vertices, hyperedges))

    graph = CausalGraph()
    for raw in data.get("events", []):
        if isinstance(raw, dict):
            if "id" not in raw:
                raise ValueError(f"event object needs an id: {raw!r}")
            metadata = raw.get("metadata") or {}
            if not isinstance(metadata, dict):
                raise ValueError(f"metadata for {raw['id']!r} must be an object")
            graph = graph.add_event(_coerce_event(raw["id"]), metadata)
        else:
            graph = graph.add_event(_coerce_event(raw))

    for raw in data.get("dependencies", []):
        src, dst = _pair(raw, "dependency")
        graph = graph.add_dependency(src, dst)

    return graph


def graph_to_dict(graph: CausalGraph) -> dict[str, Any]:
    """Serialize a graph to the same document shape graph_from_dict reads."""
    events = []
    for event in sorted(graph.events, key=event_sort_key):
        metadata = dict(graph.event_data.get(event) or {})
        events.append({"id": event, "metadata": metadata} if metadata else event)
    return {
        "events": events,
        "dependencies": [[src, dst] for src, dst in graph.edges()],
    }


def load_graph(path: Path) -> CausalGraph:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{path}: invalid JSON ({e})") from e
    return graph_from_dict(data)


def dump_graph(graph: CausalGraph, path: Path) -> None:
    path.write_text(json.dumps(graph_to_dict(graph), indent=2) + "\n", encoding="utf-8")
