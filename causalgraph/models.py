"""Data models shared across the causal graph modules."""

from collections.abc import Hashable
from dataclasses import asdict, dataclass
from typing import Any

# Events are opaque identifiers; any hashable value works.
Event = Hashable

# Free-form metadata; "rule" is the only key renderers look at.
EventMetadata = dict[str, Any]


@dataclass(frozen=True)
class GraphStats:
    """Summary numbers for a causal graph."""

    event_count: int
    dependency_count: int
    source_count: int
    sink_count: int
    max_causal_depth: int
    average_in_degree: float
    average_out_degree: float
    is_acyclic: bool

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)
