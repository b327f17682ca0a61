"""Render options and their TOML loader."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class RenderOptions:
    """Layout and naming knobs for the DOT/SVG emitters."""

    name: str = "causal_graph"
    node_radius: int = 20
    x_gap: int = 100
    y_gap: int = 100
    margin: int = 50

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("name must be a non-empty string")
        for key in ("node_radius", "x_gap", "y_gap", "margin"):
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{key} must be an integer")
            if value < 0:
                raise ValueError(f"{key} must not be negative")

    def with_overrides(self, **overrides: Any) -> "RenderOptions":
        """Return a copy with every non-None override applied."""
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"unknown render option(s): {', '.join(unknown)}")
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_render_options(path: Path) -> RenderOptions:
    """
    Load render options from the [render] table of a TOML file.

    Missing keys keep their defaults; unknown keys are rejected.
    """
    import tomllib

    data = tomllib.loads(path.read_text(encoding="utf-8"))

    table = data.get("render", {})
    if not isinstance(table, dict):
        raise ValueError("[render] must be a table")

    return RenderOptions().with_overrides(**table)
