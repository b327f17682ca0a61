"""Graph commands - summarize, order and render causal graph documents."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ..config import RenderOptions
from ..errors import CycleDetectedError
from ..graph.ordering import topological_sort
from ..graph.queries import causal_width, stats, to_adjacency_list
from ..io import dump_graph, graph_to_dict, load_graph
from ..render import to_dot, to_svg


def run_stats(graph_path: Path, *, fmt: str = "md", out: Path | None = None) -> int:
    """Print summary statistics and per-depth widths for a graph document."""
    console = Console(stderr=True)
    graph = load_graph(graph_path)

    try:
        summary = stats(graph)
        width = causal_width(graph)
    except CycleDetectedError as e:
        console.print(f"Cannot compute causal depth: {e}", style="red")
        return 1

    payload = {
        "title": f"Causal graph stats ({graph_path.name})",
        "stats": summary.to_dict(),
        "width": {str(depth): count for depth, count in width.items()},
    }

    if fmt == "rich":
        if out:
            rich_console = Console(record=True)
            _print_rich(payload, console=rich_console)
            out.write_text(rich_console.export_text(), encoding="utf-8")
            console.print(f"Wrote stats to {out}", style="green")
        else:
            _print_rich(payload, console=Console())
        return 0

    if fmt == "json":
        text = json.dumps(payload, indent=2, sort_keys=True) + "\n"
    else:
        text = _to_markdown(payload)

    _emit(text, out=out, console=console, what="stats")
    return 0


def run_order(graph_path: Path, *, out: Path | None = None, adjacency: bool = False) -> int:
    """Print a topological order (or adjacency list). Exit code 1 when the graph is cyclic."""
    console = Console(stderr=True)
    graph = load_graph(graph_path)

    if adjacency:
        adj = to_adjacency_list(graph)
        payload = [{"event": event, "successors": succs} for event, succs in adj.items()]
        _emit(json.dumps(payload, indent=2) + "\n", out=out, console=console, what="adjacency list")
        return 0

    order = topological_sort(graph)
    if order is None:
        console.print("No topological order exists: the graph contains a cycle", style="red")
        return 1

    _emit(json.dumps(order, indent=2) + "\n", out=out, console=console, what="order")
    return 0


def run_export(graph_path: Path, *, out: Path | None = None) -> int:
    """Write a graph document (hypergraphs are expanded to events and dependencies)."""
    console = Console(stderr=True)
    graph = load_graph(graph_path)

    if out:
        dump_graph(graph, out)
        console.print(f"Wrote graph document to {out}", style="green")
    else:
        print(json.dumps(graph_to_dict(graph), indent=2))
    return 0


def run_render(
    graph_path: Path,
    *,
    fmt: str = "svg",
    out: Path | None = None,
    options: RenderOptions | None = None,
) -> int:
    """Render a graph document as DOT or SVG."""
    console = Console(stderr=True)
    graph = load_graph(graph_path)

    if fmt == "dot":
        text = to_dot(graph, options)
    elif fmt == "svg":
        text = to_svg(graph, options)
    else:
        raise ValueError("fmt must be one of: dot, svg")

    _emit(text, out=out, console=console, what=f"{fmt} output")
    return 0


def _emit(text: str, *, out: Path | None, console: Console, what: str) -> None:
    if out:
        out.write_text(text, encoding="utf-8")
        console.print(f"Wrote {what} to {out}", style="green")
    else:
        print(text, end="" if text.endswith("\n") else "\n")


def _print_rich(payload: dict, *, console: Console) -> None:
    s = payload["stats"]
    console.print(f"[bold]{payload['title']}[/bold]")
    console.print(f"Events: {s['event_count']}  Dependencies: {s['dependency_count']}")
    console.print()

    t = Table(title="Summary", show_header=True, header_style="bold")
    t.add_column("Metric", style="cyan", no_wrap=True)
    t.add_column("Value", justify="right")
    for key in ("source_count", "sink_count", "max_causal_depth", "average_in_degree", "average_out_degree", "is_acyclic"):
        value = s[key]
        t.add_row(key, f"{value:.2f}" if isinstance(value, float) else str(value))
    console.print(t)
    console.print()

    w = Table(title="Causal width", show_header=True, header_style="bold")
    w.add_column("Depth", justify="right")
    w.add_column("Events", justify="right")
    for depth, count in payload["width"].items():
        w.add_row(depth, str(count))
    console.print(w)


def _to_markdown(payload: dict) -> str:
    s = payload["stats"]
    lines: list[str] = []
    lines.append(f"## {payload['title']}")
    lines.append("")
    lines.append(f"- Events: {s['event_count']}")
    lines.append(f"- Dependencies: {s['dependency_count']}")
    lines.append(f"- Sources: {s['source_count']}")
    lines.append(f"- Sinks: {s['sink_count']}")
    lines.append(f"- Max causal depth: {s['max_causal_depth']}")
    lines.append(f"- Average in-degree: {s['average_in_degree']:.2f}")
    lines.append(f"- Average out-degree: {s['average_out_degree']:.2f}")
    lines.append(f"- Acyclic: {'yes' if s['is_acyclic'] else 'no'}")
    lines.append("")
    lines.append("### Causal width")
    lines.append("")
    lines.append("| Depth | Events |")
    lines.append("|---:|---:|")
    for depth, count in payload["width"].items():
        lines.append(f"| {depth} | {count} |")

    return "\n".join(lines).rstrip() + "\n"
