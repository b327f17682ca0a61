"""CLI entrypoint for causalgraph."""

import sys
from pathlib import Path

import click

from . import __version__
from .errors import CausalGraphError

GRAPH_ARG = click.argument(
    "graph_path",
    metavar="GRAPH",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
OUT_OPT = click.option(
    "--out", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Write output to a file"
)


def _run(fn, *args, **kwargs) -> int:
    """Call a command, turning document problems into click errors."""
    try:
        return fn(*args, **kwargs)
    except (CausalGraphError, ValueError) as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(__version__, prog_name="causalgraph")
def cli() -> None:
    """causalgraph - Inspect causal dependency graphs of events.

    GRAPH is a JSON document with "events" and "dependencies", or a
    "hypergraph" with "vertices" and "hyperedges".
    """


@cli.command()
@GRAPH_ARG
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["rich", "md", "json"]),
    default="md",
    show_default=True,
    help="Output format",
)
@OUT_OPT
def stats(graph_path: Path, fmt: str, out: Path | None) -> None:
    """Summarize event counts, degrees, depth and width."""
    from .commands.graph_cmd import run_stats

    sys.exit(_run(run_stats, graph_path, fmt=fmt, out=out))


@cli.command()
@GRAPH_ARG
@click.option(
    "--adjacency",
    is_flag=True,
    default=False,
    help="Print each event's immediate successors instead of a topological order",
)
@OUT_OPT
def order(graph_path: Path, adjacency: bool, out: Path | None) -> None:
    """Print events in causal order (exit 1 if the graph has a cycle)."""
    from .commands.graph_cmd import run_order

    sys.exit(_run(run_order, graph_path, out=out, adjacency=adjacency))


@cli.command()
@GRAPH_ARG
@OUT_OPT
def export(graph_path: Path, out: Path | None) -> None:
    """Write the graph as an events/dependencies document."""
    from .commands.graph_cmd import run_export

    sys.exit(_run(run_export, graph_path, out=out))


@cli.command()
@GRAPH_ARG
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["svg", "dot"]),
    default="svg",
    show_default=True,
    help="Output format",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="TOML file with a [render] table",
)
@click.option("--name", type=str, default=None, help="Digraph name for DOT output")
@click.option("--node-radius", type=int, default=None, help="Circle radius in SVG output")
@click.option("--x-gap", type=int, default=None, help="Horizontal spacing between events in a layer")
@click.option("--y-gap", type=int, default=None, help="Vertical spacing between layers")
@click.option("--margin", type=int, default=None, help="Canvas margin")
@OUT_OPT
def render(
    graph_path: Path,
    fmt: str,
    config_path: Path | None,
    name: str | None,
    node_radius: int | None,
    x_gap: int | None,
    y_gap: int | None,
    margin: int | None,
    out: Path | None,
) -> None:
    """Render the graph as layered SVG or Graphviz DOT."""
    from .commands.graph_cmd import run_render
    from .config import RenderOptions, load_render_options

    try:
        base = load_render_options(config_path) if config_path else RenderOptions()
        options = base.with_overrides(
            name=name, node_radius=node_radius, x_gap=x_gap, y_gap=y_gap, margin=margin
        )
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--config / render options") from e

    sys.exit(_run(run_render, graph_path, fmt=fmt, out=out, options=options))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
