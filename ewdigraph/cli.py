"""ewdigraph command line interface."""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ewdigraph.io.loader import load_digraph
from ewdigraph.scheduling.cpm import schedule_from_string
from ewdigraph.shortest import AcyclicLP, AcyclicSP, BellmanFordSP, BFSRelaxerSP, DijkstraSP

app = typer.Typer(
    name="ewdigraph",
    help="Shortest paths, longest paths and critical-path scheduling on edge-weighted digraphs.",
    add_completion=False,
)

err_console = Console(stderr=True)


class Algorithm(str, Enum):
    dijkstra = "dijkstra"
    bellman_ford = "bellman-ford"
    acyclic = "acyclic"
    acyclic_lp = "acyclic-lp"
    bfs = "bfs"


_ALGORITHMS = {
    Algorithm.dijkstra: DijkstraSP,
    Algorithm.bellman_ford: BellmanFordSP,
    Algorithm.acyclic: AcyclicSP,
    Algorithm.acyclic_lp: AcyclicLP,
    Algorithm.bfs: BFSRelaxerSP,
}


@app.command()
def cpm(
    jobs_file: Optional[Path] = typer.Argument(
        None, help="Job list file (duration followed by successors per line). Reads stdin when omitted or '-'."
    ),
):
    """Print the earliest start time of every job and the finish time."""
    if jobs_file is None or str(jobs_file) == "-":
        text = sys.stdin.read()
    else:
        if not jobs_file.exists():
            err_console.print(f"[bold red]Error: File not found: {jobs_file}[/]")
            raise typer.Exit(code=1)
        try:
            text = jobs_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            err_console.print(f"[bold red]Error: Cannot read {escape(str(jobs_file))}: {escape(str(e))}[/]")
            raise typer.Exit(code=1)

    try:
        schedule = schedule_from_string(text)
    except ValueError as e:
        err_console.print(f"[bold red]Error: {escape(str(e))}[/]")
        raise typer.Exit(code=1)

    typer.echo(schedule.format_schedule(), nl=False)


@app.command()
def paths(
    graph_file: Path = typer.Argument(..., help="Graph file in the 'V E from to weight ...' format."),
    source: int = typer.Argument(..., help="Source vertex."),
    algorithm: Algorithm = typer.Option(Algorithm.dijkstra, "--algorithm", "-a", help="Path engine to run."),
):
    """Print the distance and path from SOURCE to every vertex."""
    try:
        G = load_digraph(str(graph_file))
        tree = _ALGORITHMS[algorithm](G, source)
    except (OSError, ValueError) as e:
        err_console.print(f"[bold red]Error: {escape(str(e))}[/]")
        raise typer.Exit(code=1)

    if isinstance(tree, BellmanFordSP) and tree.has_negative_cycle():
        typer.echo("Negative cycle:")
        for e in tree.negative_cycle():
            typer.echo(str(e))
        return

    for v in range(G.V()):
        if tree.has_path_to(v):
            edges = "   ".join(str(e) for e in tree.path_to(v))
            typer.echo(f"{source} to {v} ({tree.dist_to(v):.2f})  {edges}".rstrip())
        else:
            typer.echo(f"{source} to {v}         no path")


if __name__ == "__main__":
    app()
