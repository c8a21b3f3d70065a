"""
Typer-powered CLI for running shortest-path queries locally.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich import print
from rich.table import Table

from .config import configure_logging
from .errors import WaypointError
from .loader import default_graph
from .matrix import NO_EDGE, build_matrix, edge_count
from .service import find_shortest_path, shortest_distances

app = typer.Typer(add_completion=False, help="Waypoint shortest-path CLI")

GraphOption = typer.Option(None, "--graph", "-g", help="JSON adjacency file (defaults to the bundled map)")
StrategyOption = typer.Option(None, "--strategy", "-s", help="breadth_first or weighted")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output")):
    configure_logging("DEBUG" if verbose else "WARNING")


@app.command()
def find(
    start: str,
    end: str,
    graph: Optional[Path] = GraphOption,
    strategy: Optional[str] = StrategyOption,
):
    """
    Print the distance and route from START to END.
    """
    try:
        result = find_shortest_path(default_graph(graph), start, end, strategy=strategy)
    except (WaypointError, ValueError, FileNotFoundError) as exc:
        print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2)
    if not result.reachable:
        print(f"[yellow]No route from {start} to {end}[/yellow]")
        raise typer.Exit(code=1)
    print(f"[green]{result.path}[/green] (distance {result.distance})")


@app.command()
def matrix(graph: Optional[Path] = GraphOption):
    """
    Show the weight matrix of the graph.
    """
    try:
        weights, index_map = build_matrix(default_graph(graph))
    except (WaypointError, FileNotFoundError) as exc:
        print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2)
    table = Table("", *index_map.labels, title=f"{edge_count(weights)} edges")
    for label, row in zip(index_map.labels, weights):
        table.add_row(label, *("-" if weight == NO_EDGE else str(weight) for weight in row))
    print(table)


@app.command()
def reach(
    start: str,
    graph: Optional[Path] = GraphOption,
    strategy: Optional[str] = StrategyOption,
):
    """
    Distance and route from START to every waypoint.
    """
    try:
        rows = shortest_distances(default_graph(graph), start, strategy=strategy)
    except (WaypointError, ValueError, FileNotFoundError) as exc:
        print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2)
    table = Table("Waypoint", "Distance", "Path")
    for row in rows:
        distance = "unreachable" if row.distance is None else str(row.distance)
        table.add_row(row.label, distance, row.path)
    print(table)


if __name__ == "__main__":
    app()
