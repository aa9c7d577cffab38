import logging
from pathlib import Path
import typer
import networkx as nx
from rich import print as rprint
from rich.panel import Panel
from rich.markup import escape
from rich.table import Table
from typing import Optional

from . import config
from .engine import find_orphaned_nodes, would_create_cycle
from .graphio import GraphLoadError, load_graph
from .ir import Graph
from .report import ascii_plan, path_report
from .validator import validate_graph

app = typer.Typer(no_args_is_help=True, help="supplygraph CLI — supply-chain topology checks")

def _graph_file():
    return typer.Argument(None, help="Graph YAML/JSON (defaults to $SUPPLYGRAPH_GRAPH_FILE).")

def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.LOG_LEVEL, logging.WARNING)
    logging.getLogger("supplygraph").setLevel(level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

def _load(file: Optional[Path]) -> Graph:
    path = file or Path(config.GRAPH_FILE)
    try:
        return load_graph(path)
    except GraphLoadError as e:
        rprint(f"[bold red]Error:[/] {escape(str(e))}")
        raise typer.Exit(code=2)

@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging.")):
    setup_logging(verbose)

@app.command()
def validate(file: Optional[Path] = _graph_file()):
    """Validate a supply-chain graph (ids, edge endpoints, cycles, orphans)."""
    ok, messages = validate_graph(_load(file))
    table = Table(title="Validation Report", show_lines=True)
    table.add_column("Status", justify="center", style="bold")
    table.add_column("Message")
    for m in messages:
        status, _, text = m.partition(": ")
        table.add_row(escape(status), escape(text))
    rprint(table)
    if not ok:
        raise typer.Exit(code=1)

@app.command("check-edge")
def check_edge(source: str, target: str, file: Optional[Path] = _graph_file()):
    """Check whether adding SOURCE -> TARGET would create a cycle."""
    g = _load(file)
    if would_create_cycle(g.nodes, g.edges, source, target):
        rprint(Panel.fit(f"[bold red]Blocked[/]: {escape(source)} -> {escape(target)} would create a cycle"))
        raise typer.Exit(code=1)
    rprint(Panel.fit(f"[bold green]OK[/]: {escape(source)} -> {escape(target)} keeps the supply chain acyclic"))

@app.command()
def orphans(file: Optional[Path] = _graph_file()):
    """List nodes with no incoming or outgoing edges."""
    g = _load(file)
    found = find_orphaned_nodes(g.nodes, g.edges)
    if not found:
        rprint("[green]No orphaned nodes.[/]")
        return
    for nid in found:
        rprint(f"- {escape(nid)}")

@app.command()
def path(source: str, target: str, file: Optional[Path] = _graph_file()):
    """Trace the shortest flow path from SOURCE to TARGET."""
    g = _load(file)
    lines = path_report(g, source, target)
    if lines is None:
        rprint(f"[bold red]No path[/] from {escape(source)} to {escape(target)}")
        raise typer.Exit(code=1)
    rprint(Panel.fit(escape("\n".join(lines)), title=f"{escape(source)} → {escape(target)}"))

@app.command()
def explain(file: Optional[Path] = _graph_file()):
    """Print the supply chain in topological order."""
    g = _load(file)
    try:
        print(ascii_plan(g))
    except nx.NetworkXUnfeasible:
        rprint("[bold red]Error:[/] graph contains a cycle; run `supplygraph validate` for details")
        raise typer.Exit(code=1)

if __name__ == "__main__":
    app()
