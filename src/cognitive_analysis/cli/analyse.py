"""Main analysis command."""

from pathlib import Path
from typing import Optional

import typer

from ..baseline import Baseline
from ..exceptions import CognitiveAnalysisError
from ..logging_config import setup_logging
from . import app
from ._common import console, resolve_config, run_collection
from ._render import render_collection, render_summary


@app.command()
def analyse(
    path: Path = typer.Argument(
        Path("."),
        help="File or directory to analyse",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c",
        help="Configuration file path (TOML format)",
        exists=True, file_okay=True, dir_okay=False, readable=True,
    ),
    baseline: Optional[Path] = typer.Option(
        None, "--baseline", "-b",
        help="Baseline file to compare against",
    ),
    latest_baseline: bool = typer.Option(
        False, "--latest-baseline",
        help="Compare against the newest file in .cognitive-analysis/baseline",
    ),
    generate_baseline: bool = typer.Option(
        False, "--generate-baseline",
        help="Save the results as a new baseline after analysing",
    ),
    sort_by: Optional[str] = typer.Option(
        None, "--sort-by",
        help="Sort methods by a field (score, halstead, cyclomatic, class, method, file, or a metric)",
    ),
    sort_order: str = typer.Option("asc", "--sort-order", help="asc or desc"),
    workers: Optional[int] = typer.Option(
        None, "--workers", "-w", min=1, help="Files analysed in parallel",
    ),
    no_cache: bool = typer.Option(False, "--no-cache", help="Ignore the on-disk cache"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
):
    """Measure cognitive complexity of every method under PATH."""
    setup_logging(verbose=verbose)
    try:
        settings = resolve_config(config, no_cache=no_cache, workers=workers, verbose=verbose)
        result = run_collection(path, settings)
        collection = result.collection
        service = Baseline()

        baseline_file = baseline
        if baseline_file is None and latest_baseline:
            baseline_file = service.find_latest()
            if baseline_file is None:
                console.print("[yellow]No baseline found; showing current metrics only.[/yellow]")

        if baseline_file is not None:
            loaded, warnings = service.load_with_validation(baseline_file, settings)
            for warning in warnings:
                console.print(f"[yellow]Warning:[/yellow] {warning}")
            compared = service.calculate_deltas(collection, loaded)
            console.print(f"Compared {compared} methods against {baseline_file}")

        if sort_by:
            collection = collection.sort(sort_by, sort_order)

        if collection.is_empty():
            console.print("[yellow]No methods found.[/yellow]")
        else:
            render_collection(collection, settings.score_threshold)
            render_summary(collection, settings.score_threshold)

        if generate_baseline:
            saved = service.save(collection, settings)
            console.print(f"[green]Baseline saved to {saved}[/green]")
    except CognitiveAnalysisError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
