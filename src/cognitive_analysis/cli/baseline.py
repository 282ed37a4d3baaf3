"""Baseline command."""

from pathlib import Path
from typing import Optional

import typer

from ..baseline import Baseline
from ..exceptions import CognitiveAnalysisError
from ..logging_config import setup_logging
from . import app
from ._common import console, resolve_config, run_collection


@app.command()
def baseline(
    path: Path = typer.Argument(
        Path("."),
        help="File or directory to analyse",
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o",
        help="Baseline file to write (default: .cognitive-analysis/baseline/baseline-<time>.json)",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c",
        help="Configuration file path (TOML format)",
        exists=True, file_okay=True, dir_okay=False, readable=True,
    ),
    list_files: bool = typer.Option(False, "--list", help="List existing baselines instead of saving"),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", min=1),
    no_cache: bool = typer.Option(False, "--no-cache", help="Ignore the on-disk cache"),
):
    """Save current metrics as a baseline for later comparison."""
    service = Baseline()

    if list_files:
        files = service.list_files()
        if not files:
            console.print("[yellow]No baselines found.[/yellow]")
            raise typer.Exit(0)
        for file in files:
            status = "[green]valid[/green]" if service.is_valid_file(file) else "[red]invalid[/red]"
            console.print(f"  {file}  {status}")
        raise typer.Exit(0)

    setup_logging(verbose=False, quiet=True)
    try:
        settings = resolve_config(config, no_cache=no_cache, workers=workers)
        result = run_collection(path, settings)
        saved = service.save(result.collection, settings, output)
        console.print(f"[green]Baseline saved to {saved} ({len(result.collection)} methods)[/green]")
    except CognitiveAnalysisError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
