"""Cache management commands."""

from typing import Optional
from pathlib import Path

import typer

from . import app
from ._common import console, resolve_config
from ..cache import MetricsCache
from ..exceptions import CognitiveAnalysisError


def _open_cache(config: Optional[Path]) -> tuple[MetricsCache, bool]:
    try:
        settings = resolve_config(config)
    except CognitiveAnalysisError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    cache = MetricsCache(
        cache_dir=settings.cache_dir,
        ttl_hours=settings.cache_ttl_hours,
        enabled=settings.cache_enabled,
    )
    return cache, settings.cache_enabled


@app.command()
def cache_info(
    config: Optional[Path] = typer.Option(None, "--config", "-c", exists=True, dir_okay=False),
):
    """Show cache information and statistics."""
    cache, _enabled = _open_cache(config)
    try:
        stats = cache.stats()
    finally:
        cache.close()

    console.print("[bold cyan]cognitive-analysis cache[/bold cyan]")
    if stats.get("enabled"):
        console.print("Status: [green]Enabled[/green]")
        console.print(f"Directory: [blue]{stats.get('directory', 'N/A')}[/blue]")
        console.print(f"Entries: [yellow]{stats.get('size', 0)}[/yellow]")
        console.print(f"Size: [yellow]{stats.get('volume', 0)} bytes[/yellow]")
    else:
        console.print("Status: [red]Disabled[/red]")


@app.command()
def cache_clear(
    config: Optional[Path] = typer.Option(None, "--config", "-c", exists=True, dir_okay=False),
):
    """Clear the per-file result cache."""
    cache, enabled = _open_cache(config)
    if not enabled:
        console.print("[yellow]Cache is disabled[/yellow]")
        raise typer.Exit(0)
    try:
        cache.clear()
    finally:
        cache.close()
    console.print("[green]Cache cleared successfully[/green]")
