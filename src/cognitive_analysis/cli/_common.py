"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..cache import MetricsCache
from ..collector import AnalysisResult, MetricsCollector
from ..config import CognitiveConfig, load_config

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    no_cache: bool = False,
    workers: Optional[int] = None,
    verbose: bool = False,
) -> CognitiveConfig:
    """Build configuration from CLI options."""
    overrides = {}
    if no_cache:
        overrides["cache_enabled"] = False
    if workers is not None:
        overrides["workers"] = workers
    if verbose:
        overrides["verbose"] = True
    return load_config(config_file=config, **overrides)


def run_collection(path: Path, settings: CognitiveConfig) -> AnalysisResult:
    """Collect scored metrics under ``path``, reporting per-file failures."""
    cache = MetricsCache(
        cache_dir=settings.cache_dir,
        ttl_hours=settings.cache_ttl_hours,
        enabled=settings.cache_enabled,
    )
    try:
        result = MetricsCollector(settings, cache).collect(path)
    finally:
        cache.close()

    for failure in result.failures:
        console.print(f"[yellow]Skipped[/yellow] {failure}", markup=True, highlight=False)
    return result
