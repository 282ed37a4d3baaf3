"""CLI entry point: registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="cognitive-analysis",
    help=f"cognitive-analysis {__version__} - cognitive complexity metrics with baseline comparison",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .analyse import analyse as _analyse  # noqa: F401, E402
from .baseline import baseline as _baseline  # noqa: F401, E402
from .cache import cache_clear as _cache_clear, cache_info as _cache_info  # noqa: F401, E402
