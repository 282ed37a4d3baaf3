"""Baseline persistence, validation and comparison."""

from .schema import DATE_FORMAT, VERSION, BaselineSchemaValidator
from .service import DEFAULT_BASELINE_DIR, Baseline, default_baseline_path
from .snapshot import (
    BaselineSnapshot,
    LegacyBaseline,
    LoadedBaseline,
    generate_config_hash,
    parse_baseline,
)

__all__ = [
    "Baseline",
    "BaselineSchemaValidator",
    "BaselineSnapshot",
    "DATE_FORMAT",
    "DEFAULT_BASELINE_DIR",
    "LegacyBaseline",
    "LoadedBaseline",
    "VERSION",
    "default_baseline_path",
    "generate_config_hash",
    "parse_baseline",
]
