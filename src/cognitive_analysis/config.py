"""Configuration loading and management for cognitive-analysis.

Configuration sources are merged in priority order:
    1. Defaults (defined in CognitiveConfig)
    2. Global config (~/.cognitive-analysis.toml)
    3. Project config (./cognitive-analysis.toml)
    4. Explicit config file
    5. Environment variables (COGNITIVE_* prefix)
    6. CLI overrides (passed as kwargs)

Metric thresholds live in per-metric TOML tables:

    score_threshold = 0.5

    [metrics.ifNestingLevel]
    threshold = 1
    scale = 1.0
    enabled = true

Example:
    >>> config = load_config(workers=4)
    >>> config.metric(MetricName.LINE_COUNT).threshold
    60.0
"""

from __future__ import annotations

import hashlib
import json
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Literal, Mapping, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError
from .metrics.names import MetricName

Verbosity = Literal["quiet", "normal", "verbose"]


@dataclass(frozen=True)
class MetricConfig:
    """Scoring parameters of a single metric.

    A raw value at or below ``threshold`` carries no weight; above it the
    weight grows logarithmically, and ``scale`` controls how fast.
    """

    threshold: float
    scale: float
    enabled: bool = True

    def __post_init__(self) -> None:
        for name in ("threshold", "scale"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number, got {value!r}")
        if self.scale <= 0:
            raise ValueError(f"scale must be positive, got {self.scale}")
        if not isinstance(self.enabled, bool):
            raise ValueError(f"enabled must be true or false, got {self.enabled!r}")

    def to_dict(self) -> dict[str, Any]:
        return {"threshold": float(self.threshold), "scale": float(self.scale), "enabled": self.enabled}


DEFAULT_METRICS: dict[MetricName, MetricConfig] = {
    MetricName.LINE_COUNT: MetricConfig(threshold=60.0, scale=25.0),
    MetricName.ARG_COUNT: MetricConfig(threshold=4.0, scale=1.0),
    MetricName.RETURN_COUNT: MetricConfig(threshold=2.0, scale=5.0),
    MetricName.VARIABLE_COUNT: MetricConfig(threshold=2.0, scale=5.0),
    MetricName.PROPERTY_CALL_COUNT: MetricConfig(threshold=2.0, scale=15.0),
    MetricName.IF_COUNT: MetricConfig(threshold=3.0, scale=1.0),
    MetricName.IF_NESTING_LEVEL: MetricConfig(threshold=1.0, scale=1.0),
    MetricName.ELSE_COUNT: MetricConfig(threshold=1.0, scale=1.0),
}


def default_metrics() -> dict[MetricName, MetricConfig]:
    return dict(DEFAULT_METRICS)


@dataclass(frozen=True)
class CognitiveConfig:
    """Settings for one analysis run.

    Attributes:
        metrics: Scoring parameters per metric. Missing metrics fall back to
            the defaults.
        score_threshold: Methods scoring above this are highlighted.
        exclude_patterns: Glob patterns (relative to the analysed root) to skip.
        extensions: File extensions to analyse. Empty means every extension
            with an installed grammar.
        workers: Number of files parsed concurrently.
        cache_enabled: Reuse per-file results stored on disk.
        cache_dir: Directory of the on-disk cache.
        cache_ttl_hours: Lifetime of cached results.
        verbosity: Logging verbosity.
    """

    metrics: dict[MetricName, MetricConfig] = field(default_factory=default_metrics)
    score_threshold: float = 0.5
    exclude_patterns: list[str] = field(
        default_factory=lambda: [
            ".git/*",
            "node_modules/*",
            "vendor/*",
            "venv/*",
            ".venv/*",
            "__pycache__/*",
            ".tox/*",
            "build/*",
            "dist/*",
            "*.min.js",
            "*.bundle.js",
        ]
    )
    extensions: list[str] = field(default_factory=list)
    workers: int = 1
    cache_enabled: bool = True
    cache_dir: str = ".cognitive-cache"
    cache_ttl_hours: int = 24
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        merged = default_metrics()
        for key, value in self.metrics.items():
            if not isinstance(key, MetricName):
                raise ValueError(f"metrics keys must be MetricName, got {key!r}")
            if not isinstance(value, MetricConfig):
                raise ValueError(f"metrics[{key.value}] must be a MetricConfig")
            merged[key] = value
        object.__setattr__(self, "metrics", merged)

        if self.score_threshold < 0:
            raise ValueError("score_threshold must be non-negative")
        if self.workers < 1:
            raise ValueError("workers must be at least 1")
        if self.cache_ttl_hours < 0:
            raise ValueError("cache_ttl_hours must be non-negative")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError(f"verbosity must be quiet, normal or verbose, got {self.verbosity!r}")

    def metric(self, name: MetricName) -> MetricConfig:
        return self.metrics[name]

    def scoring_config(self) -> dict[str, dict[str, Any]]:
        """Plain-dict form of the scoring parameters, keyed by metric name."""
        return {name.value: self.metrics[name].to_dict() for name in MetricName}

    def config_hash(self) -> str:
        """Digest of the scoring parameters stored in baselines."""
        return compute_config_hash(self.scoring_config())

    @property
    def cache_ttl_seconds(self) -> int:
        return self.cache_ttl_hours * 3600


def compute_config_hash(config: Mapping[str, Any]) -> str:
    """SHA-256 of the canonical JSON form, truncated to 16 hex characters."""
    config_str = json.dumps(config, sort_keys=True)
    return hashlib.sha256(config_str.encode()).hexdigest()[:16]


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> CognitiveConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``metrics``
            may map metric keys to partial tables or MetricConfig objects.

    Returns:
        Validated CognitiveConfig instance

    Raises:
        ConfigurationError: If a config file is missing or invalid
    """
    merged: dict[str, Any] = {}
    metric_tables: dict[str, dict[str, Any]] = {}

    sources = [
        ("global config", Path.home() / ".cognitive-analysis.toml", False),
        ("project config", Path.cwd() / "cognitive-analysis.toml", False),
    ]
    if config_file is not None:
        sources.append(("config file", Path(config_file), True))

    for label, path, required in sources:
        if not path.exists():
            if required:
                raise ConfigurationError(f"Config file not found: {path}")
            continue
        try:
            data = _load_toml_file(path)
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid {label} '{path}': {e}") from e
        _merge_source(merged, metric_tables, data, str(path))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides.pop("verbose"):
            overrides["verbosity"] = "verbose"
    if "quiet" in overrides:
        if overrides.pop("quiet"):
            overrides["verbosity"] = "quiet"
    _merge_source(merged, metric_tables, overrides, "overrides")

    try:
        merged["metrics"] = _build_metrics(metric_tables)
        return CognitiveConfig(**merged)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def _merge_source(
    merged: dict[str, Any],
    metric_tables: dict[str, dict[str, Any]],
    data: Mapping[str, Any],
    origin: str,
) -> None:
    """Fold one source into the running merge; metric tables merge per key."""
    for key, value in data.items():
        if key != "metrics":
            merged[key] = value
            continue
        if not isinstance(value, Mapping):
            raise ConfigurationError(f"Invalid [metrics] section in {origin}: expected a table")
        for metric_key, table in value.items():
            metric_key = metric_key.value if isinstance(metric_key, MetricName) else metric_key
            if isinstance(table, MetricConfig):
                table = table.to_dict()
            if not isinstance(table, Mapping):
                raise ConfigurationError(
                    f"Invalid [metrics.{metric_key}] section in {origin}: expected a table"
                )
            metric_tables.setdefault(metric_key, {}).update(table)


def _build_metrics(metric_tables: Mapping[str, Mapping[str, Any]]) -> dict[MetricName, MetricConfig]:
    metrics = default_metrics()
    for key, table in metric_tables.items():
        name = MetricName.from_key(key)
        unknown = set(table) - {"threshold", "scale", "enabled"}
        if unknown:
            raise ValueError(f"unknown field(s) in [metrics.{key}]: {', '.join(sorted(unknown))}")
        metrics[name] = replace(metrics[name], **table)
    return metrics


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from COGNITIVE_* environment variables.

    Supported environment variables:
        COGNITIVE_SCORE_THRESHOLD: float
        COGNITIVE_WORKERS: int
        COGNITIVE_CACHE_ENABLED: bool (true/false/1/0)
        COGNITIVE_CACHE_DIR: str
        COGNITIVE_CACHE_TTL_HOURS: int
        COGNITIVE_VERBOSITY: quiet/normal/verbose
    """
    type_hints = get_type_hints(CognitiveConfig)

    result: dict[str, Any] = {}
    for field_name in CognitiveConfig.__dataclass_fields__:
        env_key = f"COGNITIVE_{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e)) from e
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Returns None for container fields, which cannot be set from the environment.
    """
    origin = getattr(type_hint, "__origin__", None)

    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin in (list, dict) or type_hint in (list, dict):
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load a TOML file and return the parsed dict."""
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or the 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
