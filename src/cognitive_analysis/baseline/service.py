"""Loading, saving and comparing against baseline files."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from ..exceptions import (
    InvalidBaselineSchemaError,
    MissingBaselineFileError,
    UnreadableBaselineFileError,
)
from ..logging_config import get_logger
from ..metrics.collection import MetricsCollection
from ..metrics.models import MethodMetrics
from .schema import BaselineSchemaValidator
from .snapshot import BaselineSnapshot, LoadedBaseline, generate_config_hash, parse_baseline

if TYPE_CHECKING:
    from ..config import CognitiveConfig

logger = get_logger(__name__)

DEFAULT_BASELINE_DIR = Path(".cognitive-analysis") / "baseline"
BASELINE_GLOB = "baseline-*.json"
FILENAME_DATE_FORMAT = "%Y-%m-%d_%H-%M-%S"


def default_baseline_path(
    directory: Union[str, Path] = DEFAULT_BASELINE_DIR, now: Optional[datetime] = None
) -> Path:
    """``<directory>/baseline-YYYY-MM-DD_HH-MM-SS.json`` for the given time."""
    now = now or datetime.now()
    return Path(directory) / f"baseline-{now.strftime(FILENAME_DATE_FORMAT)}.json"


class Baseline:
    """Reads and writes baseline files and attaches deltas to current metrics."""

    def __init__(self, validator: Optional[BaselineSchemaValidator] = None) -> None:
        self.validator = validator or BaselineSchemaValidator()

    def load(self, path: Union[str, Path]) -> LoadedBaseline:
        """Load and validate a baseline file.

        Raises:
            MissingBaselineFileError: The file does not exist
            UnreadableBaselineFileError: The file cannot be read or is not JSON
            InvalidBaselineSchemaError: The document violates the schema
        """
        path = Path(path)
        if not path.exists():
            raise MissingBaselineFileError(path)

        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise UnreadableBaselineFileError(path, str(e)) from e
        except UnicodeDecodeError as e:
            raise UnreadableBaselineFileError(path, f"not UTF-8: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise UnreadableBaselineFileError(path, f"invalid JSON: {e}") from e

        try:
            baseline = parse_baseline(data, self.validator)
        except InvalidBaselineSchemaError as e:
            raise InvalidBaselineSchemaError(e.errors, path) from e

        logger.info(f"Loaded baseline with {baseline.method_count} methods from {path}")
        return baseline

    def load_with_validation(
        self, path: Union[str, Path], config: CognitiveConfig
    ) -> tuple[LoadedBaseline, list[str]]:
        """Load a baseline and report configuration drift as warnings.

        A hash mismatch does not stop the comparison. Legacy baselines carry no
        hash and never warn.
        """
        baseline = self.load(path)
        warnings: list[str] = []

        if isinstance(baseline, BaselineSnapshot):
            current_hash = generate_config_hash(config)
            if baseline.config_hash != current_hash:
                message = (
                    "Baseline was generated with a different scoring configuration "
                    f"(baseline {baseline.config_hash}, current {current_hash}); "
                    "deltas may be misleading"
                )
                logger.warning(message)
                warnings.append(message)

        return baseline, warnings

    def calculate_deltas(self, collection: MetricsCollection, baseline: LoadedBaseline) -> int:
        """Attach baseline-to-current deltas to every method present in both.

        Returns:
            Number of methods compared

        Raises:
            IdentityMismatchError: A stored record does not describe the
                method it is filed under
        """
        compared = 0
        for class_name, method_name, data in baseline.iter_methods():
            current = collection.get(class_name, method_name)
            if current is None:
                continue
            previous = MethodMetrics.from_dict(data)
            current.calculate_deltas(previous)
            compared += 1

        logger.debug(f"Compared {compared} methods against baseline")
        return compared

    def save(
        self,
        collection: MetricsCollection,
        config: CognitiveConfig,
        path: Optional[Union[str, Path]] = None,
    ) -> Path:
        """Write the collection as a versioned baseline; returns the path used."""
        path = Path(path) if path is not None else default_baseline_path()
        snapshot = BaselineSnapshot.from_metrics_collection(collection, config)

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(snapshot.to_dict(), f, indent=2)

        logger.info(f"Saved baseline with {len(collection)} methods to {path}")
        return path

    def is_valid_file(self, path: Union[str, Path]) -> bool:
        try:
            self.load(path)
        except (MissingBaselineFileError, UnreadableBaselineFileError, InvalidBaselineSchemaError):
            return False
        return True

    def list_files(self, directory: Union[str, Path] = DEFAULT_BASELINE_DIR) -> list[Path]:
        """Readable baseline files in ``directory``, newest first."""
        directory = Path(directory)
        if not directory.is_dir():
            return []
        files = [p for p in directory.glob(BASELINE_GLOB) if p.is_file()]
        return sorted(files, key=lambda p: p.stat().st_mtime, reverse=True)

    def find_latest(self, directory: Union[str, Path] = DEFAULT_BASELINE_DIR) -> Optional[Path]:
        files = self.list_files(directory)
        return files[0] if files else None
