"""Baseline loading exceptions."""

from pathlib import Path
from typing import List, Optional

from .base import CognitiveAnalysisError


class BaselineError(CognitiveAnalysisError):
    """Base class for baseline errors."""

    pass


class MissingBaselineFileError(BaselineError):
    """Raised when the baseline file does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"Baseline file does not exist: {path}", details={"path": str(path)})
        self.path = path


class UnreadableBaselineFileError(BaselineError):
    """Raised when the baseline file cannot be read or is not JSON."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot read baseline file: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class InvalidBaselineSchemaError(BaselineError):
    """Raised when a baseline document violates the schema.

    Every violation found is kept in ``errors``.
    """

    def __init__(self, errors: List[str], path: Optional[Path] = None):
        details = {"errors": "; ".join(errors)}
        if path is not None:
            details["path"] = str(path)
        super().__init__("Invalid baseline file format", details=details)
        self.errors = list(errors)
        self.path = path
