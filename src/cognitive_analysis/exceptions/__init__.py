"""Exception hierarchy for cognitive-analysis."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    IdentityMismatchError,
    ParsingError,
    UnsupportedLanguageError,
)
from .base import CognitiveAnalysisError
from .baseline import (
    BaselineError,
    InvalidBaselineSchemaError,
    MissingBaselineFileError,
    UnreadableBaselineFileError,
)
from .collection import (
    CollectionError,
    InvalidSortOrderError,
    UnknownGroupAttributeError,
    UnknownSortFieldError,
)
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "CognitiveAnalysisError",
    "AnalysisError",
    "FileAccessError",
    "ParsingError",
    "UnsupportedLanguageError",
    "IdentityMismatchError",
    "BaselineError",
    "MissingBaselineFileError",
    "UnreadableBaselineFileError",
    "InvalidBaselineSchemaError",
    "CollectionError",
    "UnknownSortFieldError",
    "InvalidSortOrderError",
    "UnknownGroupAttributeError",
    "ConfigurationError",
    "InvalidConfigError",
]
