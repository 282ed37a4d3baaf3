"""Analysis-related exceptions: file access, parsing, identity."""

from pathlib import Path
from typing import List

from .base import CognitiveAnalysisError


class AnalysisError(CognitiveAnalysisError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a source file cannot be read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParsingError(AnalysisError):
    """Raised when a source file cannot be turned into a syntax tree."""

    def __init__(self, filepath: Path, language: str, reason: str):
        super().__init__(
            f"Failed to parse {language} file: {filepath}",
            details={"filepath": str(filepath), "language": language, "reason": reason},
        )
        self.filepath = filepath
        self.language = language
        self.reason = reason


class UnsupportedLanguageError(AnalysisError):
    """Raised when no grammar is available for a language."""

    def __init__(self, language: str, supported_languages: List[str]):
        super().__init__(
            f"Unsupported language: {language}",
            details={"language": language, "supported": ", ".join(supported_languages)},
        )
        self.language = language
        self.supported_languages = supported_languages


class IdentityMismatchError(AnalysisError):
    """Raised when two method records with different identities are compared."""

    def __init__(self, expected: str, actual: str):
        super().__init__(
            "Cannot compare metrics of different methods",
            details={"expected": expected, "actual": actual},
        )
        self.expected = expected
        self.actual = actual
