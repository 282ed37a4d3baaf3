"""Root of the cognitive-analysis error hierarchy."""

from typing import Dict, Optional


class CognitiveAnalysisError(Exception):
    """Any failure the CLI reports as a one-line error with exit code 1.

    ``details`` holds the offending values (path, field, reason...) and is
    appended to the message as ``key=value`` pairs in insertion order.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details) if details else {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        pairs = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({pairs})"
