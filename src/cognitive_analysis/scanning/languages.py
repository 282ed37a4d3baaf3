"""File extension to grammar mapping."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

EXTENSIONS: dict[str, str] = {
    ".py": "python",
    ".pyi": "python",
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascript",
}


def detect_language(path: Path) -> Optional[str]:
    return EXTENSIONS.get(path.suffix.lower())


def extensions_for(languages: list[str]) -> list[str]:
    """Every extension handled by one of ``languages``."""
    return [ext for ext, lang in EXTENSIONS.items() if lang in languages]
