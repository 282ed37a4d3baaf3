"""Source file discovery."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from ..logging_config import get_logger

logger = get_logger(__name__)


def should_skip_file(relative: Path, exclude_patterns: Iterable[str]) -> bool:
    """True when ``relative`` matches an exclusion pattern.

    ``dir/*`` patterns exclude the directory at any depth.
    """
    for pattern in exclude_patterns:
        if pattern.endswith("/*") and pattern[:-2] in relative.parts[:-1]:
            return True
        if relative.match(pattern):
            return True
    return False


def find_source_files(
    root: Path, extensions: Iterable[str], exclude_patterns: Iterable[str] = ()
) -> list[Path]:
    """Files under ``root`` with one of ``extensions``, sorted by path.

    A file passed as ``root`` is returned on its own when its extension matches.
    """
    ext_set = {ext.lower() for ext in extensions}
    exclude_patterns = list(exclude_patterns)

    if root.is_file():
        return [root] if root.suffix.lower() in ext_set else []

    files = []
    skipped = 0
    for filepath in root.rglob("*"):
        if filepath.suffix.lower() not in ext_set or not filepath.is_file():
            continue
        if should_skip_file(filepath.relative_to(root), exclude_patterns):
            skipped += 1
            logger.debug(f"Skipped (pattern): {filepath}")
            continue
        files.append(filepath)

    logger.debug(f"Found {len(files)} source files under {root} ({skipped} excluded)")
    return sorted(files)


def module_namespace(path: Path, root: Path) -> str:
    """Dotted module path of ``path`` relative to ``root``.

    ``pkg/__init__.py`` maps to ``pkg``; a lone file maps to its stem.
    """
    try:
        relative = path.relative_to(root) if root.is_dir() else Path(path.name)
    except ValueError:
        relative = Path(path.name)
    parts = list(relative.with_suffix("").parts)
    if len(parts) > 1 and parts[-1] in ("__init__", "index"):
        parts.pop()
    return ".".join(parts)
