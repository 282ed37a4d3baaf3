"""Opt-out markers placed in doc comments."""

from __future__ import annotations

from .nodes import SyntaxNode

IGNORE_MARKER = "@cognitive-ignore"


def is_ignored(node: SyntaxNode) -> bool:
    """True when a declaration's comments carry the ignore marker."""
    return any(IGNORE_MARKER in comment for comment in node.comments)
