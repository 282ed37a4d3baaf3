"""Tree-sitter parser wrapper.

Loads the installed grammars once and hands out syntax trees. A missing
tree-sitter installation is reported through TREE_SITTER_AVAILABLE rather
than at import time.

Usage:
    if TREE_SITTER_AVAILABLE:
        parser = TreeSitterParser()
        tree = parser.parse(code_bytes, "python")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..logging_config import get_logger

logger = get_logger(__name__)

TREE_SITTER_AVAILABLE = False
_tree_sitter_module: Any = None
_language_modules: dict[str, Any] = {}

try:
    import tree_sitter as _tree_sitter_module  # type: ignore[no-redef]

    TREE_SITTER_AVAILABLE = True

    try:
        import tree_sitter_python

        _language_modules["python"] = tree_sitter_python
    except ImportError:
        pass

    try:
        import tree_sitter_javascript

        _language_modules["javascript"] = tree_sitter_javascript
    except ImportError:
        pass

except ImportError:
    TREE_SITTER_AVAILABLE = False


if TYPE_CHECKING:

    class Node:
        type: str
        is_named: bool
        has_error: bool
        is_missing: bool
        start_byte: int
        end_byte: int
        start_point: tuple[int, int]
        end_point: tuple[int, int]
        children: list[Node]
        named_children: list[Node]
        parent: Node | None
        prev_named_sibling: Node | None

    class Tree:
        root_node: Node


def get_supported_languages() -> list[str]:
    """Languages with an installed grammar."""
    if not TREE_SITTER_AVAILABLE:
        return []
    return list(_language_modules.keys())


class TreeSitterParser:
    """One tree-sitter Parser per installed grammar.

    Parsers are not thread-safe; create one TreeSitterParser per thread.
    """

    def __init__(self) -> None:
        self._parsers: dict[str, Any] = {}

        if not TREE_SITTER_AVAILABLE:
            return

        for lang_name, lang_module in _language_modules.items():
            lang_fn = getattr(lang_module, f"language_{lang_name}", None)
            if lang_fn is None:
                lang_fn = getattr(lang_module, "language", None)
            if lang_fn is None:
                continue
            try:
                # tree-sitter >= 0.23 hands out a PyCapsule that must be wrapped
                lang_obj = _tree_sitter_module.Language(lang_fn())
                self._parsers[lang_name] = _tree_sitter_module.Parser(lang_obj)
            except (TypeError, ValueError) as e:
                logger.debug(f"Grammar for {lang_name} could not be loaded: {e}")

    def parse(self, code: bytes, language: str) -> Tree | None:
        """Parse ``code``; None when the language has no grammar."""
        parser = self._parsers.get(language)
        if parser is None:
            return None
        result: Tree = parser.parse(code)
        return result

    def is_language_supported(self, language: str) -> bool:
        return language in self._parsers

    @property
    def languages(self) -> list[str]:
        return list(self._parsers)
