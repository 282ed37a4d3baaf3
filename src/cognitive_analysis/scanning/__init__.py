"""Source discovery and conversion of parse trees into the neutral tree."""

from .files import find_source_files, module_namespace, should_skip_file
from .languages import EXTENSIONS, detect_language
from .syntax_builder import JavaScriptConverter, PythonConverter, SyntaxTreeBuilder
from .treesitter_parser import TREE_SITTER_AVAILABLE, TreeSitterParser, get_supported_languages

__all__ = [
    "EXTENSIONS",
    "JavaScriptConverter",
    "PythonConverter",
    "SyntaxTreeBuilder",
    "TREE_SITTER_AVAILABLE",
    "TreeSitterParser",
    "detect_language",
    "find_source_files",
    "get_supported_languages",
    "module_namespace",
    "should_skip_file",
]
