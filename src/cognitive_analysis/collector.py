"""Collects scored metrics for every source file under a path."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .cache import MetricsCache
from .config import CognitiveConfig
from .exceptions import AnalysisError, FileAccessError, UnsupportedLanguageError
from .logging_config import get_logger
from .metrics.collection import MetricsCollection
from .metrics.cyclomatic import CyclomaticMetrics
from .metrics.halstead import HalsteadMetrics
from .metrics.score import ScoreCalculator
from .scanning.files import find_source_files, module_namespace
from .scanning.languages import detect_language, extensions_for
from .scanning.syntax_builder import SyntaxTreeBuilder
from .traversal.combined import CombinedMetricsVisitor, TraversalResult

logger = get_logger(__name__)


@dataclass
class FileFailure:
    """A file that could not be analysed."""

    path: Path
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


@dataclass
class AnalysisResult:
    collection: MetricsCollection = field(default_factory=MetricsCollection)
    class_cyclomatic: dict[str, CyclomaticMetrics] = field(default_factory=dict)
    class_halstead: dict[str, HalsteadMetrics] = field(default_factory=dict)
    ignored: list[str] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)
    failures: list[FileFailure] = field(default_factory=list)


class MetricsCollector:
    """Parses, measures and scores source files.

    Files may be processed on several worker threads; results are merged in
    file order with first-wins semantics, so the outcome matches a
    sequential run. A file that fails to parse is logged, listed in
    ``failures`` and excluded.
    """

    def __init__(self, config: CognitiveConfig, cache: Optional[MetricsCache] = None) -> None:
        self.config = config
        self.cache = cache
        self.calculator = ScoreCalculator()
        self._local = threading.local()

    def _builder(self) -> SyntaxTreeBuilder:
        # tree-sitter parsers are not thread-safe: one builder per thread
        builder = getattr(self._local, "builder", None)
        if builder is None:
            builder = SyntaxTreeBuilder()
            self._local.builder = builder
        return builder

    def discover(self, path: Path) -> list[Path]:
        extensions = self.config.extensions or extensions_for(self._builder().languages)
        if not extensions:
            logger.warning("No tree-sitter grammars installed; nothing to analyse")
            return []
        return find_source_files(path, extensions, self.config.exclude_patterns)

    def collect(self, path: Union[str, Path]) -> AnalysisResult:
        root = Path(path)
        if not root.exists():
            raise FileAccessError(root, "path does not exist")
        files = self.discover(root)
        logger.info(f"Analysing {len(files)} files under {root}")
        return self.collect_files(files, root)

    def collect_files(self, files: list[Path], root: Path) -> AnalysisResult:
        result = AnalysisResult(files=list(files))

        if self.config.workers > 1 and len(files) > 1:
            with ThreadPoolExecutor(max_workers=self.config.workers) as executor:
                futures = [executor.submit(self._analyze_safely, f, root) for f in files]
                outcomes = [future.result() for future in futures]
        else:
            outcomes = [self._analyze_safely(f, root) for f in files]

        for filepath, outcome in zip(files, outcomes):
            if isinstance(outcome, FileFailure):
                result.failures.append(outcome)
                continue
            self._merge(result, outcome)

        logger.info(
            f"Collected {len(result.collection)} methods from {len(files) - len(result.failures)} "
            f"files ({len(result.failures)} failed)"
        )
        return result

    def analyze_file(self, filepath: Path, root: Path) -> TraversalResult:
        """Unscored metrics of one file.

        Raises:
            FileAccessError: The file cannot be read
            ParsingError: The file has syntax errors
            UnsupportedLanguageError: No grammar handles the file
        """
        namespace = module_namespace(filepath, root)
        key = self.cache.file_key(filepath, namespace) if self.cache is not None else None
        if key is not None:
            cached = self.cache.get(key)
            if cached is not None:
                return cached

        language = detect_language(filepath)
        if language is None:
            raise UnsupportedLanguageError(filepath.suffix, self._builder().languages)

        try:
            source = filepath.read_bytes()
        except OSError as e:
            raise FileAccessError(filepath, str(e)) from e

        tree = self._builder().build(source, language, path=filepath, namespace=namespace)
        traversal = CombinedMetricsVisitor().traverse(tree, file=str(filepath))

        if key is not None:
            self.cache.set(key, traversal)
        return traversal

    def _analyze_safely(self, filepath: Path, root: Path) -> Union[TraversalResult, FileFailure]:
        try:
            return self.analyze_file(filepath, root)
        except AnalysisError as e:
            logger.warning(f"Skipping {filepath}: {e}")
            return FileFailure(filepath, str(e))
        except Exception as e:
            logger.error(f"Unexpected error analysing {filepath}: {e}")
            return FileFailure(filepath, f"unexpected error: {e}")

    def _merge(self, result: AnalysisResult, traversal: TraversalResult) -> None:
        for metrics in traversal.methods:
            if result.collection.contains(metrics):
                logger.debug(f"Duplicate method {metrics.class_name}::{metrics.method_name} ignored")
                continue
            self.calculator.calculate(metrics, self.config)
            result.collection.add(metrics)
        for name, record in traversal.class_cyclomatic.items():
            result.class_cyclomatic.setdefault(name, record)
        for name, record in traversal.class_halstead.items():
            result.class_halstead.setdefault(name, record)
        result.ignored.extend(traversal.ignored)
