"""Tests for the per-file result cache."""

import pytest

from cognitive_analysis.cache import MetricsCache
from cognitive_analysis.metrics import MethodMetrics
from cognitive_analysis.traversal import TraversalResult


@pytest.fixture
def cache(tmp_path):
    cache = MetricsCache(cache_dir=str(tmp_path / "cache"), ttl_hours=1)
    yield cache
    cache.close()


class TestMetricsCache:
    def test_round_trip(self, cache):
        result = TraversalResult(methods=[MethodMetrics("Job", "run", line=3)])
        cache.set("key", result)

        restored = cache.get("key")
        assert restored.methods[0].identity == ("Job", "run")
        assert restored.methods[0].line == 3

    def test_miss(self, cache):
        assert cache.get("absent") is None

    def test_file_key_changes_with_content(self, cache, tmp_path):
        source = tmp_path / "mod.py"
        source.write_text("x = 1\n")
        first = cache.file_key(source)
        assert first == cache.file_key(source)

        source.write_text("x = 1\ny = 2\n")
        assert cache.file_key(source) != first

    def test_file_key_of_missing_file(self, cache, tmp_path):
        assert cache.file_key(tmp_path / "gone.py") is None

    def test_file_key_depends_on_namespace(self, cache, tmp_path):
        source = tmp_path / "pkg" / "mod.py"
        source.parent.mkdir()
        source.write_text("x = 1\n")
        assert cache.file_key(source, "pkg.mod") != cache.file_key(source, "mod")
        assert cache.file_key(source, "mod") == cache.file_key(source, "mod")

    def test_clear_and_stats(self, cache):
        cache.set("a", 1)
        cache.set("b", 2)
        assert cache.stats()["size"] == 2

        cache.clear()
        assert cache.stats()["size"] == 0

    def test_disabled(self, tmp_path):
        cache = MetricsCache(cache_dir=str(tmp_path / "cache"), enabled=False)
        cache.set("a", 1)
        assert cache.get("a") is None
        assert cache.stats() == {"enabled": False}
        assert not (tmp_path / "cache").exists()
