"""Shared test fixtures for cognitive-analysis."""

import os

import pytest

from cognitive_analysis.config import CognitiveConfig, MetricConfig
from cognitive_analysis.metrics import MethodMetrics, MetricName, MetricsCollection


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files and COGNITIVE_* variables out of tests."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "home")
    for key in list(os.environ):
        if key.startswith("COGNITIVE_"):
            monkeypatch.delenv(key)


@pytest.fixture
def default_config():
    """Default scoring configuration."""
    return CognitiveConfig()


@pytest.fixture
def strict_config():
    """Every threshold at zero with unit scale, so any count carries weight."""
    return CognitiveConfig(
        metrics={name: MetricConfig(threshold=0, scale=1.0) for name in MetricName}
    )


@pytest.fixture
def sample_collection():
    """Five methods across three classes with distinct scores."""
    rows = [
        ("App\\Service", "handle", 1.2, "src/service.py", 10),
        ("App\\Service", "validate", 0.3, "src/service.py", 40),
        ("App\\Controller", "index", 2.5, "src/controller.py", 5),
        ("App\\Controller", "store", 0.0, "src/controller.py", 30),
        ("App\\Repository", "find", 0.7, "src/repository.py", 3),
    ]
    collection = MetricsCollection()
    for class_name, method, score, file, line in rows:
        metric = MethodMetrics(class_name, method, file=file, line=line)
        metric.score = score
        collection.add(metric)
    return collection
