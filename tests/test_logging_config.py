"""Tests for package logger naming and levels."""

import logging

from cognitive_analysis.exceptions import CognitiveAnalysisError, MissingBaselineFileError
from cognitive_analysis.logging_config import ROOT_LOGGER, get_logger, setup_logging


class TestLogging:
    def test_module_names_are_prefixed(self):
        assert get_logger("collector").name == "cognitive_analysis.collector"
        assert get_logger("cognitive_analysis.cache").name == "cognitive_analysis.cache"
        assert get_logger().name == ROOT_LOGGER

    def test_similar_prefix_is_not_mistaken_for_package(self):
        assert get_logger("cognitive_analysis_extra").name == "cognitive_analysis.cognitive_analysis_extra"

    def test_levels(self):
        assert setup_logging(verbose=True).level == logging.DEBUG
        assert setup_logging(verbose=True, quiet=True).level == logging.ERROR
        assert setup_logging().level == logging.WARNING


class TestErrorMessages:
    def test_details_follow_message(self):
        error = CognitiveAnalysisError("Bad input", details={"path": "a.py", "reason": "empty"})
        assert str(error) == "Bad input (path=a.py, reason=empty)"

    def test_without_details(self):
        assert str(CognitiveAnalysisError("Bad input")) == "Bad input"

    def test_subclass_details(self, tmp_path):
        error = MissingBaselineFileError(tmp_path / "b.json")
        assert error.details == {"path": str(tmp_path / "b.json")}
        assert isinstance(error, CognitiveAnalysisError)
