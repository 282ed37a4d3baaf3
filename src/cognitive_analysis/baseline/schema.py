"""Structural validation of baseline documents.

Validation is exhaustive: every violation is reported, not just the first.
A value of ``None`` counts as missing.
"""

from __future__ import annotations

import math
import re
from datetime import datetime
from typing import Any, Mapping

from ..metrics.names import MetricName

VERSION = "2.0"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")

TOP_LEVEL_FIELDS = ("version", "createdAt", "configHash", "metrics")
COUNT_FIELDS = tuple(metric.value for metric in MetricName)
WEIGHT_FIELDS = tuple(metric.weight_key for metric in MetricName)
METHOD_REQUIRED_FIELDS = ("class", "method") + COUNT_FIELDS + WEIGHT_FIELDS


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


class BaselineSchemaValidator:
    """Validates versioned ("2.0") and legacy baseline documents."""

    def validate(self, data: Any) -> list[str]:
        """Return every schema violation; an empty list means valid."""
        if not isinstance(data, Mapping):
            return ["Baseline data must be a JSON object"]
        if not data:
            return ["Empty baseline data"]
        if self.is_versioned(data):
            return self._validate_versioned(data)
        return self._validate_classes(data)

    def is_valid(self, data: Any) -> bool:
        return not self.validate(data)

    @staticmethod
    def is_versioned(data: Mapping[str, Any]) -> bool:
        return "version" in data

    def _validate_versioned(self, data: Mapping[str, Any]) -> list[str]:
        errors = [
            f"Missing required field: {name}" for name in TOP_LEVEL_FIELDS if data.get(name) is None
        ]

        version = data.get("version")
        if version is not None and version != VERSION:
            errors.append(f"Invalid version: {version}. Expected: {VERSION}")

        created_at = data.get("createdAt")
        if created_at is not None and not self._is_valid_date(created_at):
            errors.append("Invalid createdAt format. Expected: YYYY-MM-DD HH:MM:SS")

        config_hash = data.get("configHash")
        if config_hash is not None and (not isinstance(config_hash, str) or not config_hash):
            errors.append("Invalid configHash. Must be a non-empty string")

        for key in data:
            if key not in TOP_LEVEL_FIELDS:
                errors.append(f"Unexpected field '{key}' in baseline")

        metrics = data.get("metrics")
        if metrics is not None:
            if not isinstance(metrics, Mapping):
                errors.append("Metrics must be an object")
            elif not metrics:
                errors.append("Metrics object cannot be empty")
            else:
                errors.extend(self._validate_classes(metrics))

        return errors

    @staticmethod
    def _is_valid_date(value: Any) -> bool:
        if not isinstance(value, str) or not _DATE_PATTERN.match(value):
            return False
        try:
            datetime.strptime(value, DATE_FORMAT)
        except ValueError:
            return False
        return True

    def _validate_classes(self, metrics: Mapping[str, Any]) -> list[str]:
        errors: list[str] = []
        for class_name, class_data in metrics.items():
            if not class_name:
                errors.append("Class name cannot be empty")
            if not isinstance(class_data, Mapping):
                errors.append(f"Class data for '{class_name}' must be an object")
                continue

            methods = class_data.get("methods")
            if methods is None:
                errors.append(f"Missing 'methods' field for class '{class_name}'")
            elif not isinstance(methods, Mapping):
                errors.append(f"'methods' for class '{class_name}' must be an object")
            else:
                for method_name, method_data in methods.items():
                    errors.extend(self._validate_method(class_name, method_name, method_data))

            for key in class_data:
                if key != "methods":
                    errors.append(f"Unexpected field '{key}' in class '{class_name}'")
        return errors

    def _validate_method(self, class_name: str, method_name: str, data: Any) -> list[str]:
        where = f"method '{class_name}::{method_name}'"
        if not isinstance(data, Mapping):
            return [f"Data for {where} must be an object"]

        errors = [
            f"Missing required field '{name}' for {where}"
            for name in METHOD_REQUIRED_FIELDS
            if data.get(name) is None
        ]

        for name in ("class", "method"):
            value = data.get(name)
            if value is not None and (not isinstance(value, str) or not value):
                errors.append(f"Field '{name}' for {where} must be a non-empty string")

        for name in COUNT_FIELDS:
            value = data.get(name)
            if value is not None and not _is_count(value):
                errors.append(f"Field '{name}' for {where} must be a non-negative integer")

        for name in WEIGHT_FIELDS + ("score",):
            value = data.get(name)
            if value is not None and not (_is_number(value) and value >= 0):
                errors.append(f"Field '{name}' for {where} must be a non-negative number")

        line = data.get("line")
        if line is not None and not (_is_count(line) and line >= 1):
            errors.append(f"Field 'line' for {where} must be an integer >= 1")

        file = data.get("file")
        if file is not None and not isinstance(file, str):
            errors.append(f"Field 'file' for {where} must be a string or null")

        return errors
