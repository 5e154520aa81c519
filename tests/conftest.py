# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Shared fixtures for the guard clause test-suite."""
from __future__ import annotations

from typing import Any, Dict, List, Tuple

import pytest

from guardclauses import Against
from guardclauses.config import reload_settings


class RecordingCounter:
    """Stand-in for an OpenTelemetry counter that remembers every ``add``."""

    def __init__(self) -> None:
        self.calls: List[Tuple[int, Dict[str, Any]]] = []

    def add(self, amount: int, attributes: Dict[str, Any] | None = None) -> None:  # noqa: D401
        self.calls.append((amount, dict(attributes or {})))


@pytest.fixture()
def guard():
    """The canonical guard clause."""
    return Against


@pytest.fixture()
def violations(monkeypatch) -> RecordingCounter:
    """Capture ``guardclauses.guard.violation.total`` increments."""
    counter = RecordingCounter()
    monkeypatch.setattr("guardclauses.telemetry.metrics.guard_violation_total", counter)
    return counter


@pytest.fixture()
def rejections(monkeypatch) -> RecordingCounter:
    """Capture ``guardclauses.pattern.rejected.total`` increments."""
    counter = RecordingCounter()
    monkeypatch.setattr("guardclauses.guards.strings.pattern_rejected_total", counter)
    return counter


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Start every test from default settings and leave none behind."""
    for name in (
        "GUARDCLAUSES_EMAIL_MAX_LENGTH",
        "GUARDCLAUSES_URL_MAX_LENGTH",
        "GUARDCLAUSES_METRICS",
    ):
        monkeypatch.delenv(name, raising=False)
    reload_settings()
    yield
    monkeypatch.undo()
    reload_settings()


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


@pytest.fixture()
def compilations(monkeypatch) -> RecordingCounter:
    """Capture ``guardclauses.pattern.compile.total`` increments."""
    counter = RecordingCounter()
    monkeypatch.setattr("guardclauses.guards.patterns.pattern_compile_total", counter)
    return counter
