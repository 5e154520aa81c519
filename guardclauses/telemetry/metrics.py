# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for the guard clauses."""

from __future__ import annotations

import logging
from typing import TypeVar

from ..config import get_settings
from ..exceptions import GuardError
from .runtime import meter

logger = logging.getLogger(__name__)

_E = TypeVar("_E", bound=GuardError)

guard_violation_total = meter.create_counter(
    name="guardclauses.guard.violation.total",
    description="Counts failed guard clauses partitioned by guard and error kind.",
    unit="1",
)

pattern_compile_total = meter.create_counter(
    name="guardclauses.pattern.compile.total",
    description="Counts regular expressions compiled by the string format guards.",
    unit="1",
)

pattern_rejected_total = meter.create_counter(
    name="guardclauses.pattern.rejected.total",
    description="Counts inputs rejected without running the matcher (e.g. over the length ceiling).",
    unit="1",
)


# ==============================================================================
# Guard Violation Recording
# ==============================================================================


def record_violation(guard: str, error: _E) -> _E:
    """Count a failed guard and hand the error back for raising.

    Usage inside a guard::

        raise record_violation("null", ArgumentNullError(message, parameter_name))

    The error itself is neither stored nor logged.
    """

    if not get_settings().metrics_enabled:
        return error

    try:
        guard_violation_total.add(1, {"guard": guard, "kind": error.kind.value})
    except Exception:
        # Telemetry must never interfere with user code
        logger.debug("Failed to record violation metric for guard '%s'", guard, exc_info=True)
    return error


__all__ = [
    "guard_violation_total",
    "pattern_compile_total",
    "pattern_rejected_total",
    "record_violation",
]
