# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Telemetry package - OpenTelemetry instruments for the guard clauses."""

from .metrics import (
    guard_violation_total,
    pattern_compile_total,
    pattern_rejected_total,
    record_violation,
)
from .runtime import meter

__all__ = [
    "guard_violation_total",
    "meter",
    "pattern_compile_total",
    "pattern_rejected_total",
    "record_violation",
]
