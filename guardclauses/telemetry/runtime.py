# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""OpenTelemetry meter shared by the guard clause instruments."""

from __future__ import annotations

from opentelemetry import metrics

from .. import __version__

# Without a configured MeterProvider the API hands out no-op instruments.
meter = metrics.get_meter("guardclauses", __version__)

__all__ = ["meter"]
