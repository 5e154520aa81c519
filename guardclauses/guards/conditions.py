# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Custom boolean condition guard."""

from __future__ import annotations

from typing import Optional

from ..clause import IGuardClause
from ..exceptions import ArgumentError
from ..telemetry.metrics import record_violation
from .base import choose


def custom_condition(
    guard: IGuardClause,
    condition: bool,
    parameter_name: Optional[str] = None,
    message: Optional[str] = None,
) -> None:
    """Raise :class:`ArgumentError` if *condition* is true.

    *condition* describes the invalid state, e.g.
    ``custom_condition(Against, end < start, "end")``.
    """

    if condition:
        if parameter_name:
            default = f"Input parameter '{parameter_name}' failed custom condition."
        else:
            default = "The specified condition was met, indicating an invalid state."
        raise record_violation("custom_condition", ArgumentError(choose(message, default), parameter_name))


__all__ = ["custom_condition"]
