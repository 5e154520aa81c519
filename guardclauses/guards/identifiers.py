# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Unique identifier guards."""

from __future__ import annotations

import uuid
from typing import Final, Optional

from ..clause import IGuardClause
from ..exceptions import ArgumentError
from ..telemetry.metrics import record_violation
from .base import choose

EMPTY_UUID: Final[uuid.UUID] = uuid.UUID(int=0)


def empty(
    guard: IGuardClause,
    value: uuid.UUID,
    parameter_name: Optional[str] = None,
    message: Optional[str] = None,
) -> None:
    """Raise :class:`ArgumentError` if *value* is the all-zero UUID."""

    if value == EMPTY_UUID:
        default = f"'{parameter_name}' cannot be an empty GUID." if parameter_name else "Value cannot be an empty GUID."
        raise record_violation("empty", ArgumentError(choose(message, default), parameter_name))


__all__ = ["EMPTY_UUID", "empty"]
