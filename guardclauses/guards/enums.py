# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Enum membership guards."""

from __future__ import annotations

import enum
import functools
import operator
from typing import Any, Optional, Type

from ..clause import IGuardClause
from ..exceptions import ArgumentOutOfRangeError
from ..telemetry.metrics import record_violation
from .base import choose, named


def _declared(enum_type: Type[enum.Enum]) -> list:
    # __members__ includes aliases
    return list(enum_type.__members__.values())


def _flag_mask(enum_type: Type[enum.Flag]) -> int:
    return functools.reduce(operator.or_, (int(m.value) for m in _declared(enum_type)), 0)


def _raw(value: Any) -> Any:
    return value.value if isinstance(value, enum.Enum) else value


def enum_out_of_range(
    guard: IGuardClause,
    value: Any,
    enum_type: Optional[Type[enum.Enum]] = None,
    parameter_name: Optional[str] = None,
    message: Optional[str] = None,
) -> None:
    """Raise :class:`ArgumentOutOfRangeError` if *value* is not valid for *enum_type*.

    *value* may be a member or a raw value; a raw value needs *enum_type*.

    For ``enum.Flag`` types (including ``IntFlag``) any combination of
    declared flags is valid, zero included; the value fails only when it
    carries a bit outside the OR of all declared members. For every other
    enum the value must equal one of the declared members.
    """

    if enum_type is None:
        if not isinstance(value, enum.Enum):
            raise TypeError("enum_out_of_range() needs enum_type when value is not an Enum member")
        enum_type = type(value)

    subject = named("Input parameter", parameter_name)

    if issubclass(enum_type, enum.Flag):
        if isinstance(value, enum.Enum) and not isinstance(value, enum_type):
            valid = False
        else:
            raw = _raw(value)
            # Bitmasks are integers; no coercion from floats or strings
            if isinstance(raw, int):
                valid = raw & ~_flag_mask(enum_type) == 0
            else:
                valid = False
        if not valid:
            raise record_violation(
                "enum_out_of_range",
                ArgumentOutOfRangeError(
                    choose(
                        message,
                        f"{subject} with value {_raw(value)} contains undefined flags "
                        f"for enum type {enum_type.__name__}.",
                    ),
                    parameter_name,
                ),
            )
        return

    if isinstance(value, enum.Enum):
        valid = isinstance(value, enum_type) and value in _declared(enum_type)
    else:
        valid = any(value == member.value for member in _declared(enum_type))

    if not valid:
        raise record_violation(
            "enum_out_of_range",
            ArgumentOutOfRangeError(
                choose(
                    message,
                    f"{subject} with value {_raw(value)} is not a valid value "
                    f"for enum type {enum_type.__name__}.",
                ),
                parameter_name,
            ),
        )


__all__ = ["enum_out_of_range"]
