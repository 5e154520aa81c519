# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Numeric and date range guards.

``out_of_range`` works for anything ordered: ints, floats, ``Decimal``,
``Fraction``, dates, datetimes, times and timedeltas. ``zero`` and
``negative`` need a number; the comparison is made against the value's
own type zero so ``Decimal`` and ``Fraction`` keep exact arithmetic.
"""

from __future__ import annotations

from numbers import Number
from typing import Any, Optional

from ..clause import IGuardClause
from ..exceptions import ArgumentError, ArgumentOutOfRangeError
from ..telemetry.metrics import record_violation
from .base import choose, named, render


def out_of_range(
    guard: IGuardClause,
    value: Any,
    minimum: Any,
    maximum: Any,
    parameter_name: Optional[str] = None,
    message: Optional[str] = None,
) -> None:
    """Raise :class:`ArgumentOutOfRangeError` unless ``minimum <= value <= maximum``.

    Both bounds are inclusive.
    """

    # NaN fails: every comparison with it is false
    if not (minimum <= value <= maximum):
        default = (
            f"{named('Input parameter', parameter_name)} with value {render(value)} is out of range. "
            f"Allowed range: {render(minimum)}-{render(maximum)}."
        )
        raise record_violation(
            "out_of_range",
            ArgumentOutOfRangeError(choose(message, default), parameter_name),
        )


def _zero_of(value: Any) -> Any:
    if not isinstance(value, Number):
        raise TypeError(f"Expected a number, got {type(value).__name__}")
    try:
        return type(value)(0)
    except (TypeError, ValueError):
        return 0


def zero(
    guard: IGuardClause,
    value: Any,
    parameter_name: Optional[str] = None,
    message: Optional[str] = None,
) -> None:
    """Raise :class:`ArgumentError` if *value* equals zero (``-0.0`` included)."""

    if value == _zero_of(value):
        raise record_violation(
            "zero",
            ArgumentError(
                choose(message, f"{named('Input parameter', parameter_name)} with value '{value}' cannot be zero."),
                parameter_name,
            ),
        )


def negative(
    guard: IGuardClause,
    value: Any,
    parameter_name: Optional[str] = None,
    message: Optional[str] = None,
) -> None:
    """Raise :class:`ArgumentError` if *value* is strictly below zero.

    Zero passes, and so does ``-0.0``: it compares equal to zero.
    """

    if value < _zero_of(value):
        raise record_violation(
            "negative",
            ArgumentError(
                choose(message, f"{named('Input parameter', parameter_name)} with value '{value}' cannot be negative."),
                parameter_name,
            ),
        )


__all__ = ["negative", "out_of_range", "zero"]
