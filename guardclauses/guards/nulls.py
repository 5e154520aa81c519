# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Nullability and emptiness guards."""

from __future__ import annotations

from collections.abc import Iterable, Sized
from typing import Any, Optional

from ..clause import IGuardClause
from ..exceptions import ArgumentError, ArgumentNullError
from ..telemetry.metrics import record_violation
from .base import choose, named

_NOTHING = object()


def _raise_if_none(guard_name: str, value: Any, parameter_name: Optional[str], message: Optional[str]) -> None:
    if value is None:
        raise record_violation(
            guard_name,
            ArgumentNullError(
                choose(message, f"{named('Parameter', parameter_name)} cannot be null."),
                parameter_name,
            ),
        )


def null(
    guard: IGuardClause,
    value: Any,
    parameter_name: Optional[str] = None,
    message: Optional[str] = None,
) -> None:
    """Raise :class:`ArgumentNullError` if *value* is ``None``."""

    _raise_if_none("null", value, parameter_name, message)


def _is_empty(value: Iterable[Any]) -> bool:
    if isinstance(value, Sized):
        return len(value) == 0
    # Pull at most one element; one-shot iterators are never re-iterated.
    return next(iter(value), _NOTHING) is _NOTHING


def null_or_empty(
    guard: IGuardClause,
    value: Any,
    parameter_name: Optional[str] = None,
    message: Optional[str] = None,
) -> None:
    """Raise if *value* is ``None`` or empty.

    Strings fail only when they have zero length; whitespace-only strings
    pass (see :func:`null_or_white_space`). Any other iterable fails when it
    yields no elements.

    Raises:
        ArgumentNullError: *value* is ``None``.
        ArgumentError: *value* is an empty string or an empty collection.
        TypeError: *value* is neither a string nor iterable.
    """

    _raise_if_none("null_or_empty", value, parameter_name, message)

    if isinstance(value, str):
        if value == "":
            raise record_violation(
                "null_or_empty",
                ArgumentError(
                    choose(message, f"{named('Parameter', parameter_name)} cannot be empty."),
                    parameter_name,
                ),
            )
        return

    if _is_empty(value):
        raise record_violation(
            "null_or_empty",
            ArgumentError(
                choose(message, f"{named('Parameter', parameter_name)} cannot be an empty collection."),
                parameter_name,
            ),
        )


def null_or_white_space(
    guard: IGuardClause,
    value: Optional[str],
    parameter_name: Optional[str] = None,
    message: Optional[str] = None,
) -> None:
    """Raise if *value* is ``None``, empty, or consists only of whitespace."""

    _raise_if_none("null_or_white_space", value, parameter_name, message)

    if value == "" or value.isspace():
        raise record_violation(
            "null_or_white_space",
            ArgumentError(
                choose(message, f"{named('Parameter', parameter_name)} cannot be empty or whitespace."),
                parameter_name,
            ),
        )


__all__ = ["null", "null_or_empty", "null_or_white_space"]
