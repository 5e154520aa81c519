# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Guards for values that come out of a lookup."""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from ..clause import IGuardClause
from ..exceptions import ArgumentError, NotFoundError
from ..telemetry.metrics import record_violation
from .base import choose, named

K = TypeVar("K")


def not_found(
    guard: IGuardClause,
    value: Any,
    parameter_name: Optional[str] = None,
    message: Optional[str] = None,
) -> None:
    """Raise :class:`ArgumentError` if an already looked-up *value* is ``None``."""

    if value is None:
        raise record_violation(
            "not_found",
            ArgumentError(choose(message, f"{named('Item', parameter_name)} was not found."), parameter_name),
        )


def not_found_by_key(
    guard: IGuardClause,
    key: K,
    lookup: Callable[[K], Any],
    parameter_name: Optional[str] = None,
    message: Optional[str] = None,
) -> None:
    """Call ``lookup(key)`` once and raise :class:`NotFoundError` if nothing comes back.

    A lookup that raises ``LookupError`` (``KeyError``, ``IndexError``…) also
    counts as "nothing"; its exception becomes the ``__cause__`` of the
    ``NotFoundError``. Any other exception propagates unchanged.
    """

    cause: Optional[LookupError] = None
    try:
        result = lookup(key)
    except LookupError as exc:
        result, cause = None, exc

    if result is None:
        raise record_violation(
            "not_found_by_key",
            NotFoundError(
                choose(message, f"Resource with key '{key}' was not found."),
                parameter_name,
                key=key,
                cause=cause,
            ),
        )


__all__ = ["not_found", "not_found_by_key"]
