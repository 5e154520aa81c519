# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""String format guards.

Format guards only judge values that were actually supplied: ``None`` and
``""`` pass every one of them (the email and URL guards also let
whitespace-only input through). Combine them with
:func:`~guardclauses.guards.nulls.null_or_white_space` when the value is
also required::

    null_or_white_space(Against, email, "email")
    invalid_email(Against, email, "email")
"""

from __future__ import annotations

import logging
from typing import Optional, Pattern, Union

from ..clause import IGuardClause
from ..config import get_settings
from ..exceptions import ArgumentError
from ..telemetry.metrics import pattern_rejected_total, record_violation
from .base import choose, named
from .patterns import EMAIL_PATTERN, URL_PATTERN, LazyPattern, compile_pattern

logger = logging.getLogger(__name__)


def invalid_format(
    guard: IGuardClause,
    value: Optional[str],
    pattern: Union[str, Pattern[str]],
    parameter_name: Optional[str] = None,
    message: Optional[str] = None,
) -> None:
    """Raise :class:`ArgumentError` if *value* does not contain a match for *pattern*.

    Matching uses ``re.search`` semantics; anchor the pattern with ``^``/``$``
    to require the whole value to match. ``None`` and ``""`` are skipped.

    Raises:
        ArgumentError: *value* does not match.
        ConfigurationError: *pattern* is not a valid regular expression.
    """

    if not value:
        return

    if compile_pattern(pattern).search(value) is None:
        raise record_violation(
            "invalid_format",
            ArgumentError(
                choose(message, f"{named('Input', parameter_name)} does not match the required format."),
                parameter_name,
            ),
        )


def _matches(pattern: LazyPattern, value: str, max_length: int) -> bool:
    if len(value) > max_length:
        pattern_rejected_total.add(1, {"pattern": pattern.name, "reason": "too_long"})
        logger.debug(
            "Rejected %d-character input for %s pattern (limit %d)",
            len(value),
            pattern.name,
            max_length,
        )
        return False
    return pattern.fullmatch(value)


def invalid_email(
    guard: IGuardClause,
    value: Optional[str],
    parameter_name: Optional[str] = None,
    message: Optional[str] = None,
) -> None:
    """Raise :class:`ArgumentError` if *value* is not a valid email address.

    ``None``, empty and whitespace-only values are skipped.
    """

    if value is None or value.strip() == "":
        return

    if not _matches(EMAIL_PATTERN, value, get_settings().email_max_length):
        raise record_violation(
            "invalid_email",
            ArgumentError(
                choose(message, f"{named('Input', parameter_name)} is not a valid email address."),
                parameter_name,
            ),
        )


def invalid_url(
    guard: IGuardClause,
    value: Optional[str],
    parameter_name: Optional[str] = None,
    message: Optional[str] = None,
) -> None:
    """Raise :class:`ArgumentError` if *value* is not an absolute http(s) URL.

    ``None``, empty and whitespace-only values are skipped.
    """

    if value is None or value.strip() == "":
        return

    if not _matches(URL_PATTERN, value, get_settings().url_max_length):
        raise record_violation(
            "invalid_url",
            ArgumentError(
                choose(message, f"{named('Input', parameter_name)} is not a valid URL."),
                parameter_name,
            ),
        )


__all__ = ["invalid_email", "invalid_format", "invalid_url"]
