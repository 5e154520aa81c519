# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Guard clauses - fail-fast precondition checks for function arguments.

Quick Start:
    >>> from guardclauses import Against, null_or_white_space, out_of_range
    >>> def register(username: str, age: int) -> None:
    ...     null_or_white_space(Against, username, "username")
    ...     out_of_range(Against, age, 13, 120, "age")

Each guard returns ``None`` when the value is acceptable and raises one of
the errors in :mod:`guardclauses.exceptions` otherwise.
"""

__version__ = "0.1.0"

from .clause import Against, Guard, IGuardClause, get_guard_clause
from .exceptions import (
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
    ConfigurationError,
    ErrorKind,
    GuardError,
    NotFoundError,
)
from .guards import (
    EMPTY_UUID,
    custom_condition,
    empty,
    enum_out_of_range,
    invalid_email,
    invalid_format,
    invalid_url,
    negative,
    not_found,
    not_found_by_key,
    null,
    null_or_empty,
    null_or_white_space,
    out_of_range,
    zero,
)

__all__ = [
    "__version__",
    # Entry point
    "Against",
    "Guard",
    "IGuardClause",
    "get_guard_clause",
    # Errors
    "ArgumentError",
    "ArgumentNullError",
    "ArgumentOutOfRangeError",
    "ConfigurationError",
    "ErrorKind",
    "GuardError",
    "NotFoundError",
    # Guards
    "EMPTY_UUID",
    "custom_condition",
    "empty",
    "enum_out_of_range",
    "invalid_email",
    "invalid_format",
    "invalid_url",
    "negative",
    "not_found",
    "not_found_by_key",
    "null",
    "null_or_empty",
    "null_or_white_space",
    "out_of_range",
    "zero",
]
