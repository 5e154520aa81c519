# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Error taxonomy raised by guard clauses.

Every failed guard raises exactly one of four kinds:

- ``ArgumentNullError``: a required value was ``None``.
- ``ArgumentError``: the value is present but invalid (empty, zero, bad format…).
- ``ArgumentOutOfRangeError``: the value is well-formed but outside its bounds.
- ``NotFoundError``: a lookup by key produced no result.

The null and out-of-range kinds subclass ``ArgumentError`` so ``except
ArgumentError`` catches any bad argument; ``error.kind`` tells them apart.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Abstract kind of a precondition violation."""

    NULL_ARGUMENT = "null_argument"
    INVALID_ARGUMENT = "invalid_argument"
    ARGUMENT_OUT_OF_RANGE = "argument_out_of_range"
    NOT_FOUND = "not_found"


class GuardError(Exception):
    """Base class for every error raised by a guard clause."""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str, parameter_name: Optional[str] = None):
        self.message = message
        self.parameter_name = parameter_name or None
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"parameter_name={self.parameter_name!r})"
        )


class ArgumentError(GuardError, ValueError):
    """The value is present but structurally or semantically invalid."""

    kind = ErrorKind.INVALID_ARGUMENT


class ArgumentNullError(ArgumentError):
    """A required value was ``None``."""

    kind = ErrorKind.NULL_ARGUMENT


class ArgumentOutOfRangeError(ArgumentError):
    """The value lies outside an allowed bound or enumeration."""

    kind = ErrorKind.ARGUMENT_OUT_OF_RANGE


class NotFoundError(GuardError, LookupError):
    """A lookup by key produced no result.

    Distinct from the presence-based ``not_found`` guard, which raises
    ``ArgumentError``: this kind means the referenced entity is absent.
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        message: str,
        parameter_name: Optional[str] = None,
        *,
        key: Any = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, parameter_name)
        self.key = key
        if cause is not None:
            self.__cause__ = cause


class ConfigurationError(Exception):
    """A guard was configured incorrectly (e.g. a malformed regex pattern).

    This is a programming error on the caller's side, not a violation of
    the guarded value, so it sits outside the ``GuardError`` hierarchy.
    """


__all__ = [
    "ArgumentError",
    "ArgumentNullError",
    "ArgumentOutOfRangeError",
    "ConfigurationError",
    "ErrorKind",
    "GuardError",
    "NotFoundError",
]
