# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Built-in guard clauses, grouped by the kind of value they inspect."""

from .conditions import custom_condition
from .enums import enum_out_of_range
from .identifiers import EMPTY_UUID, empty
from .lookups import not_found, not_found_by_key
from .nulls import null, null_or_empty, null_or_white_space
from .numeric import negative, out_of_range, zero
from .strings import invalid_email, invalid_format, invalid_url

__all__ = [
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
