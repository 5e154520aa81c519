# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Message helpers shared by the built-in guard clauses."""

from __future__ import annotations

from datetime import date, time
from typing import Any, Optional


def named(subject: str, parameter_name: Optional[str]) -> str:
    """Return ``"<subject> 'name'"``, or just ``subject`` when the name is unknown."""

    if parameter_name:
        return f"{subject} '{parameter_name}'"
    return subject


def render(value: Any) -> str:
    """Format a value for inclusion in a default message."""

    if isinstance(value, (date, time)):
        return value.isoformat()
    return str(value)


def choose(message: Optional[str], default: str) -> str:
    """A caller-supplied message replaces the default outright."""

    return message if message is not None else default


__all__ = ["choose", "named", "render"]
