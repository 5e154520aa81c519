# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Runnable demo showcasing fail-fast guard clauses.

Run with:

    python examples/guard_clauses_demo.py

The script registers a handful of users through a small service that
validates its arguments with guard clauses, then shows:

1. Presence guards stopping missing or blank values.
2. Format guards checking only values that were supplied.
3. Lookup guards raising ``NotFoundError`` for unknown keys.
"""

from __future__ import annotations

import logging
from textwrap import indent

from guardclauses import (
    Against,
    GuardError,
    invalid_email,
    invalid_format,
    not_found_by_key,
    null_or_white_space,
    out_of_range,
)

PLANS = {"free": 0, "team": 10, "enterprise": 100}


def register(username, email, plan: str, seats: int) -> dict:
    """Pretend to create an account once every guard passes."""

    null_or_white_space(Against, username, "username")
    invalid_format(Against, username, r"^[a-z0-9_]{3,20}$", "username")
    invalid_email(Against, email, "email")
    not_found_by_key(Against, plan, PLANS.get, "plan")
    out_of_range(Against, seats, 1, max(PLANS[plan], 1), "seats")
    return {"username": username, "email": email, "plan": plan, "seats": seats}


ATTEMPTS = [
    ("ada", "ada@example.com", "team", 5),
    ("grace", None, "free", 1),
    ("   ", "blank@example.com", "free", 1),
    ("Bad Name!", "bad@example.com", "free", 1),
    ("linus", "linus-at-example", "team", 2),
    ("alan", "alan@example.com", "platinum", 1),
    ("barbara", "barbara@example.com", "team", 50),
]


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    for attempt in ATTEMPTS:
        print(f"register{attempt!r}")
        try:
            account = register(*attempt)
        except GuardError as error:
            print(indent(f"✗ {type(error).__name__} [{error.kind.value}]: {error}", "    "))
        else:
            print(indent(f"✓ created {account}", "    "))


if __name__ == "__main__":
    main()
