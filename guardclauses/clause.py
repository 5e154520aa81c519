# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""The guard capability and its process-wide entry point.

Guards are plain functions whose first argument is the capability value.
Adding a guard means writing another such function anywhere; nothing has
to be registered:

.. code-block:: python

    from guardclauses import Against, IGuardClause, ArgumentError

    def invalid_state(guard: IGuardClause, status, parameter_name=None):
        if status in {"shipped", "cancelled"}:
            raise ArgumentError(f"Order with status '{status}' cannot be modified.", parameter_name)

    invalid_state(Against, order.status, "status")
"""

from __future__ import annotations

import threading
from typing import Final, Protocol, runtime_checkable


@runtime_checkable
class IGuardClause(Protocol):
    """Marker type every guard clause is written against."""


class _GuardClause:
    """The single, stateless realisation of :class:`IGuardClause`."""

    __slots__ = ()

    _created = False
    _lock = threading.Lock()

    def __new__(cls):
        with cls._lock:
            if cls._created:
                raise TypeError(
                    "The guard clause is a process-wide singleton; use Guard.against"
                )
            cls._created = True
            return super().__new__(cls)

    def __repr__(self) -> str:
        return "Guard.against"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (get_guard_clause, ())


# Process-wide instance
Against: Final[IGuardClause] = _GuardClause()


class Guard:
    """Namespace holding the canonical guard clause as ``Guard.against``."""

    against: Final[IGuardClause] = Against

    def __init__(self) -> None:
        raise TypeError("Guard is a namespace; use Guard.against")


def get_guard_clause() -> IGuardClause:
    """Return the process-wide guard clause instance."""

    return Against


__all__ = [
    "Against",
    "Guard",
    "IGuardClause",
    "get_guard_clause",
]
