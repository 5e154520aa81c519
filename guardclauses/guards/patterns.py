# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Process-wide regular expressions used by the string format guards.

The email and URL grammars avoid nested, overlapping quantifiers so the
backtracking engine stays polynomial, and callers cap the input length
before matching. Together that bounds the time any single match can take;
anything longer than the ceiling fails closed.
"""

from __future__ import annotations

import functools
import logging
import re
import threading
from typing import Optional, Pattern, Union

from ..exceptions import ConfigurationError
from ..telemetry.metrics import pattern_compile_total

logger = logging.getLogger(__name__)

# atext per RFC 5322; dots only between atoms
_LOCAL_PART = r"[a-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
# DNS label: 1-63 chars, no leading or trailing hyphen
_LABEL = r"[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?"

EMAIL_EXPRESSION = rf"{_LOCAL_PART}@(?:{_LABEL}\.)+{_LABEL}"

URL_EXPRESSION = (
    r"https?://"
    r"(?:www\.)?"
    rf"(?:{_LABEL}\.)+{_LABEL}"
    r"(?::[0-9]{1,5})?"
    r"(?:/[^\s?#]*)?"
    r"(?:\?[^\s#]*)?"
    r"(?:#\S*)?"
)


class LazyPattern:
    """A regular expression compiled on first use, exactly once per process."""

    def __init__(self, name: str, expression: str, flags: int = 0):
        self.name = name
        self.expression = expression
        self.flags = flags
        self._compiled: Optional[Pattern[str]] = None
        self._lock = threading.Lock()

    @property
    def compiled(self) -> Pattern[str]:
        compiled = self._compiled
        if compiled is not None:
            return compiled

        with self._lock:
            if self._compiled is None:
                self._compiled = re.compile(self.expression, self.flags)
                pattern_compile_total.add(1, {"pattern": self.name})
                logger.debug("Compiled %s pattern", self.name)
            return self._compiled

    @property
    def is_compiled(self) -> bool:
        return self._compiled is not None

    def fullmatch(self, value: str) -> bool:
        return self.compiled.fullmatch(value) is not None

    def __repr__(self) -> str:
        return f"LazyPattern(name={self.name!r}, compiled={self.is_compiled})"


EMAIL_PATTERN = LazyPattern("email", EMAIL_EXPRESSION, re.IGNORECASE)
URL_PATTERN = LazyPattern("url", URL_EXPRESSION, re.IGNORECASE)


@functools.lru_cache(maxsize=256)
def _compile_cached(expression: str) -> Pattern[str]:
    try:
        compiled = re.compile(expression)
    except re.error as exc:
        raise ConfigurationError(f"Invalid regex pattern {expression!r}: {exc}") from exc
    pattern_compile_total.add(1, {"pattern": "custom"})
    logger.debug("Compiled custom pattern %r", expression)
    return compiled


def compile_pattern(pattern: Union[str, Pattern[str]]) -> Pattern[str]:
    """Return a compiled pattern, reusing earlier compilations of the same string.

    Raises:
        ConfigurationError: *pattern* is not a valid regular expression.
    """

    if isinstance(pattern, re.Pattern):
        return pattern
    return _compile_cached(pattern)


__all__ = [
    "EMAIL_EXPRESSION",
    "EMAIL_PATTERN",
    "LazyPattern",
    "URL_EXPRESSION",
    "URL_PATTERN",
    "compile_pattern",
]
