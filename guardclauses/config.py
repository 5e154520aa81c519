# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Environment-driven settings for the guard clauses.

Settings are read once, on first use, and are immutable afterwards.
Malformed values fall back to the defaults with a warning.
"""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

EMAIL_MAX_LENGTH_ENV = "GUARDCLAUSES_EMAIL_MAX_LENGTH"
URL_MAX_LENGTH_ENV = "GUARDCLAUSES_URL_MAX_LENGTH"
METRICS_ENV = "GUARDCLAUSES_METRICS"

# RFC 5321 path limit; de-facto browser limit for URLs
DEFAULT_EMAIL_MAX_LENGTH = 254
DEFAULT_URL_MAX_LENGTH = 2048


@dataclass(frozen=True)
class GuardSettings:
    """Immutable view of the guard clause configuration."""

    email_max_length: int = DEFAULT_EMAIL_MAX_LENGTH
    url_max_length: int = DEFAULT_URL_MAX_LENGTH
    metrics_enabled: bool = True


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default

    try:
        value = int(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring malformed %s=%r; using %d", name, raw, default)
        return default

    if value <= 0:
        logger.warning("Ignoring non-positive %s=%r; using %d", name, raw, default)
        return default
    return value


def _flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in ("", "0", "false", "no", "off")


def load_settings() -> GuardSettings:
    """Build a fresh :class:`GuardSettings` from the environment."""

    return GuardSettings(
        email_max_length=_positive_int(EMAIL_MAX_LENGTH_ENV, DEFAULT_EMAIL_MAX_LENGTH),
        url_max_length=_positive_int(URL_MAX_LENGTH_ENV, DEFAULT_URL_MAX_LENGTH),
        metrics_enabled=_flag(METRICS_ENV, True),
    )


_SETTINGS: Optional[GuardSettings] = None
_SETTINGS_LOCK = threading.Lock()


def get_settings() -> GuardSettings:
    """Return the process-wide settings, loading them on first use."""

    global _SETTINGS
    settings = _SETTINGS
    if settings is not None:
        return settings

    with _SETTINGS_LOCK:
        if _SETTINGS is None:
            _SETTINGS = load_settings()
            logger.debug("Loaded guard settings: %s", _SETTINGS)
        return _SETTINGS


def reload_settings() -> GuardSettings:
    """Re-read the environment and replace the process-wide settings."""

    global _SETTINGS
    with _SETTINGS_LOCK:
        _SETTINGS = load_settings()
        return _SETTINGS


__all__ = [
    "DEFAULT_EMAIL_MAX_LENGTH",
    "DEFAULT_URL_MAX_LENGTH",
    "EMAIL_MAX_LENGTH_ENV",
    "GuardSettings",
    "METRICS_ENV",
    "URL_MAX_LENGTH_ENV",
    "get_settings",
    "load_settings",
    "reload_settings",
]
