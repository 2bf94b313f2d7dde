"""
Application settings.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping, Optional

import streamlit as st


logger = logging.getLogger(__name__)

ENV_PREFIX = "RM_BARCODE_"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "confirmation_min_delay": 1.0,  # seconds
    "confirmation_max_delay": 30.0,
    "confirmation_success_rate": 0.5,
    "confirmation_workers": 8,
    "success_message_seconds": 2.0,
    "history_limit": 50,
    "log_level": "INFO",
}


def _coerce(key: str, raw: str) -> Any:
    default = DEFAULT_SETTINGS[key]
    if isinstance(default, int):
        return int(raw)
    if isinstance(default, float):
        return float(raw)
    return raw


def validate_settings(settings: Mapping[str, Any]) -> None:
    """Raise ValueError for inconsistent settings."""
    min_delay = settings["confirmation_min_delay"]
    max_delay = settings["confirmation_max_delay"]
    if min_delay < 0 or max_delay < min_delay:
        raise ValueError(
            f"Invalid confirmation delay range: {min_delay} to {max_delay}"
        )
    rate = settings["confirmation_success_rate"]
    if not 0.0 <= rate <= 1.0:
        raise ValueError(f"confirmation_success_rate must be between 0 and 1, got {rate}")
    if settings["history_limit"] < 1:
        raise ValueError("history_limit must be at least 1")
    if settings["confirmation_workers"] < 1:
        raise ValueError("confirmation_workers must be at least 1")


def read_settings(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Build settings from DEFAULT_SETTINGS and RM_BARCODE_* environment variables.

    Values that cannot be converted to the default's type are ignored.
    """
    environ = os.environ if environ is None else environ
    settings = DEFAULT_SETTINGS.copy()
    for key in DEFAULT_SETTINGS:
        env_name = ENV_PREFIX + key.upper()
        if env_name not in environ:
            continue
        try:
            settings[key] = _coerce(key, environ[env_name])
        except ValueError:
            logger.warning("Ignoring invalid value for %s: %r", env_name, environ[env_name])
    validate_settings(settings)
    return settings


@st.cache_data(ttl=300)
def load_settings() -> Dict[str, Any]:
    return read_settings()
