"""
Populate the REC_* settings before config.load_settings() reads them.

Sources, first one wins per key: the process environment, Streamlit secrets
(top-level REC_* keys or a [rec] table), then a local .env file.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping

import streamlit as st
from dotenv import load_dotenv

SETTING_PREFIX = "REC_"


def settings_from_secrets(secrets: Mapping[str, Any]) -> Dict[str, str]:
    """Pick the REC_* settings out of a secrets mapping; other keys are ignored."""
    settings: Dict[str, str] = {}
    for key, value in secrets.items():
        if key.upper().startswith(SETTING_PREFIX) and not isinstance(value, Mapping):
            settings[key.upper()] = str(value)
    table = secrets.get("rec")
    if isinstance(table, Mapping):
        for key, value in table.items():
            settings.setdefault(SETTING_PREFIX + key.upper(), str(value))
    return settings


def _read_secrets() -> Dict[str, Any]:
    try:
        return st.secrets.to_dict()
    except Exception:
        # no secrets.toml, or running outside Streamlit
        return {}


def ensure_env() -> None:
    """Idempotent; never overrides variables that are already set."""
    for key, value in settings_from_secrets(_read_secrets()).items():
        os.environ.setdefault(key, value)
    load_dotenv()


ensure_env()
