"""Configuration layer for the client.

Merge order (later wins):
    1. Built-in defaults (``config.defaults``)
    2. Environment variables, after a one-time ``.env`` load
       (``CHAT_COMPLETIONS_BASE_URL``, ``CHAT_COMPLETIONS_API_KEY`` or
       ``OPENAI_API_KEY``, ``CHAT_COMPLETIONS_MODEL``)
    3. In-code overrides passed to ``get_client_config``

The ``.env`` file (path from ``DOTENV_FILE``, default ``.env``) only fills
variables that are unset or hold placeholder values.

Public API
----------
* get_client_config(overrides: dict | None = None) -> dict
"""
from __future__ import annotations

import os
from typing import Any, Dict, Optional

from .defaults import DEFAULT_BASE_URL, DEFAULT_DOTENV_FILE, DEFAULT_MODEL
from .env import ENV_VARS, is_placeholder, load_dotenv_file, resolve_setting

DEFAULTS: Dict[str, Any] = {
    "base_url": DEFAULT_BASE_URL,
    "model": DEFAULT_MODEL,
}

_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Populate unset (or placeholder) environment variables from the dotenv file."""
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    try:
        path = os.getenv("DOTENV_FILE", DEFAULT_DOTENV_FILE)
        for k, v in load_dotenv_file(path).items():
            if k not in os.environ or is_placeholder(os.environ.get(k)):
                os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for setting in ENV_VARS:
        value, _ = resolve_setting(setting)
        if value is not None:
            out[setting] = value
    return out


def get_client_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged client configuration.

    Keys: ``base_url``, ``api_key`` (may be absent) and ``model``.
    ``None`` values in ``overrides`` are ignored.
    """
    _load_dotenv_once()
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


__all__ = [
    "DEFAULTS",
    "get_client_config",
]
