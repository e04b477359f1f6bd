"""chat_completions.config.env
============================

Environment variable names and lookup helpers for client settings.

Each setting has a canonical variable and optional aliases (canonical first
to establish precedence). The API key also accepts ``OPENAI_API_KEY`` so an
existing OpenAI setup works unchanged.

Helpers never raise on unset variables; callers decide how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

# Setting -> ordered env var names (canonical first)
ENV_VARS: Dict[str, Tuple[str, ...]] = {
    "base_url": ("CHAT_COMPLETIONS_BASE_URL",),
    "api_key": ("CHAT_COMPLETIONS_API_KEY", "OPENAI_API_KEY"),  # pragma: allowlist secret - env names
    "model": ("CHAT_COMPLETIONS_MODEL",),
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the value looks like a placeholder rather than a real setting.

    Heuristics (case-insensitive): contains 'placeholder', 'changeme' or
    'example', or starts with 'test_'.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def get_env_var_candidates(setting: str) -> Iterable[str]:
    """Yield the env var names for ``setting`` in priority order."""
    yield from ENV_VARS.get(setting, ())


def resolve_setting(setting: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, env_var_used)`` for the first non-empty candidate.

    ``(None, None)`` when nothing is set.
    """
    for name in get_env_var_candidates(setting):
        if val := os.environ.get(name):
            return val, name
    return None, None


def load_dotenv_file(path: str) -> Dict[str, str]:
    """Parse a ``KEY=VALUE`` dotenv file, ignoring comments and blank lines.

    Returns an empty mapping when the file does not exist.
    """
    values: Dict[str, str] = {}
    if not os.path.isfile(path):
        return values
    with open(path, "r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            k, v = line.split("=", 1)
            k = k.strip()
            if k.startswith("export "):
                k = k[len("export "):].strip()
            if k:
                values[k] = v.strip().strip('"').strip("'")
    return values


__all__ = [
    "ENV_VARS",
    "is_placeholder",
    "get_env_var_candidates",
    "resolve_setting",
    "load_dotenv_file",
]
