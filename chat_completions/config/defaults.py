"""chat_completions.config.defaults
================================

Small, stable default values used across the package. They can be
overridden through environment variables or explicit overrides passed to
``get_client_config``.

This module performs no I/O and imports nothing from the rest of the package
to stay free of circular dependencies.
"""

from __future__ import annotations

# Full chat-completions endpoint; requests are POSTed to this URL as-is.
DEFAULT_BASE_URL = "https://api.openai.com/v1/chat/completions"

# Model used by callers that do not pick one explicitly.
DEFAULT_MODEL = "gpt-4o-mini"

# Path of the optional dotenv file read once per process.
DEFAULT_DOTENV_FILE = ".env"
