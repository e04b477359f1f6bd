"""Implementation modules behind ``chat_completions.base.cancellation``."""
