from __future__ import annotations

from .logging import LOGGING_CONFIG, logging_config, safe_redact, structured_log

__all__ = [
    "LOGGING_CONFIG",
    "logging_config",
    "safe_redact",
    "structured_log",
]
