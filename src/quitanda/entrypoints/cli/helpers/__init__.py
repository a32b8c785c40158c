"""CLI helpers for QUITANDA.

Utilities used by the command-line interface: URL sanitization for safe display,
``NAME=LEVEL`` option parsing, and stderr message emitters with emoji/ASCII
fallbacks.
"""

from .db_url import sanitize_url
from .log_level_parser import parse_log_level
from .messages import error, success, warn

__all__ = ["sanitize_url", "parse_log_level", "warn", "success", "error"]
