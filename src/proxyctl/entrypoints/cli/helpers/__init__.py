"""CLI helpers for PROXYCTL.

Message emitters that write to stderr with emoji->ASCII fallbacks, and the
parser for NAME=LEVEL logger overrides.
"""

from .log_level_parser import parse_log_level
from .messages import error, success

__all__ = ["error", "parse_log_level", "success"]
