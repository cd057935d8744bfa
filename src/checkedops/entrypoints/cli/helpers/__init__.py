"""CLI helpers for CHECKEDOPS.

Utilities used by the command-line interface: option parsers for NAME=LEVEL
and KEY=VALUE items, and message emitters that write to stderr with
emoji→ASCII fallbacks.
"""

from .messages import error
from .parsers import parse_int_pairs, parse_log_level, parse_str_pairs

__all__ = ["error", "parse_log_level", "parse_int_pairs", "parse_str_pairs"]
