"""I/O utilities for assembly-resolver."""

from .logging import PassLog, get_timestamped_log_path, log_yaml, parse_log_level

__all__ = [
    "PassLog",
    "get_timestamped_log_path",
    "log_yaml",
    "parse_log_level",
]
