"""Logging utilities for assembly-resolver.

A resolver configured with a log path owns a :class:`PassLog`. The pass log
holds one file handler and attaches it to the package logger only while one
of its resolver's passes runs, so every module's messages from that pass
land in that resolver's file and nowhere else.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Iterator, Optional, Union

import yaml

from ..exceptions import ConfigurationError

PathLike = Union[str, Path]

PACKAGE_LOGGER = "assembly_resolver"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_log_level(name: Union[str, int]) -> int:
    """Convert a level name such as ``"debug"`` to its numeric value.

    Raises
    ------
    ConfigurationError
        If ``name`` is not a standard logging level
    """
    if isinstance(name, int) and not isinstance(name, bool):
        return name
    level = logging.getLevelName(str(name).strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level '{name}', expected one of DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )
    return level


def get_timestamped_log_path(log_path: PathLike) -> Path:
    """Insert a timestamp before the suffix: resolver.log -> resolver_20251209_080530.log"""
    log_path = Path(log_path)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return log_path.parent / f"{log_path.stem}_{timestamp}{log_path.suffix or '.log'}"


class PassLog:
    """File log for the passes of one resolver.

    Parameters
    ----------
    log_path : PathLike
        Base path of the log file
    level : int
        Lowest level written to the file
    timestamped : bool
        If True, a timestamp is added to the file name. If False, an
        existing file at ``log_path`` is replaced.

    Example
    -------
    >>> pass_log = PassLog("logs/resolver.log", level=logging.DEBUG)
    >>> with pass_log.capture():
    ...     logging.getLogger("assembly_resolver.core").debug("captured")
    >>> pass_log.close()
    """

    def __init__(self, log_path: PathLike, level: int = logging.INFO, timestamped: bool = True):
        log_path = Path(log_path)
        if timestamped:
            self.path = get_timestamped_log_path(log_path)
        else:
            self.path = log_path
            self.path.unlink(missing_ok=True)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        self.level = level
        self.handler = logging.FileHandler(self.path, mode="a", encoding="utf-8")
        self.handler.setLevel(level)
        self.handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    @contextmanager
    def capture(self) -> Iterator[Path]:
        """Write package log records to this file until the block exits.

        Nested captures of the same pass log are no-ops. The package
        logger's level is lowered for the block if it would filter out
        records this file wants, and restored afterwards.
        """
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        if self.handler in package_logger.handlers:
            yield self.path
            return

        previous_level = package_logger.level
        if package_logger.getEffectiveLevel() > self.level:
            package_logger.setLevel(self.level)
        package_logger.addHandler(self.handler)
        try:
            yield self.path
        finally:
            package_logger.removeHandler(self.handler)
            package_logger.setLevel(previous_level)
            self.handler.flush()

    def close(self) -> None:
        self.handler.close()


def log_yaml(
    log_path: Optional[PathLike],
    record: dict[str, Any],
    *,
    logger: logging.Logger | None = None,
) -> None:
    """Emit ``record`` as one YAML document, to ``logger`` if given, else appended to ``log_path``."""
    document = yaml.safe_dump(record, sort_keys=False).rstrip("\n") + "\n---"
    if logger is not None:
        logger.info("%s", document)
        return
    if log_path is None:
        raise ValueError("log_yaml needs either log_path or logger")

    path = Path(log_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as handle:
        handle.write(document + "\n")
