"""Configuration for dependency resolution planning."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ...io.logging import parse_log_level


@dataclass
class ResolverConfig:
    """Configuration for a DependencyResolver.

    Raises ConfigurationError when ``log_level`` is not a logging level name.
    """

    validate_assembly: bool = True  # Check all directives before gathering
    resolve_enabled_projects: bool = True  # Resolve module projects, not only the root
    log_path: Optional[str] = None  # Write a file log of each pass here
    log_level: str = "INFO"
    timestamped_log: bool = True  # Add timestamp to the log file name
    log_summary: bool = True  # Log the requirement summary as YAML

    def __post_init__(self) -> None:
        parse_log_level(self.log_level)

    @property
    def level(self) -> int:
        """Numeric value of ``log_level``."""
        return parse_log_level(self.log_level)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResolverConfig":
        """Create config from a dictionary, ignoring unknown keys."""
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)

    @classmethod
    def from_yaml(cls, path: Path) -> "ResolverConfig":
        """Load config from the ``resolver`` section of a YAML file.

        Parameters
        ----------
        path : Path
            Path to YAML file

        Returns
        -------
        ResolverConfig
            Loaded configuration
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data.get("resolver", data))
