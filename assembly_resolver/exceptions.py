"""Exception types raised while planning dependency resolution."""

from typing import List, Optional


class AssemblyResolverError(Exception):
    """Base class for all assembly-resolver errors."""

    pass


class ConfigurationError(AssemblyResolverError):
    """Raised when an assembly directive is structurally invalid.

    Parameters
    ----------
    message : str
        Human-readable summary
    problems : List[str], optional
        Individual problems found, when raised after collecting several
    """

    def __init__(self, message: str, problems: Optional[List[str]] = None):
        super().__init__(message)
        self.problems = list(problems or [])


class DependencyResolutionError(AssemblyResolverError):
    """Raised by a resolution executor when artifacts cannot be resolved."""

    def __init__(self, message: str, project: Optional[str] = None):
        super().__init__(message)
        self.project = project
