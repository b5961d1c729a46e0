"""Dependency scopes and the scope implication table."""

from enum import Enum
from typing import Dict, FrozenSet, Union

from ...exceptions import ConfigurationError


class Scope(str, Enum):
    """Visibility tier of a dependency."""

    COMPILE = "compile"
    PROVIDED = "provided"
    SYSTEM = "system"
    RUNTIME = "runtime"
    TEST = "test"

    def __str__(self) -> str:
        return self.value


# Declared scope -> scopes a consumer of that scope also needs
SCOPE_IMPLICATIONS: Dict[Scope, FrozenSet[Scope]] = {
    Scope.COMPILE: frozenset({Scope.COMPILE, Scope.PROVIDED, Scope.SYSTEM}),
    Scope.PROVIDED: frozenset({Scope.PROVIDED}),
    Scope.SYSTEM: frozenset({Scope.SYSTEM}),
    Scope.RUNTIME: frozenset({Scope.COMPILE, Scope.RUNTIME}),
    Scope.TEST: frozenset(Scope),
}


def parse_scope(value: Union[str, Scope]) -> Scope:
    """Convert a declared scope value to a Scope.

    Matching is case-insensitive and ignores surrounding whitespace.

    Raises
    ------
    ConfigurationError
        If the value is not a known scope
    """
    if isinstance(value, Scope):
        return value
    if not isinstance(value, str):
        raise ConfigurationError(f"Scope must be a string, got {type(value).__name__}")
    try:
        return Scope(value.strip().lower())
    except ValueError:
        known = ", ".join(s.value for s in Scope)
        raise ConfigurationError(
            f"Unrecognized scope: '{value}'. Expected one of: {known}"
        ) from None


def implied_scopes(value: Union[str, Scope]) -> FrozenSet[Scope]:
    """Return every scope included when a directive declares ``value``."""
    return SCOPE_IMPLICATIONS[parse_scope(value)]
