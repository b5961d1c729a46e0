"""Validation of assembly directives before a resolution pass."""

from typing import List

from ...exceptions import ConfigurationError
from ...model import Assembly
from ..reactor import pattern_error
from ..scope import parse_scope


def _scope_error(value) -> List[str]:
    try:
        parse_scope(value)
    except ConfigurationError as e:
        return [str(e)]
    return []


def validate_assembly(assembly: Assembly) -> List[str]:
    """
    Validate every scope and module pattern of an assembly.

    Returns list of error messages (empty if valid).
    """
    errors = []

    for i, dependency_set in enumerate(assembly.dependency_sets):
        for error in _scope_error(dependency_set.scope):
            errors.append(f"Dependency set {i}: {error}")

    for i, module_set in enumerate(assembly.module_sets):
        for pattern in module_set.includes + module_set.excludes:
            error = pattern_error(pattern)
            if error:
                errors.append(f"Module set {i}: {error}")
        for j, dependency_set in enumerate(module_set.dependency_sets):
            for error in _scope_error(dependency_set.scope):
                errors.append(f"Module set {i}, dependency set {j}: {error}")

    for i, entry in enumerate(assembly.repositories):
        for error in _scope_error(entry.scope):
            errors.append(f"Repository {i}: {error}")

    return errors


def check_assembly(assembly: Assembly) -> None:
    """Raise ConfigurationError listing every problem in the assembly."""
    errors = validate_assembly(assembly)
    if errors:
        raise ConfigurationError(
            f"Assembly '{assembly.id}' is invalid:\n" + "\n".join(errors),
            problems=errors,
        )
