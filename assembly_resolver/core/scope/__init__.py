"""Dependency scopes and scope filters."""

from .filter import ScopeFilter
from .scope import SCOPE_IMPLICATIONS, Scope, implied_scopes, parse_scope

__all__ = [
    "Scope",
    "SCOPE_IMPLICATIONS",
    "parse_scope",
    "implied_scopes",
    "ScopeFilter",
]
