"""Include/exclude matcher over dependency scopes."""

from dataclasses import dataclass, field
from typing import Iterable, Set, Union

from .scope import Scope, implied_scopes, parse_scope

ScopeLike = Union[str, Scope]


@dataclass
class ScopeFilter:
    """Set of included and excluded scopes. Exclusion always wins.

    Filters only widen: includes and excludes are inserted, never removed,
    and ``union`` keeps everything either side had.

    Example
    -------
    >>> f = ScopeFilter.for_declared_scope("runtime")
    >>> f.is_included("compile")
    True
    >>> f.exclude_scope("compile")
    >>> f.is_included("compile")
    False
    """

    included: Set[Scope] = field(default_factory=set)
    excluded: Set[Scope] = field(default_factory=set)

    @classmethod
    def for_declared_scope(cls, declared: ScopeLike) -> "ScopeFilter":
        """Build a filter including every scope implied by ``declared``."""
        return cls(included=set(implied_scopes(declared)))

    @classmethod
    def for_included_scopes(cls, scopes: Iterable[ScopeLike]) -> "ScopeFilter":
        return cls(included={parse_scope(s) for s in scopes})

    def include_scope(self, scope: ScopeLike) -> None:
        self.included.add(parse_scope(scope))

    def exclude_scope(self, scope: ScopeLike) -> None:
        self.excluded.add(parse_scope(scope))

    def is_included(self, scope: ScopeLike) -> bool:
        """True iff ``scope`` is included and not excluded."""
        scope = parse_scope(scope)
        return scope in self.included and scope not in self.excluded

    def union(self, other: "ScopeFilter") -> "ScopeFilter":
        """Return a new filter holding both filters' includes and excludes."""
        return ScopeFilter(
            included=self.included | other.included,
            excluded=self.excluded | other.excluded,
        )

    def update(self, other: "ScopeFilter") -> None:
        """Union ``other`` into this filter in place."""
        self.included |= other.included
        self.excluded |= other.excluded

    def effective_scopes(self) -> Set[Scope]:
        """Scopes that pass the filter."""
        return self.included - self.excluded

    def to_dict(self) -> dict:
        return {
            "included": sorted(s.value for s in self.included),
            "excluded": sorted(s.value for s in self.excluded),
        }
