"""Core planning modules for assembly-resolver.

This package contains:
- scope: dependency scopes, the implication table and scope filters
- reactor: module tree of a multi-module build and module-set selection
- resolution: requirement accumulator, per-directive gathering, repository
  aggregation and the resolver orchestrating a pass
"""
