"""Test suite for assembly-resolver.

Test organization:
- fixtures/: Project and reactor builders
- unit/: Unit tests for individual modules

Run tests with:
    pytest tests/
    pytest tests/unit/ -v --tb=short
"""
