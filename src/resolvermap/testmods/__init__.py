"""Handlers used by tests for import- and entrypoint-based loading."""
