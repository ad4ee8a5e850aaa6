"""Shared agenda: a JSON-file backed task list with a REST API and a polling client."""

__version__ = "1.0.0"
