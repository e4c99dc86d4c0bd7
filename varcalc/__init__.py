"""Concurrent evaluation of variable-assignment instructions, served over HTTP."""

__version__ = "1.0.0"