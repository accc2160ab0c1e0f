"""Recursion exercises, a bounded keyed list, and exercises built on that list."""

__version__ = "0.1.0"