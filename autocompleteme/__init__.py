"""Prefix search over weighted terms, with sorting and string clean-up helpers."""

__version__ = "0.1.0"