"""Recursive file-system search with wildcard, regex and fuzzy name matching."""

__version__ = "0.1.0"
