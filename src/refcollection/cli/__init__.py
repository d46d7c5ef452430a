"""
Command-line interface for refcollection.

Provides commands for resolving reference collection kinds and parsing
entity references.
"""

from .main import app, main

__all__ = ["main", "app"]
