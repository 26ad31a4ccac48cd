"""Root exception for Matchwise."""

from __future__ import annotations


class MatchwiseError(Exception):
    """Base class for errors raised by Matchwise."""
