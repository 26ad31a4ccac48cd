"""Shared constants for Matchwise."""
