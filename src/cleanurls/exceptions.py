"""Centralized exceptions for the cleanurls package."""


class CleanUrlsError(Exception):
    """Base exception for all cleanurls errors."""
