"""API module for doclinks.

Functions defined here are the single source of truth for CLI commands.
"""

__all__ = []
