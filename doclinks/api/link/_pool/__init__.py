"""Pooled execution contexts for rendered navigation."""

from .ContextPool import ContextFactory, ContextPool
from .RenderingContext import ContextCrashed, NavigationError, RenderingContext

__all__ = [
    "ContextCrashed",
    "ContextFactory",
    "ContextPool",
    "NavigationError",
    "RenderingContext",
]
