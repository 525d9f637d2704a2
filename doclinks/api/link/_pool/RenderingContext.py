"""Interface of a pooled execution context for rendered navigation."""

from abc import ABC, abstractmethod


class NavigationError(RuntimeError):
    """The page could not be loaded; the context itself is still usable."""


class ContextCrashed(RuntimeError):
    """The context is unusable and must be replaced."""


class RenderingContext(ABC):
    """A browser-like client that can load one URL at a time."""

    @abstractmethod
    async def navigate(self, url: str) -> int:
        """Load ``url`` and return the final HTTP status of the main document.

        Raises:
            NavigationError: The load failed.
            ContextCrashed: The underlying engine died.
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the context."""
        pass
