"""Primary strategy: load the URL in a pooled browser context."""

import asyncio

from .._pool.ContextPool import ContextPool
from .._pool.RenderingContext import ContextCrashed, NavigationError
from ._BaseStrategy import VerificationStrategy
from .StrategyResult import StrategyResult


class RenderedNavigationStrategy(VerificationStrategy):
    """Follows redirects and client-side behavior like a browser would."""

    name = "render"

    def __init__(self, pool: ContextPool, timeout: float):
        self._pool = pool
        self._timeout = timeout

    async def attempt(self, url: str) -> StrategyResult:
        try:
            async with self._pool.acquire() as context:
                status = await asyncio.wait_for(context.navigate(url), timeout=self._timeout)
        except asyncio.TimeoutError:
            return StrategyResult.failed(f"navigation timed out after {self._timeout:g}s")
        except ContextCrashed as exc:
            return StrategyResult.failed(f"browser context failed: {exc}")
        except NavigationError as exc:
            return StrategyResult.failed(f"navigation failed: {exc}")
        return StrategyResult.resolved(status)
