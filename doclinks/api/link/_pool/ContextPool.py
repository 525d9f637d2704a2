"""Fixed-size pool of rendering contexts with FIFO admission."""

import asyncio
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from ..FatalSetupError import FatalSetupError
from .RenderingContext import ContextCrashed, RenderingContext

logger = logging.getLogger(__name__)

ContextFactory = Callable[[], Awaitable[RenderingContext]]


class ContextPool:
    """Owns ``size`` contexts for one run.

    At most ``size`` navigations are in flight; further ``acquire`` calls
    wait in FIFO order. A context that crashes or times out is closed and
    replaced with a fresh one in the background.
    """

    def __init__(self, factory: ContextFactory, size: int):
        if size < 1:
            raise ValueError(f"Pool size must be at least 1, got {size}")
        self._factory = factory
        self._size = size
        self._idle: asyncio.Queue[RenderingContext | None] = asyncio.Queue()
        self._live = 0
        self._in_flight = 0
        self._started = False
        self._replacements: set[asyncio.Task] = set()

    @property
    def size(self) -> int:
        return self._size

    @property
    def live(self) -> int:
        return self._live

    @property
    def in_flight(self) -> int:
        return self._in_flight

    async def start(self) -> None:
        """Create every context up front.

        Raises:
            FatalSetupError: If any context cannot be created.
        """
        if self._started:
            return
        results = await asyncio.gather(*(self._factory() for _ in range(self._size)), return_exceptions=True)
        contexts = [r for r in results if isinstance(r, RenderingContext)]
        failures = [r for r in results if isinstance(r, BaseException)]
        if failures:
            for context in contexts:
                await self._close_quietly(context)
            raise FatalSetupError(f"Cannot create browser context pool: {failures[0]}") from failures[0]
        for context in contexts:
            self._idle.put_nowait(context)
        self._live = len(contexts)
        self._started = True
        logger.info("Started context pool with %d contexts", self._live)

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[RenderingContext]:
        """Borrow a context, waiting for one to free up if necessary.

        Raises:
            ContextCrashed: If the pool has no live contexts left.
        """
        if not self._started:
            raise RuntimeError("ContextPool.acquire() called before start()")
        context = await self._next_context()
        self._in_flight += 1
        healthy = True
        try:
            yield context
        except (ContextCrashed, asyncio.TimeoutError):
            healthy = False
            raise
        finally:
            self._in_flight -= 1
            if healthy:
                self._idle.put_nowait(context)
            else:
                # Replace in the background so the failed attempt returns on time
                task = asyncio.create_task(self._replace(context))
                self._replacements.add(task)
                task.add_done_callback(self._replacements.discard)

    async def close(self) -> None:
        """Release every idle context; call once all work has settled."""
        if self._replacements:
            await asyncio.gather(*self._replacements, return_exceptions=True)
        while not self._idle.empty():
            context = self._idle.get_nowait()
            if context is not None:
                await self._close_quietly(context)
        self._live = 0
        logger.info("Closed context pool")

    async def _next_context(self) -> RenderingContext:
        if self._live == 0:
            raise ContextCrashed("no live browser contexts left in pool")
        context = await self._idle.get()
        if context is None:
            # Pool died while waiting; wake the next waiter too
            self._idle.put_nowait(None)
            raise ContextCrashed("no live browser contexts left in pool")
        return context

    async def _replace(self, context: RenderingContext) -> None:
        await self._close_quietly(context)
        try:
            fresh = await self._factory()
        except Exception as exc:
            self._live -= 1
            logger.error("Cannot replace browser context (%d left): %s", self._live, exc)
            if self._live == 0:
                self._idle.put_nowait(None)
            return
        logger.info("Replaced failed browser context")
        self._idle.put_nowait(fresh)

    @staticmethod
    async def _close_quietly(context: RenderingContext) -> None:
        try:
            await context.close()
        except Exception as exc:
            logger.warning("Error closing browser context: %s", exc)
