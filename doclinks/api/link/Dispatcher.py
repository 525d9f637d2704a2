"""Bounded dispatch of link verifications for one run."""

import asyncio
import logging
from functools import partial

import aiohttp

from ..config.CheckConfig import CheckConfig
from ._pool import ContextFactory, ContextPool
from ._verify import HeadProbeStrategy, LinkVerifier, RenderedNavigationStrategy, probe_headers
from .ResolvedTarget import ResolvedTarget
from .VerificationOutcome import VerificationOutcome

logger = logging.getLogger(__name__)


class Dispatcher:
    """Owns the context pool and HEAD probe session for the lifetime of a run.

    Usage::

        async with Dispatcher(config) as dispatcher:
            outcome = await dispatcher.submit(target, "docs/index.md")

    Leaving the block waits for every submitted task before the pool is
    released.
    """

    def __init__(
        self,
        config: CheckConfig,
        context_factory: ContextFactory | None = None,
        session: aiohttp.ClientSession | None = None,
    ):
        self._config = config
        self._context_factory = context_factory
        self._session = session
        self._owns_session = session is None
        self._pool: ContextPool | None = None
        self._verifier: LinkVerifier | None = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def pool(self) -> ContextPool:
        if self._pool is None:
            raise RuntimeError("Dispatcher is not open")
        return self._pool

    async def __aenter__(self) -> "Dispatcher":
        factory = self._context_factory
        if factory is None:
            from ._pool.BrowserContext import BrowserContext

            factory = partial(BrowserContext.create, self._config.browser, self._config.timeout)

        self._pool = ContextPool(factory, self._config.pool_size)
        await self._pool.start()

        if self._session is None:
            try:
                self._session = aiohttp.ClientSession(headers=probe_headers(self._config.browser.user_agent))
            except Exception:
                await self._pool.close()
                raise

        self._verifier = LinkVerifier(
            [
                RenderedNavigationStrategy(self._pool, self._config.timeout),
                HeadProbeStrategy(self._session, self._config.timeout),
            ]
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> bool:
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
        if self._pool is not None:
            await self._pool.close()
        if self._owns_session and self._session is not None:
            await self._session.close()
        return False

    def submit(self, target: ResolvedTarget, source_file: str) -> "asyncio.Task[VerificationOutcome]":
        """Schedule verification of ``target``; the task never raises for per-link errors."""
        if self._verifier is None:
            raise RuntimeError("Dispatcher.submit() called outside 'async with'")
        logger.debug("Submitting %s from %s", target.url, source_file)
        task = asyncio.create_task(self._verifier.verify(target, source_file))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task
