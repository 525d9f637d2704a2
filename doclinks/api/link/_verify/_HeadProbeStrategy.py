"""Fallback strategy: a HEAD request with browser-like headers."""

import asyncio

import aiohttp

from ._BaseStrategy import VerificationStrategy
from .StrategyResult import StrategyResult


def probe_headers(user_agent: str) -> dict[str, str]:
    """Headers that keep sites blocking non-browser clients from answering 403."""
    return {
        "Accept-Language": "en-US,en;q=0.9",
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "User-Agent": user_agent,
    }


class HeadProbeStrategy(VerificationStrategy):
    """Cheap probe that does not consume a pooled browser context."""

    name = "head"

    def __init__(self, session: aiohttp.ClientSession, timeout: float):
        self._session = session
        self._timeout = timeout

    async def attempt(self, url: str) -> StrategyResult:
        try:
            async with self._session.head(
                url,
                allow_redirects=True,
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            ) as resp:
                return StrategyResult.resolved(resp.status)
        except asyncio.TimeoutError:
            return StrategyResult.failed(f"HEAD timed out after {self._timeout:g}s")
        except aiohttp.ClientError as exc:
            return StrategyResult.failed(f"HEAD failed: {exc}")
