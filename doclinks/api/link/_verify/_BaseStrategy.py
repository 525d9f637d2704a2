"""Abstract verification strategy."""

from abc import ABC, abstractmethod

from .StrategyResult import StrategyResult


class VerificationStrategy(ABC):
    """One way of confirming that a URL responds."""

    name: str = "strategy"

    @abstractmethod
    async def attempt(self, url: str) -> StrategyResult:
        """Try to obtain a status for ``url``.

        Expected failures (timeouts, network and navigation errors) are
        returned as ``StrategyResult.failed`` rather than raised.
        """
        pass
