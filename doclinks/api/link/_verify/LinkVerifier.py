"""Ranked-strategy verification of a resolved target."""

import logging
from collections.abc import Sequence

from ..ResolvedTarget import ResolvedTarget
from ..VerificationOutcome import VerificationOutcome
from ._BaseStrategy import VerificationStrategy
from .StrategyResult import StrategyResult
from .VerificationState import VerificationState

logger = logging.getLogger(__name__)


class LinkVerifier:
    """Tries strategies in rank order until one yields a status.

    A non-2xx status is still a resolved result; later strategies only run
    when an earlier one could not obtain any status at all.
    """

    def __init__(self, strategies: Sequence[VerificationStrategy]):
        if not strategies:
            raise ValueError("LinkVerifier requires at least one strategy")
        self._strategies = tuple(strategies)

    @property
    def strategies(self) -> tuple[VerificationStrategy, ...]:
        return self._strategies

    async def verify(self, target: ResolvedTarget, source_file: str) -> VerificationOutcome:
        state = VerificationState.NOT_TRIED
        errors: list[str] = []

        for strategy in self._strategies:
            result = await self._attempt(strategy, target.url)
            if result.ok:
                state = VerificationState.RESOLVED
                logger.debug("%s -> %s via %s (%s)", target.url, result.status, strategy.name, state.value)
                return VerificationOutcome(
                    status=result.status,
                    original=target.original,
                    source_file=source_file,
                    url=target.url,
                    diagnostics=tuple(errors),
                )
            errors.append(f"{strategy.name}: {result.error}")
            state = state.after_failure()
            logger.debug("%s: %s failed (%s): %s", target.url, strategy.name, state.value, result.error)

        logger.info("%s unreachable: %s", target.url, errors[-1])
        return VerificationOutcome(
            status=None,
            original=target.original,
            source_file=source_file,
            url=target.url,
            error=errors[-1],
            diagnostics=tuple(errors[:-1]),
        )

    @staticmethod
    async def _attempt(strategy: VerificationStrategy, url: str) -> StrategyResult:
        try:
            return await strategy.attempt(url)
        except Exception as exc:
            # Unexpected strategy errors stay local to this link
            logger.warning("%s strategy raised for %s: %s", strategy.name, url, exc)
            return StrategyResult.failed(f"{type(exc).__name__}: {exc}")
