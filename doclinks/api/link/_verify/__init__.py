"""Verification strategies and the fallback state machine."""

from ._BaseStrategy import VerificationStrategy
from ._HeadProbeStrategy import HeadProbeStrategy, probe_headers
from ._RenderedNavigationStrategy import RenderedNavigationStrategy
from .LinkVerifier import LinkVerifier
from .StrategyResult import StrategyResult
from .VerificationState import VerificationState

__all__ = [
    "HeadProbeStrategy",
    "LinkVerifier",
    "RenderedNavigationStrategy",
    "StrategyResult",
    "VerificationState",
    "VerificationStrategy",
    "probe_headers",
]
