"""States of the strategy fallback state machine."""

from enum import Enum


class VerificationState(str, Enum):
    NOT_TRIED = "not_tried"
    TRIED_PRIMARY = "tried_primary"
    TRIED_FALLBACK = "tried_fallback"
    RESOLVED = "resolved"

    def after_failure(self) -> "VerificationState":
        """Next state when the current strategy fails to produce a status."""
        if self is VerificationState.RESOLVED:
            raise ValueError("A resolved verification cannot fail")
        if self is VerificationState.NOT_TRIED:
            return VerificationState.TRIED_PRIMARY
        return VerificationState.TRIED_FALLBACK
