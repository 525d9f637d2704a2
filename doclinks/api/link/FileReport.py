"""Per-file collection of verification outcomes."""

from dataclasses import dataclass

from .VerificationOutcome import VerificationOutcome


@dataclass(frozen=True)
class FileReport:
    """Outcomes for one markdown file, in extraction order."""

    source_file: str
    outcomes: tuple[VerificationOutcome, ...] = ()
    errors: tuple[str, ...] = ()

    @property
    def failures(self) -> tuple[VerificationOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if not outcome.success)
