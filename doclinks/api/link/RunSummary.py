"""Run-level totals, reduced once after every file has settled."""

from collections.abc import Iterable
from dataclasses import dataclass

from .elide_link import DEFAULT_WIDTH, elide_link
from .FileReport import FileReport
from .VerificationOutcome import VerificationOutcome

ERROR_STATUS_LABEL = "ERR"


@dataclass(frozen=True)
class FailureRow:
    """One row of the failing-links table."""

    status_label: str
    short_link: str
    file: str


@dataclass(frozen=True)
class RunSummary:
    total_links: int
    total_files: int
    failures: tuple[VerificationOutcome, ...]
    reports: tuple[FileReport, ...] = ()

    @classmethod
    def from_reports(cls, reports: Iterable[FileReport]) -> "RunSummary":
        """Reduce file reports (in discovery order) into a summary."""
        reports = tuple(reports)
        return cls(
            total_links=sum(len(report.outcomes) for report in reports),
            total_files=len(reports),
            failures=tuple(outcome for report in reports for outcome in report.failures),
            reports=reports,
        )

    @property
    def ok(self) -> bool:
        return not self.failures

    def failure_rows(self, width: int = DEFAULT_WIDTH) -> list[FailureRow]:
        """Structured rows for the failure table; files are already root-relative."""
        return [
            FailureRow(
                status_label=str(outcome.status) if outcome.status is not None else ERROR_STATUS_LABEL,
                short_link=elide_link(outcome.url or outcome.original, width),
                file=outcome.source_file,
            )
            for outcome in self.failures
        ]
