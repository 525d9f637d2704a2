"""Result of verifying one link occurrence."""

from dataclasses import dataclass


@dataclass(frozen=True)
class VerificationOutcome:
    """Either an HTTP status or an error, never both and never neither."""

    status: int | None
    original: str
    source_file: str
    url: str = ""
    error: str | None = None
    diagnostics: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if (self.status is None) == (self.error is None):
            raise ValueError("VerificationOutcome requires exactly one of status or error")

    @property
    def success(self) -> bool:
        return self.status is not None and 200 <= self.status < 300
