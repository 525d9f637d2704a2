"""Result of a single verification strategy attempt."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StrategyResult:
    status: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """A status was obtained; any status, including 404, resolves the link."""
        return self.status is not None

    @classmethod
    def resolved(cls, status: int) -> "StrategyResult":
        return cls(status=int(status))

    @classmethod
    def failed(cls, error: str) -> "StrategyResult":
        return cls(error=error or "unknown error")
