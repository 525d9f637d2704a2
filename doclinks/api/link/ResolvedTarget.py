"""Fully qualified target of a link reference."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedTarget:
    """The fetchable URL a link maps to, plus the href as written."""

    url: str
    original: str

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("ResolvedTarget.url must not be empty")
