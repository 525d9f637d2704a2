"""Output schemas for link commands."""

from pydantic import BaseModel, Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkOutcomeOutput(BaseModel):
    status: int | None = Field(..., description="HTTP status, null when no strategy obtained one")
    original: str = Field(..., description="Href as written in the markdown file")
    url: str = Field(..., description="URL that was checked")
    success: bool = Field(..., description="True for a 2xx status")
    error: str | None = Field(None, description="Final error when no status was obtained")
    diagnostics: list[str] = Field(default_factory=list, description="Errors of strategies tried before the final one")


class FileReportOutput(BaseModel):
    source_file: str = Field(..., description="File path relative to the scanned root")
    links: list[LinkOutcomeOutput] = Field(..., description="Outcomes in extraction order")


class FailureOutput(BaseModel):
    status: str = Field(..., description="HTTP status, or ERR for a network error")
    link: str = Field(..., description="Full URL that failed")
    short_link: str = Field(..., description="Link elided to the display width")
    file: str = Field(..., description="File path relative to the scanned root")


class LinkCheckOutput(BaseOutputSchema):
    """Output schema for link check command.

    Output structure:
    - errors: list[str] - fatal setup errors, empty list if the run completed
    - warnings: list[str] - unreadable files and similar non-fatal problems
    - root: str - scanned root directory
    - repository: str - owner/name@commit used for relative links
    - total_links / total_files / total_failures: int - run totals
    - files: list - per-file outcomes in discovery order
    - failures: list - failing links for the summary table
    """

    root: str = Field(..., description="Scanned root directory")
    repository: str = Field(..., description="owner/name@commit used for relative links")
    total_links: int = Field(..., description="Number of link occurrences checked")
    total_files: int = Field(..., description="Number of markdown files scanned")
    total_failures: int = Field(..., description="Number of failing links")
    files: list[FileReportOutput] = Field(..., description="Per-file outcomes in discovery order")
    failures: list[FailureOutput] = Field(..., description="Failing links")


# Register schemas
register_output_schema("link", "check", LinkCheckOutput)
