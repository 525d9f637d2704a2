"""Link reference dataclass (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkRef:
    """A reference to a link found in a markdown file."""

    href: str
    source_file: str
    line_number: int
    column_number: int
    link_type: str  # "inline", "image", "reference", "autolink"
