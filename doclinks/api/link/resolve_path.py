"""Textual resolution of an href against the file it appeared in."""

import re

ABSOLUTE_URL_PATTERN = re.compile(r"^https?://", re.IGNORECASE)


def is_absolute_url(href: str) -> bool:
    return bool(ABSOLUTE_URL_PATTERN.match(href))


def resolve_path(source_file: str, href: str) -> str:
    """Resolve ``href`` relative to ``source_file``.

    Absolute URLs and repository-root paths (leading ``/``) are returned
    unchanged. Anything else replaces the last path segment of
    ``source_file``; the result is not normalized, so
    ``resolve_path("build/guide.md", "./node.md") == "build/./node.md"``.
    """
    if is_absolute_url(href) or href.startswith("/"):
        return href
    directory, separator, _ = source_file.replace("\\", "/").rpartition("/")
    return f"{directory}{separator}{href}"
