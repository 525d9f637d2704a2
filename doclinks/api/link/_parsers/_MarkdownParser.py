"""Markdown link parser."""

import re
from collections.abc import Iterator

from ._BaseParser import BaseParser, LinkRef

# Compiled regex patterns
FENCE_PATTERN = re.compile(r"^\s{0,3}(`{3,}|~{3,})")
CODE_SPAN_PATTERN = re.compile(r"(`+)(?:(?!\1).)+?\1")
INLINE_PATTERN = re.compile(
    r"(!)?\[((?:[^\[\]]|\[[^\[\]]*\])*)\]\(\s*(<[^<>\n]*>|[^\s()]*(?:\([^\s()]*\)[^\s()]*)*)(?:\s+(?:\"[^\"]*\"|'[^']*'|\([^)]*\)))?\s*\)"
)
REFERENCE_PATTERN = re.compile(r"(!)?\[((?:[^\[\]]|\[[^\[\]]*\])*)\](?:\[([^\[\]]*)\])?")
DEFINITION_PATTERN = re.compile(r"^\s{0,3}\[([^\[\]]+)\]:\s*(<[^<>]*>|\S+)")
AUTOLINK_PATTERN = re.compile(r"<(https?://[^\s<>]+)>", re.IGNORECASE)

CHECKABLE_SCHEMES = ("http://", "https://")


def _normalize_label(label: str) -> str:
    return " ".join(label.split()).lower()


def _is_checkable(href: str) -> bool:
    """Skip empty hrefs, same-page fragments and non-http schemes (mailto:, tel:, ...)."""
    if not href or href.startswith("#"):
        return False
    if href.lower().startswith(CHECKABLE_SCHEMES):
        return True
    return not re.match(r"^[A-Za-z][A-Za-z0-9+.-]*:", href)


def _blank(line: str, start: int, end: int) -> str:
    return line[:start] + " " * (end - start) + line[end:]


class MarkdownParser(BaseParser):
    """Parser for standard Markdown: inline, reference-style and autolinks."""

    def parse(self, text: str, source_file: str = "") -> Iterator[LinkRef]:
        lines = self._strip_code(text.splitlines())

        definitions: dict[str, str] = {}
        definition_lines: set[int] = set()
        for index, line in enumerate(lines):
            match = DEFINITION_PATTERN.match(line)
            if match:
                # First definition wins
                definitions.setdefault(_normalize_label(match.group(1)), match.group(2).strip("<>"))
                definition_lines.add(index)

        for index, line in enumerate(lines):
            if index in definition_lines:
                continue
            for column, href, link_type in sorted(self._scan(line, definitions), key=lambda item: item[0]):
                if not _is_checkable(href):
                    continue
                yield LinkRef(
                    href=href,
                    source_file=source_file,
                    line_number=index + 1,
                    column_number=column + 1,
                    link_type=link_type,
                )

    def _scan(self, text: str, definitions: dict[str, str], offset: int = 0) -> list[tuple[int, str, str]]:
        """Find links in ``text``, descending into link text for badges like ``[![alt](src)](href)``."""
        found: list[tuple[int, str, str]] = []

        # 1. Inline: [text](href "title") and ![alt](src)
        for match in INLINE_PATTERN.finditer(text):
            href = match.group(3).strip("<>").strip()
            found.append((offset + match.start(), href, "image" if match.group(1) else "inline"))
            found.extend(self._scan(match.group(2), definitions, offset + match.start(2)))
            text = _blank(text, match.start(), match.end())

        # 2. Autolinks: <https://...>
        for match in AUTOLINK_PATTERN.finditer(text):
            found.append((offset + match.start(), match.group(1), "autolink"))
            text = _blank(text, match.start(), match.end())

        # 3. Reference-style: [text][id], [text][], [id], and [![alt][img]][id]
        for match in REFERENCE_PATTERN.finditer(text):
            label = match.group(3) or match.group(2)
            href = definitions.get(_normalize_label(label)) if label.strip() else None
            if href is not None:
                found.append((offset + match.start(), href, "reference"))
            found.extend(self._scan(match.group(2), definitions, offset + match.start(2)))
        return found

    @staticmethod
    def _strip_code(lines: list[str]) -> list[str]:
        """Blank out fenced code blocks and inline code spans, keeping line numbers."""
        stripped: list[str] = []
        fence: str | None = None
        for line in lines:
            match = FENCE_PATTERN.match(line)
            if fence is not None:
                if match and match.group(1)[0] == fence[0] and len(match.group(1)) >= len(fence):
                    fence = None
                stripped.append("")
                continue
            if match:
                fence = match.group(1)
                stripped.append("")
                continue
            stripped.append(CODE_SPAN_PATTERN.sub(lambda m: " " * len(m.group(0)), line))
        return stripped
