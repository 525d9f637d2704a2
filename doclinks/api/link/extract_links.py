"""Extract link references from markdown text."""

from ._parsers import LinkRef, get_parser


def extract_links(markdown_text: str, source_file: str = "", parser: str = "markdown") -> list[LinkRef]:
    """Return every link in ``markdown_text`` in order of appearance.

    Repeated hrefs are returned once per occurrence. Malformed markdown
    never raises; unmatched syntax simply yields no link.
    """
    return list(get_parser(parser).parse(markdown_text, source_file))
