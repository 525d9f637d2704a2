"""Link parsers package."""

from ._BaseParser import BaseParser
from ._MarkdownParser import MarkdownParser
from .LinkRef import LinkRef

_PARSERS: dict[str, type[BaseParser]] = {
    "markdown": MarkdownParser,
}


def get_parser(parser_name: str = "markdown") -> BaseParser:
    """Get a parser instance by name."""
    parser_cls = _PARSERS.get(parser_name)
    if not parser_cls:
        raise ValueError(f"Unknown parser: {parser_name}")
    return parser_cls()


__all__ = [
    "BaseParser",
    "LinkRef",
    "MarkdownParser",
    "get_parser",
]
