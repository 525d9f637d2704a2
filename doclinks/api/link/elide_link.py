"""Shorten long links for tabular display."""

ELLIPSIS = "..."
DEFAULT_WIDTH = 60


def elide_link(link: str, width: int = DEFAULT_WIDTH) -> str:
    """Elide the middle of ``link`` so the result is at most ``width`` characters.

    The head and tail of the original are kept around an ``...`` marker.
    """
    if len(link) <= width:
        return link
    if width <= len(ELLIPSIS):
        return link[:width]
    keep = width - len(ELLIPSIS)
    head = (keep + 1) // 2
    tail = keep - head
    return f"{link[:head]}{ELLIPSIS}{link[len(link) - tail:]}"
