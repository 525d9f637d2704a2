"""Find markdown files under the scanned root."""

from collections.abc import Iterable
from pathlib import Path

from .FatalSetupError import FatalSetupError


def discover_files(root: Path, pattern: str = "**/*.md", exclude_dirnames: Iterable[str] = ()) -> list[Path]:
    """Return matching files in a stable (sorted) discovery order.

    Zero matches is not an error.

    Raises:
        FatalSetupError: If root does not exist, is not a directory, or cannot be scanned.
    """
    if not root.exists():
        raise FatalSetupError(f"Root directory does not exist: {root}")
    if not root.is_dir():
        raise FatalSetupError(f"Root is not a directory: {root}")

    excluded = set(exclude_dirnames)
    try:
        matches = [
            path
            for path in root.glob(pattern)
            if path.is_file() and not excluded.intersection(path.relative_to(root).parts[:-1])
        ]
    except (OSError, ValueError) as exc:
        raise FatalSetupError(f"Cannot scan {root}: {exc}") from exc
    return sorted(matches)
