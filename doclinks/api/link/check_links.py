"""The link check pipeline: discover, extract, resolve, verify, aggregate."""

import asyncio
import logging
from pathlib import Path

import aiohttp

from ..config.CheckConfig import CheckConfig
from ._pool import ContextFactory
from .discover_files import discover_files
from .Dispatcher import Dispatcher
from .extract_links import extract_links
from .FileReport import FileReport
from .resolve_target import resolve_target
from .RunSummary import RunSummary

logger = logging.getLogger(__name__)


async def check_links(
    config: CheckConfig,
    context_factory: ContextFactory | None = None,
    session: aiohttp.ClientSession | None = None,
) -> RunSummary:
    """Check every link in every markdown file under ``config.root``.

    Files are checked concurrently; the summary lists them in discovery
    order. Per-link failures are recorded, never raised.

    Raises:
        FatalSetupError: If the root cannot be scanned or the pool cannot start.
    """
    root = config.root.expanduser().resolve()
    files = discover_files(root, config.pattern, config.exclude_dirnames)
    logger.info("Found %d markdown files under %s", len(files), root)

    async with Dispatcher(config, context_factory=context_factory, session=session) as dispatcher:
        reports = await asyncio.gather(*(_check_file(dispatcher, config, root, path) for path in files))

    summary = RunSummary.from_reports(reports)
    logger.info(
        "Checked %d links in %d files, %d failing", summary.total_links, summary.total_files, len(summary.failures)
    )
    return summary


async def _check_file(dispatcher: Dispatcher, config: CheckConfig, root: Path, path: Path) -> FileReport:
    source_file = path.relative_to(root).as_posix()
    try:
        text = await asyncio.to_thread(path.read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read %s: %s", source_file, exc)
        return FileReport(source_file=source_file, errors=(f"Cannot read {source_file}: {exc}",))

    refs = extract_links(text, source_file)
    tasks = [dispatcher.submit(resolve_target(ref, config.repository), source_file) for ref in refs]
    outcomes = await asyncio.gather(*tasks)
    return FileReport(source_file=source_file, outcomes=tuple(outcomes))
