"""Link check API command."""

import asyncio
import logging
from collections.abc import Iterator
from typing import Any

import aiohttp

from doclinks.utils.configure_logging import configure_logging

from ..config.CheckConfig import CheckConfig
from ..StageResult import StageResult
from . import LinkCheckOutput
from ._pool import ContextFactory
from .check_links import check_links
from .FatalSetupError import FatalSetupError
from .RunSummary import RunSummary

logger = logging.getLogger(__name__)


def _repository_label(config: CheckConfig) -> str:
    return f"{config.repository.slug}@{config.repository.commit}"


def _summary_output(config: CheckConfig, summary: RunSummary) -> dict[str, Any]:
    rows = summary.failure_rows()
    return LinkCheckOutput(
        root=str(config.root),
        repository=_repository_label(config),
        total_links=summary.total_links,
        total_files=summary.total_files,
        total_failures=len(summary.failures),
        files=[
            {
                "source_file": report.source_file,
                "links": [
                    {
                        "status": outcome.status,
                        "original": outcome.original,
                        "url": outcome.url,
                        "success": outcome.success,
                        "error": outcome.error,
                        "diagnostics": list(outcome.diagnostics),
                    }
                    for outcome in report.outcomes
                ],
            }
            for report in summary.reports
        ],
        failures=[
            {"status": row.status_label, "link": outcome.url, "short_link": row.short_link, "file": row.file}
            for row, outcome in zip(rows, summary.failures)
        ],
        warnings=[error for report in summary.reports for error in report.errors],
    ).model_dump(mode="python")


def _fatal_output(config: CheckConfig, message: str) -> dict[str, Any]:
    return LinkCheckOutput(
        root=str(config.root),
        repository=_repository_label(config),
        total_links=0,
        total_files=0,
        total_failures=0,
        files=[],
        failures=[],
        errors=[message],
    ).model_dump(mode="python")


def cmd_check(
    config: CheckConfig,
    context_factory: ContextFactory | None = None,
    session: aiohttp.ClientSession | None = None,
) -> StageResult:
    """Verify every link in the markdown files under ``config.root``."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Configuring logging...")
        configure_logging(level=config.log.level)

        yield (0.2, f"Checking links with {config.pool_size} browser contexts...")
        try:
            summary = asyncio.run(check_links(config, context_factory=context_factory, session=session))
        except FatalSetupError as e:
            logger.error("Fatal setup error: %s", e)
            result_obj.output = _fatal_output(config, str(e))
            result_obj.result = f"Fatal: {e}"
            result_obj.success = False
            return
        except Exception as e:
            logger.exception("Link check aborted")
            result_obj.output = _fatal_output(config, f"Unexpected error: {e}")
            result_obj.result = f"Link check aborted: {e}"
            result_obj.success = False
            return

        yield (0.9, "Aggregating results...")
        result_obj.output = _summary_output(config, summary)
        result_obj.result = (
            f"Checked {summary.total_links} links in {summary.total_files} files: "
            f"{len(summary.failures)} failing"
        )
        result_obj.success = summary.ok
        yield (1.0, "Complete")

    return StageResult(announce=f"Checking links in {config.root}...", progress_callback=do_work)
