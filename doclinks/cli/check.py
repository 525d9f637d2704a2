"""Check command: build a CheckConfig from CLI options and run the link check."""

from pathlib import Path
from typing import Any

import typer

from doclinks.api.config.CheckConfig import CheckConfig
from doclinks.api.link.cmd_check import cmd_check
from doclinks.cli._handle_stage_result import _handle_stage_result
from doclinks.cli._print_report import _print_report


def _build_config(
    root: Path | None,
    repository: str | None,
    commit: str | None,
    host: str | None,
    pool_size: int | None,
    timeout: float | None,
    pattern: str | None,
    config_file: Path | None,
    headed: bool,
    remote_url: str | None,
) -> CheckConfig:
    """Merge config file, CLI options and the GitHub Actions environment.

    CLI options win over the config file; anything still missing falls back
    to the environment, so a partial config file is fine.

    Raises:
        ValueError: If the resulting configuration is incomplete or invalid.
    """
    values = CheckConfig.read_file(config_file) if config_file is not None else {}
    values.update(
        {
            key: value
            for key, value in {"root": root, "pool_size": pool_size, "timeout": timeout, "pattern": pattern}.items()
            if value is not None
        }
    )

    browser: dict[str, Any] = {}
    if headed:
        browser["headless"] = False
    if remote_url:
        browser["remote_url"] = remote_url
    if browser:
        file_browser = values.get("browser")
        values["browser"] = {**(file_browser if isinstance(file_browser, dict) else {}), **browser}

    file_repository = values.get("repository")
    if isinstance(file_repository, dict) and (repository or commit or host):
        del values["repository"]
        if repository is None and file_repository.get("owner") and file_repository.get("name"):
            repository = f"{file_repository['owner']}/{file_repository['name']}"
        commit = commit or file_repository.get("commit")
        host = host or file_repository.get("host")
    elif repository or commit or host:
        values.pop("repository", None)

    stray = sorted({"slug", "commit", "host"} & values.keys())
    if stray:
        raise ValueError(f"Configuration validation error: {stray[0]}: Extra inputs are not permitted")

    return CheckConfig.from_env(slug=repository, commit=commit, host=host, **values)


def check(
    ctx: typer.Context,
    root: Path | None = typer.Argument(None, help="Directory to scan (default: $GITHUB_WORKSPACE or cwd)"),
    repository: str | None = typer.Option(None, "--repository", "-r", help="owner/name (default: $GITHUB_REPOSITORY)"),
    commit: str | None = typer.Option(None, "--commit", "-c", help="Commit SHA (default: $GITHUB_SHA)"),
    host: str | None = typer.Option(None, help="Source hosting host (default: github.com)"),
    pool_size: int | None = typer.Option(None, "--pool-size", "-n", help="Number of browser contexts"),
    timeout: float | None = typer.Option(None, help="Per-request timeout in seconds"),
    pattern: str | None = typer.Option(None, help="Markdown glob relative to root"),
    config_file: Path | None = typer.Option(None, "--config", help="JSON configuration file"),
    headed: bool = typer.Option(False, "--headed", help="Show the browser window"),
    remote_url: str | None = typer.Option(None, "--remote-url", help="Selenium Grid URL"),
) -> None:
    """Verify that every link in the markdown files under ROOT resolves."""
    try:
        config = _build_config(
            root, repository, commit, host, pool_size, timeout, pattern, config_file, headed, remote_url
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    _handle_stage_result(cmd_check, ctx=ctx, report_printer_factory=_print_report)(config)
