"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _extract_display_format(ctx: typer.Context | None) -> str:
    """Get the display format stored by the app callback.

    Walks from ``ctx`` up through its parents; defaults to yaml when no
    context in the chain carries one.

    Raises:
        ValueError: If an invalid display format value is encountered.
    """
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value in ("json", "yaml"):
                return value
            raise ValueError(f"Invalid display_format value: {value!r}")
        current = current.parent
    return "yaml"


def _handle_stage_result(
    func: F,
    ctx: typer.Context | None = None,
    report_printer_factory: Callable | None = None,
    suppress_output: bool = False,
) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Report and result (stderr)
    4. Output (stdout as JSON or YAML)

    ``ctx`` is the invoking Typer context, which carries ``--display``.
    ``report_printer_factory`` receives the display and returns a callable
    that renders the command output for humans.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from doclinks.cli.display import CLIDisplay

        display = CLIDisplay()
        display_format = _extract_display_format(ctx)
        report_printer = report_printer_factory(display) if report_printer_factory else None
        _run_single_execution(func, args, kwargs, display, display_format, report_printer, suppress_output)

    return wrapper  # type: ignore[return-value]
