"""Human-readable rendering of a link check output."""

from collections.abc import Callable
from typing import Any

from rich.markup import escape
from rich.table import Table

from doclinks.cli.display import CLIDisplay


def _print_report(display: CLIDisplay) -> Callable[[dict[str, Any]], None]:
    """Return a printer that renders per-link lines, the failure table and totals."""

    def printer(output: dict[str, Any]) -> None:
        console = display.stderr_console

        for error in output["errors"]:
            display.error(error)
        for warning in output["warnings"]:
            display.warning(warning)

        for report in output["files"]:
            console.print(f"[bold]{escape(report['source_file'])}[/bold]")
            if not report["links"]:
                console.print("  [dim]no links[/dim]")
            for link in report["links"]:
                marker = "[green]✓[/green]" if link["success"] else "[red]✗[/red]"
                status = link["status"] if link["status"] is not None else "ERR"
                console.print(f"  {marker} {status} {escape(link['original'])}")

        if output["failures"]:
            table = Table(title="Failing links")
            table.add_column("Status", justify="right", style="red")
            table.add_column("Link", overflow="fold")
            table.add_column("File", style="cyan")
            for failure in output["failures"]:
                table.add_row(failure["status"], escape(failure["short_link"]), escape(failure["file"]))
            console.print(table)

        console.print(
            f"[bold]{output['total_links']}[/bold] links in [bold]{output['total_files']}[/bold] files, "
            f"[bold]{output['total_failures']}[/bold] failing"
        )

    return printer
