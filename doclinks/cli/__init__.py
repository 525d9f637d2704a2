"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Returns the process exit code: 0 on success, 1 on failing links,
    configuration problems and usage errors.
    """
    import typer

    from doclinks.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from doclinks.utils.get_package_version import get_package_version

        print(f"doclinks {get_package_version()}")
        return 0

    app = _create_app()
    try:
        # Non-standalone mode returns Exit codes and raises usage errors here
        exit_code = app(argv, standalone_mode=False)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        return 1
    return exit_code if isinstance(exit_code, int) else 0
