"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Typer runs in standalone mode, so usage errors (exit 2) and aborts
    (exit 1) are reported by Typer itself and arrive here as SystemExit.
    """
    from dots.cli._create_app import _create_app
    from dots.utils.logger import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from dots.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"dots {result.output.get('full_version', 'unknown')}")
        return 0 if result.success else 1

    configure_logging()
    app = _create_app()
    try:
        app(argv, prog_name="dots")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0
