"""App Typer app factory."""

import typer

from dots.api.app.cmd_list import cmd_list
from dots.api.app.cmd_setup import cmd_setup
from dots.cli._app_factory import _domain_app
from dots.cli._handle_stage_result import _handle_stage_result


def app() -> typer.Typer:
    """Create and configure the app Typer app."""
    typer_app = _domain_app("app", "Application settings (claude, gemini, ...)")

    @typer_app.command(name="list")
    def list_cmd() -> None:
        """List configured applications."""
        _handle_stage_result(cmd_list)()

    @typer_app.command(name="setup")
    def setup_cmd(
        name: str = typer.Argument(..., help="Application name from the apps config section"),
    ) -> None:
        """Link an application's settings."""
        _handle_stage_result(cmd_setup)(name)

    return typer_app
