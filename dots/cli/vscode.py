"""VSCode Typer app factory."""

import typer

from dots.api.vscode.cmd_export import cmd_export
from dots.api.vscode.cmd_setup import cmd_setup
from dots.cli._app_factory import _domain_app
from dots.cli._handle_stage_result import _handle_stage_result


def vscode() -> typer.Typer:
    """Create and configure the vscode Typer app."""
    app = _domain_app("vscode", "VSCode settings and extensions")

    @app.command(name="setup")
    def setup_cmd() -> None:
        """Link general and profile settings."""
        _handle_stage_result(cmd_setup)()

    @app.command(name="export")
    def export_cmd() -> None:
        """Export installed extensions to the dotfiles."""
        _handle_stage_result(cmd_export)()

    return app
