"""Config Typer app factory."""

import typer

from dots.api.config.cmd_init import cmd_init
from dots.api.config.cmd_show import cmd_show
from dots.api.config.cmd_version import cmd_version
from dots.cli._app_factory import _domain_app
from dots.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = _domain_app("config", "Configuration operations")

    @app.command(name="show")
    def show_cmd(
        section: str = typer.Argument("", help="Configuration section name (omit to list sections)"),
    ) -> None:
        """Show configuration for a section, or list the sections."""
        _handle_stage_result(cmd_show)(section)

    @app.command(name="init")
    def init_cmd(
        force: bool = typer.Option(False, "--force", help="Overwrite an existing config file"),
    ) -> None:
        """Write the default configuration file."""
        _handle_stage_result(cmd_init)(force=force)

    @app.command(name="version")
    def version_cmd() -> None:
        """Show dots version information."""
        _handle_stage_result(cmd_version)()

    return app
