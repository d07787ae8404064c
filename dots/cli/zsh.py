"""Zsh Typer app factory."""

import typer

from dots.api.zsh.cmd_setup import cmd_setup
from dots.cli._app_factory import _domain_app
from dots.cli._handle_stage_result import _handle_stage_result


def zsh() -> typer.Typer:
    """Create and configure the zsh Typer app."""
    app = _domain_app("zsh", "Oh My Zsh and plugins")

    @app.command(name="setup")
    def setup_cmd() -> None:
        """Install Oh My Zsh and clone missing plugins."""
        _handle_stage_result(cmd_setup)()

    return app
