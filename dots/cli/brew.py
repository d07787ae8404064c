"""Brew Typer app factory."""

import typer

from dots.api.brew.cmd_dump import cmd_dump
from dots.api.brew.cmd_install import cmd_install
from dots.cli._app_factory import _domain_app
from dots.cli._handle_stage_result import _handle_stage_result


def brew() -> typer.Typer:
    """Create and configure the brew Typer app."""
    app = _domain_app("brew", "Homebrew packages")

    @app.command(name="install")
    def install_cmd(
        bootstrap: bool = typer.Option(False, "--bootstrap", help="Install Homebrew first if it is missing"),
    ) -> None:
        """Install packages from the Brewfile."""
        _handle_stage_result(cmd_install)(bootstrap=bootstrap)

    @app.command(name="dump")
    def dump_cmd() -> None:
        """Export installed packages to the Brewfile."""
        _handle_stage_result(cmd_dump)()

    return app
