"""Link Typer app factory."""

import typer

from dots.api.link.cmd_run import cmd_run
from dots.api.link.cmd_status import cmd_status
from dots.cli._app_factory import _domain_app
from dots.cli._handle_stage_result import _handle_stage_result


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = _domain_app("link", "Symlink dotfiles into the home directory")

    @app.command(name="run")
    def run_cmd() -> None:
        """Create the symlinks, backing up files they replace."""
        _handle_stage_result(cmd_run)()

    @app.command(name="status")
    def status_cmd() -> None:
        """Show the state of each configured link."""
        _handle_stage_result(cmd_status)()

    return app
