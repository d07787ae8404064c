"""macOS Typer app factory."""

import typer

from dots.api.macos.cmd_apply import cmd_apply
from dots.cli._app_factory import _domain_app
from dots.cli._handle_stage_result import _handle_stage_result


def macos() -> typer.Typer:
    """Create and configure the macos Typer app."""
    app = _domain_app("macos", "macOS system preferences")

    @app.command(name="apply")
    def apply_cmd() -> None:
        """Write system preferences and restart affected apps."""
        _handle_stage_result(cmd_apply)()

    return app
