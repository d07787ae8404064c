"""Create the main Typer CLI app."""

import typer

from dots.api.bootstrap.cmd_install import cmd_install
from dots.api.bootstrap.cmd_update import cmd_update
from dots.cli._display_format import set_display_format
from dots.cli._handle_stage_result import _handle_stage_result
from dots.cli.app import app as app_domain
from dots.cli.brew import brew
from dots.cli.config import config
from dots.cli.link import link
from dots.cli.macos import macos
from dots.cli.vscode import vscode
from dots.cli.zsh import zsh


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="dots - macOS dotfiles bootstrapper",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(config(), name="config")
    app.add_typer(link(), name="link")
    app.add_typer(brew(), name="brew")
    app.add_typer(zsh(), name="zsh")
    app.add_typer(vscode(), name="vscode")
    app.add_typer(app_domain(), name="app")
    app.add_typer(macos(), name="macos")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        try:
            set_display_format(display)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    @app.command(name="install")
    def install_cmd(
        macos_prefs: bool | None = typer.Option(
            None, "--macos/--no-macos", help="Apply macOS system preferences (asks when omitted)"
        ),
    ) -> None:
        """Install everything: packages, shell, links, editor, then optionally macOS preferences."""
        if macos_prefs is None:
            macos_prefs = typer.confirm("Configure macOS system preferences?", default=False, err=True)
        _handle_stage_result(cmd_install)(macos=macos_prefs)

    @app.command(name="update")
    def update_cmd() -> None:
        """Export the Brewfile and VSCode extension list from this machine."""
        _handle_stage_result(cmd_update)()

    return app
