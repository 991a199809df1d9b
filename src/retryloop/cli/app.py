"""CLI application factory."""

import typer

from ..app import create_app
from ..config.settings import LogLevel, Settings, build_settings
from .commands.run import run
from .state import CLIState


def create_cli_app(settings: Settings | None = None) -> typer.Typer:
    """Create CLI application with optional settings override.

    Args:
        settings: Optional Settings override for testing

    Returns:
        Configured Typer application with commands registered
    """
    app = typer.Typer(
        name="retryloop",
        help="Run a command again until it succeeds or the retry policy gives up",
        no_args_is_help=True,
    )

    @app.callback()
    def setup(
        ctx: typer.Context,
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Enable verbose output (DEBUG logging)",
        ),
    ) -> None:
        """Global options available to all commands."""
        if settings is not None:
            resolved_settings = settings
        else:
            resolved_settings = build_settings(
                log_level=LogLevel.DEBUG if verbose else LogLevel.WARNING,
            )

        ctx.obj = CLIState(create_app(resolved_settings))

    app.command(
        "run",
        context_settings={"allow_interspersed_args": False},
    )(run)

    return app
