import click
import pydantic

from coffee_shop.infrastructure.app_logging import configure_logging
from coffee_shop.infrastructure.cli.screen_commands import (
    screen_interactive,
    screen_order,
    screen_summary,
)
from coffee_shop.infrastructure.config import Settings


@click.group()
@click.option("--log-level", default=None, help="Logging level (e.g. DEBUG).")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Coffee Shop order screen"""
    try:
        settings = Settings()
    except pydantic.ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")

    configure_logging(log_level or settings.log_level)
    ctx.obj = settings


# Register subcommands
cli.add_command(screen_interactive)
cli.add_command(screen_order)
cli.add_command(screen_summary)
