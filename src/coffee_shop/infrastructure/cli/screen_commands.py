"""CLI commands for the order screen."""

from __future__ import annotations

import click

from coffee_shop.application.order_screen import OrderScreenController
from coffee_shop.domain.exceptions import DomainException
from coffee_shop.domain.model.value_objects import DrinkOptions, ShotDirection
from coffee_shop.infrastructure.bootstrap import order_screen
from coffee_shop.infrastructure.cli.console_display import ConsoleOrderDisplay
from coffee_shop.infrastructure.config import Settings

_HELP = """\
Commands:
  + | more        add a shot
  - | less        remove a shot
  shots N         set the shot count
  iced | hot      choose the temperature
  name TEXT       choose the drink
  size TEXT       choose the size
  show            redraw the screen
  order           place the order
  help            show this help
  quit            leave the screen"""


def _drink_options(func):
    """Shared options describing the drink to build."""
    func = click.option("--shots", type=int, default=None, help="Number of espresso shots.")(func)
    func = click.option("--iced/--hot", "iced", default=False, help="Serve cold or hot.")(func)
    func = click.option("--size", default=None, help="Drink size (e.g. Small).")(func)
    func = click.option("--name", default=None, help="Drink name (e.g. Latte).")(func)
    return func


def _prepare(
    settings: Settings,
    display: ConsoleOrderDisplay,
    name: str | None,
    size: str | None,
    iced: bool,
    shots: int | None,
) -> OrderScreenController:
    screen = order_screen(display, settings)
    try:
        if shots is not None:
            screen.set_shot_count(shots)
        screen.change_drink_options(
            DrinkOptions(is_iced=iced, drink_name=name, drink_size=size)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))
    return screen


@click.command("summary")
@_drink_options
@click.pass_obj
def screen_summary(settings: Settings, name: str | None, size: str | None, iced: bool, shots: int | None) -> None:
    """Print the summary for a drink."""
    display = ConsoleOrderDisplay()
    _prepare(settings, display, name, size, iced, shots)
    click.echo(display.summary_text)


@click.command("order")
@_drink_options
@click.pass_obj
def screen_order(settings: Settings, name: str | None, size: str | None, iced: bool, shots: int | None) -> None:
    """Build a drink and place the order."""
    display = ConsoleOrderDisplay()
    screen = _prepare(settings, display, name, size, iced, shots)
    screen.order_button_tapped()


def _parse_count(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise click.BadParameter(f"Invalid shot count '{raw}'.")


def _dispatch(screen: OrderScreenController, display: ConsoleOrderDisplay, line: str) -> bool:
    """Run one interactive command.  Returns False when the user quits."""
    verb, _, arg = line.strip().partition(" ")
    verb = verb.lower()
    arg = arg.strip()

    if verb in ("quit", "exit", "q"):
        return False
    if verb in ("+", "more"):
        screen.modify_shots(ShotDirection.INCREMENT)
    elif verb in ("-", "less"):
        screen.modify_shots(ShotDirection.DECREMENT)
    elif verb == "shots":
        screen.set_shot_count(_parse_count(arg))
    elif verb == "iced":
        screen.change_drink_options(DrinkOptions(is_iced=True))
    elif verb == "hot":
        screen.change_drink_options(DrinkOptions(is_iced=False))
    elif verb in ("name", "size"):
        if not arg:
            raise click.BadParameter(f"'{verb}' needs a value.")
        field = "drink_name" if verb == "name" else "drink_size"
        screen.change_drink_options(DrinkOptions(**{field: arg}))
    elif verb == "order":
        screen.order_button_tapped()
        return True
    elif verb == "help":
        click.echo(_HELP)
        return True
    elif verb not in ("show", ""):
        raise click.BadParameter(f"Unknown command '{verb}'. Type 'help'.")

    display.draw()
    return True


@click.command("screen")
@click.pass_obj
def screen_interactive(settings: Settings) -> None:
    """Open an interactive order screen."""
    display = ConsoleOrderDisplay()
    screen = order_screen(display, settings)
    display.draw()

    while True:
        line = click.prompt(">", default="", show_default=False, prompt_suffix=" ")
        try:
            if not _dispatch(screen, display, line):
                break
        except click.BadParameter as exc:
            click.echo(f"Error: {exc.format_message()}", err=True)
        except DomainException as exc:
            click.echo(f"Error: {exc}", err=True)
