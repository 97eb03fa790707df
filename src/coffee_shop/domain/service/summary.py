"""Domain service: summary rendering.

Pure functions from drink state to display text.  They never touch a
display, so the exact output can be asserted in tests.
"""

from __future__ import annotations

from coffee_shop.domain.model.drink import Drink

_LABEL_WIDTH = 13


def describe_shots(count: int) -> str:
    return f"{count} shot" if count == 1 else f"{count} shots"


def describe_temperature(is_iced: bool) -> str:
    return "Iced" if is_iced else "Hot"


def render_shot_count(drink: Drink) -> str:
    """Text for the shot-count indicator."""
    return str(drink.shot_count)


def render_summary(drink: Drink) -> str:
    """Multi-line, human-readable description of the whole drink."""
    rows = [
        ("Drink:", drink.drink_name),
        ("Size:", drink.drink_size),
        ("Temperature:", describe_temperature(drink.is_iced)),
        ("Espresso:", describe_shots(drink.shot_count)),
    ]
    return "\n".join(f"{label:<{_LABEL_WIDTH}}{value}" for label, value in rows)
