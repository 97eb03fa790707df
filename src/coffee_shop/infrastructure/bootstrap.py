"""Composition root: wires a display and settings into an order screen.

This is the only place that knows about every layer.
"""

from __future__ import annotations

from coffee_shop.application.order_screen import OrderScreenController
from coffee_shop.application.ports import OrderDisplay
from coffee_shop.domain.model.drink import Drink
from coffee_shop.infrastructure.config import Settings


def initial_drink(settings: Settings) -> Drink:
    return Drink.create(
        drink_name=settings.default_drink_name,
        drink_size=settings.default_drink_size,
        shot_count=settings.default_shot_count,
    )


def order_screen(
    display: OrderDisplay,
    settings: Settings | None = None,
) -> OrderScreenController:
    settings = settings if settings is not None else Settings()
    return OrderScreenController(display=display, drink=initial_drink(settings))
