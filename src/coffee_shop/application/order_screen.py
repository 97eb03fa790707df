"""Application service: the order screen.

Each user action follows the same pipeline:

1. mutate the owned Drink,
2. derive display text with the pure summary functions,
3. write that text to the display port.
"""

from __future__ import annotations

import logging

from coffee_shop.application.dto import OrderConfirmationDTO
from coffee_shop.application.ports import OrderDisplay
from coffee_shop.domain.exceptions import ValidationError
from coffee_shop.domain.model.drink import Drink
from coffee_shop.domain.model.value_objects import DrinkOptions, ShotDirection
from coffee_shop.domain.service.summary import render_shot_count, render_summary

logger = logging.getLogger(__name__)


class OrderScreenController:

    def __init__(self, display: OrderDisplay, drink: Drink | None = None) -> None:
        self._display = display
        self._drink = drink if drink is not None else Drink.create()
        self._orders_placed = 0
        self._render()

    # --- Actions --------------------------------------------------------------

    def modify_shots(self, direction: ShotDirection, steps: int = 1) -> None:
        """Step the shot count up or down; decrements stop at zero.

        A step count below one changes nothing but still re-renders.
        Raises ValidationError, before touching the drink, if *direction*
        is not a ShotDirection or one of its values.
        """
        try:
            direction = ShotDirection(direction)
        except ValueError as exc:
            raise ValidationError(f"Unknown shot direction: {direction!r}") from exc

        if steps >= 1:
            if direction is ShotDirection.INCREMENT:
                self._drink.add_shots(steps)
            else:
                self._drink.remove_shots(steps)
        logger.debug(
            "Shots %s by %d -> %d",
            direction.value,
            max(steps, 0),
            self._drink.shot_count,
        )
        self._render()

    def set_shot_count(self, value: int) -> None:
        """Stepper-style absolute update, clamped at zero."""
        self._drink.set_shot_count(value)
        logger.debug("Shots set to %d", self._drink.shot_count)
        self._render()

    def change_drink_options(self, selection: DrinkOptions) -> None:
        if selection.is_empty:
            logger.debug("Empty drink selection ignored")
            return
        self._drink.apply_options(selection)
        logger.debug("Drink options changed: %s", selection.present())
        self._render()

    def order_button_tapped(self) -> OrderConfirmationDTO:
        """Place the current drink.

        Nothing is sent anywhere; the user gets a confirmation and the
        drink stays on screen for further edits.
        """
        self._orders_placed += 1
        confirmation = self._to_dto(self._drink.snapshot(), self._orders_placed)
        logger.info(
            "Order #%d placed: %s %s, %s",
            confirmation.order_number,
            confirmation.drink_size,
            confirmation.drink_name,
            "iced" if confirmation.is_iced else "hot",
        )
        self._display.show_confirmation(confirmation)
        return confirmation

    # --- Queries --------------------------------------------------------------

    @property
    def drink(self) -> Drink:
        return self._drink

    @property
    def summary(self) -> str:
        return render_summary(self._drink)

    # --- Rendering ------------------------------------------------------------

    def _render(self) -> None:
        self._display.show_shot_count(render_shot_count(self._drink))
        self._display.show_summary(render_summary(self._drink))

    @staticmethod
    def _to_dto(drink: Drink, order_number: int) -> OrderConfirmationDTO:
        return OrderConfirmationDTO(
            order_number=order_number,
            shot_count=drink.shot_count,
            is_iced=drink.is_iced,
            drink_name=drink.drink_name,
            drink_size=drink.drink_size,
            summary=render_summary(drink),
        )
