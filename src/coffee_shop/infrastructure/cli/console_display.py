"""Terminal implementation of the OrderDisplay port."""

from __future__ import annotations

import click

from coffee_shop.application.dto import OrderConfirmationDTO
from coffee_shop.application.ports import OrderDisplay


class ConsoleOrderDisplay(OrderDisplay):
    """Holds the latest screen contents and draws them on request.

    The controller re-renders after every action, so the surfaces only
    remember the last value; ``draw()`` prints it.  Confirmations are
    echoed straight away.
    """

    def __init__(self) -> None:
        self.shot_count_text = ""
        self.summary_text = ""

    # --- OrderDisplay interface -----------------------------------------------

    def show_shot_count(self, text: str) -> None:
        self.shot_count_text = text

    def show_summary(self, text: str) -> None:
        self.summary_text = text

    def show_confirmation(self, confirmation: OrderConfirmationDTO) -> None:
        click.echo(f"Order #{confirmation.order_number} placed.")
        click.echo()
        click.echo(confirmation.summary)

    # --- Drawing --------------------------------------------------------------

    def draw(self) -> None:
        click.echo(f"Shots: [{self.shot_count_text}]")
        click.echo("-" * 30)
        click.echo(self.summary_text)
