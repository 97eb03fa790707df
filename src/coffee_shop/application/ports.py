"""Abstract display surfaces the order screen writes to.

Defined in the application layer so the controller never depends on a
particular UI toolkit.  Concrete implementations (console, test fakes)
live elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from coffee_shop.application.dto import OrderConfirmationDTO


class OrderDisplay(ABC):

    @abstractmethod
    def show_shot_count(self, text: str) -> None:
        """Update the shot-count indicator."""

    @abstractmethod
    def show_summary(self, text: str) -> None:
        """Replace the contents of the summary area."""

    @abstractmethod
    def show_confirmation(self, confirmation: OrderConfirmationDTO) -> None:
        """Acknowledge a placed order to the user."""
