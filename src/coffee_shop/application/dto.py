"""Data Transfer Objects that leave the order screen.

They carry plain values so callers never hold on to the live drink.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderConfirmationDTO:
    """Output: the drink as it stood when the order button was tapped."""

    order_number: int  # local to one screen, starts at 1
    shot_count: int
    is_iced: bool
    drink_name: str
    drink_size: str
    summary: str
