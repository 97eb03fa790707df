"""Drink aggregate: the single order edited on the order screen.

The drink is owned by one screen controller and mutated in place.
Its invariants are enforced here:

- ``shot_count`` is never negative
- ``drink_name`` and ``drink_size`` are never blank
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from coffee_shop.domain.exceptions import ValidationError
from coffee_shop.domain.model.value_objects import DrinkOptions

# ---------------------------------------------------------------------------
# Defaults for a freshly opened screen
# ---------------------------------------------------------------------------
DEFAULT_DRINK_NAME = "Coffee"
DEFAULT_DRINK_SIZE = "Medium"
DEFAULT_SHOT_COUNT = 1


@dataclass
class Drink:
    """Aggregate root for the in-progress drink order.

    Use ``Drink.create()`` to build one from loosely-typed input; it fills
    in defaults and validates the shot count.
    """

    shot_count: int = DEFAULT_SHOT_COUNT
    is_iced: bool = False
    drink_name: str = DEFAULT_DRINK_NAME
    drink_size: str = DEFAULT_DRINK_SIZE

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        drink_name: str | None = None,
        drink_size: str | None = None,
        shot_count: int | None = None,
        is_iced: bool = False,
    ) -> Drink:
        """Create a drink, falling back to defaults for missing values."""
        if shot_count is None:
            shot_count = DEFAULT_SHOT_COUNT
        _check_shot_count(shot_count)

        return Drink(
            shot_count=shot_count,
            is_iced=bool(is_iced),
            drink_name=_text_or_default(drink_name, DEFAULT_DRINK_NAME),
            drink_size=_text_or_default(drink_size, DEFAULT_DRINK_SIZE),
        )

    # --- Mutations ------------------------------------------------------------

    def add_shots(self, count: int = 1) -> None:
        _check_step(count)
        self.shot_count += count

    def remove_shots(self, count: int = 1) -> None:
        """Remove *count* shots, stopping at zero."""
        _check_step(count)
        self.shot_count = max(0, self.shot_count - count)

    def set_shot_count(self, value: int) -> None:
        """Set an absolute shot count; negative values clamp to zero."""
        _check_integer(value, "Shot count")
        self.shot_count = max(0, value)

    def apply_options(self, options: DrinkOptions) -> None:
        """Apply the selected options, leaving unselected fields as they are.

        Blank text resets that field to its default.
        """
        if options.is_iced is not None:
            self.is_iced = bool(options.is_iced)
        if options.drink_name is not None:
            self.drink_name = _text_or_default(options.drink_name, DEFAULT_DRINK_NAME)
        if options.drink_size is not None:
            self.drink_size = _text_or_default(options.drink_size, DEFAULT_DRINK_SIZE)

    # --- Queries --------------------------------------------------------------

    def snapshot(self) -> Drink:
        """Return an independent copy of the current state."""
        return replace(self)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _text_or_default(value: str | None, default: str) -> str:
    if value is None or not value.strip():
        return default
    return value.strip()


def _check_integer(value: int, what: str) -> None:
    # bool is an int subclass; True is not a shot count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{what} must be an integer, got {type(value).__name__}"
        )


def _check_shot_count(value: int) -> None:
    _check_integer(value, "Shot count")
    if value < 0:
        raise ValidationError(f"Shot count cannot be negative, got {value}")


def _check_step(count: int) -> None:
    _check_integer(count, "Shot step")
    if count <= 0:
        raise ValidationError("Shot step must be positive")
