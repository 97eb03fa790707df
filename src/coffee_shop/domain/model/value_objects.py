"""Value Objects describing user selections on the order screen."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum


class ShotDirection(Enum):
    INCREMENT = "increment"
    DECREMENT = "decrement"


@dataclass(frozen=True)
class DrinkOptions:
    """A partial selection of drink options.

    Only fields that are not ``None`` are applied to the drink; the rest
    of the drink is left untouched.
    """

    is_iced: bool | None = None
    drink_name: str | None = None
    drink_size: str | None = None

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def present(self) -> dict[str, object]:
        """Return only the fields that were actually selected."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
