"""Unit tests for the Drink aggregate and its invariants."""

import pytest

from coffee_shop.domain.exceptions import ValidationError
from coffee_shop.domain.model.drink import (
    DEFAULT_DRINK_NAME,
    DEFAULT_DRINK_SIZE,
    DEFAULT_SHOT_COUNT,
    Drink,
)
from coffee_shop.domain.model.value_objects import DrinkOptions


class TestDrinkCreation:

    def test_defaults(self):
        drink = Drink.create()
        assert drink.shot_count == DEFAULT_SHOT_COUNT
        assert drink.is_iced is False
        assert drink.drink_name == DEFAULT_DRINK_NAME
        assert drink.drink_size == DEFAULT_DRINK_SIZE

    def test_explicit_values(self):
        drink = Drink.create("Latte", "Small", shot_count=2, is_iced=True)
        assert drink == Drink(shot_count=2, is_iced=True, drink_name="Latte", drink_size="Small")

    def test_blank_text_falls_back_to_defaults(self):
        drink = Drink.create(drink_name="   ", drink_size="")
        assert drink.drink_name == DEFAULT_DRINK_NAME
        assert drink.drink_size == DEFAULT_DRINK_SIZE

    def test_text_is_stripped(self):
        drink = Drink.create(drink_name="  Mocha ")
        assert drink.drink_name == "Mocha"

    def test_zero_shots_allowed(self):
        assert Drink.create(shot_count=0).shot_count == 0

    def test_negative_shots_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Drink.create(shot_count=-1)

    def test_non_integer_shots_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Drink.create(shot_count=1.5)

    def test_bool_shots_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Drink.create(shot_count=True)


class TestShotChanges:

    def test_add_shots(self):
        drink = Drink.create(shot_count=1)
        drink.add_shots()
        drink.add_shots(2)
        assert drink.shot_count == 4

    def test_remove_shots_clamps_at_zero(self):
        drink = Drink.create(shot_count=1)
        drink.remove_shots(5)
        assert drink.shot_count == 0

    def test_remove_from_zero_stays_zero(self):
        drink = Drink.create(shot_count=0)
        drink.remove_shots()
        assert drink.shot_count == 0

    def test_add_then_remove_restores_count(self):
        drink = Drink.create(shot_count=3)
        drink.add_shots()
        drink.remove_shots()
        assert drink.shot_count == 3

    @pytest.mark.parametrize("step", [0, -1])
    def test_non_positive_step_rejected(self, step):
        drink = Drink.create()
        with pytest.raises(ValidationError, match="must be positive"):
            drink.add_shots(step)
        with pytest.raises(ValidationError, match="must be positive"):
            drink.remove_shots(step)

    def test_set_shot_count_clamps_negative(self):
        drink = Drink.create(shot_count=2)
        drink.set_shot_count(-4)
        assert drink.shot_count == 0

    def test_set_shot_count(self):
        drink = Drink.create()
        drink.set_shot_count(6)
        assert drink.shot_count == 6


class TestApplyOptions:

    def test_only_selected_fields_change(self):
        drink = Drink.create("Latte", "Small", shot_count=2)
        drink.apply_options(DrinkOptions(is_iced=True, drink_size="Large"))
        assert drink == Drink(shot_count=2, is_iced=True, drink_name="Latte", drink_size="Large")

    def test_empty_selection_changes_nothing(self):
        drink = Drink.create("Latte", "Small", shot_count=2, is_iced=True)
        before = drink.snapshot()
        drink.apply_options(DrinkOptions())
        assert drink == before

    def test_iced_false_is_applied(self):
        drink = Drink.create(is_iced=True)
        drink.apply_options(DrinkOptions(is_iced=False))
        assert drink.is_iced is False

    def test_blank_name_resets_to_default(self):
        drink = Drink.create(drink_name="Latte")
        drink.apply_options(DrinkOptions(drink_name=" "))
        assert drink.drink_name == DEFAULT_DRINK_NAME


class TestSnapshot:

    def test_snapshot_is_independent(self):
        drink = Drink.create(shot_count=2)
        copy = drink.snapshot()
        drink.add_shots()
        assert copy.shot_count == 2
        assert drink.shot_count == 3
