"""Meal energy aggregation."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from healthy_tracker.domain.energy import SlotCalories
from healthy_tracker.domain.logs import FoodReference, MealLog, MealPortion, MealSlot
from healthy_tracker.domain.windows import PortionView

PORTION_CALORIE_DECIMALS = 2

_logger = logging.getLogger(__name__)


class MealLogRepository(Protocol):
    """Persistence interface for meal logs and their portions."""

    def list_meal_logs(
        self, user_id: int, start: date | None = None, end: date | None = None
    ) -> list[MealLog]:
        """Return meal logs for a user, optionally within an inclusive range."""

    def list_meal_portions(self, meal_ids: list[int]) -> list[MealPortion]:
        """Return the portions belonging to the given meal logs."""


class FoodRepository(Protocol):
    """Read access to the reference food table."""

    def get_foods(self, food_ids: list[int]) -> list[FoodReference]:
        """Return the foods that exist among the given ids."""


@dataclass
class MealEnergyAggregator:
    """Sums eaten calories per meal slot from logged portions."""

    food_repository: FoodRepository

    def resolve_foods(
        self, portions: Iterable[MealPortion]
    ) -> dict[int, FoodReference]:
        """Look up every food referenced by the portions in one call."""
        food_ids = sorted({portion.food_id for portion in portions})
        if not food_ids:
            return {}
        foods = {food.id: food for food in self.food_repository.get_foods(food_ids)}
        missing = [food_id for food_id in food_ids if food_id not in foods]
        if missing:
            _logger.warning("Unresolved food references: %s", missing)
        return foods

    def kcal_for_slot(
        self,
        meal_logs: list[MealLog],
        portions: list[MealPortion],
        foods: dict[int, FoodReference],
        slot: MealSlot,
    ) -> float:
        """Return kcal eaten in one slot; 0 when nothing was logged."""
        meal_ids = {log.id for log in meal_logs if log.slot == slot}
        if not meal_ids:
            return 0.0
        return sum(
            portion_kcal(portion, foods)
            for portion in portions
            if portion.meal_id in meal_ids
        )

    def kcal_for_day(
        self,
        meal_logs: list[MealLog],
        portions: list[MealPortion],
        foods: dict[int, FoodReference],
    ) -> SlotCalories:
        """Return kcal per surfaced slot; the ``other`` slot is not reported."""
        return SlotCalories(
            breakfast=self.kcal_for_slot(
                meal_logs, portions, foods, MealSlot.BREAKFAST
            ),
            lunch=self.kcal_for_slot(meal_logs, portions, foods, MealSlot.LUNCH),
            dinner=self.kcal_for_slot(meal_logs, portions, foods, MealSlot.DINNER),
            snack=self.kcal_for_slot(meal_logs, portions, foods, MealSlot.SNACK),
        )


def portion_kcal(portion: MealPortion, foods: dict[int, FoodReference]) -> float:
    """Return unrounded kcal of a portion; unknown foods count as 0."""
    food = foods.get(portion.food_id)
    if food is None:
        return 0.0
    return portion.grams * food.calories / 100.0


def portion_view(portion: MealPortion, foods: dict[int, FoodReference]) -> PortionView:
    """Build the display row for a portion."""
    food = foods.get(portion.food_id)
    if food is None:
        return PortionView(id=portion.id, name="", amount=portion.grams, calorie=0)
    return PortionView(
        id=portion.id,
        name=food.name,
        amount=portion.grams,
        calorie=round(food.calories * portion.grams / 100.0, PORTION_CALORIE_DECIMALS),
    )
