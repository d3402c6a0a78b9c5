"""Domain models for logged events."""

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum


class MealSlot(str, Enum):
    """Meal-time category of a meal log."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"
    OTHER = "other"

    @classmethod
    def from_label(cls, label: str | None) -> "MealSlot":
        """Normalize a client-supplied slot label."""
        if not label:
            return cls.OTHER
        cleaned = label.strip()
        chinese = _CHINESE_LABELS.get(cleaned)
        if chinese is not None:
            return chinese
        try:
            return cls(cleaned.lower())
        except ValueError:
            return cls.OTHER


_CHINESE_LABELS = {
    "早餐": MealSlot.BREAKFAST,
    "午餐": MealSlot.LUNCH,
    "晚餐": MealSlot.DINNER,
    "加餐": MealSlot.SNACK,
}

SURFACED_SLOTS = (
    MealSlot.BREAKFAST,
    MealSlot.LUNCH,
    MealSlot.DINNER,
    MealSlot.SNACK,
)


@dataclass(frozen=True)
class WeightRecord:
    """Body weight measurement for a calendar day."""

    id: int
    user_id: int
    day: date
    weight_kg: float
    body_fat: float | None = None
    time_of_day: time | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class WaterRecord:
    """Single drink logged by a user."""

    id: int
    user_id: int
    day: date
    time_of_day: time | None
    drink: str
    amount_ml: float


@dataclass(frozen=True)
class ExerciseRecord:
    """Exercise session with its total energy cost."""

    id: int
    user_id: int
    day: date
    total_calories: float | None


@dataclass(frozen=True)
class MealLog:
    """A meal eaten in one slot of a day."""

    id: int
    user_id: int
    day: date
    slot: MealSlot


@dataclass(frozen=True)
class MealPortion:
    """Grams of a reference food eaten as part of a meal."""

    id: int
    meal_id: int
    food_id: int
    grams: float


@dataclass(frozen=True)
class FoodReference:
    """Reference food with densities per 100 grams."""

    id: int
    name: str
    calories: float
    carbs: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    category: str | None = None
