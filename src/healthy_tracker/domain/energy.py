"""Domain models for energy-balance results."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SlotCalories:
    """Unrounded kcal eaten per surfaced meal slot."""

    breakfast: float
    lunch: float
    dinner: float
    snack: float

    @property
    def total(self) -> float:
        return self.breakfast + self.lunch + self.dinner + self.snack


@dataclass(frozen=True)
class DailyCalorieSummary:
    """Energy balance for one day, rounded for display."""

    remain_calorie: int
    breakfast_kcal: int
    lunch_kcal: int
    dinner_kcal: int
    snack_kcal: int
    tdee: int
    balance: int


@dataclass(frozen=True)
class BodyInfo:
    """Body metrics snapshot for one day."""

    weight: float
    height: float
    bmr: int
    body_fat: float | None
    bmi: float
