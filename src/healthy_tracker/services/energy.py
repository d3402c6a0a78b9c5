"""Daily energy balance computation."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from healthy_tracker.domain.energy import BodyInfo, DailyCalorieSummary
from healthy_tracker.domain.logs import ExerciseRecord
from healthy_tracker.errors import InvalidInputError
from healthy_tracker.services.meals import MealEnergyAggregator, MealLogRepository
from healthy_tracker.services.metrics import (
    ACTIVITY_MULTIPLIER,
    bmr_for,
    compute_bmi,
    resolve_profile,
)
from healthy_tracker.services.users import UserProfileService
from healthy_tracker.services.weights import WeightLogService
from healthy_tracker.services.windows import parse_day

WEIGHT_DECIMALS = 1

_logger = logging.getLogger(__name__)


class ExerciseLogRepository(Protocol):
    """Persistence interface for exercise logs."""

    def list_exercise_records(self, user_id: int, day: date) -> list[ExerciseRecord]:
        """Return exercise records for a user on one day."""


@dataclass
class EnergyBalanceService:
    """Combines body metrics, exercise and meals into a daily calorie budget."""

    users: UserProfileService
    weights: WeightLogService
    exercises: ExerciseLogRepository
    meals: MealLogRepository
    aggregator: MealEnergyAggregator

    def daily_energy_summary(
        self, user_id: int, day: date | str
    ) -> DailyCalorieSummary:
        """Return the remaining calorie budget and per-slot intake for a day.

        Raises InvalidInputError for an unparseable day and NotFoundError for
        an unknown user. Missing profile fields fall back to defaults.
        """
        target = _require_day(day)
        profile = self.users.get_profile(user_id)
        weigh_in = self.weights.record_for_day(user_id, target)
        resolved = resolve_profile(
            profile, weigh_in.weight_kg if weigh_in is not None else None
        )
        bmr = bmr_for(resolved)
        exercise_kcal = self.exercise_kcal(user_id, target)
        tdee = bmr * ACTIVITY_MULTIPLIER + exercise_kcal

        meal_logs = self.meals.list_meal_logs(user_id, start=target, end=target)
        if not meal_logs:
            return DailyCalorieSummary(
                remain_calorie=_display(tdee),
                breakfast_kcal=0,
                lunch_kcal=0,
                dinner_kcal=0,
                snack_kcal=0,
                tdee=_display(tdee),
                balance=_display(tdee),
            )

        portions = self.meals.list_meal_portions([log.id for log in meal_logs])
        foods = self.aggregator.resolve_foods(portions)
        slots = self.aggregator.kcal_for_day(meal_logs, portions, foods)
        balance = tdee - slots.total
        remain = max(balance, 0.0)
        _logger.debug(
            "Energy summary user=%s day=%s bmr=%.2f tdee=%.2f eaten=%.2f",
            user_id,
            target,
            bmr,
            tdee,
            slots.total,
        )
        return DailyCalorieSummary(
            remain_calorie=_display(remain),
            breakfast_kcal=_display(slots.breakfast),
            lunch_kcal=_display(slots.lunch),
            dinner_kcal=_display(slots.dinner),
            snack_kcal=_display(slots.snack),
            tdee=_display(tdee),
            balance=_display(balance),
        )

    def exercise_kcal(self, user_id: int, day: date) -> float:
        """Return the kcal burned by exercise on a day."""
        records = self.exercises.list_exercise_records(user_id, day)
        return sum(record.total_calories or 0.0 for record in records)

    def body_info(self, user_id: int, day: date | str | None = None) -> BodyInfo:
        """Return weight, height, BMR, body fat and BMI for a day."""
        target = parse_day(day) or date.today()
        profile = self.users.get_profile(user_id)
        weigh_in = self.weights.record_for_day(user_id, target)
        resolved = resolve_profile(
            profile, weigh_in.weight_kg if weigh_in is not None else None
        )
        return BodyInfo(
            weight=round(resolved.weight_kg, WEIGHT_DECIMALS),
            height=resolved.height_cm,
            bmr=_display(bmr_for(resolved)),
            body_fat=weigh_in.body_fat if weigh_in is not None else None,
            bmi=compute_bmi(resolved.weight_kg, resolved.height_cm),
        )


def _require_day(day: date | str) -> date:
    target = parse_day(day)
    if target is None:
        raise InvalidInputError("A date is required")
    return target


def _display(value: float) -> int:
    return int(round(value))
