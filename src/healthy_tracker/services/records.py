"""Windowed listings of weight, water and meal logs."""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Protocol

from healthy_tracker.domain.logs import (
    SURFACED_SLOTS,
    MealLog,
    WaterRecord,
    WeightRecord,
)
from healthy_tracker.domain.windows import DayGroup, MealView, PortionView, WindowMode
from healthy_tracker.services.meals import (
    MealEnergyAggregator,
    MealLogRepository,
    portion_view,
)
from healthy_tracker.services.weights import WeightLogRepository
from healthy_tracker.services.windows import parse_day, windowed_aggregate


class WaterLogRepository(Protocol):
    """Persistence interface for water logs."""

    def list_water_records(self, user_id: int) -> list[WaterRecord]:
        """Return all water records for a user."""


@dataclass
class RecordQueryService:
    """Shapes a user's logs into day groups for a requested window."""

    weights: WeightLogRepository
    water: WaterLogRepository
    meals: MealLogRepository
    aggregator: MealEnergyAggregator

    def weight_groups(  # noqa: PLR0913
        self,
        user_id: int,
        mode: str | None = None,
        start: date | str | None = None,
        end: date | str | None = None,
        now: datetime | None = None,
    ) -> Iterator[DayGroup[WeightRecord]]:
        """Return weigh-ins grouped by day.

        Explicit bounds apply in every mode. Without them, ``week`` and
        ``month`` are rolling windows ending now.
        """
        return windowed_aggregate(
            self.weights.list_weight_records(user_id),
            _day_of,
            WindowMode.parse(mode),
            time_of=_time_of,
            start=parse_day(start),
            end=parse_day(end),
            now=now,
            rolling=True,
            bounds_any_mode=True,
        )

    def water_groups(
        self,
        user_id: int,
        mode: str | None = None,
        day: date | str | None = None,
        start: date | str | None = None,
        end: date | str | None = None,
    ) -> Iterator[DayGroup[WaterRecord]]:
        """Return drinks grouped by day, ordered by time within a day."""
        return windowed_aggregate(
            self.water.list_water_records(user_id),
            _day_of,
            WindowMode.parse(mode),
            time_of=_time_of,
            reference_day=parse_day(day),
            start=parse_day(start),
            end=parse_day(end),
        )

    def meal_groups(
        self,
        user_id: int,
        mode: str | None = None,
        day: date | str | None = None,
        start: date | str | None = None,
        end: date | str | None = None,
    ) -> list[DayGroup[MealView]]:
        """Return meals with their portions grouped by day."""
        groups = list(
            windowed_aggregate(
                self.meals.list_meal_logs(user_id),
                _day_of,
                WindowMode.parse(mode),
                reference_day=parse_day(day),
                start=parse_day(start),
                end=parse_day(end),
            )
        )
        logs = [log for group in groups for log in group.records]
        if not logs:
            return []
        portions = self.meals.list_meal_portions([log.id for log in logs])
        foods = self.aggregator.resolve_foods(portions)
        views: dict[int, MealView] = {}
        for log in logs:
            views[log.id] = MealView(
                slot=log.slot.value,
                items=[
                    portion_view(portion, foods)
                    for portion in portions
                    if portion.meal_id == log.id
                ],
            )
        return [
            DayGroup(day=group.day, records=[views[log.id] for log in group.records])
            for group in groups
        ]

    def meals_for_day(
        self, user_id: int, day: date | str
    ) -> dict[str, list[PortionView]]:
        """Return the portions eaten on a day keyed by surfaced slot."""
        target = parse_day(day)
        by_slot: dict[str, list[PortionView]] = {
            slot.value: [] for slot in SURFACED_SLOTS
        }
        if target is None:
            return by_slot
        logs = self.meals.list_meal_logs(user_id, start=target, end=target)
        if not logs:
            return by_slot
        portions = self.meals.list_meal_portions([log.id for log in logs])
        foods = self.aggregator.resolve_foods(portions)
        meal_by_id: dict[int, MealLog] = {log.id: log for log in logs}
        for portion in portions:
            log = meal_by_id.get(portion.meal_id)
            if log is None or log.slot.value not in by_slot:
                continue
            by_slot[log.slot.value].append(portion_view(portion, foods))
        return by_slot


def _day_of(record: WeightRecord | WaterRecord | MealLog) -> date:
    return record.day


def _time_of(record: WeightRecord | WaterRecord) -> time | None:
    return record.time_of_day
