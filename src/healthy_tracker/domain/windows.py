"""Domain models for windowed log queries."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class WindowMode(str, Enum):
    """Requested time window for a log listing."""

    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    ALL = "all"

    @classmethod
    def parse(cls, value: str | None) -> "WindowMode":
        """Return the mode for a raw value, treating unknown values as all."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.ALL


@dataclass(frozen=True)
class DayGroup(Generic[T]):
    """Records sharing one calendar date."""

    day: date
    records: list[T]


@dataclass(frozen=True)
class PortionView:
    """Display row for one eaten portion."""

    id: int
    name: str
    amount: float
    calorie: float


@dataclass(frozen=True)
class MealView:
    """Display row for a meal with its portions."""

    slot: str
    items: list[PortionView]
