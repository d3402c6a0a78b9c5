"""Request and response models for the HTTP API."""

from datetime import date, time

from pydantic import BaseModel, Field

from healthy_tracker.domain.logs import WaterRecord, WeightRecord
from healthy_tracker.domain.windows import MealView, PortionView

NO_TIME = "--"


class WeightLogRequest(BaseModel):
    """Payload for recording a weigh-in."""

    user_id: int
    weight: float = Field(gt=0)
    day: date | None = Field(default=None, alias="date")
    time_of_day: time | None = None


class DailyCalorieResponse(BaseModel):
    """Remaining calorie budget and per-slot intake."""

    remain_calorie: int
    breakfast_kcal: int
    lunch_kcal: int
    dinner_kcal: int
    snack_kcal: int
    tdee: int
    balance: int


class BodyInfoResponse(BaseModel):
    """Body metrics snapshot."""

    weight: float
    height: float
    bmr: int
    body_fat: float | None
    bmi: float


class WeightEntry(BaseModel):
    id: int
    time: str
    weight: float
    body_fat: float | None

    @classmethod
    def from_record(cls, record: WeightRecord) -> "WeightEntry":
        return cls(
            id=record.id,
            time=_format_time(record.time_of_day),
            weight=record.weight_kg,
            body_fat=record.body_fat,
        )


class WeightDay(BaseModel):
    date: str
    records: list[WeightEntry]


class WaterEntry(BaseModel):
    id: int
    time: str | None
    drink: str
    amount: float

    @classmethod
    def from_record(cls, record: WaterRecord) -> "WaterEntry":
        return cls(
            id=record.id,
            time=record.time_of_day.isoformat() if record.time_of_day else None,
            drink=record.drink,
            amount=record.amount_ml,
        )


class WaterDay(BaseModel):
    date: str
    records: list[WaterEntry]


class WaterToday(BaseModel):
    """Drinks logged on one day."""

    date: str
    records: list[WaterEntry]


class WaterHistory(BaseModel):
    """Drinks grouped by day, newest first."""

    data: list[WaterDay]


class PortionEntry(BaseModel):
    id: int
    name: str
    amount: float
    calorie: float

    @classmethod
    def from_view(cls, view: PortionView) -> "PortionEntry":
        return cls(id=view.id, name=view.name, amount=view.amount, calorie=view.calorie)


class MealEntry(BaseModel):
    type: str
    items: list[PortionEntry]

    @classmethod
    def from_view(cls, view: MealView) -> "MealEntry":
        return cls(
            type=view.slot, items=[PortionEntry.from_view(item) for item in view.items]
        )


class MealDay(BaseModel):
    date: str
    meals: list[MealEntry]


class TodayMeals(BaseModel):
    """Portions eaten on one day keyed by meal slot."""

    breakfast: list[PortionEntry]
    lunch: list[PortionEntry]
    dinner: list[PortionEntry]
    snack: list[PortionEntry]


class MealToday(BaseModel):
    records: TodayMeals


def _format_time(value: time | None) -> str:
    if value is None:
        return NO_TIME
    return value.strftime("%H:%M")
