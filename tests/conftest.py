"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime, time

import pytest

from healthy_tracker.config import Settings
from healthy_tracker.containers import AppContainer
from healthy_tracker.domain.logs import (
    ExerciseRecord,
    FoodReference,
    MealLog,
    MealPortion,
    MealSlot,
    WaterRecord,
    WeightRecord,
)
from healthy_tracker.domain.models import UserProfile
from healthy_tracker.services.energy import EnergyBalanceService, ExerciseLogRepository
from healthy_tracker.services.meals import (
    FoodRepository,
    MealEnergyAggregator,
    MealLogRepository,
)
from healthy_tracker.services.records import RecordQueryService, WaterLogRepository
from healthy_tracker.services.users import UserProfileRepository, UserProfileService
from healthy_tracker.services.weights import WeightLogRepository, WeightLogService


@dataclass
class InMemoryUserRepository(UserProfileRepository):
    """In-memory user profile repository for tests."""

    profiles: dict[int, UserProfile] = field(default_factory=dict)

    def add(self, profile: UserProfile) -> UserProfile:
        self.profiles[profile.id] = profile
        return profile

    def get_profile(self, user_id: int) -> UserProfile | None:
        return self.profiles.get(user_id)


@dataclass
class InMemoryWeightRepository(WeightLogRepository):
    """In-memory weight log repository for tests."""

    records: list[WeightRecord] = field(default_factory=list)
    calls: int = 0

    def list_weight_records(
        self, user_id: int, day: date | None = None
    ) -> list[WeightRecord]:
        self.calls += 1
        return [
            record
            for record in self.records
            if record.user_id == user_id and (day is None or record.day == day)
        ]

    def create_weight_record(  # noqa: PLR0913
        self,
        user_id: int,
        day: date,
        weight_kg: float,
        body_fat: float | None,
        time_of_day: time | None,
    ) -> WeightRecord:
        record = WeightRecord(
            id=len(self.records) + 1,
            user_id=user_id,
            day=day,
            weight_kg=weight_kg,
            body_fat=body_fat,
            time_of_day=time_of_day,
            created_at=datetime.now(tz=UTC),
        )
        self.records.append(record)
        return record


@dataclass
class InMemoryExerciseRepository(ExerciseLogRepository):
    """In-memory exercise log repository for tests."""

    records: list[ExerciseRecord] = field(default_factory=list)

    def list_exercise_records(self, user_id: int, day: date) -> list[ExerciseRecord]:
        return [
            record
            for record in self.records
            if record.user_id == user_id and record.day == day
        ]


@dataclass
class InMemoryMealLogRepository(MealLogRepository):
    """In-memory meal log repository for tests."""

    logs: list[MealLog] = field(default_factory=list)
    portions: list[MealPortion] = field(default_factory=list)
    portion_lookups: int = 0

    def add_meal(
        self,
        user_id: int,
        day: date,
        slot: MealSlot,
        items: list[tuple[int, float]],
    ) -> MealLog:
        log = MealLog(id=len(self.logs) + 1, user_id=user_id, day=day, slot=slot)
        self.logs.append(log)
        for food_id, grams in items:
            self.portions.append(
                MealPortion(
                    id=len(self.portions) + 1,
                    meal_id=log.id,
                    food_id=food_id,
                    grams=grams,
                )
            )
        return log

    def list_meal_logs(
        self, user_id: int, start: date | None = None, end: date | None = None
    ) -> list[MealLog]:
        return [
            log
            for log in self.logs
            if log.user_id == user_id
            and (start is None or log.day >= start)
            and (end is None or log.day <= end)
        ]

    def list_meal_portions(self, meal_ids: list[int]) -> list[MealPortion]:
        self.portion_lookups += 1
        return [portion for portion in self.portions if portion.meal_id in meal_ids]


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory reference food table for tests."""

    foods: dict[int, FoodReference] = field(default_factory=dict)
    lookups: int = 0

    def get_foods(self, food_ids: list[int]) -> list[FoodReference]:
        self.lookups += 1
        return [self.foods[food_id] for food_id in food_ids if food_id in self.foods]


@dataclass
class InMemoryWaterRepository(WaterLogRepository):
    """In-memory water log repository for tests."""

    records: list[WaterRecord] = field(default_factory=list)

    def list_water_records(self, user_id: int) -> list[WaterRecord]:
        return [record for record in self.records if record.user_id == user_id]


RICE = FoodReference(id=1, name="Rice", calories=130, carbs=28, protein=2.7, fat=0.3)
CHICKEN = FoodReference(id=2, name="Chicken breast", calories=165, protein=31, fat=3.6)
APPLE = FoodReference(id=3, name="Apple", calories=52, carbs=14, protein=0.3, fat=0.2)


@dataclass
class Repositories:
    """Bundle of in-memory repositories backing the services under test."""

    users: InMemoryUserRepository = field(default_factory=InMemoryUserRepository)
    weights: InMemoryWeightRepository = field(default_factory=InMemoryWeightRepository)
    exercises: InMemoryExerciseRepository = field(
        default_factory=InMemoryExerciseRepository
    )
    meals: InMemoryMealLogRepository = field(default_factory=InMemoryMealLogRepository)
    foods: InMemoryFoodRepository = field(
        default_factory=lambda: InMemoryFoodRepository(
            foods={food.id: food for food in (RICE, CHICKEN, APPLE)}
        )
    )
    water: InMemoryWaterRepository = field(default_factory=InMemoryWaterRepository)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def repositories() -> Repositories:
    return Repositories()


@pytest.fixture
def user_service(repositories: Repositories) -> UserProfileService:
    return UserProfileService(repositories.users)


@pytest.fixture
def weight_log_service(
    repositories: Repositories, user_service: UserProfileService
) -> WeightLogService:
    return WeightLogService(users=user_service, repository=repositories.weights)


@pytest.fixture
def aggregator(repositories: Repositories) -> MealEnergyAggregator:
    return MealEnergyAggregator(repositories.foods)


@pytest.fixture
def energy_service(
    repositories: Repositories,
    user_service: UserProfileService,
    weight_log_service: WeightLogService,
    aggregator: MealEnergyAggregator,
) -> EnergyBalanceService:
    return EnergyBalanceService(
        users=user_service,
        weights=weight_log_service,
        exercises=repositories.exercises,
        meals=repositories.meals,
        aggregator=aggregator,
    )


@pytest.fixture
def record_service(
    repositories: Repositories, aggregator: MealEnergyAggregator
) -> RecordQueryService:
    return RecordQueryService(
        weights=repositories.weights,
        water=repositories.water,
        meals=repositories.meals,
        aggregator=aggregator,
    )


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    user_service: UserProfileService,
    weight_log_service: WeightLogService,
    energy_service: EnergyBalanceService,
    record_service: RecordQueryService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        user_service=user_service,
        weight_log_service=weight_log_service,
        energy_service=energy_service,
        record_service=record_service,
    )
