"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from healthy_tracker.adapters.supabase_exercise_repository import (
    SupabaseExerciseRepository,
)
from healthy_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from healthy_tracker.adapters.supabase_meal_log_repository import (
    SupabaseMealLogRepository,
)
from healthy_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from healthy_tracker.adapters.supabase_water_repository import (
    SupabaseWaterRepository,
)
from healthy_tracker.adapters.supabase_weight_repository import (
    SupabaseWeightRepository,
)
from healthy_tracker.config import Settings
from healthy_tracker.services.energy import EnergyBalanceService
from healthy_tracker.services.meals import MealEnergyAggregator
from healthy_tracker.services.records import RecordQueryService
from healthy_tracker.services.users import UserProfileService
from healthy_tracker.services.weights import WeightLogService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserProfileService
    weight_log_service: WeightLogService
    energy_service: EnergyBalanceService
    record_service: RecordQueryService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    weight_repository = SupabaseWeightRepository(supabase_client)
    meal_log_repository = SupabaseMealLogRepository(supabase_client)
    user_service = UserProfileService(SupabaseUserRepository(supabase_client))
    weight_log_service = WeightLogService(
        users=user_service,
        repository=weight_repository,
    )
    aggregator = MealEnergyAggregator(SupabaseFoodRepository(supabase_client))
    energy_service = EnergyBalanceService(
        users=user_service,
        weights=weight_log_service,
        exercises=SupabaseExerciseRepository(supabase_client),
        meals=meal_log_repository,
        aggregator=aggregator,
    )
    record_service = RecordQueryService(
        weights=weight_repository,
        water=SupabaseWaterRepository(supabase_client),
        meals=meal_log_repository,
        aggregator=aggregator,
    )
    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        weight_log_service=weight_log_service,
        energy_service=energy_service,
        record_service=record_service,
    )
