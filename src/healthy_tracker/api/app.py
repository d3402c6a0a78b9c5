"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from healthy_tracker.api.models import (
    BodyInfoResponse,
    DailyCalorieResponse,
    MealDay,
    MealEntry,
    MealToday,
    PortionEntry,
    TodayMeals,
    WaterDay,
    WaterEntry,
    WaterHistory,
    WaterToday,
    WeightDay,
    WeightEntry,
    WeightLogRequest,
)
from healthy_tracker.app_logging import configure_logging
from healthy_tracker.config import parse_allowed_origins
from healthy_tracker.containers import AppContainer
from healthy_tracker.domain.windows import WindowMode
from healthy_tracker.errors import InvalidInputError, NotFoundError
from healthy_tracker.services.windows import parse_day


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.info("Not found on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(InvalidInputError)
    async def invalid_input(request: Request, exc: InvalidInputError) -> JSONResponse:
        logger.info("Invalid input on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/weight-log/body-info")
    async def body_info(user_id: int, request: Request) -> BodyInfoResponse:
        """Return today's body metrics for a user."""
        state_container: AppContainer = request.app.state.container
        info = state_container.energy_service.body_info(user_id)
        return BodyInfoResponse(
            weight=info.weight,
            height=info.height,
            bmr=info.bmr,
            body_fat=info.body_fat,
            bmi=info.bmi,
        )

    @app.get("/api/weight-log/daily-calorie")
    async def daily_calorie(
        user_id: int, date: str, request: Request
    ) -> DailyCalorieResponse:
        """Return the remaining calorie budget for a day."""
        state_container: AppContainer = request.app.state.container
        summary = state_container.energy_service.daily_energy_summary(user_id, date)
        return DailyCalorieResponse(
            remain_calorie=summary.remain_calorie,
            breakfast_kcal=summary.breakfast_kcal,
            lunch_kcal=summary.lunch_kcal,
            dinner_kcal=summary.dinner_kcal,
            snack_kcal=summary.snack_kcal,
            tdee=summary.tdee,
            balance=summary.balance,
        )

    @app.post("/api/weight-log/add")
    async def add_weight(payload: WeightLogRequest, request: Request) -> WeightEntry:
        """Record a weigh-in and its body-fat estimate."""
        state_container: AppContainer = request.app.state.container
        record = state_container.weight_log_service.log_weight(
            payload.user_id,
            payload.weight,
            day=payload.day,
            time_of_day=payload.time_of_day,
        )
        return WeightEntry.from_record(record)

    @app.get("/api/weight-log/records")
    async def weight_records(
        user_id: int,
        request: Request,
        mode: str = "all",
        start: str | None = None,
        end: str | None = None,
    ) -> list[WeightDay]:
        """Return weigh-ins grouped by day, newest first."""
        state_container: AppContainer = request.app.state.container
        groups = state_container.record_service.weight_groups(
            user_id, mode=mode, start=start, end=end
        )
        return [
            WeightDay(
                date=group.day.isoformat(),
                records=[WeightEntry.from_record(record) for record in group.records],
            )
            for group in groups
        ]

    @app.get("/api/water-log/records")
    async def water_records(  # noqa: PLR0913
        user_id: int,
        request: Request,
        mode: str = "all",
        date: str | None = None,
        start: str | None = None,
        end: str | None = None,
    ) -> WaterToday | WaterHistory:
        """Return drinks for one day or grouped by day."""
        state_container: AppContainer = request.app.state.container
        service = state_container.record_service
        reference_day = parse_day(date)
        if WindowMode.parse(mode) is WindowMode.TODAY and reference_day is not None:
            records = [
                WaterEntry.from_record(record)
                for group in service.water_groups(
                    user_id, mode=mode, day=reference_day
                )
                for record in group.records
            ]
            return WaterToday(date=reference_day.isoformat(), records=records)
        groups = service.water_groups(user_id, mode=mode, start=start, end=end)
        return WaterHistory(
            data=[
                WaterDay(
                    date=group.day.isoformat(),
                    records=[
                        WaterEntry.from_record(record) for record in group.records
                    ],
                )
                for group in groups
            ]
        )

    @app.get("/api/meal-log/records")
    async def meal_records(  # noqa: PLR0913
        user_id: int,
        request: Request,
        mode: str = "all",
        date: str | None = None,
        start: str | None = None,
        end: str | None = None,
    ) -> MealToday | list[MealDay]:
        """Return a day's meals by slot, or meals grouped by day."""
        state_container: AppContainer = request.app.state.container
        service = state_container.record_service
        reference_day = parse_day(date)
        if WindowMode.parse(mode) is WindowMode.TODAY and reference_day is not None:
            by_slot = service.meals_for_day(user_id, reference_day)
            records = TodayMeals(
                **{
                    slot: [PortionEntry.from_view(view) for view in views]
                    for slot, views in by_slot.items()
                }
            )
            return MealToday(records=records)
        groups = service.meal_groups(user_id, mode=mode, start=start, end=end)
        return [
            MealDay(
                date=group.day.isoformat(),
                meals=[MealEntry.from_view(view) for view in group.records],
            )
            for group in groups
        ]

    return app
