"""Supabase repository for weight logs."""

from dataclasses import dataclass
from datetime import date, time

from supabase import Client

from healthy_tracker.adapters.supabase_rows import (
    optional_float,
    parse_date,
    parse_datetime,
    parse_time,
)
from healthy_tracker.domain.logs import WeightRecord
from healthy_tracker.services.weights import WeightLogRepository

_COLUMNS = "log_id, user_id, date, time_of_day, weight, body_fat, created_at"


@dataclass
class SupabaseWeightRepository(WeightLogRepository):
    """Supabase implementation for weight logs."""

    client: Client

    def list_weight_records(
        self, user_id: int, day: date | None = None
    ) -> list[WeightRecord]:
        """Return weight records for a user, optionally for one day."""
        query = self.client.table("weight_logs").select(_COLUMNS).eq("user_id", user_id)
        if day is not None:
            query = query.eq("date", day.isoformat())
        response = query.order("log_id", desc=False).execute()
        return [_parse_row(row) for row in response.data or []]

    def create_weight_record(  # noqa: PLR0913
        self,
        user_id: int,
        day: date,
        weight_kg: float,
        body_fat: float | None,
        time_of_day: time | None,
    ) -> WeightRecord:
        """Insert a weight row and return it."""
        response = (
            self.client.table("weight_logs")
            .insert(
                {
                    "user_id": user_id,
                    "date": day.isoformat(),
                    "time_of_day": time_of_day.isoformat() if time_of_day else None,
                    "weight": weight_kg,
                    "body_fat": body_fat,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create weight log")
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> WeightRecord:
    return WeightRecord(
        id=int(row["log_id"]),
        user_id=int(row["user_id"]),
        day=parse_date(row.get("date")),
        weight_kg=float(row.get("weight") or 0.0),
        body_fat=optional_float(row.get("body_fat")),
        time_of_day=parse_time(row.get("time_of_day")),
        created_at=parse_datetime(row.get("created_at")),
    )
