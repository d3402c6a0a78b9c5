"""Supabase repository for water logs."""

from dataclasses import dataclass

from supabase import Client

from healthy_tracker.adapters.supabase_rows import parse_date, parse_time
from healthy_tracker.domain.logs import WaterRecord
from healthy_tracker.services.records import WaterLogRepository


@dataclass
class SupabaseWaterRepository(WaterLogRepository):
    """Supabase implementation for water logs."""

    client: Client

    def list_water_records(self, user_id: int) -> list[WaterRecord]:
        """Return all water rows for a user."""
        response = (
            self.client.table("water_logs")
            .select("water_id, user_id, date, time, water_type, amount")
            .eq("user_id", user_id)
            .order("water_id", desc=False)
            .execute()
        )
        return [
            WaterRecord(
                id=int(row["water_id"]),
                user_id=int(row["user_id"]),
                day=parse_date(row.get("date")),
                time_of_day=parse_time(row.get("time")),
                drink=str(row.get("water_type") or ""),
                amount_ml=float(row.get("amount") or 0.0),
            )
            for row in response.data or []
        ]
