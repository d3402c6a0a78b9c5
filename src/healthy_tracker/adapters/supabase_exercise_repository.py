"""Supabase repository for exercise logs."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from healthy_tracker.adapters.supabase_rows import optional_float, parse_date
from healthy_tracker.domain.logs import ExerciseRecord
from healthy_tracker.services.energy import ExerciseLogRepository


@dataclass
class SupabaseExerciseRepository(ExerciseLogRepository):
    """Supabase implementation for exercise logs."""

    client: Client

    def list_exercise_records(self, user_id: int, day: date) -> list[ExerciseRecord]:
        """Return exercise rows for a user on one day."""
        response = (
            self.client.table("exercise_logs")
            .select("exercise_id, user_id, date, total_calories")
            .eq("user_id", user_id)
            .eq("date", day.isoformat())
            .execute()
        )
        return [
            ExerciseRecord(
                id=int(row["exercise_id"]),
                user_id=int(row["user_id"]),
                day=parse_date(row.get("date")),
                total_calories=optional_float(row.get("total_calories")),
            )
            for row in response.data or []
        ]
