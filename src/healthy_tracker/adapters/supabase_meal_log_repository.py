"""Supabase repository for meal logs and their portions."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from healthy_tracker.adapters.supabase_rows import parse_date
from healthy_tracker.domain.logs import MealLog, MealPortion, MealSlot
from healthy_tracker.services.meals import MealLogRepository


@dataclass
class SupabaseMealLogRepository(MealLogRepository):
    """Supabase implementation for meal logs."""

    client: Client

    def list_meal_logs(
        self, user_id: int, start: date | None = None, end: date | None = None
    ) -> list[MealLog]:
        """Return meal logs for a user within an optional inclusive range."""
        query = (
            self.client.table("meal_logs")
            .select("meal_id, user_id, date, meal_type")
            .eq("user_id", user_id)
        )
        if start is not None:
            query = query.gte("date", start.isoformat())
        if end is not None:
            query = query.lte("date", end.isoformat())
        response = query.order("meal_id", desc=False).execute()
        return [
            MealLog(
                id=int(row["meal_id"]),
                user_id=int(row["user_id"]),
                day=parse_date(row.get("date")),
                slot=MealSlot.from_label(row.get("meal_type")),
            )
            for row in response.data or []
        ]

    def list_meal_portions(self, meal_ids: list[int]) -> list[MealPortion]:
        """Return portions for the given meal logs."""
        if not meal_ids:
            return []
        response = (
            self.client.table("meal_foods")
            .select("meal_food_id, meal_id, food_id, amount")
            .in_("meal_id", meal_ids)
            .order("meal_food_id", desc=False)
            .execute()
        )
        return [
            MealPortion(
                id=int(row["meal_food_id"]),
                meal_id=int(row["meal_id"]),
                food_id=int(row["food_id"]),
                grams=float(row.get("amount") or 0.0),
            )
            for row in response.data or []
        ]
