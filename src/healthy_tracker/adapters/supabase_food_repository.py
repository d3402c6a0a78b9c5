"""Supabase repository for the reference food table."""

from dataclasses import dataclass

from supabase import Client

from healthy_tracker.domain.logs import FoodReference
from healthy_tracker.services.meals import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase implementation for food lookups."""

    client: Client

    def get_foods(self, food_ids: list[int]) -> list[FoodReference]:
        """Return the foods found among the ids."""
        if not food_ids:
            return []
        response = (
            self.client.table("foods")
            .select("food_id, name, calories, carbs, protein, fat, category")
            .in_("food_id", food_ids)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> FoodReference:
    return FoodReference(
        id=int(row["food_id"]),
        name=str(row.get("name") or ""),
        calories=float(row.get("calories") or 0.0),
        carbs=float(row.get("carbs") or 0.0),
        protein=float(row.get("protein") or 0.0),
        fat=float(row.get("fat") or 0.0),
        category=row.get("category"),
    )
