"""Supabase-backed user profile repository."""

from dataclasses import dataclass

from supabase import Client

from healthy_tracker.adapters.supabase_rows import optional_float
from healthy_tracker.domain.models import UserProfile
from healthy_tracker.services.users import UserProfileRepository


@dataclass
class SupabaseUserRepository(UserProfileRepository):
    """Supabase implementation for user profile reads."""

    client: Client

    def get_profile(self, user_id: int) -> UserProfile | None:
        """Return the profile for a user id, if present."""
        response = (
            self.client.table("users")
            .select("user_id, age, gender, height, initial_weight, target_weight")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        age = row.get("age")
        return UserProfile(
            id=int(row["user_id"]),
            age=int(age) if age is not None else None,
            gender=row.get("gender"),
            height_cm=optional_float(row.get("height")),
            initial_weight_kg=optional_float(row.get("initial_weight")),
            target_weight_kg=optional_float(row.get("target_weight")),
        )
