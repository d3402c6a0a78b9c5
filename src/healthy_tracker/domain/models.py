"""Domain models for user profiles."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserProfile:
    """Body profile of a user as stored in the database."""

    id: int
    age: int | None
    gender: str | None
    height_cm: float | None
    initial_weight_kg: float | None
    target_weight_kg: float | None = None


@dataclass(frozen=True)
class ResolvedProfile:
    """User profile with formula defaults applied."""

    user_id: int
    age: int
    gender: str | None
    height_cm: float
    weight_kg: float
