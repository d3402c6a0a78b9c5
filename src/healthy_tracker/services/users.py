"""User profile lookups."""

from dataclasses import dataclass
from typing import Protocol

from healthy_tracker.domain.models import UserProfile
from healthy_tracker.errors import NotFoundError


class UserProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: int) -> UserProfile | None:
        """Return the profile for a user id, if present."""


@dataclass
class UserProfileService:
    """Application service for reading user profiles."""

    repository: UserProfileRepository

    def get_profile(self, user_id: int) -> UserProfile:
        """Return the user's profile or raise NotFoundError."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            raise NotFoundError("User", user_id)
        return profile
