"""Weight log service."""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime, time
from typing import Protocol

from healthy_tracker.domain.logs import WeightRecord
from healthy_tracker.services.metrics import body_fat_for
from healthy_tracker.services.users import UserProfileService

_logger = logging.getLogger(__name__)


class WeightLogRepository(Protocol):
    """Persistence interface for weight logs."""

    def list_weight_records(
        self, user_id: int, day: date | None = None
    ) -> list[WeightRecord]:
        """Return weight records for a user, optionally for one day."""

    def create_weight_record(  # noqa: PLR0913
        self,
        user_id: int,
        day: date,
        weight_kg: float,
        body_fat: float | None,
        time_of_day: time | None,
    ) -> WeightRecord:
        """Create a weight record and return it."""


@dataclass
class WeightLogService:
    """Service for recording weigh-ins and resolving the weight of a day."""

    users: UserProfileService
    repository: WeightLogRepository

    def log_weight(
        self,
        user_id: int,
        weight_kg: float,
        day: date | None = None,
        time_of_day: time | None = None,
    ) -> WeightRecord:
        """Persist a weigh-in along with its body-fat estimate."""
        profile = self.users.get_profile(user_id)
        body_fat = body_fat_for(profile, weight_kg)
        if body_fat is None:
            _logger.info("Skipping body fat for user %s: height unknown", user_id)
        return self.repository.create_weight_record(
            user_id=user_id,
            day=day or date.today(),
            weight_kg=weight_kg,
            body_fat=body_fat,
            time_of_day=time_of_day,
        )

    def record_for_day(self, user_id: int, day: date) -> WeightRecord | None:
        """Return the latest weigh-in on ``day``, if any."""
        return latest_record(self.repository.list_weight_records(user_id, day))


_EARLIEST = datetime.min.replace(tzinfo=UTC)


def latest_record(records: list[WeightRecord]) -> WeightRecord | None:
    """Return the most recently written record.

    Recency is the write timestamp, then the identifier.
    """
    if not records:
        return None
    return max(records, key=lambda record: (_write_time(record), record.id))


def _write_time(record: WeightRecord) -> datetime:
    if record.created_at is None:
        return _EARLIEST
    if record.created_at.tzinfo is None:
        return record.created_at.replace(tzinfo=UTC)
    return record.created_at
