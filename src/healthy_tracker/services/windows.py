"""Time-window filtering and day grouping for log collections."""

import calendar
from collections.abc import Callable, Iterable, Iterator
from datetime import date, datetime, time, timedelta
from itertools import groupby
from typing import TypeVar

from healthy_tracker.domain.windows import DayGroup, WindowMode
from healthy_tracker.errors import InvalidInputError

T = TypeVar("T")

JANUARY = 1
DECEMBER = 12
ROLLING_WEEK_DAYS = 7

_BOUNDED_MODES = (WindowMode.WEEK, WindowMode.MONTH)


def parse_day(value: date | str | None) -> date | None:
    """Parse a calendar date from an ISO date or datetime string."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    cleaned = value.strip()
    if not cleaned:
        return None
    try:
        return date.fromisoformat(cleaned)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(cleaned).date()
    except ValueError as exc:
        raise InvalidInputError(f"Invalid date format: {value!r}") from exc


def rolling_cutoff(mode: WindowMode, now: datetime) -> datetime | None:
    """Return the lower bound of a rolling week or month ending at ``now``."""
    if mode is WindowMode.WEEK:
        return now - timedelta(days=ROLLING_WEEK_DAYS)
    if mode is WindowMode.MONTH:
        return _one_month_before(now)
    return None


def filter_window(  # noqa: PLR0913
    records: Iterable[T],
    day_of: Callable[[T], date],
    mode: WindowMode,
    *,
    reference_day: date | None = None,
    start: date | None = None,
    end: date | None = None,
    now: datetime | None = None,
    rolling: bool = False,
    bounds_any_mode: bool = False,
) -> Iterator[T]:
    """Yield the records that fall inside the requested window.

    ``today`` with a reference day matches that date exactly. Otherwise
    explicit ``start``/``end`` bounds (both required) filter inclusively for
    ``week``/``month``, or for every mode when ``bounds_any_mode`` is set. When
    ``rolling`` is set, ``week``/``month`` without bounds keep records from
    the last 7 days or calendar month before ``now``, with no upper bound.
    Anything else is unfiltered.
    """
    if mode is WindowMode.TODAY and reference_day is not None:
        return (record for record in records if day_of(record) == reference_day)
    bounded_mode = bounds_any_mode or mode in _BOUNDED_MODES
    if bounded_mode and start is not None and end is not None:
        return (record for record in records if start <= day_of(record) <= end)
    if rolling:
        moment = now or datetime.now()
        cutoff = rolling_cutoff(mode, moment)
        if cutoff is not None:
            return (
                record
                for record in records
                if datetime.combine(day_of(record), time.min, tzinfo=cutoff.tzinfo)
                >= cutoff
            )
    return iter(records)


def group_by_day(
    records: Iterable[T],
    day_of: Callable[[T], date],
    time_of: Callable[[T], time | None] | None = None,
) -> Iterator[DayGroup[T]]:
    """Yield day groups, newest day first.

    Within a day records are ordered by time of day with missing times first;
    records without a time keep their input order.
    """
    ordered = list(records)
    if time_of is not None:
        ordered.sort(key=lambda record: time_of(record) or time.min)
    ordered.sort(key=day_of, reverse=True)
    for day, members in groupby(ordered, key=day_of):
        yield DayGroup(day=day, records=list(members))


def windowed_aggregate(  # noqa: PLR0913
    records: Iterable[T],
    day_of: Callable[[T], date],
    mode: WindowMode,
    *,
    time_of: Callable[[T], time | None] | None = None,
    reference_day: date | None = None,
    start: date | None = None,
    end: date | None = None,
    now: datetime | None = None,
    rolling: bool = False,
    bounds_any_mode: bool = False,
) -> Iterator[DayGroup[T]]:
    """Filter records to a window and group them by day."""
    selected = filter_window(
        records,
        day_of,
        mode,
        reference_day=reference_day,
        start=start,
        end=end,
        now=now,
        rolling=rolling,
        bounds_any_mode=bounds_any_mode,
    )
    return group_by_day(selected, day_of, time_of)


def _one_month_before(moment: datetime) -> datetime:
    if moment.month == JANUARY:
        year, month = moment.year - 1, DECEMBER
    else:
        year, month = moment.year, moment.month - 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)
