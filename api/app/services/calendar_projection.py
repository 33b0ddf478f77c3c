"""Project seasons onto a displayed calendar month.

Pure functions: given seasons and a (year, month), compute the per-day
aggregates the calendar grid renders (milestone counters plus the seasons
whose signup or season window spans the day) and the ordered event list for
a selected day.

Ranges are fail-closed: a range missing either bound, or with an unparseable
bound, contributes no milestones and no active days.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable, NamedTuple

from ..utils.datetime_utils import is_valid_month, month_bounds
from .season_types import ACTIVE, SIGNUP, Season

DEFAULT_CLOSING_SOON_DAYS = 7


@dataclass
class DayInfo:
    """Aggregates for one calendar day."""

    reg_opens: int = 0
    reg_closes: int = 0
    season_starts: int = 0
    season_ends: int = 0
    active_dots: list[Season] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (
            self.reg_opens
            or self.reg_closes
            or self.season_starts
            or self.season_ends
            or self.active_dots
        )

    def add_active(self, season: Season) -> None:
        if all(existing.id != season.id for existing in self.active_dots):
            self.active_dots.append(season)


@dataclass(frozen=True)
class DayEvent:
    """One season as seen from a selected day."""

    season: Season
    types: frozenset[str]
    reg_opens: bool = False
    reg_closes: bool = False
    season_starts: bool = False
    season_ends: bool = False

    @property
    def has_milestone(self) -> bool:
        return self.reg_opens or self.reg_closes or self.season_starts or self.season_ends


class ClosingSoon(NamedTuple):
    is_closing_soon: bool
    days_remaining: int | None


def compute_day_info(seasons: Iterable[Season], year: int, month: int) -> dict[int, DayInfo]:
    """Map day-of-month to DayInfo for every day with at least one event.

    Days without events are omitted; callers treat a missing day as empty.
    An out-of-range year or month yields an empty map.
    """
    if not is_valid_month(year, month):
        return {}

    month_start, month_end = month_bounds(year, month)
    days: dict[int, DayInfo] = {}

    def day_entry(day: int) -> DayInfo:
        entry = days.get(day)
        if entry is None:
            entry = days[day] = DayInfo()
        return entry

    for season in seasons:
        for range_type, start, end in season.ranges():
            if start > month_end or end < month_start:
                continue

            if month_start <= start:
                entry = day_entry(start.day)
                if range_type == SIGNUP:
                    entry.reg_opens += 1
                else:
                    entry.season_starts += 1
            if end <= month_end:
                entry = day_entry(end.day)
                if range_type == SIGNUP:
                    entry.reg_closes += 1
                else:
                    entry.season_ends += 1

            first_day = max(start, month_start).day
            last_day = min(end, month_end).day
            for day in range(first_day, last_day + 1):
                day_entry(day).add_active(season)

    return days


def events_for_day(
    day_info: DayInfo | None, year: int, month: int, day: int
) -> list[DayEvent]:
    """Ordered events for one day: milestones first, registration closings first of all."""
    if day_info is None:
        return []
    try:
        current = date(year, month, day)
    except ValueError:
        return []

    events: list[DayEvent] = []
    for season in day_info.active_dots:
        types = set()
        if _contains(season.signup_range, current):
            types.add(SIGNUP)
        if _contains(season.season_range, current):
            types.add(ACTIVE)
        events.append(
            DayEvent(
                season=season,
                types=frozenset(types),
                reg_opens=season.signup_start == current,
                reg_closes=season.signup_end == current,
                season_starts=season.season_start == current,
                season_ends=season.season_end == current,
            )
        )

    # sorted() is stable, so input order breaks ties
    return sorted(events, key=lambda event: (not event.has_milestone, not event.reg_closes))


def closing_soon(
    signup_end: date | None,
    today: date,
    window_days: int = DEFAULT_CLOSING_SOON_DAYS,
) -> ClosingSoon:
    """Countdown to a registration deadline.

    ``days_remaining`` is None when there is no deadline or it has passed.
    """
    if signup_end is None:
        return ClosingSoon(False, None)
    days_remaining = math.ceil((signup_end - today) / timedelta(days=1))
    if days_remaining < 0:
        return ClosingSoon(False, None)
    return ClosingSoon(days_remaining <= window_days, days_remaining)


def _contains(bounds: tuple[date, date] | None, current: date) -> bool:
    return bounds is not None and bounds[0] <= current <= bounds[1]
