"""Registration deadline views built on the closing-soon countdown."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable, NamedTuple

from .calendar_projection import DEFAULT_CLOSING_SOON_DAYS, closing_soon
from .season_types import Season

URGENT_DAYS = 2


class RankedDeadline(NamedTuple):
    season: Season
    days_remaining: int


@dataclass
class DeadlineLists:
    upcoming: list[Season] = field(default_factory=list)
    recently_closed: list[Season] = field(default_factory=list)


def closing_soon_seasons(
    seasons: Iterable[Season],
    today: date,
    window_days: int = DEFAULT_CLOSING_SOON_DAYS,
) -> list[RankedDeadline]:
    """Seasons whose registration closes within the window, soonest first."""
    ranked: list[RankedDeadline] = []
    for season in seasons:
        status = closing_soon(season.signup_end, today, window_days)
        if status.is_closing_soon and status.days_remaining is not None:
            ranked.append(RankedDeadline(season, status.days_remaining))
    ranked.sort(key=lambda item: item.days_remaining)
    return ranked


def partition_deadlines(
    seasons: Iterable[Season],
    today: date,
    recently_closed_days: int | None = None,
) -> DeadlineLists:
    """Split seasons with a signup deadline into upcoming and recently closed.

    Upcoming deadlines (closing today or later) are ascending; closed ones are
    most recent first. With ``recently_closed_days`` set, deadlines that closed
    longer ago than that are dropped.
    """
    cutoff = today - timedelta(days=recently_closed_days) if recently_closed_days is not None else None
    lists = DeadlineLists()
    for season in seasons:
        deadline = season.signup_end
        if deadline is None:
            continue
        if deadline >= today:
            lists.upcoming.append(season)
        elif cutoff is None or deadline >= cutoff:
            lists.recently_closed.append(season)

    lists.upcoming.sort(key=lambda season: season.signup_end)
    lists.recently_closed.sort(key=lambda season: season.signup_end, reverse=True)
    return lists


def urgency(days_remaining: int, window_days: int = DEFAULT_CLOSING_SOON_DAYS) -> str:
    """"soon" ends where the closing-soon window ends."""
    if days_remaining <= URGENT_DAYS:
        return "urgent"
    if days_remaining <= window_days:
        return "soon"
    return "normal"


def deadline_label(days_remaining: int) -> str:
    if days_remaining == 0:
        return "Closes today!"
    if days_remaining == 1:
        return "Closes tomorrow!"
    return f"{days_remaining} days left"
