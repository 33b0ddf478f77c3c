"""Shared helpers for the league calendar routes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from fastapi import Query

from ...services.age_eligibility import ages_from_birthdates
from ...services.calendar_projection import closing_soon
from ...services.deadlines import deadline_label, urgency
from ...services.season_filters import apply_preferences
from ...services.season_types import Season
from .schemas import DeadlineEntry, SeasonResponse


@dataclass
class ViewerPreferences:
    """Client-local preferences sent with each request.

    The browser owns these (hidden seasons, children's ages or birthdates);
    the API only applies them.
    """

    sport: str | None = None
    ages: list[int] = field(default_factory=list)
    birthdates: list[str] = field(default_factory=list)
    hidden: list[int] = field(default_factory=list)

    def child_ages(self, today: date) -> list[int]:
        return [*self.ages, *ages_from_birthdates(self.birthdates, today)]

    def apply(self, seasons: list[Season], today: date, *, include_hidden: bool = False) -> list[Season]:
        return apply_preferences(
            seasons,
            hidden_ids=() if include_hidden else self.hidden,
            child_ages=self.child_ages(today),
            sport=self.sport,
        )


def viewer_preferences(
    sport: str | None = Query(None),
    ages: list[int] = Query([]),
    birthdates: list[str] = Query([]),
    hidden: list[int] = Query([]),
) -> ViewerPreferences:
    return ViewerPreferences(sport=sport, ages=ages, birthdates=birthdates, hidden=hidden)


def upcoming_entry(season: Season, today: date, window_days: int) -> DeadlineEntry:
    status = closing_soon(season.signup_end, today, window_days)
    days = status.days_remaining
    return DeadlineEntry(
        season=SeasonResponse.from_season(season),
        signup_end=season.signup_end,
        days_remaining=days,
        urgency=urgency(days, window_days) if days is not None else None,
        label=deadline_label(days) if days is not None else None,
    )


def closed_entry(season: Season) -> DeadlineEntry:
    return DeadlineEntry(season=SeasonResponse.from_season(season), signup_end=season.signup_end)
