"""Pydantic schemas for the league calendar endpoints."""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ...services.season_types import Season


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class LeagueResponse(_ApiModel):
    id: int
    name: str
    organization: str | None = None
    sport: str
    website: str
    source: str
    active: bool

    @classmethod
    def from_league(cls, league: Any) -> "LeagueResponse":
        return cls(
            id=league.id,
            name=league.name,
            organization=league.organization,
            sport=league.sport,
            website=league.website,
            source=league.source,
            active=league.active,
        )


class SeasonResponse(_ApiModel):
    """Season with its league's display fields, as served to the calendar."""

    id: int
    league_id: int | None = Field(None, alias="leagueId")
    name: str
    sport: str
    signup_start: date | None = Field(None, alias="signupStart")
    signup_end: date | None = Field(None, alias="signupEnd")
    season_start: date | None = Field(None, alias="seasonStart")
    season_end: date | None = Field(None, alias="seasonEnd")
    age_group: str | None = Field(None, alias="ageGroup")
    details_url: str | None = Field(None, alias="detailsUrl")
    registration_url: str | None = Field(None, alias="registrationUrl")
    league_name: str | None = Field(None, alias="leagueName")
    organization: str | None = None
    league_website: str | None = Field(None, alias="leagueWebsite")

    @classmethod
    def from_season(cls, season: Season) -> "SeasonResponse":
        return cls(
            id=season.id,
            league_id=season.league_id,
            name=season.name,
            sport=season.sport,
            signup_start=season.signup_start,
            signup_end=season.signup_end,
            season_start=season.season_start,
            season_end=season.season_end,
            age_group=season.age_group,
            details_url=season.details_url,
            registration_url=season.registration_url,
            league_name=season.league_name,
            organization=season.organization,
            league_website=season.league_website,
        )


class DayInfoResponse(_ApiModel):
    day: int
    day_date: date = Field(alias="date")
    reg_opens: int = Field(0, alias="regOpens")
    reg_closes: int = Field(0, alias="regCloses")
    season_starts: int = Field(0, alias="seasonStarts")
    season_ends: int = Field(0, alias="seasonEnds")
    active_season_ids: list[int] = Field(default_factory=list, alias="activeSeasonIds")


class BarResponse(_ApiModel):
    season_id: int = Field(alias="seasonId")
    type: str
    start_day: int = Field(alias="startDay")
    end_day: int = Field(alias="endDay")
    lane: int


class CalendarMonthResponse(_ApiModel):
    year: int
    month: int
    days_in_month: int = Field(alias="daysInMonth")
    # 0 = Sunday, matching the grid's first column
    first_weekday: int = Field(alias="firstWeekday")
    days: list[DayInfoResponse]
    seasons: list[SeasonResponse]
    bars: list[BarResponse]


class DayEventResponse(_ApiModel):
    season: SeasonResponse
    types: list[str]
    reg_opens: bool = Field(alias="regOpens")
    reg_closes: bool = Field(alias="regCloses")
    season_starts: bool = Field(alias="seasonStarts")
    season_ends: bool = Field(alias="seasonEnds")
    has_milestone: bool = Field(alias="hasMilestone")


class DayDetailResponse(_ApiModel):
    day_date: date = Field(alias="date")
    events: list[DayEventResponse]


class DeadlineEntry(_ApiModel):
    season: SeasonResponse
    signup_end: date = Field(alias="signupEnd")
    days_remaining: int | None = Field(None, alias="daysRemaining")
    urgency: str | None = None
    label: str | None = None


class DeadlinesResponse(_ApiModel):
    today: date
    upcoming: list[DeadlineEntry]
    recently_closed: list[DeadlineEntry] = Field(alias="recentlyClosed")


class ClosingSoonResponse(_ApiModel):
    today: date
    seasons: list[DeadlineEntry]


class DirectoryLeague(_ApiModel):
    league_id: int = Field(alias="leagueId")
    league_name: str = Field(alias="leagueName")
    organization: str | None = None
    website: str
    visible: list[SeasonResponse]
    hidden: list[SeasonResponse]


class LeagueDetailResponse(_ApiModel):
    league: LeagueResponse
    seasons: list[SeasonResponse]


class DirectorySport(_ApiModel):
    sport: str
    leagues: list[DirectoryLeague]


class DirectoryResponse(_ApiModel):
    sports: list[DirectorySport]
    hidden_count: int = Field(alias="hiddenCount")


class LeagueCreateRequest(_ApiModel):
    name: str = Field(min_length=1)
    organization: str | None = None
    sport: str = Field(min_length=1)
    website: str = Field(min_length=1)
    source: str = "manual"
    active: bool = True


class LeagueUpdateRequest(_ApiModel):
    name: str | None = Field(None, min_length=1)
    organization: str | None = None
    sport: str | None = Field(None, min_length=1)
    website: str | None = Field(None, min_length=1)
    active: bool | None = None


class SeasonCreateRequest(_ApiModel):
    league_id: int = Field(alias="leagueId")
    name: str = Field(min_length=1)
    sport: str = Field(min_length=1)
    signup_start: date | None = Field(None, alias="signupStart")
    signup_end: date | None = Field(None, alias="signupEnd")
    season_start: date | None = Field(None, alias="seasonStart")
    season_end: date | None = Field(None, alias="seasonEnd")
    age_group: str | None = Field(None, alias="ageGroup")
    details_url: str | None = Field(None, alias="detailsUrl")
    registration_url: str | None = Field(None, alias="registrationUrl")
    visible: bool = True


class SeasonUpdateRequest(_ApiModel):
    league_id: int | None = Field(None, alias="leagueId")
    name: str | None = Field(None, min_length=1)
    sport: str | None = Field(None, min_length=1)
    signup_start: date | None = Field(None, alias="signupStart")
    signup_end: date | None = Field(None, alias="signupEnd")
    season_start: date | None = Field(None, alias="seasonStart")
    season_end: date | None = Field(None, alias="seasonEnd")
    age_group: str | None = Field(None, alias="ageGroup")
    details_url: str | None = Field(None, alias="detailsUrl")
    registration_url: str | None = Field(None, alias="registrationUrl")
    visible: bool | None = None


class SeasonRecordResponse(_ApiModel):
    """Stored season as returned by the manage endpoints."""

    id: int
    league_id: int = Field(alias="leagueId")
    name: str
    sport: str
    signup_start: date | None = Field(None, alias="signupStart")
    signup_end: date | None = Field(None, alias="signupEnd")
    season_start: date | None = Field(None, alias="seasonStart")
    season_end: date | None = Field(None, alias="seasonEnd")
    age_group: str | None = Field(None, alias="ageGroup")
    details_url: str | None = Field(None, alias="detailsUrl")
    registration_url: str | None = Field(None, alias="registrationUrl")
    visible: bool


class DeleteResponse(_ApiModel):
    success: bool
