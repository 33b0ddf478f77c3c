"""Season value object consumed by the calendar and filtering services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping

from ..utils.datetime_utils import parse_iso_date

SIGNUP = "signup"
ACTIVE = "active"


@dataclass(frozen=True)
class Season:
    """Immutable season snapshot.

    Only ``id``, ``sport``, the four range bounds and ``age_group`` drive the
    calendar logic. The remaining fields are passed through for display.
    """

    id: int
    sport: str
    signup_start: date | None = None
    signup_end: date | None = None
    season_start: date | None = None
    season_end: date | None = None
    age_group: str | None = None
    name: str = ""
    league_id: int | None = None
    league_name: str | None = None
    organization: str | None = None
    league_website: str | None = None
    details_url: str | None = None
    registration_url: str | None = None

    @property
    def has_dates(self) -> bool:
        return any(
            value is not None
            for value in (self.signup_start, self.signup_end, self.season_start, self.season_end)
        )

    @property
    def signup_range(self) -> tuple[date, date] | None:
        return _closed_range(self.signup_start, self.signup_end)

    @property
    def season_range(self) -> tuple[date, date] | None:
        return _closed_range(self.season_start, self.season_end)

    def ranges(self) -> list[tuple[str, date, date]]:
        """Complete ranges as (type, start, end), signup first."""
        out: list[tuple[str, date, date]] = []
        if self.signup_range:
            out.append((SIGNUP, *self.signup_range))
        if self.season_range:
            out.append((ACTIVE, *self.season_range))
        return out

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Season":
        """Build from a dict with snake_case or camelCase keys.

        Date fields go through ``parse_iso_date`` so malformed values become
        None instead of raising.
        """

        def pick(snake: str, camel: str) -> Any:
            if snake in data:
                return data[snake]
            return data.get(camel)

        return cls(
            id=int(data["id"]),
            sport=str(data.get("sport") or ""),
            signup_start=parse_iso_date(pick("signup_start", "signupStart")),
            signup_end=parse_iso_date(pick("signup_end", "signupEnd")),
            season_start=parse_iso_date(pick("season_start", "seasonStart")),
            season_end=parse_iso_date(pick("season_end", "seasonEnd")),
            age_group=_optional_text(pick("age_group", "ageGroup")),
            name=pick("name", "name") or "",
            league_id=pick("league_id", "leagueId"),
            league_name=pick("league_name", "leagueName"),
            organization=pick("organization", "organization"),
            league_website=pick("league_website", "leagueWebsite"),
            details_url=pick("details_url", "detailsUrl"),
            registration_url=pick("registration_url", "registrationUrl"),
        )


def _closed_range(start: date | None, end: date | None) -> tuple[date, date] | None:
    # A range needs both bounds; an inverted range never contains any day.
    if start is None or end is None or start > end:
        return None
    return start, end


def _optional_text(value: Any) -> str | None:
    return None if value is None else str(value)
