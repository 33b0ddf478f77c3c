"""Season selection helpers applied before projection.

``overlaps_month`` mirrors the month-overlap clause used by the seasons
query so that in-memory callers select the same rows.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Iterable

from ..utils.datetime_utils import is_valid_month, month_bounds
from .age_eligibility import season_matches_ages
from .season_types import Season


def overlaps_month(season: Season, year: int, month: int) -> bool:
    """True if the signup or season window touches the month.

    Also true when registration opens before the month ends and play ends
    after it starts, which catches seasons with only one half of each range.
    """
    if not is_valid_month(year, month):
        return False
    month_start, month_end = month_bounds(year, month)

    def spans(start, end) -> bool:
        return start is not None and end is not None and start <= month_end and end >= month_start

    return (
        spans(season.signup_start, season.signup_end)
        or spans(season.season_start, season.season_end)
        or spans(season.signup_start, season.season_end)
    )


def apply_preferences(
    seasons: Iterable[Season],
    hidden_ids: Iterable[int] = (),
    child_ages: Iterable[int] = (),
    sport: str | None = None,
) -> list[Season]:
    """Drop hidden seasons, other sports and seasons no child is eligible for."""
    hidden = set(hidden_ids)
    ages = list(child_ages)
    return [
        season
        for season in seasons
        if season.id not in hidden
        and (sport is None or season.sport == sport)
        and season_matches_ages(season.age_group, ages)
    ]


def split_hidden(
    seasons: Iterable[Season], hidden_ids: Iterable[int]
) -> tuple[list[Season], list[Season]]:
    hidden = set(hidden_ids)
    visible: list[Season] = []
    hidden_seasons: list[Season] = []
    for season in seasons:
        (hidden_seasons if season.id in hidden else visible).append(season)
    return visible, hidden_seasons


def group_leagues_by_sport(
    leagues: Iterable[Any], seasons: Iterable[Season]
) -> dict[str, list[tuple[Any, list[Season]]]]:
    """league sport -> [(league, its seasons)], sports sorted by name.

    Leagues are grouped by their own sport, so a multi-sport league stays a
    single entry. Seasons attach by ``league_id`` and leagues without any
    seasons are still listed.
    """
    by_league: dict[int, list[Season]] = defaultdict(list)
    for season in seasons:
        if season.league_id is not None:
            by_league[season.league_id].append(season)

    grouped: dict[str, list[tuple[Any, list[Season]]]] = defaultdict(list)
    for league in sorted(leagues, key=lambda league: (league.name, league.id)):
        grouped[league.sport].append((league, by_league.get(league.id, [])))
    return {sport: grouped[sport] for sport in sorted(grouped)}
