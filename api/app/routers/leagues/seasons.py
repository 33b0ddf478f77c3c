"""League, sport and season listing endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...db import AsyncSession, get_db
from ...services.season_filters import apply_preferences, group_leagues_by_sport, split_hidden
from ...services.season_queries import fetch_league, fetch_leagues, fetch_seasons, fetch_sports
from ...utils.datetime_utils import today_local
from .common import ViewerPreferences, viewer_preferences
from .schemas import (
    DirectoryLeague,
    DirectoryResponse,
    DirectorySport,
    LeagueDetailResponse,
    LeagueResponse,
    SeasonResponse,
)

router = APIRouter()


@router.get("/leagues", response_model=list[LeagueResponse])
async def list_leagues(session: AsyncSession = Depends(get_db)) -> list[LeagueResponse]:
    leagues = await fetch_leagues(session)
    return [LeagueResponse.from_league(league) for league in leagues]


@router.get("/leagues/{league_id}", response_model=LeagueDetailResponse)
async def league_detail(
    league_id: int,
    session: AsyncSession = Depends(get_db),
) -> LeagueDetailResponse:
    """One active league with its visible seasons that carry at least one date."""
    league = await fetch_league(session, league_id)
    if league is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="League not found")

    seasons = await fetch_seasons(session, league_id=league.id)
    return LeagueDetailResponse(
        league=LeagueResponse.from_league(league),
        seasons=[SeasonResponse.from_season(season) for season in seasons if season.has_dates],
    )


@router.get("/sports", response_model=list[str])
async def list_sports(session: AsyncSession = Depends(get_db)) -> list[str]:
    return await fetch_sports(session)


@router.get("/seasons", response_model=list[SeasonResponse])
async def list_seasons(
    year: int | None = Query(None, ge=1, le=9999),
    month: int | None = Query(None, ge=1, le=12),
    sport: str | None = Query(None),
    session: AsyncSession = Depends(get_db),
) -> list[SeasonResponse]:
    """Visible seasons, optionally limited to those touching a month."""
    seasons = await fetch_seasons(session, year=year, month=month, sport=sport)
    return [SeasonResponse.from_season(season) for season in seasons]


@router.get("/directory", response_model=DirectoryResponse)
async def league_directory(
    prefs: ViewerPreferences = Depends(viewer_preferences),
    session: AsyncSession = Depends(get_db),
) -> DirectoryResponse:
    """Active leagues grouped by sport, each with its seasons split into shown and hidden."""
    today = today_local()
    leagues = await fetch_leagues(session, active_only=True)
    # The sport filter applies to the league, not to each of its seasons.
    seasons = apply_preferences(await fetch_seasons(session), child_ages=prefs.child_ages(today))
    if prefs.sport:
        leagues = [league for league in leagues if league.sport == prefs.sport]

    hidden_count = 0
    sports: list[DirectorySport] = []
    for sport, entries in group_leagues_by_sport(leagues, seasons).items():
        directory_leagues: list[DirectoryLeague] = []
        for league, league_seasons in entries:
            visible, hidden = split_hidden(league_seasons, prefs.hidden)
            hidden_count += len(hidden)
            directory_leagues.append(
                DirectoryLeague(
                    league_id=league.id,
                    league_name=league.name,
                    organization=league.organization,
                    website=league.website,
                    visible=[SeasonResponse.from_season(s) for s in visible],
                    hidden=[SeasonResponse.from_season(s) for s in hidden],
                )
            )
        sports.append(DirectorySport(sport=sport, leagues=directory_leagues))

    return DirectoryResponse(sports=sports, hidden_count=hidden_count)
