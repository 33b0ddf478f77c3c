"""Registration deadline endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ...config import settings
from ...db import AsyncSession, get_db
from ...services.deadlines import closing_soon_seasons, partition_deadlines
from ...services.season_queries import fetch_seasons
from ...utils.datetime_utils import today_local
from .common import ViewerPreferences, closed_entry, upcoming_entry, viewer_preferences
from .schemas import ClosingSoonResponse, DeadlinesResponse

router = APIRouter()


@router.get("/deadlines", response_model=DeadlinesResponse)
async def registration_deadlines(
    prefs: ViewerPreferences = Depends(viewer_preferences),
    session: AsyncSession = Depends(get_db),
) -> DeadlinesResponse:
    """Upcoming deadlines soonest first, then recently closed, latest first."""
    today = today_local()
    seasons = prefs.apply(await fetch_seasons(session, sport=prefs.sport), today)
    lists = partition_deadlines(seasons, today, settings.recently_closed_days)
    return DeadlinesResponse(
        today=today,
        upcoming=[
            upcoming_entry(season, today, settings.closing_soon_days)
            for season in lists.upcoming
        ],
        recently_closed=[closed_entry(season) for season in lists.recently_closed],
    )


@router.get("/deadlines/closing-soon", response_model=ClosingSoonResponse)
async def registration_closing_soon(
    prefs: ViewerPreferences = Depends(viewer_preferences),
    session: AsyncSession = Depends(get_db),
) -> ClosingSoonResponse:
    today = today_local()
    seasons = prefs.apply(await fetch_seasons(session, sport=prefs.sport), today)
    ranked = closing_soon_seasons(seasons, today, settings.closing_soon_days)
    return ClosingSoonResponse(
        today=today,
        seasons=[
            upcoming_entry(item.season, today, settings.closing_soon_days)
            for item in ranked
        ],
    )
