"""Calendar month and day detail endpoints."""

from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Path, status

from ...db import AsyncSession, get_db
from ...services.calendar_bars import month_bars
from ...services.calendar_projection import compute_day_info, events_for_day
from ...services.season_queries import fetch_seasons
from ...utils.datetime_utils import days_in_month, today_local
from .common import ViewerPreferences, viewer_preferences
from .schemas import (
    BarResponse,
    CalendarMonthResponse,
    DayDetailResponse,
    DayEventResponse,
    DayInfoResponse,
    SeasonResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/calendar/{year}/{month}", response_model=CalendarMonthResponse)
async def calendar_month(
    year: int = Path(..., ge=1, le=9999),
    month: int = Path(..., ge=1, le=12),
    prefs: ViewerPreferences = Depends(viewer_preferences),
    session: AsyncSession = Depends(get_db),
) -> CalendarMonthResponse:
    """Per-day milestones, active seasons and bars for one month."""
    today = today_local()
    seasons = prefs.apply(
        await fetch_seasons(session, year=year, month=month, sport=prefs.sport), today
    )
    day_info = compute_day_info(seasons, year, month)
    bars = month_bars(seasons, year, month)

    logger.info(
        "calendar_month_computed",
        extra={
            "year": year,
            "month": month,
            "season_count": len(seasons),
            "event_days": len(day_info),
        },
    )

    return CalendarMonthResponse(
        year=year,
        month=month,
        days_in_month=days_in_month(year, month),
        # date.weekday() is Monday=0; the grid starts on Sunday
        first_weekday=(date(year, month, 1).weekday() + 1) % 7,
        days=[
            DayInfoResponse(
                day=day,
                day_date=date(year, month, day),
                reg_opens=info.reg_opens,
                reg_closes=info.reg_closes,
                season_starts=info.season_starts,
                season_ends=info.season_ends,
                active_season_ids=[season.id for season in info.active_dots],
            )
            for day, info in sorted(day_info.items())
        ],
        seasons=[SeasonResponse.from_season(season) for season in seasons],
        bars=[
            BarResponse(
                season_id=bar.season.id,
                type=bar.type,
                start_day=bar.start_day,
                end_day=bar.end_day,
                lane=bar.lane,
            )
            for bar in bars
        ],
    )


@router.get("/calendar/{year}/{month}/{day}", response_model=DayDetailResponse)
async def calendar_day(
    year: int = Path(..., ge=1, le=9999),
    month: int = Path(..., ge=1, le=12),
    day: int = Path(..., ge=1, le=31),
    prefs: ViewerPreferences = Depends(viewer_preferences),
    session: AsyncSession = Depends(get_db),
) -> DayDetailResponse:
    """Events for one day, most actionable first."""
    if day > days_in_month(year, month):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{year:04d}-{month:02d} has no day {day}",
        )

    today = today_local()
    seasons = prefs.apply(
        await fetch_seasons(session, year=year, month=month, sport=prefs.sport), today
    )
    day_info = compute_day_info(seasons, year, month)
    events = events_for_day(day_info.get(day), year, month, day)

    return DayDetailResponse(
        day_date=date(year, month, day),
        events=[
            DayEventResponse(
                season=SeasonResponse.from_season(event.season),
                types=sorted(event.types),
                reg_opens=event.reg_opens,
                reg_closes=event.reg_closes,
                season_starts=event.season_starts,
                season_ends=event.season_ends,
                has_milestone=event.has_milestone,
            )
            for event in events
        ],
    )
