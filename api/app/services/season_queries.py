"""Season and league reads shared by the public routers."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from sqlalchemy import Select, and_, or_, select

from ..db import AsyncSession
from ..db.leagues import League, Season as SeasonRow
from ..utils.datetime_utils import is_valid_month, month_bounds
from .season_types import Season

logger = logging.getLogger(__name__)


def month_overlap_clause(year: int, month: int):
    """SQL twin of ``season_filters.overlaps_month``."""
    month_start, month_end = month_bounds(year, month)
    return or_(
        and_(SeasonRow.signup_start <= month_end, SeasonRow.signup_end >= month_start),
        and_(SeasonRow.season_start <= month_end, SeasonRow.season_end >= month_start),
        and_(SeasonRow.signup_start <= month_end, SeasonRow.season_end >= month_start),
    )


def build_seasons_query(
    *,
    year: int | None = None,
    month: int | None = None,
    sport: str | None = None,
    league_id: int | None = None,
    include_hidden: bool = False,
) -> Select:
    stmt = select(
        SeasonRow,
        League.name.label("league_name"),
        League.organization.label("organization"),
        League.website.label("league_website"),
    ).join(League, SeasonRow.league_id == League.id)

    if not include_hidden:
        stmt = stmt.where(SeasonRow.visible.is_(True))
    if sport:
        stmt = stmt.where(SeasonRow.sport == sport)
    if league_id is not None:
        stmt = stmt.where(SeasonRow.league_id == league_id)
    if year is not None and month is not None and is_valid_month(year, month):
        stmt = stmt.where(month_overlap_clause(year, month))

    return stmt.order_by(SeasonRow.id)


def season_from_row(row: Any) -> Season:
    """Convert a (SeasonRow, league columns) result row into a value object."""
    record = row.Season
    return Season.from_mapping(
        {
            "id": record.id,
            "sport": record.sport,
            "signup_start": record.signup_start,
            "signup_end": record.signup_end,
            "season_start": record.season_start,
            "season_end": record.season_end,
            "age_group": record.age_group,
            "name": record.name,
            "league_id": record.league_id,
            "league_name": row.league_name,
            "organization": row.organization,
            "league_website": row.league_website,
            "details_url": record.details_url,
            "registration_url": record.registration_url,
        }
    )


async def fetch_seasons(
    session: AsyncSession,
    *,
    year: int | None = None,
    month: int | None = None,
    sport: str | None = None,
    league_id: int | None = None,
    include_hidden: bool = False,
) -> list[Season]:
    stmt = build_seasons_query(
        year=year,
        month=month,
        sport=sport,
        league_id=league_id,
        include_hidden=include_hidden,
    )
    result = await session.execute(stmt)
    seasons = [season_from_row(row) for row in result.all()]
    logger.debug(
        "seasons_fetched",
        extra={"year": year, "month": month, "sport": sport, "count": len(seasons)},
    )
    return seasons


async def fetch_sports(session: AsyncSession) -> list[str]:
    stmt = select(SeasonRow.sport).distinct().order_by(SeasonRow.sport)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def fetch_leagues(session: AsyncSession, *, active_only: bool = False) -> Sequence[League]:
    stmt = select(League)
    if active_only:
        stmt = stmt.where(League.active.is_(True))
    result = await session.execute(stmt.order_by(League.name))
    return result.scalars().all()


async def fetch_league(session: AsyncSession, league_id: int) -> League | None:
    """Active league by id, or None."""
    stmt = select(League).where(League.id == league_id, League.active.is_(True))
    result = await session.execute(stmt)
    return result.scalars().first()
