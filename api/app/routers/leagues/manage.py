"""Manage endpoints for editing leagues and seasons.

All routes require the X-API-Key header.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import delete

from ...db import AsyncSession, get_db
from ...db.leagues import League, Season
from ...dependencies import verify_api_key
from .schemas import (
    DeleteResponse,
    LeagueCreateRequest,
    LeagueResponse,
    LeagueUpdateRequest,
    SeasonCreateRequest,
    SeasonRecordResponse,
    SeasonUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/manage", dependencies=[Depends(verify_api_key)])

# Columns that are NOT NULL; an explicit null in an update is ignored.
_REQUIRED_LEAGUE_FIELDS = frozenset({"name", "sport", "website", "active"})
_REQUIRED_SEASON_FIELDS = frozenset({"league_id", "name", "sport", "visible"})


def _changes(payload, required: frozenset[str]) -> dict:
    return {
        key: value
        for key, value in payload.model_dump(exclude_unset=True).items()
        if value is not None or key not in required
    }


def _season_response(season: Season) -> SeasonRecordResponse:
    return SeasonRecordResponse(
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
        visible=season.visible,
    )


async def _get_league_or_404(session: AsyncSession, league_id: int) -> League:
    league = await session.get(League, league_id)
    if league is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="League not found")
    return league


async def _get_season_or_404(session: AsyncSession, season_id: int) -> Season:
    season = await session.get(Season, season_id)
    if season is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Season not found")
    return season


@router.post("/leagues", response_model=LeagueResponse, status_code=status.HTTP_201_CREATED)
async def create_league(
    payload: LeagueCreateRequest,
    session: AsyncSession = Depends(get_db),
) -> LeagueResponse:
    league = League(
        name=payload.name,
        organization=payload.organization,
        sport=payload.sport,
        website=payload.website,
        source=payload.source,
        active=payload.active,
    )
    session.add(league)
    await session.flush()
    logger.info("league_created", extra={"league_id": league.id, "league_name": league.name})
    return LeagueResponse.from_league(league)


@router.put("/leagues/{league_id}", response_model=LeagueResponse)
async def update_league(
    league_id: int,
    payload: LeagueUpdateRequest,
    session: AsyncSession = Depends(get_db),
) -> LeagueResponse:
    league = await _get_league_or_404(session, league_id)
    for key, value in _changes(payload, _REQUIRED_LEAGUE_FIELDS).items():
        setattr(league, key, value)
    await session.flush()
    logger.info("league_updated", extra={"league_id": league_id})
    return LeagueResponse.from_league(league)


@router.delete("/leagues/{league_id}", response_model=DeleteResponse)
async def delete_league(
    league_id: int,
    session: AsyncSession = Depends(get_db),
) -> DeleteResponse:
    league = await _get_league_or_404(session, league_id)
    await session.execute(delete(Season).where(Season.league_id == league_id))
    await session.delete(league)
    logger.info("league_deleted", extra={"league_id": league_id})
    return DeleteResponse(success=True)


@router.post("/seasons", response_model=SeasonRecordResponse, status_code=status.HTTP_201_CREATED)
async def create_season(
    payload: SeasonCreateRequest,
    session: AsyncSession = Depends(get_db),
) -> SeasonRecordResponse:
    await _get_league_or_404(session, payload.league_id)
    season = Season(**payload.model_dump())
    session.add(season)
    await session.flush()
    logger.info(
        "season_created",
        extra={"season_id": season.id, "league_id": season.league_id},
    )
    return _season_response(season)


@router.put("/seasons/{season_id}", response_model=SeasonRecordResponse)
async def update_season(
    season_id: int,
    payload: SeasonUpdateRequest,
    session: AsyncSession = Depends(get_db),
) -> SeasonRecordResponse:
    season = await _get_season_or_404(session, season_id)
    changes = _changes(payload, _REQUIRED_SEASON_FIELDS)
    if "league_id" in changes:
        await _get_league_or_404(session, changes["league_id"])
    for key, value in changes.items():
        setattr(season, key, value)
    await session.flush()
    logger.info("season_updated", extra={"season_id": season_id, "fields": sorted(changes)})
    return _season_response(season)


@router.delete("/seasons/{season_id}", response_model=DeleteResponse)
async def delete_season(
    season_id: int,
    session: AsyncSession = Depends(get_db),
) -> DeleteResponse:
    season = await _get_season_or_404(session, season_id)
    await session.delete(season)
    logger.info("season_deleted", extra={"season_id": season_id})
    return DeleteResponse(success=True)
