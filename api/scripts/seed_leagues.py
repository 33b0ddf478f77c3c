"""Seed the league directory with known leagues and sample seasons.

Idempotent: leagues are matched by website, seasons by (league, name).
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from datetime import date
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from sqlalchemy import select

from app.config import settings
from app.db import get_async_session, init_db
from app.db.leagues import League, Season
from app.logging_config import configure_logging

logger = logging.getLogger(__name__)

SEED_LEAGUES = [
    ("i9 Sports Dallas", "i9 Sports", "Multi-Sport", "https://www.i9sports.com/Programs/Dallas-TX"),
    ("YMCA of Metropolitan Dallas - Youth Sports", "YMCA", "Multi-Sport", "https://www.ymcadallas.org/programs/youth-sports"),
    ("Dallas Parks & Recreation Youth Sports", "City of Dallas", "Multi-Sport", "https://www.dallasparks.org/"),
    ("Plano Youth Soccer Association", "PYSA", "Soccer", "https://www.planosoccer.org/"),
    ("Dallas Youth Baseball", "Dallas Youth Baseball", "Baseball", "https://www.dallasyouthbaseball.com/"),
    ("North Texas Youth Football Association", "NTYFA", "Football", "https://www.ntyfa.org/"),
    ("Dallas Texans Soccer Club", "Dallas Texans", "Soccer", "https://www.dallastexans.com/"),
    ("DFW Swim - Youth Swimming", "DFW Swim", "Swimming", "https://www.dfwswim.com/"),
    ("McKinney Youth Basketball Association", "MYBA", "Basketball", "https://www.mckinneyyouthbasketball.com/"),
]

# (league website, name, sport, signup_start, signup_end, season_start, season_end, age_group)
SAMPLE_SEASONS = [
    ("https://www.i9sports.com/Programs/Dallas-TX", "Spring 2026 Flag Football", "Football", "2026-01-15", "2026-02-28", "2026-03-07", "2026-05-16", "5-12"),
    ("https://www.i9sports.com/Programs/Dallas-TX", "Spring 2026 Soccer", "Soccer", "2026-01-10", "2026-02-20", "2026-03-01", "2026-05-10", "4-14"),
    ("https://www.ymcadallas.org/programs/youth-sports", "Spring 2026 Basketball", "Basketball", "2026-02-01", "2026-03-01", "2026-03-15", "2026-05-30", "6-14"),
    ("https://www.ymcadallas.org/programs/youth-sports", "Summer 2026 Swim Team", "Swimming", "2026-04-01", "2026-05-15", "2026-06-01", "2026-08-01", "6-18"),
    ("https://www.dallasparks.org/", "Summer 2026 Youth Baseball", "Baseball", "2026-03-15", "2026-04-30", "2026-05-15", "2026-07-31", "6-14"),
    ("https://www.planosoccer.org/", "Spring 2026 Rec Soccer", "Soccer", "2026-01-01", "2026-02-10", "2026-02-22", "2026-05-09", "4-18"),
    ("https://www.dallasyouthbaseball.com/", "Spring 2026 Little League", "Baseball", "2026-01-15", "2026-02-28", "2026-03-14", "2026-06-13", "12U"),
    ("https://www.ntyfa.org/", "Fall 2026 Youth Football", "Football", "2026-05-01", "2026-07-15", "2026-08-01", "2026-11-15", "1st-8th Grade"),
    ("https://www.dallastexans.com/", "Spring 2026 Select Soccer", "Soccer", "2026-01-10", "2026-02-15", "2026-02-28", "2026-05-30", "8-18"),
    ("https://www.dfwswim.com/", "Summer 2026 Swim Season", "Swimming", "2026-03-01", "2026-05-01", "2026-05-25", "2026-08-15", "5-18"),
]


async def _seed() -> tuple[int, int]:
    added_leagues = 0
    added_seasons = 0
    async with get_async_session() as session:
        by_website: dict[str, League] = {}
        for name, organization, sport, website in SEED_LEAGUES:
            existing = (
                await session.execute(select(League).where(League.website == website))
            ).scalar_one_or_none()
            if existing is None:
                existing = League(
                    name=name,
                    organization=organization,
                    sport=sport,
                    website=website,
                    source="seed",
                )
                session.add(existing)
                await session.flush()
                added_leagues += 1
                logger.info("seed_league_added", extra={"league_name": name, "league_id": existing.id})
            by_website[website] = existing

        for website, name, sport, signup_start, signup_end, season_start, season_end, age_group in SAMPLE_SEASONS:
            league = by_website[website]
            existing_season = (
                await session.execute(
                    select(Season).where(Season.league_id == league.id, Season.name == name)
                )
            ).scalar_one_or_none()
            if existing_season is not None:
                continue
            session.add(
                Season(
                    league_id=league.id,
                    name=name,
                    sport=sport,
                    signup_start=date.fromisoformat(signup_start),
                    signup_end=date.fromisoformat(signup_end),
                    season_start=date.fromisoformat(season_start),
                    season_end=date.fromisoformat(season_end),
                    age_group=age_group,
                )
            )
            added_seasons += 1
    return added_leagues, added_seasons


async def _run(create_tables: bool) -> tuple[int, int]:
    if create_tables:
        await init_db()
    return await _seed()


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed leagues and sample seasons.")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables first (development only).",
    )
    return parser.parse_args()


def main() -> None:
    configure_logging(
        service="league-calendar-cli",
        environment=settings.environment,
        log_level=settings.log_level,
    )
    args = _parse_args()
    try:
        added_leagues, added_seasons = asyncio.run(_run(args.create_tables))
    except Exception:
        logger.exception("seed_failed")
        raise
    logger.info(
        "seed_completed",
        extra={"leagues_added": added_leagues, "seasons_added": added_seasons},
    )


if __name__ == "__main__":
    main()
