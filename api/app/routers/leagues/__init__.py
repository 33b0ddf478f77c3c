"""League calendar router bundle."""

from fastapi import APIRouter

from . import calendar, deadlines, manage, seasons

router = APIRouter(prefix="/api", tags=["league-calendar"])
router.include_router(seasons.router)
router.include_router(calendar.router)
router.include_router(deadlines.router)
router.include_router(manage.router)

__all__ = ["router"]
