"""League directory models: leagues and their seasons."""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class League(Base):
    """A youth sports organization's league listing."""

    __tablename__ = "leagues"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    organization: Mapped[str | None] = mapped_column(String(200))
    sport: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    website: Mapped[str] = mapped_column(String(500), nullable=False)
    # "seed", "manual" or "discovered"
    source: Mapped[str] = mapped_column(String(20), nullable=False, default="seed")
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    seasons: Mapped[list["Season"]] = relationship(
        "Season", back_populates="league", cascade="all, delete-orphan"
    )


class Season(Base):
    """One season offering with optional signup and play windows."""

    __tablename__ = "seasons"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    league_id: Mapped[int] = mapped_column(
        ForeignKey("leagues.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    sport: Mapped[str] = mapped_column(String(50), nullable=False)
    signup_start: Mapped[date | None] = mapped_column(Date)
    signup_end: Mapped[date | None] = mapped_column(Date)
    season_start: Mapped[date | None] = mapped_column(Date)
    season_end: Mapped[date | None] = mapped_column(Date)
    age_group: Mapped[str | None] = mapped_column(String(100))
    details_url: Mapped[str | None] = mapped_column(String(500))
    registration_url: Mapped[str | None] = mapped_column(String(500))
    raw_text: Mapped[str | None] = mapped_column(Text)
    visible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    league: Mapped[League] = relationship("League", back_populates="seasons")

    __table_args__ = (
        Index("idx_seasons_sport", "sport"),
        Index("idx_seasons_signup_window", "signup_start", "signup_end"),
        Index("idx_seasons_play_window", "season_start", "season_end"),
    )
