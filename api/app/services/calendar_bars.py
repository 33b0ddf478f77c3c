"""Horizontal signup/season bars for the month grid."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from ..utils.datetime_utils import is_valid_month, month_bounds
from .season_types import Season


@dataclass(frozen=True)
class BarSegment:
    season: Season
    type: str
    start_day: int
    end_day: int
    lane: int = 0

    def overlaps(self, other: "BarSegment") -> bool:
        return self.start_day <= other.end_day and other.start_day <= self.end_day


def bar_segments(seasons: Iterable[Season], year: int, month: int) -> list[BarSegment]:
    """One segment per complete range touching the month, clipped to it."""
    if not is_valid_month(year, month):
        return []
    month_start, month_end = month_bounds(year, month)

    segments: list[BarSegment] = []
    for season in seasons:
        for range_type, start, end in season.ranges():
            if start > month_end or end < month_start:
                continue
            segments.append(
                BarSegment(
                    season=season,
                    type=range_type,
                    start_day=max(start, month_start).day,
                    end_day=min(end, month_end).day,
                )
            )
    return segments


def assign_lanes(segments: list[BarSegment]) -> list[BarSegment]:
    """Give each bar the first lane it fits in without overlapping.

    Bars are placed in start-day order; the result keeps the input order.
    """
    lane_ends: list[int] = []
    lanes: dict[int, int] = {}
    order = sorted(range(len(segments)), key=lambda idx: segments[idx].start_day)
    for idx in order:
        segment = segments[idx]
        for lane, last_end in enumerate(lane_ends):
            if last_end < segment.start_day:
                lane_ends[lane] = segment.end_day
                lanes[idx] = lane
                break
        else:
            lane_ends.append(segment.end_day)
            lanes[idx] = len(lane_ends) - 1
    return [replace(segment, lane=lanes[idx]) for idx, segment in enumerate(segments)]


def month_bars(seasons: Iterable[Season], year: int, month: int) -> list[BarSegment]:
    return assign_lanes(bar_segments(seasons, year, month))
