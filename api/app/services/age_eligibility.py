"""Age group parsing and matching.

Strategy: fail-open. If an age_group string can't be understood it matches
every child, so a relevant season is never hidden because of messy text.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import Callable, Iterable, NamedTuple

from ..utils.datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)


class AgeRange(NamedTuple):
    min_age: int
    max_age: int

    def contains(self, age: int) -> bool:
        return self.min_age <= age <= self.max_age


GRADE_TO_AGE: dict[str, int] = {
    "pk3": 3,
    "pre-k3": 3,
    "prek3": 3,
    "pk4": 4,
    "pre-k4": 4,
    "prek4": 4,
    "pk": 4,
    "pre-k": 4,
    "prek": 4,
    "k": 5,
    "kindergarten": 5,
    "1st": 6,
    "2nd": 7,
    "3rd": 8,
    "4th": 9,
    "5th": 10,
    "6th": 11,
    "7th": 12,
    "8th": 13,
    "9th": 14,
    "10th": 15,
    "11th": 16,
    "12th": 17,
    "high school": 17,
}

_UNDER_RE = re.compile(r"^(\d+)\s*U$|^(\d+)\s+and\s+under$", re.IGNORECASE)
_NUMERIC_RANGE_RE = re.compile(r"^(\d+)\s*[-–]\s*(\d+)$")
_SINGLE_NUMBER_RE = re.compile(r"^(\d+)$")
# "1st-6th Grade", "PK3-6th Grade", "2nd grade through high school"
_GRADE_RANGE_RE = re.compile(
    r"^(.+?)(?:\s*[-–]\s*|\s+through\s+|\s+to\s+)(.+?)(?:\s+grade)?$",
    re.IGNORECASE,
)
_GRADE_WORD_RE = re.compile(r"\s*grade\s*", re.IGNORECASE)
_SINGLE_GRADE_RE = re.compile(r"^(.+?)\s*grade$", re.IGNORECASE)


def grade_to_age(grade: str) -> int | None:
    return GRADE_TO_AGE.get(grade.strip().lower())


def _under(match: re.Match[str]) -> AgeRange | None:
    return AgeRange(0, int(match.group(1) or match.group(2)))


def _numeric_range(match: re.Match[str]) -> AgeRange | None:
    return AgeRange(int(match.group(1)), int(match.group(2)))


def _single_number(match: re.Match[str]) -> AgeRange | None:
    age = int(match.group(1))
    return AgeRange(age, age)


def _grade_range(match: re.Match[str]) -> AgeRange | None:
    left = grade_to_age(_GRADE_WORD_RE.sub("", match.group(1), count=1))
    right = grade_to_age(_GRADE_WORD_RE.sub("", match.group(2), count=1))
    if left is None or right is None:
        return None
    return AgeRange(left, right)


def _single_grade(match: re.Match[str]) -> AgeRange | None:
    age = grade_to_age(match.group(1))
    if age is None:
        return None
    return AgeRange(age, age)


# Tried in order; the first extractor returning a range wins.
_PARSERS: tuple[tuple[re.Pattern[str], Callable[[re.Match[str]], AgeRange | None]], ...] = (
    (_UNDER_RE, _under),
    (_NUMERIC_RANGE_RE, _numeric_range),
    (_SINGLE_NUMBER_RE, _single_number),
    (_GRADE_RANGE_RE, _grade_range),
    (_SINGLE_GRADE_RE, _single_grade),
)


def parse_age_group(age_group: str | None) -> AgeRange | None:
    """Parse free-text age group into an AgeRange, or None if unparseable.

    Callers should treat None as "matches all ages".
    """
    if not age_group:
        return None
    text = age_group.strip()
    if not text:
        return None

    for pattern, extract in _PARSERS:
        match = pattern.match(text)
        if match is None:
            continue
        parsed = extract(match)
        if parsed is not None:
            return parsed
    return None


def calculate_age(birthdate: date | str, today: date) -> int | None:
    """Whole years elapsed since ``birthdate`` as of ``today``.

    Returns None when the birthdate string can't be parsed.
    """
    born = parse_iso_date(birthdate)
    if born is None:
        return None
    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age


def ages_from_birthdates(birthdates: Iterable[date | str], today: date) -> list[int]:
    """Child ages for the birthdates that parse; malformed ones are skipped."""
    ages: list[int] = []
    for birthdate in birthdates:
        age = calculate_age(birthdate, today)
        if age is None:
            logger.debug("skipping_unparseable_birthdate", extra={"birthdate": str(birthdate)})
            continue
        ages.append(age)
    return ages


def season_matches_ages(age_group: str | None, child_ages: Iterable[int]) -> bool:
    """True if the season is relevant to at least one child.

    Also True when no ages are given (no filter) or the text is unparseable.
    """
    ages = list(child_ages)
    if not ages:
        return True

    age_range = parse_age_group(age_group)
    if age_range is None:
        return True

    return any(age_range.contains(age) for age in ages)
