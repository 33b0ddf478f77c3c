"""Tests for age group parsing and matching."""

from datetime import date

import pytest

from app.services.age_eligibility import (
    AgeRange,
    ages_from_birthdates,
    calculate_age,
    grade_to_age,
    parse_age_group,
    season_matches_ages,
)
from app.services.season_types import Season


class TestParseAgeGroupNumeric:
    def test_under_notation(self):
        assert parse_age_group("14U") == AgeRange(0, 14)

    def test_under_notation_lowercase_with_space(self):
        assert parse_age_group("10 u") == AgeRange(0, 10)

    def test_and_under(self):
        assert parse_age_group("12 and under") == AgeRange(0, 12)
        assert parse_age_group("12 AND UNDER") == AgeRange(0, 12)

    def test_hyphen_range(self):
        assert parse_age_group("5-12") == AgeRange(5, 12)

    def test_spaced_en_dash_range(self):
        assert parse_age_group("5 – 12") == AgeRange(5, 12)

    def test_single_number(self):
        assert parse_age_group("7") == AgeRange(7, 7)

    def test_surrounding_whitespace_ignored(self):
        assert parse_age_group("  5-12  ") == AgeRange(5, 12)


class TestParseAgeGroupGrades:
    def test_single_grade(self):
        assert parse_age_group("6th Grade") == AgeRange(11, 11)

    def test_grade_range(self):
        assert parse_age_group("1st-6th Grade") == AgeRange(6, 11)

    def test_pre_k_range(self):
        assert parse_age_group("PK3-6th Grade") == AgeRange(3, 11)

    def test_kindergarten_range(self):
        assert parse_age_group("K-5th grade") == AgeRange(5, 10)

    def test_through_high_school(self):
        assert parse_age_group("2nd grade through high school") == AgeRange(7, 17)

    def test_to_separator(self):
        assert parse_age_group("K to 5th") == AgeRange(5, 10)

    def test_grade_table(self):
        assert grade_to_age("PK4") == 4
        assert grade_to_age(" Pre-K ") == 4
        assert grade_to_age("Kindergarten") == 5
        assert grade_to_age("12th") == 17
        assert grade_to_age("13th") is None


class TestParseAgeGroupUnparseable:
    @pytest.mark.parametrize("text", [None, "", "   ", "banana", "Kindergarten", "All ages"])
    def test_returns_none(self, text):
        assert parse_age_group(text) is None

    def test_trailing_words_after_grade_do_not_parse(self):
        assert parse_age_group("3rd - 5th Grade Boys") is None


class TestCalculateAge:
    def test_day_before_birthday(self):
        assert calculate_age("2015-06-15", date(2024, 6, 14)) == 8

    def test_on_birthday(self):
        assert calculate_age("2015-06-15", date(2024, 6, 15)) == 9

    def test_accepts_date(self):
        assert calculate_age(date(2015, 6, 15), date(2024, 12, 31)) == 9

    def test_leap_day_birthday(self):
        assert calculate_age("2016-02-29", date(2025, 2, 28)) == 8
        assert calculate_age("2016-02-29", date(2025, 3, 1)) == 9

    def test_malformed_birthdate(self):
        assert calculate_age("June 2015", date(2024, 6, 15)) is None

    def test_ages_from_birthdates_skips_malformed(self):
        today = date(2024, 6, 15)
        assert ages_from_birthdates(["2015-06-15", "garbage", "2020-01-01"], today) == [9, 4]


class TestSeasonMatchesAges:
    def test_age_inside_range(self):
        assert season_matches_ages("5-12", [7]) is True

    def test_age_outside_range(self):
        assert season_matches_ages("5-12", [2]) is False

    def test_range_bounds_inclusive(self):
        assert season_matches_ages("5-12", [5]) is True
        assert season_matches_ages("5-12", [12]) is True
        assert season_matches_ages("5-12", [13]) is False

    def test_any_child_matches(self):
        assert season_matches_ages("5-12", [2, 9]) is True

    def test_unparseable_fails_open(self):
        assert season_matches_ages("banana", [2]) is True

    def test_missing_age_group_fails_open(self):
        assert season_matches_ages(None, [2]) is True

    def test_no_children_means_no_filter(self):
        assert season_matches_ages("5-12", []) is True

    def test_under_notation(self):
        assert season_matches_ages("14U", [3]) is True
        assert season_matches_ages("14U", [15]) is False


class TestMappingInput:
    def test_numeric_age_group_from_mapping(self):
        season = Season.from_mapping({"id": 1, "sport": "Soccer", "ageGroup": 7})
        assert parse_age_group(season.age_group) == AgeRange(7, 7)
        assert season_matches_ages(season.age_group, [7])
        assert not season_matches_ages(season.age_group, [9])
