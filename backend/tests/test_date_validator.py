"""
Tests for validate_date_parts: the pure day / month / year validation rules.
"""

from datetime import date, timedelta

import pytest

from govuk_binders.constants import DatePartError
from govuk_binders.schemas import AllEmpty, FieldErrors, Success
from govuk_binders.services.date_binder import validate_date_parts


def _validate(error_text, day, month, year):
    return validate_date_parts("dateOfBirth", error_text, {"day": day, "month": month, "year": year})


class TestAllEmpty:
    def test_all_parts_empty_strings(self, error_text):
        assert _validate(error_text, "", "", "") == AllEmpty()

    def test_all_parts_absent(self, error_text):
        assert isinstance(validate_date_parts("dateOfBirth", error_text, {}), AllEmpty)

    def test_mix_of_absent_and_empty(self, error_text):
        assert isinstance(_validate(error_text, None, "", None), AllEmpty)

    def test_whitespace_is_not_empty(self, error_text):
        outcome = _validate(error_text, " ", "", "")
        assert isinstance(outcome, FieldErrors)
        assert outcome.message == "Enter a real date of birth"


class TestMissingParts:
    def test_missing_day_only(self, error_text):
        outcome = _validate(error_text, "", "13", "2024")
        assert isinstance(outcome, FieldErrors)
        assert outcome.message == "Date of birth does not include a day"
        assert outcome.errors == {"day": DatePartError.MISSING}

    def test_missing_month_only(self, error_text):
        outcome = _validate(error_text, "5", "", "2024")
        assert outcome.message == "Date of birth does not include a month"

    def test_missing_parts_joined_in_order(self, error_text):
        outcome = _validate(error_text, "", "6", None)
        assert outcome.message == "Date of birth does not include a day or a year"

    def test_missing_two_parts_with_only_year(self, error_text):
        outcome = _validate(error_text, "", "", "2024")
        assert outcome.message == "Date of birth does not include a day or a month"
        assert list(outcome.errors) == ["day", "month"]


class TestNotInteger:
    def test_non_numeric_day(self, error_text):
        outcome = _validate(error_text, "ab", "1", "2024")
        assert isinstance(outcome, FieldErrors)
        assert outcome.message == "Enter a real date of birth"
        assert outcome.errors == {"day": DatePartError.NOT_INTEGER}

    def test_not_integer_wins_over_missing(self, error_text):
        outcome = _validate(error_text, "", "June", "2024")
        assert outcome.message == "Enter a real date of birth"
        assert outcome.errors == {
            "day": DatePartError.MISSING,
            "month": DatePartError.NOT_INTEGER,
        }

    @pytest.mark.parametrize("raw", ["1.5", "1_0", "0x1", "１２", "--1", "2147483648", "-2147483649"])
    def test_values_that_are_not_32_bit_integers(self, error_text, raw):
        outcome = _validate(error_text, "1", raw, "2024")
        assert outcome.errors == {"month": DatePartError.NOT_INTEGER}

    def test_surrounding_whitespace_and_sign_are_accepted(self, error_text):
        outcome = _validate(error_text, " 05 ", "+6", "2023\t")
        assert outcome == Success(value=date(2023, 6, 5))


class TestCalendarDates:
    def test_valid_date(self, error_text):
        outcome = _validate(error_text, "5", "6", "2023")
        assert isinstance(outcome, Success)
        assert outcome.value == date(2023, 6, 5)

    def test_each_part_read_from_its_own_field(self, error_text):
        outcome = _validate(error_text, "28", "2", "1999")
        assert outcome.value == date(1999, 2, 28)

    @pytest.mark.parametrize(
        "day, month, year",
        [
            ("31", "2", "2023"),
            ("29", "2", "2023"),
            ("31", "4", "2024"),
            ("1", "13", "2024"),
            ("0", "1", "2024"),
            ("1", "0", "2024"),
            ("1", "1", "0"),
            ("1", "1", "10000"),
            ("-1", "1", "2024"),
        ],
    )
    def test_impossible_dates(self, error_text, day, month, year):
        outcome = _validate(error_text, day, month, year)
        assert isinstance(outcome, FieldErrors)
        assert outcome.message == "Enter a real date of birth"
        assert outcome.errors == {}

    def test_leap_day(self, error_text):
        assert _validate(error_text, "29", "2", "2024").value == date(2024, 2, 29)

    def test_every_day_of_a_leap_year_succeeds(self, error_text):
        current = date(2024, 1, 1)
        while current.year == 2024:
            outcome = _validate(error_text, str(current.day), str(current.month), str(current.year))
            assert outcome == Success(value=current)
            current += timedelta(days=1)

    @pytest.mark.parametrize("value", [date.min, date.max])
    def test_range_boundaries(self, error_text, value):
        outcome = _validate(error_text, str(value.day), str(value.month), str(value.year))
        assert outcome == Success(value=value)


class TestIdempotence:
    @pytest.mark.parametrize(
        "parts",
        [("", "", ""), ("", "13", "2024"), ("ab", "1", "2024"), ("31", "2", "2023"), ("5", "6", "2023")],
    )
    def test_same_input_same_outcome(self, error_text, parts):
        assert _validate(error_text, *parts) == _validate(error_text, *parts)
