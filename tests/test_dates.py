from datetime import date

import pytest

from name_days.dates import (
    day_label,
    day_of_year,
    normalize_date,
    parse_eu_numeric,
    parse_generic,
    parse_leap_day,
    parse_local_month_names,
    parse_us_numeric,
)

NON_LEAP = date(2026, 10, 19)
LEAP = date(2028, 3, 1)


class TestNormalizeDate:

    @pytest.mark.parametrize("text", ["1 June", "June 1", "6/1", "1.6", "1 czerwca", "1 června", "1 Jun"])
    def test_june_first(self, text):
        assert normalize_date(text, today=NON_LEAP) == (6, 1)

    @pytest.mark.parametrize("text", ["29 Feb", "Feb 29", "29th February", "February 29th", "29 lutego", "29 února"])
    @pytest.mark.parametrize("today", [NON_LEAP, LEAP])
    def test_leap_day_in_any_year(self, text, today):
        assert normalize_date(text, today=today) == (2, 29)

    def test_year_is_ignored(self):
        assert normalize_date("12 September 1999", today=NON_LEAP) == (9, 12)

    def test_polish_and_czech_months(self):
        assert normalize_date("9 stycznia", today=NON_LEAP) == (1, 9)
        assert normalize_date("9 Styczeń", today=NON_LEAP) == (1, 9)
        assert normalize_date("24 června", today=NON_LEAP) == (6, 24)
        assert normalize_date("24 července", today=NON_LEAP) == (7, 24)
        assert normalize_date("3 prosince", today=NON_LEAP) == (12, 3)

    def test_relative_days(self):
        today = date(2026, 6, 1)
        assert normalize_date("today", today=today) == (6, 1)
        assert normalize_date("Tomorrow", today=today) == (6, 2)
        assert normalize_date("wczoraj", today=today) == (5, 31)
        assert normalize_date("dnes", today=today) == (6, 1)

    def test_relative_day_across_year_end(self):
        assert normalize_date("jutro", today=date(2026, 12, 31)) == (1, 1)

    @pytest.mark.parametrize("text", ["", "   ", "xyzzy", "31.2", "0.5", "10:30", "5 pm", "8th", "monday"])
    def test_no_match(self, text):
        assert normalize_date(text, today=NON_LEAP) is None


class TestForms:

    def test_generic_uses_current_year(self):
        assert parse_generic("29 Feb", NON_LEAP) is None
        assert parse_generic("29 Feb", LEAP) == (2, 29)

    def test_generic_skips_bare_numbers(self):
        assert parse_generic("15", NON_LEAP) is None
        assert parse_generic("1.6", NON_LEAP) is None

    @pytest.mark.parametrize("text", ["10:30", "5 pm", "8th", "12th", "monday", "June"])
    def test_generic_needs_month_and_day(self, text):
        # a time, a weekday or a lone day or month is not a calendar date
        assert parse_generic(text, NON_LEAP) is None
        assert parse_generic(text, LEAP) is None

    def test_us_numeric(self):
        assert parse_us_numeric("12/24", NON_LEAP) == (12, 24)
        assert parse_us_numeric("2 / 29", NON_LEAP) == (2, 29)

    @pytest.mark.parametrize("text", ["13/1", "0/5", "2/30", "6/0", "1.6", "June 1"])
    def test_us_numeric_rejects(self, text):
        assert parse_us_numeric(text, NON_LEAP) is None

    def test_eu_numeric(self):
        assert parse_eu_numeric("24.12", NON_LEAP) == (12, 24)
        assert parse_eu_numeric("29. 2", NON_LEAP) == (2, 29)

    @pytest.mark.parametrize("text", ["1.6.", "1. 6.", "1.6"])
    def test_eu_numeric_trailing_dot(self, text):
        assert parse_eu_numeric(text, NON_LEAP) == (6, 1)
        assert normalize_date(text, today=NON_LEAP) == (6, 1)

    @pytest.mark.parametrize("text", ["31.2", "1.13", "0.1", "6/1"])
    def test_eu_numeric_rejects(self, text):
        assert parse_eu_numeric(text, NON_LEAP) is None

    def test_local_month_names_only_when_rewritten(self):
        assert parse_local_month_names("1 June", NON_LEAP) is None
        assert parse_local_month_names("1 maja", NON_LEAP) == (5, 1)

    def test_leap_day(self):
        assert parse_leap_day("29 feb", NON_LEAP) == (2, 29)
        assert parse_leap_day("28 Feb", NON_LEAP) is None
        assert parse_leap_day("Feb 29 2001", NON_LEAP) is None


class TestDayOfYear:

    def test_reference_leap_year(self):
        assert day_of_year(1, 1) == 1
        assert day_of_year(2, 29) == 60
        assert day_of_year(3, 1) == 61
        assert day_of_year(6, 1) == 153
        assert day_of_year(12, 31) == 366

    def test_invalid(self):
        with pytest.raises(ValueError):
            day_of_year(2, 30)

    def test_day_label(self):
        assert day_label(1) == "1 Jan"
        assert day_label(60) == "29 Feb"
        assert day_label(366) == "31 Dec"

    @pytest.mark.parametrize("yday", [0, 367])
    def test_day_label_out_of_range(self, yday):
        with pytest.raises(ValueError):
            day_label(yday)
