#!/usr/bin/env python3
"""Tests for LedgerDate primitive type."""

from datetime import date, datetime, timedelta, timezone

import pytest

from ledger.core.dates import LedgerDate, parse_record_date


class TestLedgerDateConstruction:
    """Test LedgerDate construction."""

    @pytest.mark.parametrize(
        "constructor,expected_date",
        [
            (lambda: LedgerDate(date=date(2024, 3, 1)), date(2024, 3, 1)),
            (lambda: LedgerDate.from_string("2024-03-01"), date(2024, 3, 1)),
            (lambda: LedgerDate.from_string("2024-03-31T23:30:00Z"), date(2024, 3, 31)),
            (lambda: LedgerDate.from_string("2024-03-31T23:30:00"), date(2024, 3, 31)),
            (lambda: LedgerDate.coerce(datetime(2024, 3, 1, 12, 0)), date(2024, 3, 1)),
            (lambda: LedgerDate.coerce("2024-03-01"), date(2024, 3, 1)),
        ],
        ids=["from_date", "from_string", "utc_timestamp", "naive_timestamp", "from_datetime", "coerce_str"],
    )
    def test_construction(self, constructor, expected_date):
        assert constructor().date == expected_date

    def test_offset_timestamp_is_shifted_to_utc(self):
        """Test 1 April 02:00 at +05:30 is still 31 March in UTC."""
        assert LedgerDate.from_string("2024-04-01T02:00:00+05:30").date == date(2024, 3, 31)

    def test_aware_datetime_is_shifted_to_utc(self):
        ist = timezone(timedelta(hours=5, minutes=30))
        assert LedgerDate.coerce(datetime(2024, 4, 1, 2, 0, tzinfo=ist)).date == date(2024, 3, 31)

    def test_today_is_utc(self):
        assert LedgerDate.today().date == datetime.now(timezone.utc).date()

    def test_invalid_string_raises(self):
        with pytest.raises(ValueError):
            LedgerDate.from_string("not a date")

    @pytest.mark.parametrize("text", ["2024-3-1", "2024-03-1", "2024-3-01", " 2024-3-1 "])
    def test_unpadded_month_and_day(self, text):
        assert LedgerDate.from_string(text).date == date(2024, 3, 1)

    @pytest.mark.parametrize("text", ["2024-13-1", "2024-2-30", "2024-3-"])
    def test_out_of_range_or_malformed_parts_raise(self, text):
        with pytest.raises(ValueError):
            LedgerDate.from_string(text)


class TestLedgerDateMonths:
    """Test calendar month helpers."""

    def test_same_month(self):
        march = LedgerDate.from_string("2024-03-15")
        assert LedgerDate.from_string("2024-03-01").same_month(march)
        assert LedgerDate.from_string("2024-03-31").same_month(march)
        assert not LedgerDate.from_string("2024-02-29").same_month(march)
        assert not LedgerDate.from_string("2023-03-15").same_month(march)

    def test_month_key(self):
        assert LedgerDate.from_string("2024-03-15").month_key() == "2024-03"

    def test_ordering_and_str(self):
        assert LedgerDate.from_string("2024-03-01") < LedgerDate.from_string("2024-03-02")
        assert str(LedgerDate.from_string("2024-03-01")) == "2024-03-01"


class TestParseRecordDate:
    """Test lenient parsing of stored dates."""

    @pytest.mark.parametrize("value", ["", "   ", "31/03/2024", "yesterday", None, 20240301])
    def test_unreadable_dates_are_none(self, value):
        assert parse_record_date(value) is None

    def test_readable_date(self):
        assert parse_record_date("2024-03-31") == LedgerDate(date=date(2024, 3, 31))
