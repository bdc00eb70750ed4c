from datetime import datetime, timedelta, timezone

import pytest

from challonge.services.timestamps import parse_rfc3339, read_timestamp


class TestParseRfc3339:

    def test_offset(self):
        dt = parse_rfc3339("2015-01-19T16:57:17-05:00")
        assert dt == datetime(2015, 1, 19, 16, 57, 17, tzinfo=timezone(timedelta(hours=-5)))
        assert dt.utcoffset() == timedelta(hours=-5)

    @pytest.mark.parametrize("text", [
        "2015-01-19T21:57:17Z",
        "2015-01-19t21:57:17z",
        "2015-01-19 21:57:17+00:00",
    ])
    def test_utc_spellings(self, text):
        assert parse_rfc3339(text) == datetime(2015, 1, 19, 21, 57, 17, tzinfo=timezone.utc)

    def test_fraction_is_truncated_to_microseconds(self):
        dt = parse_rfc3339("2015-01-19T21:57:17.1234567+01:00")
        assert dt.microsecond == 123456

    def test_short_fraction(self):
        assert parse_rfc3339("2015-01-19T21:57:17.5Z").microsecond == 500000

    @pytest.mark.parametrize("text", [
        "",
        "2015-01-19",
        "2015-01-19T16:57:17",
        "2015-01-19T16:57-05:00",
        "2015-13-19T16:57:17-05:00",
        "2015-01-19T25:57:17-05:00",
        "2015-01-19T16:57:17-0500",
        "19/01/2015 16:57:17",
        " 2015-01-19T16:57:17Z",
    ])
    def test_rejects(self, text):
        assert parse_rfc3339(text) is None


class TestReadTimestamp:

    @pytest.mark.parametrize("value", [None, 1421704637, 1421704637.0, True, ["2015-01-19T21:57:17Z"]])
    def test_non_strings(self, value):
        assert read_timestamp(value) is None

    def test_string(self):
        assert read_timestamp("2015-01-19T21:57:17Z") is not None


class TestLeapSecond:

    def test_leap_second_clamped_to_end_of_minute(self):
        dt = parse_rfc3339("2016-12-31T23:59:60Z")
        assert dt == datetime(2016, 12, 31, 23, 59, 59, 999999, tzinfo=timezone.utc)

    def test_leap_second_with_fraction_and_offset(self):
        dt = parse_rfc3339("2016-12-31T18:59:60.5-05:00")
        assert dt == datetime(2016, 12, 31, 23, 59, 59, 999999, tzinfo=timezone.utc)

    def test_other_out_of_range_seconds_still_rejected(self):
        assert parse_rfc3339("2016-12-31T23:59:61Z") is None
