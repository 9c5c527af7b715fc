"""Unit tests for Media Fragment URI parsing."""

import pytest

from mediafrag.fragment import parse_media_fragment, parse_npt_time
from mediafrag.models import TemporalWindow

BASE = "http://example.com/video.m3u8"


# ---------------------------------------------------------------------------
# parse_npt_time
# ---------------------------------------------------------------------------

class TestParseNptTime:
    def test_seconds(self):
        assert parse_npt_time("10") == 10.0

    def test_fractional_seconds(self):
        assert parse_npt_time("10.5") == 10.5

    def test_mm_ss(self):
        assert parse_npt_time("02:30") == 150.0

    def test_hh_mm_ss_fractional(self):
        assert parse_npt_time("1:02:30.5") == 3750.5

    def test_surrounding_whitespace(self):
        assert parse_npt_time("  12 ") == 12.0

    @pytest.mark.parametrize(
        "value",
        ["", "abc", "1:2:3:4", "-5", "60:00", "00:60", "1:60:00", "1:00:60", "1e3", ":30", "1.5.2", "inf", "nan"],
    )
    def test_rejected(self, value):
        assert parse_npt_time(value) is None

    @pytest.mark.parametrize("value", ["\u0661\u0660", "\u0660\u0662:\u0663\u0660", "\uff11\uff10.5"])
    def test_non_ascii_digits_rejected(self, value):
        assert parse_npt_time(value) is None


# ---------------------------------------------------------------------------
# parse_media_fragment
# ---------------------------------------------------------------------------

class TestNoFragment:
    def test_no_hash(self):
        assert parse_media_fragment(BASE) is None

    def test_query_without_fragment(self):
        assert parse_media_fragment(f"{BASE}?token=abc123") is None

    def test_empty_fragment(self):
        assert parse_media_fragment(f"{BASE}#") is None

    def test_only_non_temporal_params(self):
        assert parse_media_fragment(f"{BASE}#track=video&id=main") is None

    def test_empty_t_value(self):
        assert parse_media_fragment(f"{BASE}#t=") is None

    def test_empty_bounds(self):
        assert parse_media_fragment(f"{BASE}#t=,") is None

    def test_parameter_ending_in_t_is_not_temporal(self):
        assert parse_media_fragment(f"{BASE}#at=10") is None


class TestBasicTemporal:
    def test_start_and_end(self):
        assert parse_media_fragment(f"{BASE}#t=10,20") == TemporalWindow(start=10, end=20)

    def test_start_only(self):
        assert parse_media_fragment(f"{BASE}#t=10") == TemporalWindow(start=10)

    def test_end_only(self):
        assert parse_media_fragment(f"{BASE}#t=,20") == TemporalWindow(end=20)

    def test_start_with_trailing_comma(self):
        assert parse_media_fragment(f"{BASE}#t=10,") == TemporalWindow(start=10)

    def test_fractional(self):
        assert parse_media_fragment(f"{BASE}#t=10.5,20.75") == TemporalWindow(start=10.5, end=20.75)

    def test_zero_start(self):
        assert parse_media_fragment(f"{BASE}#t=0,10") == TemporalWindow(start=0, end=10)

    def test_zero_start_only(self):
        assert parse_media_fragment(f"{BASE}#t=0") == TemporalWindow(start=0)


class TestNptPrefix:
    def test_start_and_end(self):
        assert parse_media_fragment(f"{BASE}#t=npt:15,25") == TemporalWindow(start=15, end=25)

    def test_start_only(self):
        assert parse_media_fragment(f"{BASE}#t=npt:30") == TemporalWindow(start=30)

    def test_end_only(self):
        assert parse_media_fragment(f"{BASE}#t=npt:,20") == TemporalWindow(end=20)


class TestClockFormats:
    def test_hh_mm_ss(self):
        assert parse_media_fragment(f"{BASE}#t=0:02:00,0:03:30") == TemporalWindow(start=120, end=210)

    def test_hh_mm_ss_fractional(self):
        result = parse_media_fragment(f"{BASE}#t=1:30:45.5,1:35:00.25")
        assert result == TemporalWindow(start=5445.5, end=5700.25)

    def test_mm_ss(self):
        assert parse_media_fragment(f"{BASE}#t=02:00,03:30") == TemporalWindow(start=120, end=210)

    def test_mm_ss_fractional(self):
        result = parse_media_fragment(f"{BASE}#t=30:45.5,35:00.25")
        assert result == TemporalWindow(start=1845.5, end=2100.25)

    def test_hours_above_nine(self):
        result = parse_media_fragment(f"{BASE}#t=10:00:00,12:30:00")
        assert result == TemporalWindow(start=36000, end=45000)

    def test_mixed_formats(self):
        assert parse_media_fragment(f"{BASE}#t=0:02:00,210") == TemporalWindow(start=120, end=210)


class TestMultipleOccurrences:
    def test_last_wins(self):
        assert parse_media_fragment(f"{BASE}#t=5&t=15,25") == TemporalWindow(start=15, end=25)

    def test_last_wins_start_only(self):
        assert parse_media_fragment(f"{BASE}#t=10&t=20") == TemporalWindow(start=20)

    def test_last_wins_mixed_formats(self):
        assert parse_media_fragment(f"{BASE}#t=10&t=npt:20,30") == TemporalWindow(start=20, end=30)

    def test_invalid_middle_occurrence_is_overridden(self):
        result = parse_media_fragment(f"{BASE}#t=5,10&t=invalid&t=15,25")
        assert result == TemporalWindow(start=15, end=25)

    def test_malformed_last_occurrence_discards_result(self):
        """The last t= is selected before validation; no fallback to an earlier one."""
        assert parse_media_fragment(f"{BASE}#t=5,10&t=invalid") is None

    def test_empty_last_occurrence_discards_result(self):
        assert parse_media_fragment(f"{BASE}#t=5,10&t=") is None


class TestInvalid:
    @pytest.mark.parametrize(
        "fragment",
        [
            "t=20,10",
            "t=10,10",
            "t=abc,def",
            "t=10,abc",
            "t=abc,20",
            "t=60:00,70:00",
            "t=00:60,00:65",
            "t=1:60:00,2:00:00",
            "t=1:00:60,2:00:00",
            "t=10,20,30",
            "t=,0",
            "t=npt:,0",
            "t=-5,10",
            "t=smpte:00:00:10,00:00:20",
            "t=\u0661\u0660,\u0662\u0660",
            "t=10,\uff12\uff10",
        ],
    )
    def test_rejected(self, fragment):
        assert parse_media_fragment(f"{BASE}#{fragment}") is None


class TestUrlCompatibility:
    def test_query_parameters_ignored(self):
        result = parse_media_fragment(f"{BASE}?token=abc#t=10,20")
        assert result == TemporalWindow(start=10, end=20)

    def test_query_t_parameter_ignored(self):
        assert parse_media_fragment(f"{BASE}?t=5#track=video") is None

    def test_mixed_fragment_parameters(self):
        result = parse_media_fragment(f"{BASE}#t=10,20&track=video&id=main")
        assert result == TemporalWindow(start=10, end=20)

    def test_temporal_after_other_parameters(self):
        result = parse_media_fragment(f"{BASE}#track=video&t=10,20")
        assert result == TemporalWindow(start=10, end=20)

    def test_idempotent(self):
        url = f"{BASE}#t=npt:0:01:00,90"
        assert parse_media_fragment(url) == parse_media_fragment(url)


class TestTemporalWindow:
    def test_duration(self):
        assert TemporalWindow(start=10, end=25).duration == 15

    def test_duration_open_ended(self):
        assert TemporalWindow(start=10).duration is None

    def test_to_dict(self):
        assert TemporalWindow(end=20).to_dict() == {"start": None, "end": 20}

    def test_immutable(self):
        w = TemporalWindow(start=1, end=2)
        with pytest.raises(AttributeError):
            w.start = 5
