"""Tests for inspector update reports and freshness helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from cabradar.config import DisplayConfig
from cabradar.models import Inspector, InspectorReportType
from cabradar.reports import UpdateReport, apply_report
from cabradar.timeutils import format_relative_time, is_live, parse_timestamp

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def inspector() -> Inspector:
    return Inspector(
        id="bank-junction",
        report_type=InspectorReportType.TFL,
        location_name="bank-junction",
        time="2026-10-19T09:00:00+00:00",
        coordinates=(-0.0886, 51.5133),
    )


class TestApplyReport:
    """Tests for apply_report function."""

    def test_still_here_keeps_type(self, inspector: Inspector) -> None:
        updated = apply_report(inspector, UpdateReport.STILL_HERE, now=NOW)

        assert updated.report_type is InspectorReportType.TFL
        assert updated.time == NOW.isoformat()

    @pytest.mark.parametrize(
        ("report", "expected"),
        [
            ("clear", InspectorReportType.CLEAR),
            ("tfl", InspectorReportType.TFL),
            ("police-check", InspectorReportType.POLICE_CHECK),
        ],
    )
    def test_replaces_type(
        self, inspector: Inspector, report: str, expected: InspectorReportType
    ) -> None:
        assert apply_report(inspector, report, now=NOW).report_type is expected

    def test_does_not_mutate_original(self, inspector: Inspector) -> None:
        updated = apply_report(inspector, "clear", now=NOW)

        assert updated is not inspector
        assert inspector.report_type is InspectorReportType.TFL
        assert inspector.time == "2026-10-19T09:00:00+00:00"
        assert updated.coordinates == inspector.coordinates

    def test_unknown_report(self, inspector: Inspector) -> None:
        with pytest.raises(ValueError):
            apply_report(inspector, "vanished")


class TestParseTimestamp:
    """Tests for parse_timestamp function."""

    def test_zulu_suffix(self) -> None:
        assert parse_timestamp("2026-10-19T11:58:00Z") == datetime(
            2026, 10, 19, 11, 58, tzinfo=timezone.utc
        )

    def test_naive_is_utc(self) -> None:
        parsed = parse_timestamp("2026-10-19T11:58:00")
        assert parsed is not None
        assert parsed.tzinfo == timezone.utc

    def test_invalid(self) -> None:
        assert parse_timestamp("yesterday") is None
        assert parse_timestamp(None) is None


class TestIsLive:
    """Tests for is_live function."""

    def test_recent_is_live(self) -> None:
        assert is_live(NOW - timedelta(minutes=5), now=NOW)

    def test_old_is_not_live(self) -> None:
        assert not is_live(NOW - timedelta(minutes=6), now=NOW)

    def test_custom_window(self) -> None:
        config = DisplayConfig(live_window_minutes=30)
        assert is_live("2026-10-19T11:40:00Z", now=NOW, config=config)

    def test_missing_timestamp(self) -> None:
        assert not is_live(None, now=NOW)


class TestFormatRelativeTime:
    """Tests for format_relative_time function."""

    @pytest.mark.parametrize(
        ("delta", "expected"),
        [
            (timedelta(seconds=30), "Just now"),
            (timedelta(minutes=12), "12 minutes ago"),
            (timedelta(hours=1, minutes=5), "1 hour ago"),
            (timedelta(hours=3), "3 hours ago"),
            (timedelta(days=1, hours=2), "1 day ago"),
            (timedelta(days=4), "4 days ago"),
        ],
    )
    def test_buckets(self, delta: timedelta, expected: str) -> None:
        assert format_relative_time(NOW - delta, now=NOW) == expected

    def test_invalid(self) -> None:
        with pytest.raises(ValueError):
            format_relative_time("not a date", now=NOW)
