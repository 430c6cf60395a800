"""Unit tests for kernel time – clocks and date-time normalization."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from pick_request_service.kernel.errors import MalformedMessageError
from pick_request_service.kernel.time import (
    FrozenClock,
    SystemClock,
    event_age,
    parse_datetime,
    parse_datetimes,
)


class TestClocks:
    def test_system_clock_is_aware(self) -> None:
        assert SystemClock().now().tzinfo is not None

    def test_frozen_clock_rejects_naive(self) -> None:
        with pytest.raises(ValueError):
            FrozenClock(datetime(2021, 10, 8))

    def test_event_age(self) -> None:
        clock = FrozenClock(datetime(2021, 10, 8, 12, tzinfo=UTC))
        assert event_age(clock, datetime(2021, 10, 8, 11, 30, tzinfo=UTC)) == timedelta(minutes=30)

    def test_event_age_naive_is_utc(self) -> None:
        clock = FrozenClock(datetime(2021, 10, 8, 12, tzinfo=UTC))
        assert event_age(clock, datetime(2021, 10, 8, 11)) == timedelta(hours=1)

    def test_frozen_clock_advance(self) -> None:
        start = datetime(2021, 10, 8, tzinfo=UTC)
        clock = FrozenClock(start)
        clock.advance(minutes=5)
        assert clock.now() == start + timedelta(minutes=5)


class TestParseDatetime:
    def test_zulu_suffix(self) -> None:
        assert parse_datetime("2021-10-08T22:00:00Z") == datetime(2021, 10, 8, 22, tzinfo=UTC)

    def test_offset_is_kept(self) -> None:
        parsed = parse_datetime("2021-10-08T22:00:00+02:00")
        assert parsed is not None
        assert parsed.utcoffset() == timedelta(hours=2)

    def test_naive_string_is_utc(self) -> None:
        assert parse_datetime("2021-10-08T22:00:00") == datetime(2021, 10, 8, 22, tzinfo=UTC)

    def test_naive_datetime_gets_utc(self) -> None:
        assert parse_datetime(datetime(2021, 1, 1)) == datetime(2021, 1, 1, tzinfo=UTC)

    def test_aware_datetime_passes_through(self) -> None:
        value = datetime(2021, 1, 1, tzinfo=timezone(timedelta(hours=1)))
        assert parse_datetime(value) is value

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_absent_stays_absent(self, value: object) -> None:
        assert parse_datetime(value) is None

    def test_garbage_raises_malformed(self) -> None:
        with pytest.raises(MalformedMessageError) as info:
            parse_datetime("next tuesday", "cutOffTime")
        assert info.value.detail["field"] == "cutOffTime"

    def test_non_string_raises_malformed(self) -> None:
        with pytest.raises(MalformedMessageError):
            parse_datetime(12345)


class TestParseDatetimes:
    def test_nested_paths(self) -> None:
        payload = {
            "cutOffTime": "2021-10-08T22:00:00Z",
            "service": {"fromTime": "2021-10-08T08:00:00Z", "code": "EXP"},
        }
        result = parse_datetimes(payload, ["cutOffTime", "service.fromTime", "service.toTime"])
        assert result["cutOffTime"] == datetime(2021, 10, 8, 22, tzinfo=UTC)
        assert result["service"]["fromTime"] == datetime(2021, 10, 8, 8, tzinfo=UTC)
        assert "toTime" not in result["service"]
        assert result["service"]["code"] == "EXP"

    def test_input_is_not_mutated(self) -> None:
        payload = {"service": {"fromTime": "2021-10-08T08:00:00Z"}}
        parse_datetimes(payload, ["service.fromTime"])
        assert payload["service"]["fromTime"] == "2021-10-08T08:00:00Z"

    def test_missing_parent_is_skipped(self) -> None:
        assert parse_datetimes({"a": 1}, ["service.fromTime"]) == {"a": 1}
