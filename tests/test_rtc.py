from datetime import datetime, timezone

import pytest

from trackerkit.rtc import RtcClock, RtcTime, parse_gps_time


def test_parse_gps_time_fields():
    assert parse_gps_time(20150327014838) == RtcTime(2015, 3, 27, 1, 48, 38)


def test_parse_negative_raises():
    with pytest.raises(ValueError):
        parse_gps_time(-1)


def test_timestamp_matches_utc():
    expected = datetime(2015, 3, 27, 1, 48, 38, tzinfo=timezone.utc).timestamp()
    assert RtcTime(2015, 3, 27, 1, 48, 38).timestamp() == int(expected)


def test_update_with_valid_time():
    clock = RtcClock()
    assert clock.update(20150327014838) is True
    assert clock.synced is True
    assert clock.time == parse_gps_time(20150327014838)


def test_update_with_receiver_default_time_is_ignored():
    clock = RtcClock()
    assert clock.update(19800106000012) is False
    assert clock.synced is False
    assert clock.time is None


def test_update_threshold():
    clock = RtcClock()
    assert clock.update(19841231235959) is False
    assert clock.update(19850101000000) is True
    assert clock.time.year == 1985


def test_failed_update_keeps_previous_time():
    clock = RtcClock()
    clock.update(20150327014838)
    clock.update(19800106000012)
    assert clock.time == parse_gps_time(20150327014838)
    assert clock.synced is True