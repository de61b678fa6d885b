from datetime import datetime, timedelta, timezone

import pytest

from postboard.utils import parse_post_id, parse_timestamp


def test_parse_post_id():
    assert parse_post_id("17") == 17


def test_parse_post_id_rejects_text():
    with pytest.raises(ValueError):
        parse_post_id("seventeen")


def test_parse_timestamp_date_only_is_utc_midnight():
    assert parse_timestamp("2024-01-31") == datetime(2024, 1, 31, tzinfo=timezone.utc)


def test_parse_timestamp_keeps_offset():
    parsed = parse_timestamp("2024-01-31T10:00:00+05:00")

    assert parsed.utcoffset() == timedelta(hours=5)


def test_parse_timestamp_accepts_zulu_suffix():
    assert parse_timestamp("2024-01-31T10:00:00Z") == datetime(2024, 1, 31, 10, tzinfo=timezone.utc)


def test_parse_timestamp_rejects_garbage():
    with pytest.raises(ValueError):
        parse_timestamp("last tuesday")


@pytest.mark.parametrize("value", ["Jan 31 2024", "January 31, 2024"])
def test_parse_timestamp_rejects_non_iso_spellings(value):
    with pytest.raises(ValueError):
        parse_timestamp(value)
