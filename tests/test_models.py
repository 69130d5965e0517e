from datetime import datetime, timedelta, timezone

import pytest

from feedreader.models import parse_instant, to_iso


def test_to_iso_normalizes_to_utc() -> None:
    value = datetime(2024, 1, 15, 12, 30, tzinfo=timezone(timedelta(hours=2)))
    assert to_iso(value) == "2024-01-15T10:30:00Z"


def test_to_iso_pads_early_years() -> None:
    assert to_iso(datetime(500, 1, 1, tzinfo=timezone.utc)) == "0500-01-01T00:00:00Z"
    assert to_iso(datetime(1, 3, 4, 5, 6, 7)) == "0001-03-04T05:06:07Z"


@pytest.mark.parametrize(
    "value", ["0001-01-01T00:00:00+05:00", "9999-12-31T23:00:00-05:00"]
)
def test_parse_instant_rejects_out_of_range_offsets(value: str) -> None:
    assert parse_instant(value) is None


def test_parse_instant_assumes_utc_when_naive() -> None:
    assert parse_instant("2024-01-15 10:30:00") == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
