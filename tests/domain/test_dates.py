from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from lib_color_log.domain.dates import DateFormat, format_timestamp

MOMENT = datetime(2025, 9, 30, 12, 0, 5, 123000, tzinfo=timezone.utc)


def test_iso_format_matches_javascript_style() -> None:
    assert format_timestamp(MOMENT, DateFormat.ISO) == "2025-09-30T12:00:05.123Z"


def test_iso_format_normalises_offsets_to_utc() -> None:
    shifted = MOMENT.astimezone(timezone(timedelta(hours=2)))
    assert format_timestamp(shifted, DateFormat.ISO) == "2025-09-30T12:00:05.123Z"


def test_utc_format_is_rfc1123() -> None:
    assert format_timestamp(MOMENT, DateFormat.UTC) == "Tue, 30 Sep 2025 12:00:05 GMT"


def test_local_format_mentions_year_and_offset() -> None:
    rendered = format_timestamp(MOMENT, DateFormat.LOCAL)
    assert "2025" in rendered
    assert "GMT" in rendered


def test_naive_datetimes_are_treated_as_utc() -> None:
    assert format_timestamp(MOMENT.replace(tzinfo=None), DateFormat.ISO) == "2025-09-30T12:00:05.123Z"


@pytest.mark.parametrize("name, expected", [("iso", DateFormat.ISO), ("UTC", DateFormat.UTC), (" local ", DateFormat.LOCAL)])
def test_from_name(name: str, expected: DateFormat) -> None:
    assert DateFormat.from_name(name) is expected


def test_from_name_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unsupported date format"):
        DateFormat.from_name("epoch")
