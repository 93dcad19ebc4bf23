from datetime import datetime, timedelta, timezone

from hugo_lastmod.utils import time_utils


def test_format_iso_seconds_with_offset() -> None:
    value = datetime(2025, 6, 1, 0, 0, 0, 123456, tzinfo=timezone.utc)

    assert time_utils.format_iso_seconds(value, timezone.utc) == "2025-06-01T00:00:00+00:00"
    assert (
        time_utils.format_iso_seconds(value, timezone(timedelta(hours=-3, minutes=-30)))
        == "2025-05-31T20:30:00-03:30"
    )


def test_format_epoch_ms() -> None:
    epoch_ms = int(datetime(2024, 1, 1, tzinfo=timezone.utc).timestamp() * 1000) + 500

    assert time_utils.format_epoch_ms(epoch_ms, timezone.utc) == "2024-01-01T00:00:00+00:00"


def test_format_local_has_offset() -> None:
    text = time_utils.format_iso_seconds(datetime.now(timezone.utc))

    assert len(text) == 25
    assert text[19] in "+-"


def test_is_newer_iso() -> None:
    assert time_utils.is_newer_iso("2025-01-01T00:00:00+00:00", "") is True
    assert time_utils.is_newer_iso("2025-01-01T00:00:00+00:00", "2024-12-31T23:59:59+00:00") is True
    assert time_utils.is_newer_iso("2025-01-01T00:00:00+00:00", "2025-01-01T00:00:00+00:00") is False
