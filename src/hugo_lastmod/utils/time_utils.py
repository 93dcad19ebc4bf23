"""時間戳處理工具。"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Optional


def format_iso_seconds(value: datetime, tz: Optional[tzinfo] = None) -> str:
    """格式化為 ``YYYY-MM-DDTHH:MM:SS+HH:MM``。

    未指定 ``tz`` 時使用本機時區。秒以下捨去，確保字串比較等同時間先後。
    """
    localized = value.astimezone(tz)
    return localized.replace(microsecond=0).isoformat()


def format_epoch_ms(epoch_ms: int, tz: Optional[tzinfo] = None) -> str:
    value = datetime.fromtimestamp(epoch_ms // 1000, tz=timezone.utc)
    return format_iso_seconds(value, tz)


def is_newer_iso(candidate: str, current: str) -> bool:
    if not current:
        return True
    return candidate > current
