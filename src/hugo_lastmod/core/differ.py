"""Inventory diff engine."""

from __future__ import annotations

from typing import Mapping

from ..models import DiffResult, ImageEntry


def is_entry_changed(previous: ImageEntry, current: ImageEntry) -> bool:
    return previous.size != current.size or previous.fingerprint != current.fingerprint


def diff_inventories(
    previous: Mapping[str, ImageEntry],
    current: Mapping[str, ImageEntry],
) -> DiffResult:
    """比較前次與本次的圖片清單。

    只有本次才有的 key 計為新增，只有前次才有的計為刪除；兩邊都有但大小或
    指紋不同者計為變更。結果僅供統計與 hash 策略判斷使用。
    """
    added = 0
    changed = 0
    for key, entry in current.items():
        before = previous.get(key)
        if before is None:
            added += 1
        elif is_entry_changed(before, entry):
            changed += 1

    deleted = sum(1 for key in previous if key not in current)
    return DiffResult(added=added, changed=changed, deleted=deleted)
