"""前後兩次圖片清單的差異統計。"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DiffResult:
    added: int = 0
    changed: int = 0
    deleted: int = 0

    @property
    def total(self) -> int:
        return self.added + self.changed + self.deleted

    def summary(self) -> str:
        return f"[+{self.added} ~{self.changed} -{self.deleted}]"
