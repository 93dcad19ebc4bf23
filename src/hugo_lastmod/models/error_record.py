"""錯誤與警告記錄。"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorLevel(str, Enum):
    INFO = "I"
    RECOVERABLE = "W"
    FATAL = "E"


class ErrorCode:
    """代碼首字母與 ``ErrorLevel`` 對應；百位數區分來源（1 快取、2 bundle、3 寫入）。"""

    CACHE_RESET = "I-101"
    CACHE_UNREADABLE = "W-102"
    NO_BUNDLES = "I-103"
    SCAN_FAILED = "W-201"
    DESCRIPTOR_MISSING = "W-202"
    DESCRIPTOR_INVALID = "W-203"
    WRITE_FAILED = "E-301"


@dataclass
class ProcessError:
    """單一 bundle（或整次執行）的問題紀錄；``file_path`` 為專案相對路徑。"""

    code: str
    level: ErrorLevel
    message: str
    file_path: Optional[str] = None

    def describe(self) -> str:
        location = f"{self.file_path}: " if self.file_path else ""
        return f"[{self.code}] {location}{self.message}"

    def to_dict(self) -> dict[str, object]:
        return {
            "code": self.code,
            "level": self.level.value,
            "message": self.message,
            "file_path": self.file_path,
        }
