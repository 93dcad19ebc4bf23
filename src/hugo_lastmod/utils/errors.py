"""例外類別。"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class LastmodError(Exception):
    """hugo-lastmod 所有例外的基底類別。"""


class ConfigError(LastmodError):
    """設定檔格式錯誤或驗證失敗，整個執行中止。"""


class CacheReadError(LastmodError):
    """快取檔存在但內容無法解析；呼叫端應改用空快取。"""


class CacheAccessError(LastmodError):
    """快取檔無法讀取或寫入（例如權限不足）。"""


class FilesystemError(LastmodError):
    """bundle 目錄無法列出。"""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class InvalidDescriptorError(LastmodError):
    """descriptor 缺少有效的 front matter 分隔線。"""

    def __init__(self, path: Optional[Path], message: str) -> None:
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


class WriteError(LastmodError):
    """descriptor 寫入失敗。"""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
