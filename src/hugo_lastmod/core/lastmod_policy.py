"""lastmod 決策策略。

兩種策略互斥，於設定載入時選定一次：

* ``mtime``：指紋為檔案修改時間，候選值為所有圖片中最新的 mtime；
  只要候選值晚於目前的 lastmod 就更新，差異統計僅供參考。
* ``hash``：指紋為檔案內容摘要，候選值為執行當下時間；
  只有在差異統計不為零時才更新。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from pathlib import Path
from typing import Callable, Mapping, Optional

from ..config import ConfigManager
from ..models import DiffResult, ImageEntry
from ..utils import hash_calc, time_utils

Clock = Callable[[], datetime]


@dataclass(frozen=True)
class LastmodDecision:
    candidate: str
    should_update: bool


class LastmodStrategy(ABC):
    name: str = ""
    cache_version: int = 0
    supports_parallel: bool = False

    def __init__(self, tz: Optional[tzinfo] = None) -> None:
        self.tz = tz

    @abstractmethod
    def fingerprint(self, path: Path, rel_path: str) -> ImageEntry:
        """建立單一檔案的指紋；檔案消失時拋出 ``OSError``。"""

    @abstractmethod
    def decide(
        self,
        diff: DiffResult,
        inventory: Mapping[str, ImageEntry],
        current_lastmod: str,
    ) -> LastmodDecision:
        ...


class TimestampStrategy(LastmodStrategy):
    name = "mtime"
    cache_version = 4

    def fingerprint(self, path: Path, rel_path: str) -> ImageEntry:
        stat = path.stat()
        return ImageEntry(
            rel_path=rel_path,
            size=stat.st_size,
            mtime_ms=stat.st_mtime_ns // 1_000_000,
        )

    def decide(
        self,
        diff: DiffResult,
        inventory: Mapping[str, ImageEntry],
        current_lastmod: str,
    ) -> LastmodDecision:
        mtimes = [entry.mtime_ms for entry in inventory.values() if entry.mtime_ms is not None]
        if not mtimes:
            raise ValueError("mtime 策略需要至少一個含 mtime 的圖片")
        candidate = time_utils.format_epoch_ms(max(mtimes), self.tz)
        return LastmodDecision(
            candidate=candidate,
            should_update=time_utils.is_newer_iso(candidate, current_lastmod),
        )


class HashStrategy(LastmodStrategy):
    name = "hash"
    cache_version = 3
    supports_parallel = True

    def __init__(
        self,
        algorithm: str = "sha256",
        chunk_size_kb: int = 1024,
        tz: Optional[tzinfo] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        super().__init__(tz)
        self.algorithm = algorithm
        self.chunk_size_kb = chunk_size_kb
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def fingerprint(self, path: Path, rel_path: str) -> ImageEntry:
        size = path.stat().st_size
        digest = hash_calc.compute_digest(path, self.algorithm, self.chunk_size_kb)
        return ImageEntry(rel_path=rel_path, size=size, hash=digest)

    def decide(
        self,
        diff: DiffResult,
        inventory: Mapping[str, ImageEntry],
        current_lastmod: str,
    ) -> LastmodDecision:
        candidate = time_utils.format_iso_seconds(self.clock(), self.tz)
        if diff.total == 0:
            return LastmodDecision(candidate=candidate, should_update=False)
        # 時鐘倒退時 candidate 可能早於既有值，此時不更新
        return LastmodDecision(
            candidate=candidate,
            should_update=time_utils.is_newer_iso(candidate, current_lastmod),
        )


def build_strategy(
    config: ConfigManager,
    *,
    tz: Optional[tzinfo] = None,
    clock: Optional[Clock] = None,
) -> LastmodStrategy:
    name = config.get("fingerprint.strategy", "mtime")
    if name == HashStrategy.name:
        return HashStrategy(
            algorithm=str(config.get("fingerprint.algorithm", "sha256")),
            chunk_size_kb=int(config.get("fingerprint.chunkSizeKb", 1024)),
            tz=tz,
            clock=clock,
        )
    if name == TimestampStrategy.name:
        return TimestampStrategy(tz=tz)
    raise ValueError(f"未知的指紋策略: {name}")
