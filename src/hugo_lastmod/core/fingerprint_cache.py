"""跨次執行的圖片指紋快取。"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from ..models import ImageEntry, Inventory
from ..utils.errors import CacheAccessError, CacheReadError
from ..utils.logger import get_logger


@dataclass
class CacheState:
    version: int
    bundles: dict[str, Inventory] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        return {
            "version": self.version,
            "bundles": {
                bundle_id: {
                    "images": {rel_path: entry.to_dict() for rel_path, entry in inventory.items()}
                }
                for bundle_id, inventory in self.bundles.items()
            },
        }


def _parse_bundles(raw_bundles: Any) -> dict[str, Inventory]:
    if not isinstance(raw_bundles, dict):
        raise CacheReadError("bundles 必須是物件")

    bundles: dict[str, Inventory] = {}
    for bundle_id, payload in raw_bundles.items():
        images = payload.get("images", {}) if isinstance(payload, dict) else None
        if not isinstance(images, dict):
            raise CacheReadError(f"bundle {bundle_id} 的 images 格式錯誤")
        inventory: Inventory = {}
        for rel_path, data in images.items():
            if not isinstance(data, dict):
                raise CacheReadError(f"{rel_path} 的記錄格式錯誤")
            try:
                inventory[rel_path] = ImageEntry.from_dict(rel_path, data)
            except ValueError as exc:
                raise CacheReadError(str(exc)) from exc
        bundles[bundle_id] = inventory
    return bundles


class FingerprintCache:
    """以 bundle 為單位保存上次的圖片清單。

    版本號與目前策略不符時整份快取作廢（一次性重置，非錯誤）。
    """

    def __init__(self, path: Path, version: int, logger=None) -> None:
        self.path = path
        self.version = version
        self.logger = logger or get_logger(self.__class__.__name__)
        self.state = CacheState(version=version)
        self.reset_reason: Optional[str] = None
        self.load_warning: Optional[str] = None

    def load(self) -> CacheState:
        self.state = CacheState(version=self.version)
        self.reset_reason = None
        self.load_warning = None

        if not self.path.exists():
            return self.state

        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            raise CacheAccessError(f"無法讀取快取檔: {self.path} ({exc})") from exc

        try:
            payload = self._decode(raw)
        except CacheReadError as exc:
            self.load_warning = f"快取檔無法解析，改用空快取: {self.path} ({exc})"
            self.logger.warning(self.load_warning)
            return self.state

        if payload.get("version") != self.version:
            self.reset_reason = (
                f"快取版本 {payload.get('version')!r} 與目前版本 {self.version} 不符，"
                "以空快取重新開始（一次性重置）"
            )
            self.logger.info(self.reset_reason)
            return self.state

        try:
            self.state.bundles = _parse_bundles(payload.get("bundles", {}))
        except CacheReadError as exc:
            self.load_warning = f"快取內容格式錯誤，改用空快取: {self.path} ({exc})"
            self.logger.warning(self.load_warning)
        return self.state

    def get(self, bundle_id: str) -> Inventory:
        return dict(self.state.bundles.get(bundle_id, {}))

    def put(self, bundle_id: str, inventory: Inventory) -> None:
        self.state.bundles[bundle_id] = dict(inventory)

    def persist(self, state: Optional[CacheState] = None) -> Path:
        target_state = state or self.state
        temp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w", encoding="utf-8") as handle:
                json.dump(target_state.to_dict(), handle, ensure_ascii=False, indent=2)
            temp_path.replace(self.path)
        except OSError as exc:
            raise CacheAccessError(f"無法寫入快取檔: {self.path} ({exc})") from exc
        return self.path

    @staticmethod
    def _decode(raw: bytes) -> dict[str, Any]:
        try:
            payload = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise CacheReadError(str(exc)) from exc
        if not isinstance(payload, dict):
            raise CacheReadError("最外層必須是物件")
        return payload
