"""Bundle 內單一圖片的指紋記錄。"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class ImageEntry:
    rel_path: str
    size: int
    mtime_ms: Optional[int] = None
    hash: Optional[str] = None

    @property
    def fingerprint(self) -> Union[int, str, None]:
        if self.hash is not None:
            return self.hash
        return self.mtime_ms

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {}
        if self.hash is not None:
            payload["hash"] = self.hash
        if self.mtime_ms is not None:
            payload["mtime"] = self.mtime_ms
        payload["size"] = self.size
        return payload

    @classmethod
    def from_dict(cls, rel_path: str, data: dict[str, Any]) -> "ImageEntry":
        size = data.get("size")
        mtime = data.get("mtime")
        hash_value = data.get("hash")
        if not isinstance(size, int) or isinstance(size, bool):
            raise ValueError(f"{rel_path}: size 必須是整數")
        if mtime is not None and (not isinstance(mtime, (int, float)) or isinstance(mtime, bool)):
            raise ValueError(f"{rel_path}: mtime 必須是數值")
        if hash_value is not None and not isinstance(hash_value, str):
            raise ValueError(f"{rel_path}: hash 必須是字串")
        return cls(
            rel_path=rel_path,
            size=size,
            mtime_ms=int(mtime) if mtime is not None else None,
            hash=hash_value,
        )


Inventory = Dict[str, ImageEntry]
