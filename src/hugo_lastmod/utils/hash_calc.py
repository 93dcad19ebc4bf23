"""Hash calculation helpers."""

from __future__ import annotations

import hashlib
from pathlib import Path


def is_supported_algorithm(algorithm: str) -> bool:
    try:
        hashlib.new(algorithm)
    except (TypeError, ValueError):
        return False
    return True


def compute_digest(path: Path, algorithm: str = "sha256", chunk_size_kb: int = 1024) -> str:
    """以串流方式計算檔案摘要。

    檔案消失或無法讀取時直接拋出 ``OSError``，由呼叫端決定是否略過。
    """
    hasher = hashlib.new(algorithm)
    with path.open("rb") as handle:
        while True:
            chunk = handle.read(chunk_size_kb * 1024)
            if not chunk:
                break
            hasher.update(chunk)
    return hasher.hexdigest()
