"""單一 bundle 的處理結果。"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .diff_result import DiffResult


class BundleState(str, Enum):
    NO_IMAGES = "NO_IMAGES"
    UNCHANGED = "UNCHANGED"
    INVALID_DESCRIPTOR = "INVALID_DESCRIPTOR"
    UPDATED = "UPDATED"
    SCAN_FAILED = "SCAN_FAILED"
    WRITE_FAILED = "WRITE_FAILED"


@dataclass
class BundleOutcome:
    bundle_id: str
    state: BundleState
    diff: DiffResult = field(default_factory=DiffResult)
    image_count: int = 0
    descriptor_path: Optional[str] = None
    previous_lastmod: Optional[str] = None
    new_lastmod: Optional[str] = None
    reason: Optional[str] = None
