"""index.md front matter 的結構。"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional

_KEY_PATTERN = re.compile(r"^([A-Za-z0-9_][A-Za-z0-9_.-]*):")


@dataclass(frozen=True)
class HeaderLine:
    """front matter 的一行。

    ``key`` 只在行首即為 ``key:`` 時才有值；其餘行（註解、縮排的巢狀值、
    空行）視為不透明內容，原樣保留 ``raw``。
    """

    raw: str
    key: Optional[str] = None

    @classmethod
    def parse(cls, raw: str) -> "HeaderLine":
        match = _KEY_PATTERN.match(raw)
        return cls(raw=raw, key=match.group(1) if match else None)

    @property
    def is_lastmod(self) -> bool:
        return self.key == "lastmod"


@dataclass
class ParsedDescriptor:
    valid: bool
    current_lastmod: str = ""
    header: List[HeaderLine] = field(default_factory=list)
    body_lines: List[str] = field(default_factory=list)
    preamble: List[str] = field(default_factory=list)
    bom: str = ""
    error: Optional[str] = None
