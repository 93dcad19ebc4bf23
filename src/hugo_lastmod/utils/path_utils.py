"""路徑處理工具。"""

from __future__ import annotations

import glob
import os
from pathlib import Path
from typing import Iterable


def expand_target_dirs(patterns: Iterable[str], root: Path) -> list[Path]:
    """展開 targetDirs 的 glob pattern，只回傳存在的資料夾。

    每個 pattern 的結果依名稱排序，跨 pattern 去除重複但保留先後順序。
    """
    results: list[Path] = []
    seen: set[Path] = set()
    for pattern in patterns:
        for match in sorted(glob.glob(pattern, root_dir=root)):
            candidate = Path(os.path.normpath(root / match))
            if candidate in seen or not candidate.is_dir():
                continue
            seen.add(candidate)
            results.append(candidate)
    return results


def to_project_relative(path: Path, root: Path) -> str:
    return Path(os.path.relpath(path, root)).as_posix()


def should_exclude_entry(entry: os.DirEntry, logger=None) -> bool:
    try:
        if entry.is_symlink():
            if logger is not None:
                logger.debug(f"SKIPPED_SYMLINK: {entry.path}")
            return True
    except OSError:
        return True
    return False


def normalize_extensions(extensions: Iterable[str]) -> tuple[str, ...]:
    return tuple(
        str(ext).strip().lower().lstrip(".")
        for ext in extensions
        if str(ext).strip().lstrip(".")
    )


def has_extension(name: str, extensions: Iterable[str]) -> bool:
    lowered = name.lower()
    return any(lowered.endswith("." + ext) for ext in extensions)
