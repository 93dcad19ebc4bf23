"""Bundle 圖片清單掃描。"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Optional

from ..config import ConfigManager
from ..models import ImageEntry, Inventory
from ..utils import path_utils
from ..utils.errors import FilesystemError
from ..utils.logger import get_logger
from .lastmod_policy import LastmodStrategy


class InventoryScanner:
    def __init__(
        self,
        config: ConfigManager,
        strategy: LastmodStrategy,
        project_root: Path,
        logger=None,
    ) -> None:
        self.strategy = strategy
        self.project_root = project_root
        self.logger = logger or get_logger(self.__class__.__name__)
        self.extensions = path_utils.normalize_extensions(config.get("extensions", []))
        self.max_depth = int(config.get("maxDepth", 1))
        self.parallel_workers = int(config.get("fingerprint.parallelWorkers", 1))

    def scan(self, bundle_dir: Path) -> Inventory:
        files = self.list_image_files(bundle_dir)
        if self.strategy.supports_parallel and self.parallel_workers > 1 and len(files) > 1:
            entries = self._fingerprint_parallel(files)
        else:
            entries = {}
            for path in files:
                entry = self._fingerprint(path)
                if entry is not None:
                    entries[entry.rel_path] = entry

        # 平行計算完成的順序不固定，依列舉順序重建
        ordered: Inventory = {}
        for path in files:
            rel_path = self._rel_path(path)
            if rel_path in entries:
                ordered[rel_path] = entries[rel_path]
        return ordered

    def list_image_files(self, bundle_dir: Path) -> list[Path]:
        try:
            entries = self._sorted_entries(bundle_dir)
        except OSError as exc:
            raise FilesystemError(bundle_dir, f"無法列出資料夾 ({exc})") from exc

        files: list[Path] = []
        self._walk(entries, 0, files)
        return files

    def _walk(self, entries: list[os.DirEntry], depth: int, files: list[Path]) -> None:
        for entry in entries:
            if path_utils.should_exclude_entry(entry, self.logger):
                continue
            try:
                is_file = entry.is_file(follow_symlinks=False)
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError:
                continue

            if is_file:
                if path_utils.has_extension(entry.name, self.extensions):
                    files.append(Path(entry.path))
            elif is_dir and depth + 1 < self.max_depth:
                try:
                    children = self._sorted_entries(Path(entry.path))
                except OSError as exc:
                    self.logger.warning(f"無法列出子資料夾，略過: {entry.path} ({exc})")
                    continue
                self._walk(children, depth + 1, files)

    def _sorted_entries(self, directory: Path) -> list[os.DirEntry]:
        with os.scandir(directory) as iterator:
            return sorted(iterator, key=lambda item: item.name)

    def _rel_path(self, path: Path) -> str:
        return path_utils.to_project_relative(path, self.project_root)

    def _fingerprint(self, path: Path) -> Optional[ImageEntry]:
        try:
            return self.strategy.fingerprint(path, self._rel_path(path))
        except OSError as exc:
            self.logger.debug(f"檔案在掃描期間消失或無法讀取，略過: {path} ({exc})")
            return None

    def _fingerprint_parallel(self, files: list[Path]) -> dict[str, ImageEntry]:
        results: dict[str, ImageEntry] = {}
        with ThreadPoolExecutor(max_workers=self.parallel_workers) as executor:
            futures = [executor.submit(self._fingerprint, path) for path in files]
            for future in as_completed(futures):
                entry = future.result()
                if entry is not None:
                    results[entry.rel_path] = entry
        return results
