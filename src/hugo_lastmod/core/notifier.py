"""寫入 descriptor 後的通知（git add）。"""

from __future__ import annotations

import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from ..utils import path_utils
from ..utils.logger import get_logger


class WriteNotifier(ABC):
    @abstractmethod
    def notify_written(self, path: Path) -> None:
        """descriptor 已寫入磁碟後呼叫；實作不得拋出例外。"""


class NullNotifier(WriteNotifier):
    def notify_written(self, path: Path) -> None:
        return None


class GitAddNotifier(WriteNotifier):
    """對剛寫入的檔案執行 ``git add``，失敗一律忽略。"""

    def __init__(self, project_root: Path, logger=None, git_executable: str = "git") -> None:
        self.project_root = project_root
        self.git_executable = git_executable
        self.logger = logger or get_logger(self.__class__.__name__)

    def notify_written(self, path: Path) -> None:
        rel_path = path_utils.to_project_relative(path, self.project_root)
        try:
            result = subprocess.run(
                [self.git_executable, "add", "--", rel_path],
                cwd=self.project_root,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except OSError as exc:
            self.logger.debug(f"git add 無法執行: {rel_path} ({exc})")
            return
        if result.returncode != 0:
            self.logger.debug(f"git add 回傳 {result.returncode}: {rel_path}")
