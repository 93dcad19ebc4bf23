"""日誌工具。"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

DEFAULT_LOG_NAME = "hugo-lastmod-error.log"


def get_logger(name: str, log_file: Optional[Path] = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)

    log_path = log_file or (Path.cwd() / DEFAULT_LOG_NAME)
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")

    # delay=True：只有真的寫入警告時才建立檔案，避免在網站目錄留下空檔
    file_handler = logging.FileHandler(log_path, encoding="utf-8", delay=True)
    file_handler.setLevel(logging.WARNING)
    file_handler.setFormatter(formatter)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(logging.INFO)
    stream_handler.setFormatter(logging.Formatter("%(message)s"))

    logger.addHandler(file_handler)
    logger.addHandler(stream_handler)

    return logger
