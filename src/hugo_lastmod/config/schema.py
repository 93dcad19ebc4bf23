"""設定檔驗證邏輯。"""

from __future__ import annotations

from typing import Any

from ..utils.hash_calc import is_supported_algorithm

FINGERPRINT_STRATEGIES = {"mtime", "hash"}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def validate_config(config: dict[str, Any]) -> list[str]:
    errors: list[str] = []

    def add_error(path: str, message: str) -> None:
        errors.append(f"{path}: {message}")

    target_dirs = config.get("targetDirs")
    if not _is_str_list(target_dirs) or not target_dirs:
        add_error("targetDirs", "必須是非空字串清單")

    extensions = config.get("extensions")
    if not _is_str_list(extensions) or not extensions:
        add_error("extensions", "必須是非空字串清單")

    max_depth = config.get("maxDepth")
    if not _is_int(max_depth) or max_depth < 1:
        add_error("maxDepth", "必須是大於等於 1 的整數")

    delimiter = config.get("frontmatterDelim")
    if not isinstance(delimiter, str) or not delimiter.strip():
        add_error("frontmatterDelim", "必須是非空字串")

    if not isinstance(config.get("gitAdd"), bool):
        add_error("gitAdd", "必須是布林值")

    descriptor_names = config.get("descriptorNames")
    if not _is_str_list(descriptor_names) or not descriptor_names:
        add_error("descriptorNames", "必須是非空字串清單")

    cache_file = config.get("cacheFile")
    if not isinstance(cache_file, str) or not cache_file.strip():
        add_error("cacheFile", "必須是非空字串")

    fingerprint = config.get("fingerprint", {})
    if not isinstance(fingerprint, dict):
        add_error("fingerprint", "必須是物件")
        return errors

    strategy = fingerprint.get("strategy")
    if strategy not in FINGERPRINT_STRATEGIES:
        add_error("fingerprint.strategy", "必須是 mtime 或 hash")

    algorithm = fingerprint.get("algorithm")
    if not isinstance(algorithm, str) or not is_supported_algorithm(algorithm):
        add_error("fingerprint.algorithm", "不支援的 hash 演算法")

    chunk_size_kb = fingerprint.get("chunkSizeKb")
    if not _is_int(chunk_size_kb) or chunk_size_kb <= 0:
        add_error("fingerprint.chunkSizeKb", "必須是正整數")

    parallel_workers = fingerprint.get("parallelWorkers")
    if not _is_int(parallel_workers) or parallel_workers <= 0:
        add_error("fingerprint.parallelWorkers", "必須是正整數")

    return errors
