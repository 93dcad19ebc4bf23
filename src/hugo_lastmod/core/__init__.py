"""核心流程模組。"""

from .descriptor import (
    find_descriptor,
    parse_descriptor,
    read_descriptor,
    render_descriptor,
    write_descriptor,
)
from .differ import diff_inventories
from .fingerprint_cache import CacheState, FingerprintCache
from .lastmod_policy import (
    HashStrategy,
    LastmodDecision,
    LastmodStrategy,
    TimestampStrategy,
    build_strategy,
)
from .notifier import GitAddNotifier, NullNotifier, WriteNotifier
from .pipeline import LastmodPipeline, PipelineResult
from .scanner import InventoryScanner

__all__ = [
    "CacheState",
    "FingerprintCache",
    "GitAddNotifier",
    "HashStrategy",
    "InventoryScanner",
    "LastmodDecision",
    "LastmodPipeline",
    "LastmodStrategy",
    "NullNotifier",
    "PipelineResult",
    "TimestampStrategy",
    "WriteNotifier",
    "build_strategy",
    "diff_inventories",
    "find_descriptor",
    "parse_descriptor",
    "read_descriptor",
    "render_descriptor",
    "write_descriptor",
]
