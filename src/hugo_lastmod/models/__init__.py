"""資料模型模組。"""

from .bundle_outcome import BundleOutcome, BundleState
from .descriptor import HeaderLine, ParsedDescriptor
from .diff_result import DiffResult
from .error_record import ErrorCode, ErrorLevel, ProcessError
from .image_entry import ImageEntry, Inventory
from .run_stats import RunStats

__all__ = [
    "BundleOutcome",
    "BundleState",
    "DiffResult",
    "ErrorCode",
    "ErrorLevel",
    "HeaderLine",
    "ImageEntry",
    "Inventory",
    "ParsedDescriptor",
    "ProcessError",
    "RunStats",
]
