"""工具模組。"""

from . import hash_calc, path_utils, reporting, time_utils

__all__ = ["hash_calc", "path_utils", "reporting", "time_utils"]
