"""設定模組。"""

from .manager import ConfigManager, find_config_file
from .schema import validate_config

__all__ = ["ConfigManager", "find_config_file", "validate_config"]
