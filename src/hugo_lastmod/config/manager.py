"""設定管理器。

設定分三層，後者覆蓋前者：內建預設值、網站根目錄下的 JSON 設定檔、
執行期以 ``set`` 指定的值（測試與 CLI 使用）。巢狀物件逐鍵合併，
其餘型別（含 list）整個取代。
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Optional

from ..utils.errors import ConfigError
from . import defaults
from .schema import validate_config


def _merge_layers(*layers: dict[str, Any]) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    for layer in layers:
        for key, value in layer.items():
            previous = merged.get(key)
            if isinstance(previous, dict) and isinstance(value, dict):
                merged[key] = _merge_layers(previous, value)
            else:
                merged[key] = copy.deepcopy(value)
    return merged


def _lookup(config: dict[str, Any], dotted_key: str, default: Any = None) -> Any:
    node: Any = config
    for segment in dotted_key.split("."):
        if not isinstance(node, dict) or segment not in node:
            return default
        node = node[segment]
    return node


def _assign(config: dict[str, Any], dotted_key: str, value: Any) -> None:
    *parents, leaf = dotted_key.split(".")
    node = config
    for segment in parents:
        node = node.setdefault(segment, {})
    node[leaf] = value


def _read_json_object(path: Path) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"無法讀取設定檔: {path} ({exc})") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"設定檔 JSON 格式錯誤: {path} ({exc})") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"設定檔最外層必須是物件: {path}")
    return data


def find_config_file(root: Path) -> Optional[Path]:
    """依 ``CONFIG_CANDIDATES`` 順序回傳第一個存在的設定檔。"""
    for name in defaults.CONFIG_CANDIDATES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


class ConfigManager:
    """三層設定管理：預設、使用者、執行期。"""

    def __init__(self, user_config_path: Optional[Path] = None, *, required: bool = False) -> None:
        self.source_path: Optional[Path] = None
        self._user: dict[str, Any] = {}
        self._runtime: dict[str, Any] = {}

        if user_config_path is not None:
            if user_config_path.exists():
                self._user = _read_json_object(user_config_path)
                self.source_path = user_config_path
            elif required:
                raise ConfigError(f"找不到設定檔: {user_config_path}")

        self._rebuild()

    @classmethod
    def discover(cls, root: Path, explicit_path: Optional[Path] = None) -> "ConfigManager":
        """``--config`` 指定的檔案必須存在；否則在 ``root`` 中尋找，找不到就用預設值。"""
        if explicit_path is not None:
            return cls(explicit_path, required=True)
        return cls(find_config_file(root))

    def _rebuild(self) -> None:
        self._config = _merge_layers(defaults.DEFAULT_CONFIG, self._user, self._runtime)

    def get(self, key: str, default: Any = None) -> Any:
        return _lookup(self._config, key, default)

    def set(self, key: str, value: Any) -> None:
        _assign(self._runtime, key, value)
        self._rebuild()

    def validate_config(self) -> list[str]:
        return validate_config(self._config)

    def ensure_valid(self) -> None:
        problems = self.validate_config()
        if problems:
            raise ConfigError("設定值不合法: " + "; ".join(problems))
