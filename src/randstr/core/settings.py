"""全局配置（~/.config/randstr/config.json）。"""

import json
import os
from pathlib import Path

from ..utils.console import warning
from .errors import InvalidArgument

DEFAULT_LENGTH = 32
LENGTH_ENV = "RANDSTR_LENGTH"


def get_global_config_dir() -> Path:
    """返回全局配置目录。"""
    path = Path.home() / ".config" / "randstr"
    path.mkdir(parents=True, exist_ok=True)
    return path


def load_global_config() -> dict[str, object]:
    """加载全局配置。文件损坏时给出警告并返回空配置。"""
    config_path = get_global_config_dir() / "config.json"
    if not config_path.exists():
        return {}
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        warning(f"无法读取配置文件 {config_path}: {e}")
        return {}
    if not isinstance(data, dict):
        warning(f"配置文件格式错误，已忽略: {config_path}")
        return {}
    return data


def save_global_config(config: dict[str, object]) -> None:
    """保存全局配置。"""
    config_path = get_global_config_dir() / "config.json"
    config_path.write_text(
        json.dumps(config, indent=2, ensure_ascii=False), encoding="utf-8"
    )


def _as_length(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not (value.isascii() and value.isdigit()):
            return None
        return int(value)
    if isinstance(value, int) and value >= 0:
        return value
    return None


def env_length() -> int | None:
    """返回环境变量 RANDSTR_LENGTH 中的有效长度，未设置或无效时返回 None。"""
    return _as_length(os.environ.get(LENGTH_ENV))


def default_length() -> int:
    """返回默认长度。优先级: 环境变量 > 全局配置 > DEFAULT_LENGTH。"""
    # 1. 环境变量
    if env_value := os.environ.get(LENGTH_ENV):
        length = env_length()
        if length is not None:
            return length
        warning(f"忽略无效的 {LENGTH_ENV}={env_value!r}")

    # 2. 全局配置
    length = _as_length(load_global_config().get("default_length"))
    if length is not None:
        return length

    # 3. 回退到硬编码默认值
    return DEFAULT_LENGTH


def set_default_length(length: int) -> None:
    """设置默认长度并写入全局配置。"""
    if length < 0:
        raise InvalidArgument(f"长度不能为负数: {length}")
    config = load_global_config()
    config["default_length"] = length
    save_global_config(config)
