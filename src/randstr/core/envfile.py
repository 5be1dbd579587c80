""".env 文件密钥填充。"""

import re
from pathlib import Path
from typing import Optional

from .errors import InvalidArgument
from .generator import generate

KEY_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def parse_key_spec(spec: str, default: int) -> tuple[str, int]:
    """解析 `KEY` 或 `KEY:LENGTH` 形式的参数。"""
    key, sep, length_str = spec.partition(":")
    key = key.strip()
    if not KEY_PATTERN.fullmatch(key):
        raise InvalidArgument(f"无效的变量名: {spec!r}")
    if not sep:
        return key, default
    length_str = length_str.strip()
    if not (length_str.isascii() and length_str.isdigit()):
        raise InvalidArgument(f"无效的长度: {spec!r}")
    return key, int(length_str)


def _split_line(line: str) -> Optional[tuple[str, str]]:
    """拆分 `KEY=VALUE` 行，注释、空行和无等号的行返回 None。"""
    stripped = line.strip()
    if stripped.startswith("#") or "=" not in stripped:
        return None
    key, _, value = stripped.partition("=")
    return key.strip(), value.strip()


def load_env(env_path: Path) -> dict[str, str]:
    """解析 .env 文件为字典。"""
    if not env_path.exists():
        return {}
    lines = env_path.read_text(encoding="utf-8").splitlines()
    return dict(pair for pair in map(_split_line, lines) if pair is not None)


def save_env(env_path: Path, data: dict[str, str]) -> None:
    """将字典写入 .env 文件。保留原有注释行。"""
    lines: list[str] = []
    written_keys: set[str] = set()

    if env_path.exists():
        for line in env_path.read_text(encoding="utf-8").splitlines():
            pair = _split_line(line)
            if pair is None or pair[0] not in data or pair[0] in written_keys:
                lines.append(line)
                continue
            key = pair[0]
            lines.append(f"{key}={data[key]}")
            written_keys.add(key)

    # 追加新的 key
    for key, value in data.items():
        if key not in written_keys:
            lines.append(f"{key}={value}")

    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def fill_secrets(
    env_path: Path,
    specs: list[tuple[str, int]],
    *,
    force: bool = False,
    env: Optional[dict[str, str]] = None,
) -> list[str]:
    """为缺失或为空的变量生成随机值并写回文件。

    Args:
        env_path: .env 文件路径，不存在时会新建。
        specs: (变量名, 长度) 列表。
        force: 是否覆盖已有的值。
        env: 已加载的内容，省略时从 env_path 读取。

    Returns:
        本次生成了新值的变量名。
    """
    if env is None:
        env = load_env(env_path)

    generated: list[str] = []
    for key, length in specs:
        if env.get(key) and not force:
            continue
        env[key] = generate(length)
        generated.append(key)

    if generated:
        save_env(env_path, env)
    return generated
