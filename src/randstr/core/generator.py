"""安全随机字符串生成。"""

import secrets
from typing import Optional, Protocol

from .errors import InvalidArgument, RandomSourceUnavailable

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"


class IndexSource(Protocol):
    def randbelow(self, n: int) -> int: ...


class RandomSource:
    """操作系统熵池（os.urandom）的显式句柄。

    不持有任何可变状态，多线程共享安全；并发安全性由操作系统保证。
    """

    def randbelow(self, n: int) -> int:
        """返回 [0, n) 内均匀分布的整数。

        secrets.randbelow 基于 getrandbits 做拒绝采样，不存在取模偏差。
        """
        if n <= 0:
            raise InvalidArgument(f"上界必须为正数: {n}")
        return secrets.randbelow(n)


def generate(length: int, source: Optional[IndexSource] = None) -> str:
    """生成指定长度的安全随机字符串（字母+数字）。

    Args:
        length: 字符串长度，必须为非负整数。0 返回空字符串。
        source: 随机索引来源，默认每次调用新建 RandomSource。

    Raises:
        InvalidArgument: length 不是非负整数。
        RandomSourceUnavailable: 安全随机源无法读取。
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidArgument(f"长度必须为整数: {length!r}")
    if length < 0:
        raise InvalidArgument(f"长度不能为负数: {length}")

    rng = source if source is not None else RandomSource()
    size = len(ALPHABET)
    try:
        return "".join(ALPHABET[rng.randbelow(size)] for _ in range(length))
    except (OSError, NotImplementedError) as e:
        raise RandomSourceUnavailable(f"无法读取安全随机源: {e}") from e
