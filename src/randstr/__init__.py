"""randstr: 安全随机字符串生成。"""

from .core.errors import InvalidArgument, RandomSourceUnavailable, RandomStringError
from .core.generator import ALPHABET, RandomSource, generate

__version__ = "0.1.0"

__all__ = [
    "ALPHABET",
    "InvalidArgument",
    "RandomSource",
    "RandomSourceUnavailable",
    "RandomStringError",
    "generate",
]
