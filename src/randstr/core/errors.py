"""随机字符串生成相关异常。"""


class RandomStringError(Exception):
    """randstr 所有异常的基类。"""


class InvalidArgument(RandomStringError, ValueError):
    """参数非法（例如长度为负数）。"""


class RandomSourceUnavailable(RandomStringError, RuntimeError):
    """系统安全随机源不可用。

    不会降级为非加密随机数，调用方自行决定是否重试。
    """
