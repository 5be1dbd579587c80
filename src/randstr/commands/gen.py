"""gen 命令：生成随机字符串。"""

import sys

import click

from ..core.errors import InvalidArgument, RandomSourceUnavailable
from ..core.generator import generate
from ..core.settings import default_length
from ..utils.console import error


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("length", type=int, required=False)
@click.option("-n", "--count", type=int, default=1, show_default=True, help="生成数量")
def gen(length: int | None, count: int) -> None:
    """生成安全随机字符串（字母+数字），每行一个。

    LENGTH: 字符串长度，省略时使用配置的默认长度。
    """
    if count < 1:
        error(f"数量必须为正数: {count}")
        sys.exit(1)

    if length is None:
        length = default_length()

    try:
        values = [generate(length) for _ in range(count)]
    except InvalidArgument as e:
        error(str(e))
        sys.exit(1)
    except RandomSourceUnavailable as e:
        error(f"安全随机源不可用，已中止: {e}")
        sys.exit(1)

    for value in values:
        click.echo(value)
