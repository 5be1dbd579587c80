"""randstr CLI 入口。"""

import click

from . import __version__
from .commands.config_cmd import config
from .commands.env_cmd import env_cmd
from .commands.gen import gen


@click.group()
@click.version_option(version=__version__, prog_name="randstr")
def main() -> None:
    """randstr: 安全随机字符串生成工具

    支持直接生成字符串，以及为 .env 文件自动填充密钥。
    """
    pass


main.add_command(gen)
main.add_command(env_cmd)
main.add_command(config)


if __name__ == "__main__":
    main()
