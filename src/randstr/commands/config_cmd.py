"""config 命令：查看与修改全局配置。"""

import sys

import click

from ..core.errors import InvalidArgument
from ..core.settings import (
    DEFAULT_LENGTH,
    LENGTH_ENV,
    default_length,
    env_length,
    get_global_config_dir,
    load_global_config,
    set_default_length,
)
from ..utils.console import console, create_table, error, info, success


@click.group()
def config() -> None:
    """查看与修改全局配置。"""
    pass


@config.command("show")
def show() -> None:
    """显示当前生效的配置。"""
    data = load_global_config()
    table = create_table("配置项", "值", "来源")

    if env_length() is not None:
        source = f"环境变量 {LENGTH_ENV}"
    elif "default_length" in data:
        source = "配置文件"
    else:
        source = f"内置默认 ({DEFAULT_LENGTH})"
    table.add_row("default_length", str(default_length()), source)
    console.print(table)
    info(f"配置目录: {get_global_config_dir()}")


@config.command("set-length", context_settings={"ignore_unknown_options": True})
@click.argument("length", type=int)
def set_length(length: int) -> None:
    """设置默认生成长度。"""
    try:
        set_default_length(length)
    except InvalidArgument as e:
        error(str(e))
        sys.exit(1)
    success(f"默认长度已设置为 {length}")
