"""env 命令：为 .env 文件自动生成密钥。"""

import sys
from pathlib import Path

import click

from ..core.envfile import fill_secrets, load_env, parse_key_spec
from ..core.errors import InvalidArgument, RandomSourceUnavailable
from ..core.settings import default_length
from ..utils.console import confirm, error, info, print_panel, success, warning


@click.command(name="env")
@click.argument("env_file", type=click.Path(dir_okay=False))
@click.argument("keys", nargs=-1, required=True)
@click.option("--force", is_flag=True, help="覆盖已有的值")
@click.option("-y", "--yes", is_flag=True, help="跳过确认")
def env_cmd(env_file: str, keys: tuple[str, ...], force: bool, yes: bool) -> None:
    """为 .env 文件中缺失的变量生成安全随机值。

    KEYS: 变量名，可写作 KEY:LENGTH 指定长度。
    """
    env_path = Path(env_file).expanduser().resolve()

    try:
        length = default_length()
        specs = [parse_key_spec(k, length) for k in keys]
    except InvalidArgument as e:
        error(str(e))
        sys.exit(1)

    try:
        env = load_env(env_path)
    except (OSError, UnicodeDecodeError) as e:
        error(f"无法读取 {env_path}: {e}")
        sys.exit(1)

    if force:
        existing = [key for key, _ in specs if env.get(key)]
        if existing and not yes:
            warning(f"以下变量将被覆盖: {', '.join(existing)}")
            if not confirm("是否继续?"):
                info("已取消。")
                return

    try:
        generated = fill_secrets(env_path, specs, force=force, env=env)
    except RandomSourceUnavailable as e:
        error(f"安全随机源不可用，已中止: {e}")
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        error(f"无法写入 {env_path}: {e}")
        sys.exit(1)

    if not generated:
        info("所有变量均已存在，无需生成。")
        return

    for key in generated:
        info(f"已自动生成 {key}")
    print_panel("randstr env", f"文件: {env_path}\n生成: {len(generated)} 个变量")
    success(f".env 配置已保存: {env_path}")
