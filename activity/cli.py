#!filepath: activity/cli.py
from typing import List, Optional

import typer
from rich import print

from activity import __version__
from activity.config.app_config import AppConfig
from activity.extensions import default_registry
from activity.formatter import ActivityEvent, ActivityFormatter
from activity.l10n.translator import Translator
from activity.params.helper import ParameterHelper
from activity.utils.errors import ActivityError
from activity.utils.logger import init_logging

app = typer.Typer(help="Activity parameter rendering CLI")


def _load_config(config: Optional[str]) -> AppConfig:
    try:
        cfg = AppConfig.load(config)
    except ActivityError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)
    init_logging(cfg.log)
    return cfg


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def render(
    module: str,
    subject: str,
    params: List[str] = typer.Argument(None),
    item: List[str] = typer.Option(None, "--item", help="多值参数的一个条目（可重复）"),
    items_at: Optional[int] = typer.Option(None, "--items-at", help="多值参数插入的位置，默认放在最后"),
    user: str = typer.Option("", help="用户名（决定文件视图根目录 /<user>/files）"),
    strip_path: bool = typer.Option(False, "--strip-path", help="文件只显示文件名"),
    highlight: bool = typer.Option(False, "--highlight", help="输出 HTML 标记"),
    language: Optional[str] = typer.Option(None, help="覆盖配置中的语言"),
    config: Optional[str] = typer.Option(None, help="YAML 配置文件路径"),
):
    """
    渲染一条 activity

    位置参数原样传递；--item 收集的条目组成一个多值参数，
    插入到 --items-at 指定的位置
    """
    cfg = _load_config(config)

    try:
        l10n = Translator.load(language or cfg.locale.language, cfg.locale.catalog_dir)
    except ActivityError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    registry = default_registry()
    helper = ParameterHelper.from_config(cfg, user=user, l10n=l10n)
    formatter = ActivityFormatter.build(helper, registry)

    values = list(params or [])
    if item:
        position = len(values) if items_at is None else items_at
        values.insert(position, tuple(item))
    event = ActivityEvent(module=module, subject=subject, params=tuple(values))

    typer.echo(formatter.format_event(event, strip_path=strip_path, highlight=highlight))


@app.command()
def classify(module: str, subject: str):
    """
    打印 (module, subject) 的参数分类
    """
    registry = default_registry()
    helper = ParameterHelper.from_config(AppConfig(), user="")
    formatter = ActivityFormatter.build(helper, registry)

    types = formatter.helper.get_special_parameter_list(module, subject)
    if not types:
        print(f"[yellow]no classification for {module}/{subject}[/yellow]")
        return

    for position, typ in sorted(types.items()):
        print(f"{position}: {typ.value}")


if __name__ == "__main__":
    app()
