"""
统一的控制台输出工具，基于 rich 实现。
所有诊断信息（warning / error）都经由这里输出。
"""
from typing import Any

import click
from rich.console import Console as RichConsole
from rich.markup import escape
from rich.theme import Theme

# 自定义主题
CUSTOM_THEME = Theme({
    "warning": "yellow bold",
    "error": "red bold",
    "heading": "bold underline",
})

# 全局控制台实例（单例）
console = RichConsole(theme=CUSTOM_THEME, soft_wrap=True)


# --- 便捷输出函数 ---

def warning(message: str):
    """黄色警告提示"""
    console.print(f"[warning]WARNING[/warning]: {escape(message)}")


def error(message: str):
    """红色错误提示"""
    console.print(f"[error]ERROR[/error]: {escape(message)}")


def heading(title: str):
    """标题输出"""
    console.print(f"\n[heading]{escape(title)}[/heading]")


def print_json(data: Any):
    """美化输出 JSON 数据"""
    console.print_json(data=data)


def plain(text: str = ""):
    """原样输出文本：不解析 markup，不展开制表符，不过滤控制字符"""
    click.echo(text, color=True)
