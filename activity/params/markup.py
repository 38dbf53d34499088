#!filepath: activity/params/markup.py
from __future__ import annotations

from typing import Mapping, Optional
from urllib.parse import urlencode

from markupsafe import Markup, escape

"""
Markup helpers

Every fragment that ends up in HTML goes through Markup.format(), which
escapes each substituted value unless it is already Markup. Only catalog
text and percent-encoded URLs are ever wrapped as Markup directly.
"""

STRONG = Markup("<strong>{}</strong>")
AVATAR = Markup('<div class="avatar" data-user="{}"></div>')
LINK = Markup('<a class="{cls}" href="{href}"{title}>{text}</a>')
TITLE = Markup(' title="{}"')


def strong(value) -> Markup:
    return STRONG.format(value)


def avatar(user: str) -> Markup:
    return AVATAR.format(user)


def trusted(text: str) -> Markup:
    """
    catalog 文本（翻译模板的结果）视为可信
    """
    return Markup(text)


def href(base: str, query: Mapping[str, str]) -> Markup:
    """
    base?k=v&k=v

    query 值经 urlencode 百分号编码（/ → %2F），因此只剩安全字符；
    base 来自配置，仍做转义。
    """
    return escape(base) + Markup("?" + urlencode(list(query.items())))


def link(target: Markup, text: str, cls: str, title: Optional[str] = None) -> Markup:
    return LINK.format(
        cls=cls,
        href=target,
        title=TITLE.format(title) if title is not None else Markup(""),
        text=text,
    )
