#!filepath: activity/params/aggregator.py
from __future__ import annotations

from typing import List, Sequence

from markupsafe import escape

from activity.l10n.translator import Translator
from activity.params.renderer import ParameterRenderer
from activity.params.types import ParameterType

# ≥ TRUNCATE_AT 个条目时只列出前 SHOWN 个
TRUNCATE_AT = 5
SHOWN = 3


class ArrayAggregator:
    """
    ArrayAggregator

    多值参数 → 一句本地化文本

        []                → ""
        [A]               → A
        [A, B]            → "%s and %s"(A, B)
        [A, B, C, D]      → "%s and %s"("A, B, C", D)
        [A, B, C, D, E..] → "%s and %n more"("A, B, C", n-3)

    每个条目按 item_type 交给 renderer 的单值规则；
    不高亮时条目一律 HTML 转义（无论类型），
    highlight 只影响单个条目，不改变连接模板。
    """

    def __init__(self, renderer: ParameterRenderer):
        self.renderer = renderer

    @property
    def l10n(self) -> Translator:
        return self.renderer.l10n

    def set_l10n(self, l10n: Translator) -> None:
        self.renderer.set_l10n(l10n)

    def join(
        self,
        items: Sequence[str],
        item_type=ParameterType.UNCLASSIFIED,
        strip_path: bool = False,
        highlight: bool = False,
    ) -> str:
        if not items:
            return ""

        count = len(items)
        shown = items[:SHOWN] if count >= TRUNCATE_AT else items
        rendered = self._render_items(shown, item_type, strip_path, highlight)

        if count == 1:
            return rendered[0]

        separator = self.l10n.t(", ")

        if count >= TRUNCATE_AT:
            head = separator.join(rendered)
            return self.l10n.n("%s and %n more", "%s and %n more", count - SHOWN, [head])

        head = separator.join(rendered[:-1])
        return self.l10n.t("%s and %s", [head, rendered[-1]])

    def _render_items(self, items, item_type, strip_path: bool, highlight: bool) -> List[str]:
        typ = ParameterType.coerce(item_type)

        if typ is ParameterType.FILE:
            return [str(self.renderer.format_file(item, strip_path, highlight)) for item in items]
        if highlight:
            return [str(self.renderer.format_plain(item, True)) for item in items]
        # 与 file 条目一致：拼接结果里的条目一律转义
        return [str(escape(item)) for item in items]
