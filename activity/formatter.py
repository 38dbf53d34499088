#!filepath: activity/formatter.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple, Union

from activity.extensions.base import ExtensionRegistry
from activity.params.helper import ParameterHelper
from activity.utils.logger import logs


@dataclass(frozen=True)
class ActivityEvent:
    """
    一条已记录的 activity（只读视图）

    module   所属功能，例如 "files"
    subject  句子模板的 key，例如 "shared_with_by"
    params   存储的原始参数，顺序有意义；多值参数为 tuple
    """

    module: str
    subject: str
    params: Tuple[Union[str, Tuple[str, ...]], ...] = field(default_factory=tuple)


class ActivityFormatter:
    """
    event → 一句可展示的文本

    1) classifier 给出 position → type
    2) helper 逐个格式化参数
    3) 第一个认识 (module, subject) 的 extension 负责翻译

    没有 extension 翻译时退回 subject key 本身。
    """

    def __init__(self, helper: ParameterHelper, registry: ExtensionRegistry):
        self.helper = helper
        self.registry = registry

    @classmethod
    def build(cls, helper: ParameterHelper, registry: ExtensionRegistry) -> "ActivityFormatter":
        """
        helper 的 classifier 追加 registry 中尚未注册的分类函数
        （同一个 helper 可多次 build）
        """
        known = helper.classifier.providers
        for provider in registry.classifiers():
            if provider not in known:
                helper.classifier.register(provider)
        return cls(helper, registry)

    def format_event(self, event: ActivityEvent, strip_path: bool = False, highlight: bool = False) -> str:
        classification = self.helper.get_special_parameter_list(event.module, event.subject)
        prepared = self.helper.prepare_parameters(
            list(event.params), classification, strip_path, highlight
        )

        sentence = self.registry.translate(event.module, event.subject, prepared, self.helper.l10n)
        if sentence is None:
            logs.warning(f"[Formatter] no translation for {event.module}/{event.subject}")
            return event.subject

        return sentence
