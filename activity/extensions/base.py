#!filepath: activity/extensions/base.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from activity.l10n.translator import Translator
from activity.params.classifier import ClassifierFn

# (module, subject, prepared params, l10n) → sentence | None
TranslateFn = Callable[[str, str, Sequence[str], Translator], Optional[str]]


@dataclass(frozen=True)
class Extension:
    """
    一个已安装功能对 activity 的贡献（纯描述，无状态）

    - special_parameters: (module, subject) → position map | None
    - translate:          (module, subject, params, l10n) → 句子 | None
    """

    name: str
    special_parameters: ClassifierFn
    translate: TranslateFn


class ExtensionRegistry:
    """
    ExtensionRegistry

    Registration order is query order for both classification and
    translation. Registering the same name twice replaces the entry
    in place.
    """

    def __init__(self):
        self._extensions: Dict[str, Extension] = {}

    def register(self, extension: Extension) -> Extension:
        self._extensions[extension.name] = extension
        return extension

    def get(self, name: str) -> Extension:
        return self._extensions[name]

    def list(self) -> List[Extension]:
        return list(self._extensions.values())

    def classifiers(self) -> List[ClassifierFn]:
        return [ext.special_parameters for ext in self._extensions.values()]

    def translate(
        self,
        module: str,
        subject: str,
        params: Sequence[str],
        l10n: Translator,
    ) -> Optional[str]:
        for ext in self._extensions.values():
            sentence = ext.translate(module, subject, params, l10n)
            if sentence is not None and sentence is not False:
                return sentence
        return None


def subject_table(module: str, table: Mapping[str, Mapping[int, str]]) -> ClassifierFn:
    """
    静态表 → classifier 函数；不认识的 module / subject 返回 None
    """

    def _classify(app: str, subject: str):
        if app != module:
            return None
        declared = table.get(subject)
        return dict(declared) if declared is not None else None

    return _classify
