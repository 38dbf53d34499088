#!filepath: activity/l10n/translator.py
from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import yaml

from activity.utils.errors import CatalogError
from activity.utils.logger import logs

"""
Translator (locale context)

Catalog file: <catalog_dir>/<language>.yml

    "%s and %s": "%s und %s"
    "%s and %n more":
      - "%s und %n weiterer"
      - "%s und %n weitere"

Keys are the English source strings. A missing key falls back to the
key itself, so an empty catalog is plain English.

Placeholders (printf style):
    %s      next positional argument
    %1$s    argument by 1-based index
    %n      plural count
    %%      literal percent
"""

CATALOG_DIR = Path(__file__).resolve().parent

_PLACEHOLDER = re.compile(r"%(?:(\d+)\$)?([sdn%])")


def _substitute(template: str, params: Sequence[Any], count: Optional[int] = None) -> str:
    params = list(params)
    state = {"next": 0}

    def repl(m: re.Match) -> str:
        index, kind = m.group(1), m.group(2)

        if kind == "%":
            return "%"
        if kind == "n":
            return str(count) if count is not None else m.group(0)

        if index is not None:
            pos = int(index) - 1
        else:
            pos = state["next"]
            state["next"] += 1

        if pos < 0 or pos >= len(params):
            # 参数不足：保留占位符原样
            return m.group(0)

        value = params[pos]
        if kind == "d":
            try:
                return str(int(value))
            except (TypeError, ValueError):
                return str(value)
        return str(value)

    return _PLACEHOLDER.sub(repl, template)


class Translator:
    """
    查表 + 替换参数

    不持有全局状态；renderer / aggregator 通过 set_l10n() 切换实例。
    """

    def __init__(self, language: str = "en", messages: Optional[Dict[str, Any]] = None):
        self.language = language
        self.messages: Dict[str, Any] = dict(messages or {})

    def __repr__(self) -> str:
        return f"Translator(language={self.language!r}, messages={len(self.messages)})"

    # --------------------------------------------------
    @classmethod
    @logs.catch(msg="failed to load locale catalog", log_inputs=True, log_outputs=True, log_time=True)
    def load(cls, language: str = "en", catalog_dir: str | Path | None = None) -> "Translator":
        """
        从 <catalog_dir>/<language>.yml 加载；文件不存在 → 英文（空表）
        """
        base = Path(catalog_dir) if catalog_dir else CATALOG_DIR
        path = base / f"{language}.yml"

        if not path.exists():
            if language != "en":
                logs.warning(f"[L10N] no catalog for language={language} under {base}, using source strings")
            return cls(language, {})

        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise CatalogError(f"Invalid catalog {path}: {e}") from e

        if not isinstance(raw, dict):
            raise CatalogError(f"Catalog must be a mapping: {path}")

        for key, value in raw.items():
            if isinstance(value, list):
                if len(value) != 2 or not all(isinstance(v, str) for v in value):
                    raise CatalogError(f"Plural entry {key!r} in {path} needs exactly two string forms")
            elif not isinstance(value, str):
                raise CatalogError(f"Entry {key!r} in {path} must be a string")

        logs.debug(f"[L10N] loaded {len(raw)} entries for language={language}")
        return cls(language, raw)

    # --------------------------------------------------
    def t(self, text: str, params: Sequence[Any] = ()) -> str:
        translated = self.messages.get(text, text)
        if isinstance(translated, list):
            translated = translated[0]
        return _substitute(translated, params)

    def n(self, singular: str, plural: str, count: int, params: Sequence[Any] = ()) -> str:
        forms = self.messages.get(singular)

        if isinstance(forms, list):
            template = forms[0] if count == 1 else forms[1]
        else:
            template = singular if count == 1 else plural

        return _substitute(template, params, count=count)
