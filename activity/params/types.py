#!filepath: activity/params/types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Union


class ParameterType(str, Enum):
    UNCLASSIFIED = ""
    FILE = "file"
    USERNAME = "username"

    @classmethod
    def coerce(cls, value) -> "ParameterType":
        """
        str / ParameterType / None → ParameterType
        未知类型 → UNCLASSIFIED
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.UNCLASSIFIED
        try:
            return cls(value)
        except ValueError:
            return cls.UNCLASSIFIED


# position → type；None / False 表示“没有分类表”
ClassificationMap = Mapping[int, Union[ParameterType, str]]
Classification = Optional[Union[ClassificationMap, bool]]


@dataclass(frozen=True)
class PathDescriptor:
    """
    由存储的路径推导，不落库

    raw            存储时的原始值（可能缺前导 /，可能带尾部 /）
    normalized     去掉一个前导 / 和一个尾部 /
    basename       最后一个 / 之后
    containing_dir 最后一个 / 之前，没有则为 ""
    is_dir         文件视图的判断；无法判断时为 False
    """

    raw: str
    normalized: str
    basename: str
    containing_dir: str
    is_dir: bool = False
