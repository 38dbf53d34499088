#!filepath: activity/params/classifier.py
from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Mapping, Optional, Union

from activity.params.types import ParameterType
from activity.utils.logger import logs

# (module, subject) → position map | None | False
ClassifierFn = Callable[[str, str], Optional[Union[Mapping[int, str], bool]]]


class ParameterClassifier:
    """
    ParameterClassifier

    Contract:
    - providers are plain functions, queried in registration order
    - the first provider that returns a map wins (an empty map counts)
    - None / False means "no opinion"
    - nobody declares → classify() returns None
    """

    def __init__(self, providers: Iterable[ClassifierFn] = ()):
        self._providers: List[ClassifierFn] = list(providers)

    def register(self, provider: ClassifierFn) -> ClassifierFn:
        self._providers.append(provider)
        return provider

    @property
    def providers(self) -> List[ClassifierFn]:
        return list(self._providers)

    def classify(self, module: str, subject: str) -> Optional[Dict[int, ParameterType]]:
        for provider in self._providers:
            declared = provider(module, subject)

            if declared is None or declared is False:
                continue

            return self._coerce(declared, module, subject)

        return None

    def special_parameter_list(self, module: str, subject: str) -> Dict[int, ParameterType]:
        return self.classify(module, subject) or {}

    @staticmethod
    def _coerce(declared: Mapping[int, str], module: str, subject: str) -> Dict[int, ParameterType]:
        result: Dict[int, ParameterType] = {}

        for position, value in declared.items():
            typ = ParameterType.coerce(value)
            if typ is ParameterType.UNCLASSIFIED and value not in ("", None):
                logs.warning(
                    f"[Classifier] unknown parameter type {value!r} "
                    f"at position {position} for {module}/{subject}"
                )
            result[int(position)] = typ

        return result
