from .types import ParameterType, PathDescriptor
from .path_resolver import PathResolver
from .classifier import ParameterClassifier
from .renderer import ParameterRenderer
from .aggregator import ArrayAggregator
from .helper import ParameterHelper

__all__ = [
    "ParameterType", "PathDescriptor",
    "PathResolver",
    "ParameterClassifier",
    "ParameterRenderer",
    "ArrayAggregator",
    "ParameterHelper",
]
