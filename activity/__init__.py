#!filepath: activity/__init__.py

from .utils.logger import Logging, logs, init_logging
from .utils.filesystem import LocalFilesView, MemoryFilesView
from .config.app_config import AppConfig
from .l10n.translator import Translator
from .params import (
    ParameterType,
    PathResolver,
    ParameterClassifier,
    ParameterRenderer,
    ArrayAggregator,
    ParameterHelper,
)
from .extensions import ExtensionRegistry, default_registry
from .formatter import ActivityEvent, ActivityFormatter

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging", "init_logging",
    "LocalFilesView", "MemoryFilesView",
    "AppConfig",
    "Translator",
    "ParameterType",
    "PathResolver",
    "ParameterClassifier",
    "ParameterRenderer",
    "ArrayAggregator",
    "ParameterHelper",
    "ExtensionRegistry", "default_registry",
    "ActivityEvent", "ActivityFormatter",
]
