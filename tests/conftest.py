# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from activity.l10n.translator import Translator
from activity.params.classifier import ParameterClassifier
from activity.params.helper import ParameterHelper
from activity.params.path_resolver import PathResolver
from activity.params.renderer import ParameterRenderer
from activity.utils.filesystem import MemoryFilesView


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture(autouse=True)
def _clear_activity_env(monkeypatch):
    for name in ("ACTIVITY_WEBROOT", "ACTIVITY_DATA_DIR", "ACTIVITY_LANGUAGE", "ACTIVITY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def en() -> Translator:
    return Translator.load("en")


@pytest.fixture(scope="session")
def de() -> Translator:
    return Translator.load("de")


@pytest.fixture
def files_view() -> MemoryFilesView:
    """
    用户 "test" 的文件视图：默认没有目录，测试自行 add_dir()
    """
    return MemoryFilesView()


@pytest.fixture
def renderer(files_view, en) -> ParameterRenderer:
    return ParameterRenderer(PathResolver(files_view, "test"), en, webroot="")


def _mock_extension(app: str, subject: str):
    if app == "app1":
        if subject == "subject1":
            return {0: "file"}
        if subject == "subject2":
            return {0: "file", 1: "username"}
    return False


@pytest.fixture
def mock_extension():
    return _mock_extension


@pytest.fixture
def helper(renderer, mock_extension) -> ParameterHelper:
    return ParameterHelper(ParameterClassifier([mock_extension]), renderer)
