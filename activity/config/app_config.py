#!filepath: activity/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .log_config import LogConfig
from .locale_config import LocaleConfig
from .render_config import RenderConfig
from activity.utils.errors import ConfigError


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    activity/config/app_config.py → activity/config → activity → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(__file__), "base.yml")


# env 覆盖：变量名 → (section, field)
_ENV_OVERRIDES = {
    "ACTIVITY_WEBROOT": ("render", "webroot"),
    "ACTIVITY_DATA_DIR": ("render", "data_dir"),
    "ACTIVITY_LANGUAGE": ("locale", "language"),
    "ACTIVITY_LOG_LEVEL": ("log", "level"),
}


class AppConfig(BaseModel):
    log: LogConfig = LogConfig()
    render: RenderConfig = RenderConfig()
    locale: LocaleConfig = LocaleConfig()

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 activity/config/base.yml
        - 不依赖当前工作目录
        - ACTIVITY_* 环境变量覆盖文件中的值
        """
        root = project_root()

        # 1) 先加载 .env（在项目根目录下）
        load_dotenv(os.path.join(root, ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise ConfigError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            try:
                raw = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Config file is not valid YAML: {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Config file must contain a mapping: {path}")

        # 4) env 注入
        for env_name, (section, field) in _ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value is None:
                continue
            raw.setdefault(section, {})
            raw[section][field] = value

        return cls(**raw)
