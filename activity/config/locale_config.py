#!filepath: activity/config/locale_config.py
from typing import Optional

from pydantic import BaseModel


class LocaleConfig(BaseModel):
    language: str = "en"

    # None → 使用包内自带的 activity/l10n/*.yml
    catalog_dir: Optional[str] = None
