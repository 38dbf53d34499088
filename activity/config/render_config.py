#!filepath: activity/config/render_config.py
from pydantic import BaseModel


class RenderConfig(BaseModel):
    """
    RenderConfig

    语义：
      - 链接前缀（webroot + files app 路由）
      - 是否输出头像占位
      - LocalFilesView 使用的数据目录
    """

    # 站点根路径，例如 "" 或 "/cloud"
    webroot: str = ""

    # files app 的入口
    files_link: str = "/index.php/apps/files"

    enable_avatars: bool = True

    # 本地文件视图根目录（<data_dir>/<user>/files/...）
    data_dir: str = "data"
