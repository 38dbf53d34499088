#!filepath: activity/utils/filesystem.py
from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from activity.utils.logger import logs


@runtime_checkable
class FilesView(Protocol):
    """
    文件视图（只读）

    唯一操作：给定存储时的路径（形如 /<user>/files/<path>），
    判断它当前是否是一个目录。

    返回 None 表示无法判断，调用方按“不是目录”处理。
    """

    def is_dir(self, path: str) -> Optional[bool]:
        ...


class LocalFilesView:
    """
    本地磁盘上的 FilesView

    data_dir/
     └── <user>/
           └── files/
                 └── ...

    view path "/alice/files/docs" → data_dir/alice/files/docs
    """

    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir).resolve()

    def locate(self, path: str) -> Optional[Path]:
        """
        view path → 本地路径；越出 data_dir 的路径返回 None
        """
        try:
            p = (self.data_dir / path.lstrip("/")).resolve()
        except (OSError, ValueError) as e:
            # 例如路径中含 NUL 字节
            logs.debug(f"[FS] 无法解析路径 {path!r}: {e}")
            return None

        if p != self.data_dir and self.data_dir not in p.parents:
            logs.debug(f"[FS] 路径越界，忽略: {path}")
            return None
        return p

    def is_dir(self, path: str) -> Optional[bool]:
        p = self.locate(path)
        if p is None:
            return None
        return p.is_dir()


class MemoryFilesView:
    """
    内存中的 FilesView：只记录哪些 view path 是目录
    """

    def __init__(self, directories=()):
        self.directories = set(directories)

    def add_dir(self, path: str) -> None:
        self.directories.add(path)

    def is_dir(self, path: str) -> Optional[bool]:
        return path in self.directories
