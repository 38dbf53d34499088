#!filepath: activity/params/path_resolver.py
from __future__ import annotations

from dataclasses import replace
from typing import Optional, Tuple

from activity.params.types import PathDescriptor
from activity.utils.filesystem import FilesView
from activity.utils.logger import logs


def normalize(raw: str) -> str:
    """
    去掉恰好一个前导 / 和恰好一个尾部 /

    "/foo/bar.file" 与旧数据 "foo/bar.file" 得到同一结果
    """
    path = raw
    if path.startswith("/"):
        path = path[1:]
    if path.endswith("/"):
        path = path[:-1]
    return path


def split(normalized: str) -> Tuple[str, str]:
    """
    normalized path → (containing_dir, basename)
    """
    idx = normalized.rfind("/")
    if idx == -1:
        return "", normalized
    return normalized[:idx], normalized[idx + 1:]


def basename(raw: str) -> str:
    return split(normalize(raw))[1]


class PathResolver:
    """
    PathResolver

    Contract:
    - resolve(raw) -> PathDescriptor, never raises
    - is_dir is asked with the stored form, not the normalized one:
        /<user>/files + raw   (legacy records get their leading / back,
                               a trailing / is kept)
    - anything but True from the view means "not a directory"
    """

    def __init__(self, view: Optional[FilesView], user: str = ""):
        self.view = view
        self.user = user

    def view_path(self, raw: str) -> str:
        stored = raw if raw.startswith("/") else "/" + raw
        if self.user:
            return f"/{self.user}/files{stored}"
        return stored

    def is_dir(self, raw: str) -> bool:
        if self.view is None:
            return False

        path = self.view_path(raw)
        try:
            answer = self.view.is_dir(path)
        except Exception as e:
            logs.debug(f"[PathResolver] is_dir lookup failed for {path}: {e}")
            return False

        return answer is True

    def describe(self, raw: str) -> PathDescriptor:
        """
        只做规范化，不查询文件视图
        """
        normalized = normalize(raw)
        containing_dir, name = split(normalized)
        return PathDescriptor(
            raw=raw,
            normalized=normalized,
            basename=name,
            containing_dir=containing_dir,
        )

    def resolve(self, raw: str) -> PathDescriptor:
        return replace(self.describe(raw), is_dir=self.is_dir(raw))

    @staticmethod
    def link_dir(descriptor: PathDescriptor) -> str:
        """
        files app 的 dir 参数：
          目录 → /<normalized>
          文件 → /<containing_dir>（根目录下的文件为 /）
        """
        if descriptor.is_dir:
            return "/" + descriptor.normalized
        return "/" + descriptor.containing_dir
