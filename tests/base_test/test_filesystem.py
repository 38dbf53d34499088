#!filepath: tests/base_test/test_filesystem.py
from activity.utils.filesystem import FilesView, LocalFilesView, MemoryFilesView


def test_local_view_is_dir(tmp_path):
    """data_dir/<user>/files/... 上的目录判断"""
    (tmp_path / "test" / "files" / "tmp" / "test").mkdir(parents=True)
    (tmp_path / "test" / "files" / "a.txt").write_text("hello")

    view = LocalFilesView(tmp_path)

    assert view.is_dir("/test/files/tmp/test") is True
    assert view.is_dir("/test/files/tmp/test/") is True
    assert view.is_dir("/test/files/a.txt") is False
    assert view.is_dir("/test/files/missing") is False


def test_local_view_refuses_escape(tmp_path):
    data = tmp_path / "data"
    data.mkdir()
    (tmp_path / "outside").mkdir()

    view = LocalFilesView(data)

    assert view.locate("/../outside") is None
    assert view.is_dir("/test/files/../../../outside") is None


def test_memory_view():
    view = MemoryFilesView(["/u/files/a"])
    view.add_dir("/u/files/b")

    assert view.is_dir("/u/files/a") is True
    assert view.is_dir("/u/files/b") is True
    assert view.is_dir("/u/files/c") is False


def test_views_satisfy_protocol(tmp_path):
    assert isinstance(LocalFilesView(tmp_path), FilesView)
    assert isinstance(MemoryFilesView(), FilesView)


def test_local_view_null_byte_is_inconclusive(tmp_path):
    view = LocalFilesView(tmp_path)

    assert view.locate("/test/files/ba\x00r") is None
    assert view.is_dir("/test/files/ba\x00r") is None
