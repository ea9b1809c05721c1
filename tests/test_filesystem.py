import os

import pytest

from flowind import filesystem
from flowind.filesystem import DirEntry


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "one.burst").write_text("x")
    (tmp_path / "a" / "old").mkdir()
    (tmp_path / "a" / "old" / "hidden.burst").write_text("x")
    (tmp_path / ".cache").mkdir()
    (tmp_path / ".cache" / "cached.txt").write_text("x")
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "one.burst").write_text("y")
    (tmp_path / "top.pmfl").write_text("z")
    return tmp_path


def test_exists_and_is_directory(tmp_path):
    file_path = tmp_path / "f.txt"
    file_path.write_text("data")
    assert filesystem.exists(str(file_path)) is True
    assert filesystem.is_directory(str(file_path)) is False
    assert filesystem.is_directory(str(tmp_path)) is True
    assert filesystem.exists(str(tmp_path / "missing")) is False
    assert filesystem.is_directory(str(tmp_path / "missing")) is False


def test_create_folder_creates_then_reports_existing(tmp_path):
    target = str(tmp_path / "results")
    assert filesystem.create_folder(target) is True
    assert os.path.isdir(target)
    assert filesystem.create_folder(target) is False


def test_create_folder_missing_parent_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        filesystem.create_folder(str(tmp_path / "no" / "such"))


def test_create_folder_over_file_raises(tmp_path):
    file_path = tmp_path / "taken"
    file_path.write_text("x")
    with pytest.raises(FileExistsError):
        filesystem.create_folder(str(file_path))


def test_get_current_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = filesystem.get_current_path()
    assert os.path.realpath(result) == os.path.realpath(str(tmp_path))


def test_make_preferred_uses_platform_separator():
    result = filesystem.make_preferred("dir/sub/file.txt")
    assert result.split(os.sep) == ["dir", "sub", "file.txt"]


def test_list_files_recursively(tree):
    names = filesystem.list_files_recursively(str(tree))
    assert names == {
        "a", "one.burst", "old", "hidden.burst", ".cache",
        "cached.txt", "b", "top.pmfl",
    }


def test_list_files_recursively_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        filesystem.list_files_recursively(str(tmp_path / "missing"))


def test_get_file_names_recursively_skips_folders(tree):
    names = filesystem.get_file_names_recursively(str(tree), {".cache", "old"})
    assert names == {"a", "one.burst", "b", "top.pmfl"}


def test_get_file_names_recursively_without_skip_matches_full_listing(tree):
    assert filesystem.get_file_names_recursively(str(tree)) == (
        filesystem.list_files_recursively(str(tree))
    )


def test_get_files_data_recursively_sorted_and_unique(tree):
    entries = filesystem.get_files_data_recursively(str(tree), {".cache", "old"})
    names = [entry.file_name for entry in entries]
    assert names == sorted(set(names))
    assert set(names) == {"a", "one.burst", "b", "top.pmfl"}


def test_get_files_data_recursively_paths_are_consistent(tree):
    for entry in filesystem.get_files_data_recursively(str(tree)):
        assert entry.full_path == os.path.join(entry.parent_path, entry.file_name)
        assert os.path.exists(entry.full_path)


def test_get_files_data_recursively_top_level_parent(tree):
    entries = {e.file_name: e for e in filesystem.get_files_data_recursively(str(tree))}
    assert entries["top.pmfl"].parent_path == str(tree)
    assert entries["cached.txt"].parent_path == os.path.join(str(tree), ".cache")


def test_dir_entry_orders_by_file_name():
    first = DirEntry("alpha", "/x/alpha", "/x")
    second = DirEntry("beta", "/a/beta", "/a")
    assert first < second
    assert not second < first
    assert sorted([second, first]) == [first, second]