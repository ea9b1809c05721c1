"""File-system queries and recursive directory listings."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass
class DirEntry:
    """One entry found while walking a directory tree; ordered by file name."""

    file_name: str
    full_path: str
    parent_path: str
    inode: int = field(default=0, compare=False)

    def __lt__(self, other: DirEntry) -> bool:
        if not isinstance(other, DirEntry):
            return NotImplemented
        return self.file_name < other.file_name


def exists(path: str) -> bool:
    """Return True if ``path`` names an existing file or directory."""
    return os.path.exists(path)


def is_directory(path: str) -> bool:
    """Return True if ``path`` is an existing directory."""
    return os.path.isdir(path)


def create_folder(path: str) -> bool:
    """Create one directory; return False if it already exists.

    Raises OSError when the directory cannot be created, for instance when
    its parent is missing or a non-directory file has that name.
    """
    try:
        os.mkdir(path, 0o775)
    except FileExistsError:
        if os.path.isdir(path):
            return False
        raise
    return True


def get_current_path() -> str:
    """Return the current working directory."""
    return os.getcwd()


def make_preferred(path: str) -> str:
    """Convert separators in ``path`` to the platform's preferred separator."""
    if os.altsep:
        return path.replace(os.altsep, os.sep)
    return path


def _walk(path: str, skip: frozenset[str]) -> Iterator[tuple[os.DirEntry, str]]:
    """Yield every entry below ``path`` with its parent, pruning skipped names."""
    with os.scandir(path) as entries:
        children = list(entries)
    for entry in children:
        if entry.name in skip:
            continue
        yield entry, path
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            continue
        if is_dir:
            yield from _walk(entry.path, skip)


def list_files_recursively(path: str) -> set[str]:
    """Return the names of all files and folders anywhere below ``path``."""
    return {entry.name for entry, _ in _walk(path, frozenset())}


def get_file_names_recursively(path: str, folders_to_skip: Iterable[str] = ()) -> set[str]:
    """Return entry names below ``path``, leaving out and not descending into skipped names."""
    return {entry.name for entry, _ in _walk(path, frozenset(folders_to_skip))}


def get_files_data_recursively(
    path: str, folders_to_skip: Iterable[str] = ()
) -> list[DirEntry]:
    """Return entries below ``path``, sorted and unique by file name.

    Entries whose name is in ``folders_to_skip`` are left out and not descended
    into. When several entries share a name, the first one found is kept.
    """
    by_name: dict[str, DirEntry] = {}
    for entry, parent in _walk(path, frozenset(folders_to_skip)):
        if entry.name in by_name:
            continue
        try:
            inode = entry.inode()
        except OSError:
            inode = 0
        by_name[entry.name] = DirEntry(
            file_name=entry.name,
            full_path=entry.path,
            parent_path=parent,
            inode=inode,
        )
    return sorted(by_name.values())