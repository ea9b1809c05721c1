"""Burst and pattern discovery: pmfl lists, burst files and compressed vectors."""

from __future__ import annotations

import gzip
import os
import shutil
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from flowind.console import create_folder_to_contain_results
from flowind.filesystem import (
    DirEntry,
    create_folder,
    exists,
    get_current_path,
    get_files_data_recursively,
)
from flowind.helpers import get_date
from flowind.strings import get_rev_number, read_data_between_tags, suitable_path

UNZIPPED_FOLDER = "unzippedFiles"
SKIPPED_FOLDERS = frozenset({".cache", "old"})

_PATH_TAG = "../vectors/"
_INCLUDE_TAG = "#include"


@dataclass
class PatternData:
    """A pattern called by a burst, with its die, port and revision."""

    pattern_name: str = ""
    die_number: str = ""
    port_name: str = ""
    rev_number: str = ""


def _strip_spaces(text: str) -> str:
    return "".join(text.split())


def _read_lines(path: str) -> list[str]:
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        return [raw.removesuffix("\n") for raw in handle]


def create_new_directory_with_date(
    tp_path: str, results_folder: str, result_folder_name: str = ""
) -> tuple[str, str]:
    """Create ``tp_path/results_folder/<name>_<date>``.

    Returns the full path of the new folder (with '/' separators) and its name.
    """
    folder_name = f"{result_folder_name}_{get_date()}"
    results_path = create_folder_to_contain_results(tp_path, results_folder)
    try:
        create_folder(f"{results_path}/{folder_name}")
    except OSError as exc:
        print(exc)
    results_path = results_path.replace("\\", "/")
    return f"{results_path}/{folder_name}", folder_name


class _PmflSearch:
    """State shared while following a pmfl file and the files it includes."""

    def __init__(self, folder: str, bursts: set[str], need_all: bool) -> None:
        self.folder = folder
        self.bursts = bursts
        self.need_all = need_all
        self.current_path = ""
        self.found: dict[str, str] = {}

    def _take(self, name: str) -> bool:
        if name in self.bursts:
            self.found[name] = self.current_path
            self.bursts.discard(name)
            return True
        return False

    def search(self, pmfl_file_name: str) -> None:
        if "pmfl_old" in pmfl_file_name:
            return
        print(f" the pmfl file Name : {pmfl_file_name}")
        path = f"{self.folder}/{pmfl_file_name}"
        try:
            lines = _read_lines(path)
        except OSError as exc:
            raise FileNotFoundError(
                f"Failed to open the Pmfl file : {pmfl_file_name}"
            ) from exc
        for line in lines:
            if line[:2] == "--":
                continue
            if not self.bursts and not self.need_all:
                return
            found_path = line.find(_PATH_TAG)
            found_dot = line.find(".")
            found_at = line.find("@")
            found_include = line.find(_INCLUDE_TAG)
            if found_path != -1:
                self.current_path = suitable_path(line[found_path + len(_PATH_TAG):])
            if self._take(_strip_spaces(line)):
                continue
            if found_include != -1:
                self.search(_strip_spaces(line[found_include + len(_INCLUDE_TAG):]))
            elif found_dot != -1:
                if self.need_all:
                    self.found[_strip_spaces(line)] = self.current_path
                else:
                    self._take(_strip_spaces(line[:found_dot]))
            elif found_at != -1:
                if self.need_all:
                    self.found[_strip_spaces(line)] = self.current_path
                else:
                    self._take(_strip_spaces(line[:found_at]))
            else:
                name = _strip_spaces(line)
                if not self._take(name) and self.need_all:
                    self.found[name] = self.current_path


def get_bursts_path(
    pmfl_file_name: str,
    vectors_folder_path: str,
    bursts_to_search: Iterable[str],
    need_all_patterns: bool,
) -> dict[str, str]:
    """Map bursts listed in a pmfl file (and its includes) to their vector folders.

    Without ``need_all_patterns`` only the names in ``bursts_to_search`` are
    looked up and the search stops once all are found; with it, every listed
    entry is recorded.
    """
    if not exists(vectors_folder_path):
        raise FileNotFoundError(f"PATH NOT VALID: {vectors_folder_path}")
    search = _PmflSearch(vectors_folder_path, set(bursts_to_search), need_all_patterns)
    search.search(pmfl_file_name)
    return search.found


def unzip_and_read(gz_file_path: str, parent_path: str, file_name: str) -> str:
    """Decompress ``gz_file_path`` into ``./unzippedFiles/file_name``; return that path.

    ``parent_path`` is the folder holding the archive; the output always goes
    to the results folder under the current directory.
    """
    del parent_path
    folder = create_folder_to_contain_results(get_current_path(), UNZIPPED_FOLDER)
    target = f"{folder}/{file_name}"
    try:
        with gzip.open(gz_file_path, "rb") as source, open(target, "wb") as sink:
            shutil.copyfileobj(source, sink)
    except (OSError, EOFError) as exc:
        raise OSError(f"[ERROR] unzipping file: {gz_file_path}") from exc
    return target


def _die_of(pattern_name: str) -> str:
    if any(tag in pattern_name for tag in ("_Die0", "_D0", "_DIE0")):
        return "DIE0"
    if any(tag in pattern_name for tag in ("_Die1", "_D1", "_DIE1")):
        return "DIE1"
    return ""


def read_burst_file(burst_file: str) -> list[PatternData]:
    """Read the die-0 and die-1 patterns called by a burst or named in a pattern file."""
    try:
        lines = _read_lines(burst_file)
    except OSError as exc:
        raise FileNotFoundError(f"Failed to open the burst file : {burst_file}") from exc
    patterns: list[PatternData] = []
    is_pattern_file = False
    for line in lines:
        pattern_name = ""
        port_name = ""
        has_port = '",,(' in line
        if "CALL,," in line:
            pattern_name = read_data_between_tags(line, 'CALL,,"', '"')
            if has_port:
                port_name = read_data_between_tags(line, '",,(', ")")
        if 'SQLA LBL,"' in line:
            pattern_name = read_data_between_tags(line, 'SQLA LBL,"', '",')
            print(f"patt {pattern_name}")
            if has_port:
                port_name = read_data_between_tags(line, '",(', ")")
            is_pattern_file = True
        if not pattern_name:
            continue
        die = _die_of(pattern_name)
        if die:
            patterns.append(
                PatternData(
                    pattern_name=pattern_name,
                    die_number=die,
                    port_name=port_name,
                    rev_number=get_rev_number(pattern_name, "_rev"),
                )
            )
        # A pattern file names its pattern only once.
        if is_pattern_file:
            break
    return patterns


def _insert_entry_patterns(
    folder_bursts: Mapping[str, set[str]],
    entry: DirEntry,
    result: dict[str, list[PatternData]],
) -> bool:
    name = entry.file_name
    vectors_at = entry.parent_path.find("vectors")
    if vectors_at == -1:
        raise ValueError(f"no vectors folder in path: {entry.parent_path}")
    key = entry.parent_path[vectors_at:]
    print(key)
    bursts = folder_bursts.get(key)
    if bursts is None:
        return False

    zipped_at = name.find(".binl.gz")
    burst_at = name.find(".burst")
    port_at = name.find("@")
    if zipped_at != -1:
        burst = name[:zipped_at]
        if burst not in bursts:
            return False
        print("found zipped file")
        unzipped = suitable_path(
            unzip_and_read(entry.full_path, entry.parent_path, burst + ".binl")
        )
        print(unzipped)
        patterns = read_burst_file(unzipped)
        result.setdefault(burst, [])[:0] = patterns
        for pattern in patterns:
            print(pattern.pattern_name)
        os.remove(unzipped)
        return True
    for cut in (burst_at, port_at):
        if cut != -1:
            burst = name[:cut]
            if burst not in bursts:
                return False
            patterns = read_burst_file(suitable_path(entry.full_path))
            result.setdefault(burst, [])[:0] = patterns
            return True
    return False


def get_patterns_from_burst_folder(
    vectors_folder_path: str, burst_folders: Mapping[str, str]
) -> dict[str, list[PatternData]]:
    """Read the patterns of each burst from the folder the pmfl assigned it.

    ``burst_folders`` maps burst names to folders relative to
    ``vectors_folder_path/vectors``. Folders named ``.cache`` or ``old`` are
    not searched.
    """
    folder_bursts: dict[str, set[str]] = {}
    for burst, folder in burst_folders.items():
        relative = suitable_path(f"vectors/{folder}")
        folder_bursts.setdefault(relative, set()).add(burst)
        print(f"path from pmfl{relative}")

    result: dict[str, list[PatternData]] = {}
    for relative in sorted(folder_bursts):
        burst_folder = suitable_path(f"{vectors_folder_path}/{relative}")
        print(f"burst folder path: {burst_folder}")
        for entry in get_files_data_recursively(burst_folder, SKIPPED_FOLDERS):
            normalised = DirEntry(
                file_name=entry.file_name,
                full_path=suitable_path(entry.full_path),
                parent_path=suitable_path(entry.parent_path),
                inode=entry.inode,
            )
            print(f"Searching in entry: {normalised.full_path}")
            _insert_entry_patterns(folder_bursts, normalised, result)
    return result


__all__ = [
    "PatternData",
    "SKIPPED_FOLDERS",
    "UNZIPPED_FOLDER",
    "create_new_directory_with_date",
    "get_bursts_path",
    "get_patterns_from_burst_folder",
    "read_burst_file",
    "unzip_and_read",
]