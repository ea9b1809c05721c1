"""Small operating-system services: opening folders, pausing and console colours."""

from __future__ import annotations

import subprocess
import sys
from enum import IntEnum

_ANSI_CODES = {
    2: "\033[32m",
    4: "\033[31m",
    7: "\033[0m",
}


class Color(IntEnum):
    """Console colour attributes used by the tools."""

    GREEN = 2
    RED = 4
    WHITE = 7


def _on_windows() -> bool:
    return sys.platform.startswith("win")


def open_directory_window(path: str) -> None:
    """Open a file-explorer window on ``path`` (Windows only; no-op elsewhere)."""
    if _on_windows():
        subprocess.run(["explorer", path], check=False)


def print_with_color(color: int) -> str:
    """Switch the console colour; return the control sequence that was written.

    The sequence is only written when standard output is a terminal, otherwise
    nothing is written and an empty string is returned.
    """
    sequence = _ANSI_CODES.get(int(color), "")
    stream = sys.stdout
    if not sequence or not stream.isatty():
        return ""
    stream.write(sequence)
    stream.flush()
    return sequence


def call_pause() -> None:
    """Wait for a key press in the console (Windows only; no-op elsewhere)."""
    if _on_windows():
        subprocess.run("pause", shell=True, check=False)


def open_dir_window_and_pause(path: str) -> None:
    """Open ``path`` in the explorer using backslash separators, then pause."""
    open_directory_window(path.replace("/", "\\"))
    call_pause()