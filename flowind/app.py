"""Command-line entry point of the flow indicator tool."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from flowind.console import get_file_name_from_command_line

PLIST_PREFIX = "-PLIST:"
_NAME_END = re.compile(r"[ \t;]")


class FlowIndicatorPlistPreCheck:
    """Stage that reads the pattern names listed in a plist file."""

    def __init__(self) -> None:
        self.pat_names: list[str] = []

    def run_plist_stage(self, argument: str) -> str:
        """Return the plist path given as ``-PLIST:<path>``; raise ValueError otherwise."""
        message = "Enter name of Plist file like this: -PLIST:plist_example.plist"
        return get_file_name_from_command_line(PLIST_PREFIX, message, argument)

    def plist_parser(self, plist_path: str) -> list[str]:
        """Collect the names following ``Pat`` in ``plist_path`` and print them.

        Names accumulate across calls; the full list is returned. A file that
        cannot be opened is reported on standard error.
        """
        try:
            with open(plist_path, encoding="utf-8", errors="replace", newline="") as handle:
                lines = [raw.removesuffix("\n") for raw in handle]
        except OSError:
            print(f"Error opening file: {plist_path}", file=sys.stderr)
            return list(self.pat_names)
        for line in lines:
            pos = line.find("Pat")
            if pos == -1:
                continue
            rest = line[pos + 3:].lstrip(" \t")
            if not rest:
                continue
            self.pat_names.append(_NAME_END.split(rest, maxsplit=1)[0])
        print("Extracted Pat names:")
        for name in self.pat_names:
            print(name)
        return list(self.pat_names)


class ProgramManager:
    """Dispatches the command-line arguments to the tool's stages."""

    def start(self, argv: Sequence[str]) -> str | None:
        """Run the stage selected by ``argv`` (arguments without the program name).

        Returns the plist path when the plist stage ran, otherwise None.
        """
        if len(argv) != 1 or argv[0] == "--help":
            return None
        argument = argv[0]
        if PLIST_PREFIX in argument:
            return FlowIndicatorPlistPreCheck().run_plist_stage(argument)
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tool; return 0 on success and 1 after printing an error."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        ProgramManager().start(args)
    except Exception as exc:  # noqa: BLE001 - every failure is reported the same way
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())