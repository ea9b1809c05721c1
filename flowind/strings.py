"""String helpers for tokenising, tag extraction and path normalisation."""

from __future__ import annotations

import os
import string

from flowind.osservice import Color, print_with_color

_LINE_LENGTH = 53
_INT_MAX = 2**31 - 1

_HEX_BITS = {digit: format(int(digit, 16), "04b") for digit in string.hexdigits}


def _is_ascii_digits(text: str) -> bool:
    """True when every character is an ASCII digit (vacuously true for '')."""
    return all(ch in string.digits for ch in text)


def _to_int(text: str) -> int:
    """Parse a non-negative decimal string the way a 32-bit integer parse would."""
    if not text:
        raise ValueError("invalid integer: empty string")
    value = int(text)
    if value > _INT_MAX:
        raise ValueError(f"integer out of range: {text}")
    return value


def _report_error(message: str) -> None:
    print_with_color(Color.RED)
    print(message)
    print_with_color(Color.WHITE)
    print("-" * (_LINE_LENGTH + 1))


def tokenize(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``; a single trailing empty field is dropped."""
    if not text:
        return []
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def all_digits_or_alphabet(text: str) -> bool:
    """True when ``text`` holds only ASCII letters, digits and underscores."""
    allowed = set(string.ascii_letters + string.digits + "_")
    return all(ch in allowed for ch in text)


def get_start_end_indexes_of_interval(text: str) -> tuple[int, int]:
    """Parse ``"N"`` or ``"A-B"`` into a ``(start, end)`` pair.

    Returns ``(-1, -1)`` when the text is not made of digits. An empty text
    raises ValueError.
    """
    start, dash, end = text.partition("-")
    if dash:
        if not start or not end or not _is_ascii_digits(start) or not _is_ascii_digits(end):
            return (-1, -1)
        return (_to_int(start), _to_int(end))
    if not _is_ascii_digits(text):
        return (-1, -1)
    number = _to_int(text)
    return (number, number)


def read_data_between_tags(line: str, open_tag: str, close_tag: str) -> str:
    """Return the text between ``open_tag`` and the next ``close_tag`` in ``line``.

    An empty string is returned if ``open_tag`` is absent. If ``close_tag`` is
    missing, an error is reported and everything after ``open_tag`` is returned.
    """
    found = line.find(open_tag)
    if found == -1:
        return ""
    data = line[found + len(open_tag):]
    end = data.find(close_tag)
    if end == -1:
        _report_error("didnt found the name")
        return data
    return data[:end]


def get_rev_number(pattern: str, rev_str: str) -> str:
    """Return the revision that follows ``rev_str`` in ``pattern``, up to the next '_'.

    The revision starts four characters after the marker, matching the
    ``_rev`` marker used in pattern names.
    """
    found = pattern.find(rev_str)
    if found == -1:
        return ""
    rest = pattern[found + 4:]
    return rest.split("_", 1)[0]


def suitable_path(path: str) -> str:
    """Return ``path`` with separators converted to those of the running platform."""
    if os.sep == "\\":
        return path.replace("/", "\\")
    return path.replace("\\", "/")


def hex_to_binary(hex_string: str) -> str:
    """Expand each hexadecimal digit to four bits; other characters are ignored."""
    return "".join(_HEX_BITS.get(ch, "") for ch in hex_string)