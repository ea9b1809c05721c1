"""General helpers: dates, number intervals, unit scaling, expressions and ports."""

from __future__ import annotations

import math
import re
import time
from collections.abc import MutableSet

from flowind.console import COMMA, print_error_message
from flowind.strings import (
    get_start_end_indexes_of_interval,
    read_data_between_tags,
    tokenize,
)

TESTSUITE_MISSIONS: tuple[str, ...] = (
    "TEST_SETUP",
    "SSN_SETUP",
    "TEST_PAYLOAD",
    "SSN_END",
    "TEST_END",
    "_PL_",
)

DEFAULT_PORTS_FILE = "AllPorts.txt"

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

# Unit prefixes, checked in this order, and their scale factors.
_UNIT_SCALES: tuple[tuple[str, float], ...] = (
    ("m", 10.0**-3),
    ("u", 10.0**-6),
    ("P", 10.0**-12),
    ("M", 10.0**6),
)


def _parse_int_prefix(text: str) -> int:
    """Parse the leading integer of ``text``, ignoring anything after it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _parse_float_prefix(text: str) -> float:
    """Parse the leading floating-point number of ``text``, ignoring the rest."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    return float(match.group(1))


def get_date() -> str:
    """Return the current local time as ``ctime`` text with spaces and colons as '_'."""
    stamp = time.ctime().replace("\n", "")
    return stamp.replace(" ", "_").replace(":", "_")


def check_valid_number_or_interval(text: str, max_number: int) -> tuple[int, int]:
    """Parse ``"N"`` or ``"A-B"`` bounded by ``0..max_number``.

    On any problem an error is printed and ``(-1, -1)`` is returned.
    """
    error = (-1, -1)
    start, end = get_start_end_indexes_of_interval(text)
    if start == -1:
        print_error_message("The interval/Number should be only from digits")
        return error
    if start > end:
        print_error_message("Invalid Interval the left number bigger than the right one")
        return error
    if start < 0 or start > max_number or end < 0 or end > max_number:
        print_error_message(
            f"Invalid Interval OR Number,The Indexes must be between 0-{max_number}"
        )
        return error
    return (start, end)


def line_to_int_list(line: str) -> list[int]:
    """Convert a comma-separated line of integers into a list of ints."""
    return [_parse_int_prefix(token) for token in tokenize(line, COMMA)]


def check_validity_and_insert(numbers: MutableSet[int], text: str, max_number: int) -> bool:
    """Add the number or interval in ``text`` to ``numbers``.

    Returns False (after printing an error) when the text is invalid or the
    interval overlaps numbers already present; numbers added before an
    overlap was found stay in the set.
    """
    start, end = check_valid_number_or_interval(text, max_number)
    if start == -1:
        return False
    for number in range(start, end + 1):
        if number in numbers:
            print_error_message("Invalid Interval,The interval Intersect")
            return False
        numbers.add(number)
    return True


def update_value_according_to_unit(value: str, unit: str) -> float:
    """Convert ``value`` to a float, scaled by a prefix in ``value`` or ``unit``.

    When ``unit`` is empty, a prefix letter (m, u, P, M) inside ``value``
    sets the scale and the number before it is parsed. Otherwise the whole
    ``value`` is parsed and a prefix in ``unit`` sets the scale.
    """
    if not value:
        raise ValueError("no value to convert")
    result: float | None = None
    if not unit:
        for letter, scale in _UNIT_SCALES:
            position = value.find(letter)
            if position != -1:
                result = _parse_float_prefix(value[:position]) * scale
                break
    if result is None:
        result = _parse_float_prefix(value)
    if unit:
        for letter, scale in _UNIT_SCALES:
            if letter in unit:
                result *= scale
                break
    return result


def calc_expression_with_one_operator(expression: str) -> float:
    """Evaluate ``a*b``, ``a-b`` or ``a+b`` (first operator found in that order).

    Raises ValueError when the expression holds letters, has no supported
    operator, or its operands cannot be parsed.
    """
    if any(ch.isascii() and ch.isalpha() for ch in expression):
        raise ValueError(f"expression contains letters: {expression!r}")
    compact = "".join(ch for ch in expression if not ch.isspace())
    operations = (
        ("*", lambda a, b: a * b),
        ("-", lambda a, b: a - b),
        ("+", lambda a, b: a + b),
    )
    for operator, apply in operations:
        if operator in compact:
            parts = tokenize(compact, operator)
            if len(parts) < 2:
                raise ValueError(f"missing operand in {expression!r}")
            return apply(_parse_float_prefix(parts[0]), _parse_float_prefix(parts[1]))
    raise ValueError(f"no supported operator in {expression!r}")


def get_test_suite_or_pattern_mission(name: str) -> str:
    """Return the first mission whose name (upper or lower case) occurs in ``name``.

    An empty string is returned when no mission matches.
    """
    for mission in TESTSUITE_MISSIONS:
        if mission in name or mission.lower() in name:
            return mission
    return ""


def get_ports(file_name: str, output_path: str = DEFAULT_PORTS_FILE) -> list[str]:
    """Collect the ports written as ``),(PORT)`` in ``file_name``.

    Every port is written on its own line to ``output_path``; the ports are
    also returned in the order found.
    """
    ports: list[str] = []
    with open(file_name, encoding="utf-8", errors="replace", newline="") as source:
        for raw in source:
            line = raw.removesuffix("\n")
            if "),(" in line:
                ports.append(read_data_between_tags(line, "),(", ")"))
    with open(output_path, "w", encoding="utf-8") as target:
        target.writelines(f"{port}\n" for port in ports)
    return ports


def convert_decimal_to_binary(value: int) -> list[int]:
    """Return the bits of ``value``, least significant first.

    For negative values every bit carries the sign, as truncating integer
    division produces them.
    """
    sign = -1 if value < 0 else 1
    magnitude = abs(value)
    bits: list[int] = []
    while magnitude:
        bits.append(sign * (magnitude % 2))
        magnitude //= 2
    return bits


__all__ = [
    "DEFAULT_PORTS_FILE",
    "TESTSUITE_MISSIONS",
    "calc_expression_with_one_operator",
    "check_validity_and_insert",
    "check_valid_number_or_interval",
    "convert_decimal_to_binary",
    "get_date",
    "get_ports",
    "get_test_suite_or_pattern_mission",
    "line_to_int_list",
    "update_value_according_to_unit",
]

_ = math  # kept for callers that scale with math helpers