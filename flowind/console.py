"""Interactive console helpers: prompts, tables, messages and number input."""

from __future__ import annotations

import os
import string
from collections.abc import Mapping

from flowind.filesystem import create_folder, exists, is_directory
from flowind.osservice import Color, print_with_color
from flowind.strings import (
    all_digits_or_alphabet,
    get_start_end_indexes_of_interval,
    tokenize,
)

LINE_LENGTH = 53
TABLE_FOOTER_LENGTH = 35
COMMA = ","

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _read_token(prompt: str) -> str:
    """Show ``prompt`` and return the next whitespace-delimited word typed."""
    print(prompt, end="", flush=True)
    while True:
        words = input().split()
        if words:
            return words[0]


def _parse_int(text: str) -> int:
    """Parse a decimal integer, rejecting values outside the 32-bit range."""
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text}")
    return value


def _is_ascii_digits(text: str) -> bool:
    return all(ch in string.digits for ch in text)


def print_lines(char: str, length: int) -> None:
    """Print a rule made of ``length + 1`` copies of ``char``."""
    print(char * (length + 1))


def print_error_message(message: str) -> None:
    """Print ``message`` in red followed by a separator line."""
    print_with_color(Color.RED)
    print(message)
    print_with_color(Color.WHITE)
    print_lines("-", LINE_LENGTH)


def create_folder_to_contain_results(tp_path: str, results_folder: str) -> str:
    """Make sure ``tp_path/results_folder`` exists and return that path."""
    path = f"{tp_path}/{results_folder}"
    if not (exists(path) and is_directory(path)):
        create_folder(path)
    return path


def yes_no_question(message: str) -> bool:
    """Ask until the answer is Y/y (True) or N/n (False)."""
    while True:
        answer = _read_token(message)
        if answer in ("Y", "y"):
            return True
        if answer in ("N", "n"):
            return False
        print_error_message(" you should answer the question by typing Y or N (YES OR NO) ")


def get_test_program_path(folder_entry: str = "", error_message: str = "") -> str:
    """Ask for the path of a test program until an existing path is given."""
    prompt = "Enter Path to Test Program: "
    tp_path = _read_token(prompt)
    shown_error = error_message or "path not found"
    while not tp_path or not exists(tp_path):
        print(shown_error)
        print(prompt, end="", flush=True)
        tp_path = input().strip()
    print_lines("-", LINE_LENGTH)
    return tp_path


def print_table(lines: Mapping[int, str], row_size: int) -> None:
    """Print ``lines`` as a two-column table ordered by index."""
    print_lines("-", LINE_LENGTH)
    for index, text in sorted(lines.items()):
        padding = " " * max(0, row_size - len(text) + 2)
        print(f"{text}{padding} | {index} |")
    print_lines("-", TABLE_FOOTER_LENGTH)


def check_valid_table_index(lines: Mapping[int, str], index: int, index_from_zero: bool) -> bool:
    """Check ``index`` against the table size, counting from 0 or from 1."""
    if index_from_zero:
        return 0 <= index < len(lines)
    return 0 < index <= len(lines)


def get_table_index(table: Mapping[int, str], message: str, index_from_zero: bool) -> list[str]:
    """Ask for comma-separated table indexes and return the chosen rows."""
    while True:
        chosen: list[str] = []
        valid = True
        for token in tokenize(_read_token(message), COMMA):
            if not _is_ascii_digits(token):
                print_error_message("you should type a number not string")
                valid = False
                break
            index = _parse_int(token)
            if not check_valid_table_index(table, index, index_from_zero):
                print_error_message("you should type a number from the printed table")
                valid = False
                break
            if index in table:
                chosen.append(table[index])
        if valid:
            return chosen


def check_valid_names(name: str) -> bool:
    """Validate a name made of letters, digits and underscores, optionally 'A-B'."""
    first_char = name[0]
    if first_char in string.digits:
        print_error_message("name should begin with alphabet Not digit ")
        return False
    head, dash, tail = name.partition("-")
    if dash:
        return all_digits_or_alphabet(head) and all_digits_or_alphabet(tail)
    if first_char.islower():
        return yes_no_question(
            "Are you sure that name begins with lowercase letter ?[Y/N] "
        ) and all_digits_or_alphabet(name)
    if all_digits_or_alphabet(name):
        return True
    print_error_message("name can have only alphabetes ,digits ,Underscore ")
    return False


def get_names_with_minus(message: str) -> list[str]:
    """Ask for comma-separated names until all of them are valid."""
    while True:
        names = tokenize(_read_token(message), COMMA)
        if all(check_valid_names(name) for name in names):
            break
    print_lines("-", LINE_LENGTH)
    return names


def print_dir_path_from_ore(dir_name: str) -> None:
    """Print the OreConfig path for ``dir_name`` inside a green banner."""
    print_with_color(Color.GREEN)
    print_lines("#", LINE_LENGTH)
    print("Path For OreConfig Field:")
    print(f"ore/{dir_name}/OreXml.xml")
    print_lines("#", LINE_LENGTH)
    print_with_color(Color.WHITE)


def get_file_name_from_command_line(prefix: str, error_message: str, argument: str) -> str:
    """Return what follows ``prefix`` in ``argument``; raise ValueError if absent."""
    found = argument.find(prefix)
    if found == -1:
        raise ValueError(error_message)
    return argument[found + len(prefix):]


def _check_validity_and_insert(numbers: set[int], text: str, max_number: int) -> bool:
    start, end = get_start_end_indexes_of_interval(text)
    if start == -1:
        print_error_message("The interval/Number should be only from digits")
        return False
    if start > end:
        print_error_message("Invalid Interval the left number bigger than the right one")
        return False
    if start < 0 or start > max_number or end < 0 or end > max_number:
        print_error_message(
            f"Invalid Interval OR Number,The Indexes must be between 0-{max_number}"
        )
        return False
    for number in range(start, end + 1):
        if number in numbers:
            print_error_message("Invalid Interval,The interval Intersect")
            return False
        numbers.add(number)
    return True


def get_numbers_with_intervals(message: str, max_value: int) -> set[int]:
    """Ask for numbers and 'A-B' intervals up to ``max_value``, without overlaps."""
    while True:
        numbers: set[int] = set()
        parts = tokenize(_read_token(message), COMMA)
        if all(_check_validity_and_insert(numbers, part, max_value) for part in parts):
            break
    print_lines("-", LINE_LENGTH)
    return numbers


def _is_signed_number(text: str) -> bool:
    if _is_ascii_digits(text):
        return True
    return text[0] == "-" and _is_ascii_digits(text[1:])


def get_numbers_from_console(message: str, max_value: int) -> list[int]:
    """Ask for comma-separated integers, which may carry a leading minus."""
    while True:
        numbers: list[int] = []
        valid = True
        for part in tokenize(_read_token(message), COMMA):
            if not part:
                print("you have extra comma")
                valid = False
                break
            if not _is_signed_number(part):
                print("should enter Numbers with/without minus")
                valid = False
                break
            numbers.append(_parse_int(part))
        if valid:
            break
    print_lines("-", LINE_LENGTH)
    return numbers


__all__ = [
    "COMMA",
    "LINE_LENGTH",
    "check_valid_names",
    "check_valid_table_index",
    "create_folder_to_contain_results",
    "get_file_name_from_command_line",
    "get_names_with_minus",
    "get_numbers_from_console",
    "get_numbers_with_intervals",
    "get_table_index",
    "get_test_program_path",
    "print_dir_path_from_ore",
    "print_error_message",
    "print_lines",
    "print_table",
    "yes_no_question",
]

_ = os  # path helpers are imported lazily by callers on some platforms