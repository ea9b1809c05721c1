import os

import pytest

from flowind.strings import (
    all_digits_or_alphabet,
    get_rev_number,
    get_start_end_indexes_of_interval,
    hex_to_binary,
    read_data_between_tags,
    suitable_path,
    tokenize,
)


def test_tokenize_keeps_inner_empty_fields():
    assert tokenize("a,,b", ",") == ["a", "", "b"]


def test_tokenize_drops_single_trailing_empty_field():
    assert tokenize("a,b,", ",") == ["a", "b"]
    assert tokenize("a,,", ",") == ["a", ""]


def test_tokenize_leading_delimiter_and_empty_text():
    assert tokenize(",a", ",") == ["", "a"]
    assert tokenize("", ",") == []


@pytest.mark.parametrize("text", ["a,b,c", "x*y", "1-2-3"])
def test_tokenize_join_round_trip(text):
    delimiter = next(ch for ch in ",*-" if ch in text)
    assert delimiter.join(tokenize(text, delimiter)) == text


@pytest.mark.parametrize("text", ["abc", "ABC_123", "_", ""])
def test_all_digits_or_alphabet_accepts(text):
    assert all_digits_or_alphabet(text) is True


@pytest.mark.parametrize("text", ["a-b", "a b", "name!", "é"])
def test_all_digits_or_alphabet_rejects(text):
    assert all_digits_or_alphabet(text) is False


def test_interval_parses_range_and_single_number():
    assert get_start_end_indexes_of_interval("3-7") == (3, 7)
    assert get_start_end_indexes_of_interval("5") == (5, 5)


@pytest.mark.parametrize("text", ["a", "1-", "-1", "1-2-3", "x-2", "1.5"])
def test_interval_invalid_returns_error_pair(text):
    assert get_start_end_indexes_of_interval(text) == (-1, -1)


def test_interval_empty_text_raises():
    with pytest.raises(ValueError):
        get_start_end_indexes_of_interval("")


def test_interval_out_of_range_raises():
    with pytest.raises(ValueError):
        get_start_end_indexes_of_interval("99999999999")


def test_read_data_between_tags_from_burst_line():
    line = 'CALL,,"PATTERN_A",,(PORT1)'
    assert read_data_between_tags(line, 'CALL,,"', '"') == "PATTERN_A"
    assert read_data_between_tags(line, '",,(', ")") == "PORT1"


def test_read_data_between_tags_missing_open_tag():
    assert read_data_between_tags("nothing here", "<a>", "</a>") == ""


def test_read_data_between_tags_missing_close_tag_reports(capsys):
    assert read_data_between_tags("<a>value", "<a>", "</a>") == "value"
    assert "didnt found the name" in capsys.readouterr().out


def test_get_rev_number_found():
    assert get_rev_number("PAT_rev12_D0", "_rev") == "12"
    assert get_rev_number("PAT_rev3", "_rev") == "3"


def test_get_rev_number_absent():
    assert get_rev_number("PAT_D0", "_rev") == ""


def test_suitable_path_uses_platform_separator():
    result = suitable_path("a/b\\c/d")
    other = "/" if os.sep == "\\" else "\\"
    assert other not in result
    assert result.split(os.sep) == ["a", "b", "c", "d"]


def test_suitable_path_is_idempotent():
    once = suitable_path("x\\y/z")
    assert suitable_path(once) == once


def test_hex_to_binary_single_digits():
    assert hex_to_binary("A") == "1010"
    assert hex_to_binary("f") == hex_to_binary("F")


def test_hex_to_binary_round_trip():
    text = "0123456789abcdef"
    bits = hex_to_binary(text)
    assert len(bits) == 4 * len(text)
    assert int(bits, 2) == int(text, 16)


def test_hex_to_binary_ignores_other_characters():
    assert hex_to_binary("1xz") == hex_to_binary("1")
    assert hex_to_binary("") == ""