import pytest

from resembla.string_util import (
    ATTRIBUTE_DELIMITER,
    COLUMN_DELIMITER,
    KEYVALUE_DELIMITER,
    split,
    split_to_key_value_map,
)


def test_default_delimiter_is_tab():
    assert split("left\tright") == ["left", "right"]


@pytest.mark.parametrize(
    "text",
    ["a,b,c", "a,,b", ",a", "a,b,", "", "single", ",,,"],
)
def test_split_join_round_trip(text):
    parts = split(text, ",")
    assert ",".join(parts) == text


def test_trailing_delimiter_gives_empty_last_part():
    parts = split("a,b,", ",")
    assert parts[-1] == ""
    assert parts[:-1] == ["a", "b"]


def test_empty_text_gives_single_empty_part():
    assert split("", ",") == [""]


def test_max_parts_keeps_rest_unsplit():
    assert split("k=v=w", "=", 2) == ["k", "v=w"]


def test_max_parts_one_returns_whole_text():
    assert split("a,b,c", ",", 1) == ["a,b,c"]


@pytest.mark.parametrize("max_parts", [1, 2, 3, 5])
def test_max_parts_bounds_count(max_parts):
    text = "a,b,c,d"
    parts = split(text, ",", max_parts)
    assert len(parts) <= max_parts
    assert ",".join(parts) == text


def test_empty_delimiter_rejected():
    with pytest.raises(ValueError):
        split("abc", "")


def test_key_value_map_parses_pairs():
    text = f"x{KEYVALUE_DELIMITER}1{ATTRIBUTE_DELIMITER}y{KEYVALUE_DELIMITER}2"
    assert split_to_key_value_map(text) == {"x": "1", "y": "2"}


def test_key_value_map_skips_entries_without_value_delimiter():
    assert split_to_key_value_map("x=1&junk&y=2") == {"x": "1", "y": "2"}


def test_key_value_map_keeps_extra_delimiters_in_value():
    assert split_to_key_value_map("x=a=b") == {"x": "a=b"}


def test_key_value_map_empty_value_kept():
    assert split_to_key_value_map("x=") == {"x": ""}


def test_key_value_map_empty_text():
    assert split_to_key_value_map("") == {}


def test_key_value_map_later_key_wins():
    assert split_to_key_value_map("x=1&x=2") == {"x": "2"}


def test_key_value_map_custom_delimiters():
    assert split_to_key_value_map("a:1;b:2", ";", ":") == {"a": "1", "b": "2"}


def test_column_delimiter_used_for_columns():
    line = COLUMN_DELIMITER.join(["text", "k=v"])
    assert split(line)[1] == "k=v"