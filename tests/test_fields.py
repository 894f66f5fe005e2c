"""Tests for field splitting and parsing utilities."""

import pytest

from aisnmea import ParseFailure, split_fields
from aisnmea.fields import (
    parse_decimal_field,
    parse_hex_field,
    parse_optional_char_field,
    parse_optional_decimal_field,
)


class TestSplitFields:
    """Tests for split_fields function."""

    def test_keeps_empty_fields(self):
        assert split_fields(",aaa,,b,", ",") == ["", "aaa", "", "b", ""]

    def test_empty_string_has_no_fields(self):
        assert split_fields("", ",") == []
        assert split_fields("", "\\") == []

    def test_no_delimiter_gives_one_field(self):
        assert split_fields("asdfasdfasdf", "\\") == ["asdfasdfasdf"]

    def test_only_delimiters(self):
        assert split_fields("\\\\", "\\") == ["", "", ""]

    def test_join_reproduces_input(self):
        text = "!AIVDM,1,1,,B,15N4cJ`005Jrek0H@9n`DW5608EP,0"
        assert ",".join(split_fields(text, ",")) == text

    def test_multi_character_delimiter_rejected(self):
        with pytest.raises(ValueError):
            split_fields("a,,b", ",,")

    def test_empty_delimiter_rejected(self):
        with pytest.raises(ValueError):
            split_fields("abc", "")


class TestNumericFields:
    """Tests for strict numeric field parsing."""

    def test_decimal(self):
        assert parse_decimal_field("0", "fill_bits") == 0
        assert parse_decimal_field("08", "fill_bits") == 8
        assert parse_decimal_field("12", "frag_count") == 12

    @pytest.mark.parametrize("value", ["", "3x", " 3", "3 ", "-3", "+3", "1_0", "0x1", "٣"])
    def test_decimal_rejects_anything_but_digits(self, value):
        with pytest.raises(ParseFailure):
            parse_decimal_field(value, "frag_count")

    def test_optional_decimal(self):
        assert parse_optional_decimal_field("", "message_id") is None
        assert parse_optional_decimal_field("3", "message_id") == 3

    def test_optional_decimal_rejects_garbage(self):
        with pytest.raises(ParseFailure):
            parse_optional_decimal_field("x", "message_id")

    def test_hex(self):
        assert parse_hex_field("3E", "checksum") == 0x3E
        assert parse_hex_field("3e", "checksum") == 0x3E
        assert parse_hex_field("0", "checksum") == 0

    @pytest.mark.parametrize("value", ["", "3G", "0x3E", " 3E", "-1"])
    def test_hex_rejects_non_hex(self, value):
        with pytest.raises(ParseFailure):
            parse_hex_field(value, "checksum")


class TestCharField:
    """Tests for parse_optional_char_field function."""

    def test_single_character(self):
        assert parse_optional_char_field("B", "channel") == "B"

    def test_empty_is_none(self):
        assert parse_optional_char_field("", "channel") is None

    def test_multiple_characters_rejected(self):
        with pytest.raises(ParseFailure):
            parse_optional_char_field("AB", "channel")
