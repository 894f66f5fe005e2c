"""Tests for tagblock parsing."""

import pytest

from aisnmea import (
    ParseFailure,
    TagblockKey,
    parse_sentence,
    parse_tagblock,
    tagblock_timestamp,
)
from tests.helpers import TAGBLOCK, WITH_TAGBLOCK, with_checksum


class TestParseTagblock:
    """Tests for parse_tagblock function."""

    def test_simple_tagblock(self):
        assert parse_tagblock("aa:bb,c:d,eeeeee:ffff*3D") == {
            "aa": "bb",
            "c": "d",
            "eeeeee": "ffff",
        }

    def test_receiver_tagblock(self):
        result = parse_tagblock(TAGBLOCK)
        assert result == {
            "g": "1-2-73874",
            "n": "157036",
            "s": "r003669945",
            "c": "1241544035",
        }

    def test_single_pair(self):
        assert parse_tagblock(with_checksum("c:1241544035")) == {"c": "1241544035"}

    def test_duplicate_key_last_wins(self):
        assert parse_tagblock(with_checksum("a:1,a:2")) == {"a": "2"}

    def test_lowercase_checksum(self):
        assert parse_tagblock("aa:bb,c:d,eeeeee:ffff*3d")["aa"] == "bb"

    def test_no_checksum(self):
        with pytest.raises(ParseFailure):
            parse_tagblock("asdf,")

    def test_wrong_checksum(self):
        with pytest.raises(ParseFailure):
            parse_tagblock(TAGBLOCK[:-2] + "40")

    def test_non_hex_checksum(self):
        with pytest.raises(ParseFailure):
            parse_tagblock("aa:bb*XY")

    def test_two_asterisks(self):
        with pytest.raises(ParseFailure):
            parse_tagblock("aa:bb*3D*3D")

    def test_empty_tagblock(self):
        with pytest.raises(ParseFailure):
            parse_tagblock("")

    @pytest.mark.parametrize(
        "data",
        [
            "asdf",  # no colon
            "a:b:c",  # two colons
            ":b",  # empty key
            "a:",  # empty value
            "a:b,",  # trailing empty pair
            "a:b,,c:d",  # empty pair in the middle
        ],
    )
    def test_malformed_pairs(self, data):
        with pytest.raises(ParseFailure):
            parse_tagblock(with_checksum(data))

    def test_empty_data_gives_empty_mapping(self):
        assert parse_tagblock("*00") == {}


class TestTagblockTimestamp:
    """Tests for tagblock_timestamp function."""

    def test_unix_time(self):
        assert tagblock_timestamp(parse_tagblock(TAGBLOCK)) == 1241544035

    def test_no_tagblock(self):
        assert tagblock_timestamp(None) is None

    def test_missing_key(self):
        assert tagblock_timestamp({TagblockKey.SOURCE: "r003669945"}) is None

    def test_non_numeric_value(self):
        assert tagblock_timestamp({TagblockKey.UNIX_TIME: "yesterday"}) is None

    @pytest.mark.parametrize("value", [" +1_2 ", "+12", "12x", "1_241_544_035", " 12", ""])
    def test_value_must_be_plain_digits(self, value):
        assert tagblock_timestamp({TagblockKey.UNIX_TIME: value}) is None

    def test_read_only_mapping(self):
        sentence = parse_sentence(WITH_TAGBLOCK)
        assert tagblock_timestamp(sentence.tagblock) == 1241544035
