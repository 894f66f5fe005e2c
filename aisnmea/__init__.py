"""AIS NMEA 0183 sentence parser with tagblock support."""

import logging

from aisnmea.checksum import calculate_checksum, validate_checksum
from aisnmea.errors import ParseFailure
from aisnmea.fields import split_fields
from aisnmea.msgtype import message_type_from_char
from aisnmea.parser import parse_lines, parse_sentence, try_parse_sentence
from aisnmea.record import AISNMEA
from aisnmea.sentence import parse_inner_sentence
from aisnmea.tagblock import TagblockKey, parse_tagblock, tagblock_timestamp
from aisnmea.types import ParsedSentence

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AISNMEA",
    "ParseFailure",
    "ParsedSentence",
    "TagblockKey",
    "calculate_checksum",
    "message_type_from_char",
    "parse_inner_sentence",
    "parse_lines",
    "parse_sentence",
    "parse_tagblock",
    "split_fields",
    "tagblock_timestamp",
    "try_parse_sentence",
    "validate_checksum",
]
