"""NMEA 4.10 tagblock parser.

A tagblock is an optional metadata prefix added by receivers and
aggregators ahead of the sentence proper, enclosed in backslashes:

    \\g:1-2-73874,n:157036,s:r003669945,c:1241544035*4A\\!AIVDM,...
      |           |        |            |            |
      |           |        |            |            +-- Checksum (XOR)
      |           |        |            +-- UNIX time of reception
      |           |        +-- Source station
      |           +-- Line count
      +-- Sentence grouping

This module parses the text between the backslashes.
"""

import logging
from collections.abc import Mapping

from aisnmea.checksum import require_checksum, split_checksum
from aisnmea.errors import ParseFailure
from aisnmea.fields import parse_decimal_field, split_fields

__all__ = ["TagblockKey", "parse_tagblock", "tagblock_timestamp"]

logger = logging.getLogger(__name__)


class TagblockKey:
    """Standard tagblock keys."""

    UNIX_TIME = "c"
    DESTINATION = "d"
    GROUPING = "g"
    LINE_COUNT = "n"
    RELATIVE_TIME = "r"
    SOURCE = "s"
    TEXT = "t"


def _parse_pair(pair: str) -> tuple[str, str]:
    """Split one ``key:value`` pair, requiring both parts to be non-empty."""
    parts = split_fields(pair, ":")
    if len(parts) != 2:
        raise ParseFailure(f"Tagblock pair is not key:value: {pair!r}")

    key, value = parts
    if not key or not value:
        raise ParseFailure(f"Tagblock pair has an empty key or value: {pair!r}")
    return key, value


def parse_tagblock(tagblock: str) -> dict[str, str]:
    """Parse tagblock text into a key/value mapping.

    Performs:
    1. Splitting the data from the checksum on '*'
    2. Checksum validation over the data
    3. Splitting the data into ``key:value`` pairs on ','

    A repeated key keeps the last value seen.

    Args:
        tagblock: Text between the enclosing backslashes,
            e.g. "g:1-2-73874,n:157036*4A"

    Returns:
        Mapping of tagblock keys to values

    Raises:
        ParseFailure: If the checksum is missing, malformed or wrong, or any
            pair is malformed. No partial mapping is ever returned.

    Example:
        >>> parse_tagblock("aa:bb,c:d,eeeeee:ffff*3D")
        {'aa': 'bb', 'c': 'd', 'eeeeee': 'ffff'}
    """
    data, provided = split_checksum(tagblock, "Tagblock")
    require_checksum(data, provided, "Tagblock")

    result: dict[str, str] = {}
    for pair in split_fields(data, ","):
        key, value = _parse_pair(pair)
        result[key] = value

    logger.debug("Parsed tagblock with keys %s", sorted(result))
    return result


def tagblock_timestamp(tagblock: Mapping[str, str] | None) -> int | None:
    """Read the receiver UNIX time (``c`` key) from a parsed tagblock.

    Some sources send milliseconds rather than seconds; the value is
    returned as sent.

    Returns:
        Integer timestamp, or None if there is no tagblock, no ``c`` key,
        or the value is not a plain decimal number

    Example:
        >>> tagblock_timestamp({"c": "1241544035"})
        1241544035
    """
    if tagblock is None:
        return None

    value = tagblock.get(TagblockKey.UNIX_TIME)
    if value is None:
        return None
    try:
        return parse_decimal_field(value, TagblockKey.UNIX_TIME)
    except ParseFailure:
        return None
