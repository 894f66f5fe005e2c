"""Top-level AIS NMEA line parser.

A line is either a bare sentence or a sentence wrapped in a tagblock:

    !AIVDM,1,1,,B,15N4cJ`005Jrek0H@9n`DW5608EP,0*13
    \\g:1-2-73874,n:157036*..\\!AIVDM,1,1,,B,15N4cJ`005Jrek0H@9n`DW5608EP,0*13

Splitting on the backslash tells them apart: a bare sentence is one field,
a tagblock line is three, the first of which is the empty text before the
leading backslash. Any other field count is malformed.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace

from aisnmea.errors import ParseFailure
from aisnmea.fields import split_fields
from aisnmea.sentence import parse_inner_sentence
from aisnmea.tagblock import parse_tagblock
from aisnmea.types import ParsedSentence

__all__ = ["parse_lines", "parse_sentence", "try_parse_sentence"]

logger = logging.getLogger(__name__)

_TAGBLOCK_DELIMITER = "\\"
_LINE_TERMINATORS = "\r\n"
_BARE_FIELD_COUNT = 1
_TAGBLOCK_FIELD_COUNT = 3


def _parse_with_tagblock(fields: list[str]) -> ParsedSentence:
    """Parse the ``["", tagblock, sentence]`` fields of a tagblock line."""
    leading, tagblock_text, inner = fields
    if leading:
        raise ParseFailure(f"Unexpected text before tagblock: {leading!r}")

    tagblock = parse_tagblock(tagblock_text)
    return replace(parse_inner_sentence(inner), tagblock=tagblock)


def parse_sentence(line: str) -> ParsedSentence:
    """Parse one AIS NMEA line, with or without a tagblock.

    This is the main entry point. It performs:
    1. Removing a trailing \\r\\n line ending (other whitespace is kept
       and counts towards the fields and checksums)
    2. Tagblock detection by splitting on backslashes
    3. Tagblock parsing and checksum validation, if present
    4. Sentence parsing and checksum validation

    Args:
        line: Raw line as received

    Returns:
        ParsedSentence; ``tagblock`` is None for a bare sentence

    Raises:
        ParseFailure: If any part of the line is malformed or either
            checksum is wrong. No partial record is ever returned.

    Example:
        >>> result = parse_sentence("!AIVDM,1,1,,B,177KQJ5000G?tO`K>RA1wUbN0TKH,0*5C")
        >>> result.channel, result.message_type
        ('B', 1)
    """
    fields = split_fields(line.rstrip(_LINE_TERMINATORS), _TAGBLOCK_DELIMITER)

    if len(fields) == _TAGBLOCK_FIELD_COUNT:
        return _parse_with_tagblock(fields)
    if len(fields) == _BARE_FIELD_COUNT:
        return parse_inner_sentence(fields[0])

    raise ParseFailure(
        f"Line must be a bare sentence or have one tagblock, "
        f"got {len(fields)} backslash-separated fields"
    )


def try_parse_sentence(line: str) -> ParsedSentence | None:
    """Parse one AIS NMEA line, returning None instead of raising.

    Returns:
        ParsedSentence if parsing succeeds, or None for any malformed line
        or checksum mismatch. The reason is logged at DEBUG level.
    """
    try:
        return parse_sentence(line)
    except ParseFailure as e:
        logger.debug("Rejected AIS NMEA line %r: %s", line, e)
        return None


def parse_lines(lines: Iterable[str]) -> Iterator[ParsedSentence]:
    """Yield a ParsedSentence for every parseable line.

    Blank lines are skipped silently; lines that fail to parse are skipped
    and logged at DEBUG level. Works on any iterable of text, including an
    open file.

    Example:
        >>> with open("ais.nmea") as stream:
        ...     for sentence in parse_lines(stream):
        ...         process(sentence)
    """
    for line in lines:
        if not line.strip():
            continue
        result = try_parse_sentence(line)
        if result is not None:
            yield result
