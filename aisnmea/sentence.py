"""AIS sentence body parser.

Parses the sentence proper, i.e. everything after any tagblock.

AIVDM/AIVDO Sentence Format:
    !AIVDM,2,1,3,B,55P5TL01VIaAL@7WKO@mBplU@<PDhh000000001S;AJ::4A80?4i@E53,0*3E
    |      | | | | |                                                       | |
    |      | | | | |                                                       | +-- Checksum (XOR)
    |      | | | | |                                                       +-- Fill bits
    |      | | | | +-- Payload (6-bit ASCII armor)
    |      | | | +-- Radio channel (optional)
    |      | | +-- Sequential message ID (optional)
    |      | +-- Fragment number
    |      +-- Fragment count
    +-- Head (talker + sentence type)

Reference: https://gpsd.gitlab.io/gpsd/AIVDM.html
"""

from aisnmea.checksum import require_checksum, split_checksum
from aisnmea.errors import ParseFailure
from aisnmea.fields import (
    parse_decimal_field,
    parse_optional_char_field,
    parse_optional_decimal_field,
    split_fields,
)
from aisnmea.types import ParsedSentence

# head, fragment count, fragment number, message ID, channel, payload, fill bits
_BODY_FIELD_COUNT = 7


def _extract_fields(body: str) -> list[str]:
    """Split the body into its seven comma-separated columns.

    Example:
        Input: "!AIVDM,1,1,,B,15N4cJ`005Jrek0H@9n`DW5608EP,0"
        Output: ["!AIVDM", "1", "1", "", "B", "15N4cJ`005Jrek0H@9n`DW5608EP", "0"]
    """
    fields = split_fields(body, ",")
    if len(fields) != _BODY_FIELD_COUNT:
        raise ParseFailure(
            f"Sentence body must have {_BODY_FIELD_COUNT} fields, got {len(fields)}"
        )
    return fields


def _build_sentence(fields: list[str], checksum: int) -> ParsedSentence:
    """Construct a ParsedSentence from the body columns.

    Maps column indices to ParsedSentence attributes:
        fields[0] -> head (stored verbatim)
        fields[1] -> frag_count
        fields[2] -> frag_num
        fields[3] -> message_id (None if empty)
        fields[4] -> channel (None if empty)
        fields[5] -> payload (stored verbatim)
        fields[6] -> fill_bits
    """
    return ParsedSentence(
        tagblock=None,
        head=fields[0],
        frag_count=parse_decimal_field(fields[1], "frag_count"),
        frag_num=parse_decimal_field(fields[2], "frag_num"),
        message_id=parse_optional_decimal_field(fields[3], "message_id"),
        channel=parse_optional_char_field(fields[4], "channel"),
        payload=fields[5],
        fill_bits=parse_decimal_field(fields[6], "fill_bits"),
        checksum=checksum,
    )


def parse_inner_sentence(sentence: str) -> ParsedSentence:
    """Parse an AIS sentence body (without tagblock) into structured data.

    Performs:
    1. Splitting off the '*' checksum
    2. Field extraction and count validation (exactly 7 columns)
    3. Field parsing
    4. Checksum validation over the body, skipping the leading '!' or '$'

    The record is only built once every step has succeeded, so a failure
    never exposes partially parsed fields.

    Args:
        sentence: Sentence text, e.g. "!AIVDM,1,1,,B,15N4cJ`005Jrek0H@9n`DW5608EP,0*13"

    Returns:
        ParsedSentence with ``tagblock`` set to None

    Raises:
        ParseFailure: If the sentence is malformed or the checksum is wrong
    """
    body, checksum = split_checksum(sentence, "Sentence")
    sentence_data = _build_sentence(_extract_fields(body), checksum)
    require_checksum(body, checksum, "Sentence")

    return sentence_data
