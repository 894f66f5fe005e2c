"""NMEA field splitting and parsing utilities.

NMEA sentences and tagblocks are built from delimiter-separated fields that
may be empty (consecutive delimiters indicate missing data). The splitter
here keeps every empty field in place so that field positions stay
meaningful, and the numeric parsers accept only the complete field text:
``"3x"``, ``" 3"`` and ``"-3"`` are all rejected rather than read as ``3``.
"""

import re

from aisnmea.errors import ParseFailure

_DECIMAL_PATTERN = re.compile(r"[0-9]+")
_HEXADECIMAL_PATTERN = re.compile(r"[0-9A-Fa-f]+")


def split_fields(text: str, delimiter: str) -> list[str]:
    """Split a string on a single delimiter character, keeping empty fields.

    Joining the result with ``delimiter`` reproduces ``text`` exactly. The
    empty string is the one exception: it has no fields at all, so the
    result is ``[]`` rather than ``[""]``. The assembler relies on this to
    tell an empty line apart from a bare sentence.

    Args:
        text: String to split
        delimiter: Exactly one character

    Returns:
        List of fields in their original order

    Raises:
        ValueError: If ``delimiter`` is not a single character

    Example:
        >>> split_fields(",aaa,,b,", ",")
        ['', 'aaa', '', 'b', '']
        >>> split_fields("", ",")
        []
    """
    if len(delimiter) != 1:
        raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")

    if not text:
        return []
    return text.split(delimiter)


def parse_decimal_field(value: str, name: str) -> int:
    """Parse a required non-negative base-10 field.

    Args:
        value: String value from an NMEA field
        name: Field name used in the failure message

    Returns:
        Parsed integer value

    Raises:
        ParseFailure: If the field is empty or is not made of ASCII digits only

    Example:
        >>> parse_decimal_field("08", "fill_bits")
        8
    """
    if not _DECIMAL_PATTERN.fullmatch(value):
        raise ParseFailure(f"{name} is not a decimal number: {value!r}")
    return int(value, 10)


def parse_optional_decimal_field(value: str, name: str) -> int | None:
    """Parse an optional non-negative base-10 field.

    An empty field means "not present" and gives ``None``; anything else
    must parse as with ``parse_decimal_field``.

    Example:
        >>> parse_optional_decimal_field("", "message_id") is None
        True
        >>> parse_optional_decimal_field("3", "message_id")
        3
    """
    if not value:
        return None
    return parse_decimal_field(value, name)


def parse_hex_field(value: str, name: str) -> int:
    """Parse a required base-16 field such as the ``HH`` after ``*``.

    Both upper- and lowercase digits are accepted.

    Raises:
        ParseFailure: If the field is empty or contains non-hex characters

    Example:
        >>> parse_hex_field("3E", "checksum")
        62
    """
    if not _HEXADECIMAL_PATTERN.fullmatch(value):
        raise ParseFailure(f"{name} is not a hexadecimal number: {value!r}")
    return int(value, 16)


def parse_optional_char_field(value: str, name: str) -> str | None:
    """Parse an optional single-character field such as the radio channel.

    Returns:
        ``None`` for an empty field, otherwise the single character

    Raises:
        ParseFailure: If the field holds more than one character
    """
    if not value:
        return None
    if len(value) != 1:
        raise ParseFailure(f"{name} must be a single character: {value!r}")
    return value
