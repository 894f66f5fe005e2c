"""NMEA checksum calculation and validation.

NMEA 0183 sentences and tagblocks use a simple XOR checksum for data
integrity verification. The checksum is calculated over all bytes before the
'*', skipping a leading '!' or '$' sentinel, then represented as a
hexadecimal number after the '*'.

Example sentence structure:
    !AIVDM,1,1,,B,15N4cJ`005Jrek0H@9n`DW5608EP,0*13
    ^                 checksum content          ^^
    skipped                                  checksum (0x13 = 19)

Tagblocks carry no sentinel, so every byte before the '*' is covered:
    g:1-2-73874,n:157036,s:r003669945,c:1241544035*4A
"""

from aisnmea.errors import ParseFailure
from aisnmea.fields import parse_hex_field, split_fields

_SENTINELS = ("!", "$")


def calculate_checksum(content: str) -> int:
    """Calculate the XOR checksum of a sentence body or tagblock.

    At most one leading '!' or '$' is skipped. The remaining characters are
    UTF-8 encoded and every byte is XORed into an accumulator that starts
    at zero, so an empty string gives 0.

    Args:
        content: The text before the '*' (exclusive)

    Returns:
        Integer checksum value (0-255)

    Example:
        >>> calculate_checksum("!AIVDM,1,1,,B,15N4cJ`005Jrek0H@9n`DW5608EP,0")
        19
        >>> calculate_checksum("")
        0
    """
    if content.startswith(_SENTINELS):
        content = content[1:]

    result = 0
    for byte in content.encode("utf-8"):
        result ^= byte
    return result


def split_checksum(text: str, name: str) -> tuple[str, int]:
    """Separate ``<content>*HH`` into the content and the given checksum.

    Args:
        text: Sentence body or tagblock including the trailing ``*HH``
        name: What is being split, used in the failure message

    Returns:
        Tuple of (content, provided checksum)

    Raises:
        ParseFailure: If there is not exactly one '*', or the text after it
            is not hexadecimal

    Example:
        >>> split_checksum("aa:bb,c:d,eeeeee:ffff*3D", "tagblock")
        ('aa:bb,c:d,eeeeee:ffff', 61)
    """
    parts = split_fields(text, "*")
    if len(parts) != 2:
        raise ParseFailure(f"{name} must have exactly one '*': {text!r}")

    content, checksum_text = parts
    return content, parse_hex_field(checksum_text, f"{name} checksum")


def require_checksum(content: str, provided: int, name: str) -> None:
    """Raise ParseFailure unless ``provided`` is the checksum of ``content``."""
    calculated = calculate_checksum(content)
    if calculated != provided:
        raise ParseFailure(
            f"{name} checksum mismatch: calculated {calculated:02X}, "
            f"provided {provided:02X}"
        )


def validate_checksum(sentence: str) -> bool:
    """Check whether a ``<content>*HH`` string carries a correct checksum.

    Accepts a bare AIS sentence or a tagblock. A trailing ``\\r\\n`` is
    ignored; any other stray character counts towards the content or the
    checksum field.

    Returns:
        True when the hex value after the single '*' equals the XOR checksum
        of the content. False for a wrong value and for any structural
        problem (no '*', several '*', empty or non-hex checksum).

    Example:
        >>> validate_checksum("!AIVDM,1,1,,B,15N4cJ`005Jrek0H@9n`DW5608EP,0*13")
        True
        >>> validate_checksum("!AIVDM,1,1,,B,15N4cJ`005Jrek0H@9n`DW5608EP,0*19")
        False
    """
    try:
        content, provided = split_checksum(sentence.rstrip("\r\n"), "Sentence")
        require_checksum(content, provided, "Sentence")
    except ParseFailure:
        return False
    return True
