"""AIS message type lookup from the first payload character.

The AIS payload is bit-packed and then armored into printable ASCII, six
bits per character. The first six bits of every AIS message are its type,
so the first payload character alone identifies the message type without
decoding anything else.

6-bit ASCII armor alphabet (character -> value):
    '0'-'9' -> 0-9
    ':'-'@' -> 10-16
    'A'-'W' -> 17-39
    '`'-'w' -> 40-63

Only values 1-27 are assigned AIS message types ('1' through 'K').
"""

_ARMOR_ALPHABET = (
    "0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVW`abcdefghijklmnopqrstuvw"
)

_FIRST_MESSAGE_TYPE = 1
_LAST_MESSAGE_TYPE = 27

_MESSAGE_TYPE_BY_CHAR: dict[str, int] = {
    char: value
    for value, char in enumerate(_ARMOR_ALPHABET)
    if _FIRST_MESSAGE_TYPE <= value <= _LAST_MESSAGE_TYPE
}


def message_type_from_char(char: str) -> int | None:
    """Map the first payload character to an AIS message type.

    Args:
        char: A single payload character

    Returns:
        AIS message type (1-27), or None if the character does not map to
        an assigned type

    Raises:
        ValueError: If ``char`` is not exactly one character

    Example:
        >>> message_type_from_char("3")
        3
        >>> message_type_from_char("I")
        25
        >>> message_type_from_char("}") is None
        True
    """
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")
    return _MESSAGE_TYPE_BY_CHAR.get(char)
