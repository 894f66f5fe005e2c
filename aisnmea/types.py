"""AIS NMEA data types for parsed sentences.

This module defines the record produced by the sentence parser.

Design Decisions:
    1. Optional fields (int | None, str | None): the message ID and channel
       columns may be empty. Using None distinguishes "not sent" from any
       legitimate value, where sentinel numbers such as -1 would not.

    2. Frozen record: a ParsedSentence is built in one step only after every
       field and both checksums have been validated, so a partially filled
       record can never be observed. The tagblock is held as a read-only
       mapping, which keeps the record hashable. Reusing one object across
       many lines is the job of ``aisnmea.record.AISNMEA``.

    3. Payload is opaque: the 6-bit armored payload is stored verbatim for a
       separate bit-level decoder. Only its first character is interpreted,
       to report the message type.
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType

from aisnmea.msgtype import message_type_from_char


@dataclass(frozen=True)
class ParsedSentence:
    """Parsed AIS NMEA sentence, with its tagblock if one was present.

    Attributes:
        tagblock: Tagblock key/value pairs (e.g. ``{"c": "1241544035"}``).
            None if the line carried no tagblock. Stored as a read-only
            copy of the mapping passed in.

        head: Sentence identifier including its sentinel, e.g. "!AIVDM".

        frag_count: Total number of fragments in the logical message.

        frag_num: 1-based index of this fragment. ``frag_num <= frag_count``
            is expected but not enforced here.

        message_id: Sequential message ID linking the fragments of one
            multi-sentence message. None if the field was empty.

        channel: Radio channel ("A" or "B" in practice).
            None if the field was empty.

        payload: 6-bit ASCII armored AIS payload.

        fill_bits: Number of padding bits in the last payload character.

        checksum: Checksum value given after the '*'. Always equal to the
            XOR checksum of the sentence body.

    Example:
        >>> sentence = parse_sentence("!AIVDM,2,1,3,B,55P5TL01VIaAL@7WKO@mBplU@<PDhh000000001S;AJ::4A80?4i@E53,0*3E")
        >>> sentence.frag_count, sentence.frag_num, sentence.message_id
        (2, 1, 3)
        >>> sentence.message_type
        5  # static and voyage related data
    """

    tagblock: Mapping[str, str] | None
    head: str
    frag_count: int
    frag_num: int
    message_id: int | None
    channel: str | None
    payload: str
    fill_bits: int
    checksum: int

    def __post_init__(self) -> None:
        if self.tagblock is not None:
            object.__setattr__(self, "tagblock", MappingProxyType(dict(self.tagblock)))

    def __hash__(self) -> int:
        tagblock = frozenset(self.tagblock.items()) if self.tagblock is not None else None
        return hash((
            tagblock,
            self.head,
            self.frag_count,
            self.frag_num,
            self.message_id,
            self.channel,
            self.payload,
            self.fill_bits,
            self.checksum,
        ))

    @property
    def message_type(self) -> int | None:
        """AIS message type (1-27) from the first payload character.

        Returns None for a character with no assigned type.

        Raises:
            RuntimeError: If the payload is empty.
        """
        if not self.payload:
            raise RuntimeError("Cannot determine the message type of an empty payload.")
        return message_type_from_char(self.payload[0])

    @property
    def is_multipart(self) -> bool:
        """True if this sentence is one fragment of a multi-sentence message."""
        return self.frag_count > 1

    def tagblock_value(self, key: str) -> str | None:
        """Look up a tagblock value; None if absent or there is no tagblock."""
        if self.tagblock is None:
            return None
        return self.tagblock.get(key)

    def copy(self) -> "ParsedSentence":
        """Return an equal copy with its own tagblock mapping."""
        return replace(self)

    def __copy__(self) -> "ParsedSentence":
        return self.copy()

    def __deepcopy__(self, memo: dict[int, object]) -> "ParsedSentence":
        return self.copy()
