"""AISNMEA: a reusable, mutable AIS NMEA record.

``parse_sentence`` returns a fresh immutable ``ParsedSentence`` for every
line and is the preferred API. ``AISNMEA`` wraps it for callers that want to
keep one object and re-parse many lines into it::

    record = AISNMEA()
    for line in stream:
        if not record.parse(line):
            continue
        decoder.feed(record.payload, record.fill_bits)

Every call to ``parse`` discards the previous contents before it starts, so
after a failed parse the record is empty rather than holding stale fields.
"""

from aisnmea.errors import ParseFailure
from aisnmea.parser import parse_sentence
from aisnmea.types import ParsedSentence

__all__ = ["AISNMEA"]


class AISNMEA:
    """Mutable AIS NMEA record that can be parsed into repeatedly.

    Args:
        nmea: Optional line to parse immediately. Omit it to create an
            empty record for later ``parse`` calls.

    Raises:
        ParseFailure: If ``nmea`` is given and cannot be parsed.
    """

    def __init__(self, nmea: str | None = None) -> None:
        """Create an empty record, or parse ``nmea`` into a new one."""
        self._sentence: ParsedSentence | None = None
        if nmea is not None:
            self._sentence = parse_sentence(nmea)

    def __repr__(self) -> str:
        return f"AISNMEA({self._sentence!r})"

    def parse(self, nmea: str) -> bool:
        """Parse ``nmea`` into this record, replacing its previous contents.

        Returns:
            True on success. False if the line could not be parsed, in which
            case the record is left empty (``is_set`` is False).
        """
        self._sentence = None
        try:
            self._sentence = parse_sentence(nmea)
        except ParseFailure:
            return False
        return True

    def clear(self) -> None:
        """Discard the parsed contents."""
        self._sentence = None

    def dup(self) -> "AISNMEA":
        """Return an independent copy of this record."""
        duplicate = AISNMEA()
        if self._sentence is not None:
            duplicate._sentence = self._sentence.copy()
        return duplicate

    def __copy__(self) -> "AISNMEA":
        return self.dup()

    def __deepcopy__(self, memo: dict[int, object]) -> "AISNMEA":
        return self.dup()

    @property
    def is_set(self) -> bool:
        """True if the record holds a successfully parsed sentence."""
        return self._sentence is not None

    @property
    def sentence(self) -> ParsedSentence | None:
        """The parsed sentence, or None if the record is empty."""
        return self._sentence

    def _require_sentence(self) -> ParsedSentence:
        """Return the parsed sentence.

        Raises:
            RuntimeError: If the record is empty.
        """
        if self._sentence is None:
            raise RuntimeError("AISNMEA record is empty; parse a sentence first.")
        return self._sentence

    @property
    def head(self) -> str:
        return self._require_sentence().head

    @property
    def frag_count(self) -> int:
        return self._require_sentence().frag_count

    @property
    def frag_num(self) -> int:
        return self._require_sentence().frag_num

    @property
    def message_id(self) -> int | None:
        return self._require_sentence().message_id

    @property
    def channel(self) -> str | None:
        return self._require_sentence().channel

    @property
    def payload(self) -> str:
        return self._require_sentence().payload

    @property
    def fill_bits(self) -> int:
        return self._require_sentence().fill_bits

    @property
    def checksum(self) -> int:
        return self._require_sentence().checksum

    @property
    def message_type(self) -> int | None:
        """AIS message type (1-27) from the first payload character."""
        return self._require_sentence().message_type

    def tagblock_value(self, key: str) -> str | None:
        """Look up a tagblock value.

        Returns:
            The value, or None if the key is absent, the sentence had no
            tagblock, or the record is empty
        """
        if self._sentence is None:
            return None
        return self._sentence.tagblock_value(key)
