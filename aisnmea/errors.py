"""Exceptions raised while parsing AIS NMEA sentences."""


class ParseFailure(ValueError):
    """An AIS NMEA line (or its tagblock) could not be parsed.

    Every malformed-input condition raises this one exception: wrong field
    count, non-numeric field, bad channel length, unparseable tagblock pair,
    or a checksum mismatch in either the tagblock or the sentence body.

    The message describes the failing step for debug logging only; callers
    should not branch on it.
    """
