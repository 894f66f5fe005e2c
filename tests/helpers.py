"""Shared fixtures and helpers for aisnmea tests."""

from aisnmea import calculate_checksum

TAGBLOCK = "g:1-2-73874,n:157036,s:r003669945,c:1241544035*4A"
TAGBLOCK_SENTENCE = "!AIVDM,1,1,,B,15N4cJ`005Jrek0H@9n`DW5608EP,0*13"
WITH_TAGBLOCK = f"\\{TAGBLOCK}\\{TAGBLOCK_SENTENCE}"

MULTIPART_SENTENCE = (
    "!AIVDM,2,1,3,B,55P5TL01VIaAL@7WKO@mBplU@<PDhh000000001S;AJ::4A80?4i@E53,0*3E"
)
SINGLE_SENTENCE = "!AIVDM,1,1,,B,177KQJ5000G?tO`K>RA1wUbN0TKH,0*5C"


def with_checksum(content: str) -> str:
    """Append a correct ``*HH`` checksum to a sentence body or tagblock."""
    return f"{content}*{calculate_checksum(content):02X}"
