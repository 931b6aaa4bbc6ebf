"""Shorthand AWS region expansion.

Expands compact region codes such as ``ue1`` or ``apse2`` into canonical
region names (``us-east-1``, ``ap-southeast-2``). A shorthand code has three
parts read left to right:

1. Major area: one or two letters (``u``/``us``, ``ug``, ``e``/``eu``, ``a``/``ap``,
   ``af``, ``c``/``ca``, ``cn``, ``m``/``me``, ``s``/``sa``)
2. Minor area: one or two letters (``n``, ``s``, ``e``, ``w``, ``c``, ``ne``,
   ``nw``, ``se``, ``sw``)
3. Sequence number: optional digits, defaulting to 1

Decoding is greedy and does not look at the region catalogue, so it can
produce regions which do not exist (``as2`` -> ``ap-south-2``). Some codes are
also inherently ambiguous: ``us`` is always read as the ``us`` major area, so a
future ``us-southeast-1`` region could not be written as ``use1``.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, NamedTuple, Optional

from regionpedia.exceptions import (
    TooShortError,
    UnknownMajorAreaError,
    UnknownMinorAreaError,
    UnknownSequenceNumberError,
)

logger = logging.getLogger("regionpedia")

DEFAULT_REGION = "us-east-1"
DEFAULT_SEQUENCE_NUMBER = "1"


class AreaCode(NamedTuple):
    """Dispatch entry for a leading shorthand character

    ``extensions`` maps an optional second character to the canonical word it
    selects. When the second character matches, both characters are consumed.
    """
    default: str
    extensions: dict[str, str]


MAJOR_AREAS: dict[str, AreaCode] = {
    'u': AreaCode('us', {'g': 'us-gov', 's': 'us'}),
    'e': AreaCode('eu', {'u': 'eu'}),
    'a': AreaCode('ap', {'f': 'af', 'p': 'ap'}),
    'c': AreaCode('ca', {'n': 'cn', 'a': 'ca'}),
    'm': AreaCode('me', {'e': 'me'}),
    's': AreaCode('sa', {'a': 'sa'}),
}

MINOR_AREAS: dict[str, AreaCode] = {
    'n': AreaCode('north', {'w': 'northwest', 'e': 'northeast'}),
    's': AreaCode('south', {'w': 'southwest', 'e': 'southeast'}),
    'e': AreaCode('east', {}),
    'w': AreaCode('west', {}),
    'c': AreaCode('central', {}),
}

_SEQUENCE_PATTERN = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class RegionParts:
    """Decoded parts of a shorthand region"""
    major: str
    minor: str
    number: str = DEFAULT_SEQUENCE_NUMBER

    def __str__(self) -> str:
        return f"{self.major}-{self.minor}-{self.number}"


def _consume(table: dict[str, AreaCode], text: str) -> Optional[tuple[str, int]]:
    """Match the start of text against a dispatch table.

    Returns:
        (canonical word, characters consumed) or None if text[0] is unknown
    """
    if not text or text[0] not in table:
        return None
    entry = table[text[0]]
    if len(text) > 1 and text[1] in entry.extensions:
        return entry.extensions[text[1]], 2
    return entry.default, 1


def is_shorthand(region: str) -> bool:
    """Check whether a region string would be decoded as shorthand"""
    return bool(region) and '-' not in region


def parse_region(shorthand: str) -> RegionParts:
    """Decode a shorthand region code into its parts.

    Args:
        shorthand: Shorthand code without hyphens (e.g., 'ue1', 'apse2')

    Returns:
        RegionParts for the code

    Raises:
        TooShortError: If shorthand has fewer than two characters
        UnknownMajorAreaError: If the first character is not a major area
        UnknownMinorAreaError: If no known minor area follows the major area
        UnknownSequenceNumberError: If the remainder is not an integer
    """
    if len(shorthand) < 2:
        raise TooShortError(shorthand)

    match = _consume(MAJOR_AREAS, shorthand)
    if match is None:
        raise UnknownMajorAreaError(shorthand)
    major, consumed = match
    remainder = shorthand[consumed:]

    match = _consume(MINOR_AREAS, remainder)
    if match is None:
        raise UnknownMinorAreaError(remainder, major)
    minor, consumed = match
    remainder = remainder[consumed:]

    if not remainder:
        number = DEFAULT_SEQUENCE_NUMBER
    elif _SEQUENCE_PATTERN.fullmatch(remainder):
        number = remainder
    else:
        raise UnknownSequenceNumberError(remainder, major, minor)

    parts = RegionParts(major, minor, number)
    logger.debug(f"Decoded shorthand region '{shorthand}' as {parts}")
    return parts


def expand_region(region: str, default: str = DEFAULT_REGION) -> str:
    """Expand a region into its fully qualified form.

    Args:
        region: Empty string, a fully qualified region, or a shorthand code
        default: Region returned for empty input

    Returns:
        The default for empty input, the input unchanged if it contains a
        hyphen, or the expanded shorthand (e.g., 'ue1' -> 'us-east-1')

    Raises:
        RegionExpansionError: If a shorthand code cannot be decoded
    """
    if region == "":
        return default
    # Anything with a hyphen is assumed to be fully qualified already
    if '-' in region:
        return region
    return str(parse_region(region))


def expand_regions(regions: Iterable[str], default: str = DEFAULT_REGION) -> list[str]:
    """Expand several regions, preserving order"""
    return [expand_region(region, default) for region in regions]
