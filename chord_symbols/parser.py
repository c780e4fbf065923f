"""Chord symbol parser.

Grammar::

    chord      := root quality? ("/" bass)?
    root, bass := [A-Ga-g] ("#" | "♯" | "b" | "♭")?
    quality    := any raw token or alias of chord_symbols.quality

The quality part must equal a known token as a whole; tokens that are
prefixes of others ("7" and "7sus4") never cause a partial match.
"""

from __future__ import annotations

import logging
from typing import Any

from chord_symbols.config import BASS_SEPARATOR
from chord_symbols.errors import MalformedBassError, MalformedRootError, UnrecognizedChordError
from chord_symbols.models import ChordDefinition
from chord_symbols.pitch_class import parse_pitch_class, split_pitch_class
from chord_symbols.quality import ALIASES, Quality, from_token

logger = logging.getLogger(__name__)

# Aliases that contain the bass separator and must not be split
SLASH_ALIASES: frozenset[str] = frozenset(alias for alias in ALIASES if BASS_SEPARATOR in alias)


def split_bass(remainder: str) -> tuple[str, str | None]:
    """Split the text after the root into quality and bass parts.

    The split happens at the last separator so that "6/9/E" keeps its
    "6/9" quality.

    Parameters
    ----------
    remainder : str
        Everything after the root (e.g., "m7/D").

    Returns
    -------
    tuple[str, str | None]
        The quality region and the bass text, or None when there is no bass.

    Examples
    --------
    >>> split_bass("m7/D")
    ('m7', 'D')
    >>> split_bass("6/9")
    ('6/9', None)
    >>> split_bass("7")
    ('7', None)
    """
    if remainder in SLASH_ALIASES:
        return remainder, None
    region, separator, bass = remainder.rpartition(BASS_SEPARATOR)
    if not separator:
        return remainder, None
    return region, bass


def parse_chord_strict(name: str, instrument: Any = None) -> ChordDefinition:
    """Parse a chord symbol, raising on malformed input.

    An unrecognised quality is not an error: the chord is returned with
    ``Quality.UNKNOWN``.

    Parameters
    ----------
    name : str
        The chord symbol (e.g., "Cm7", "G7/B", "C#maj7b5").
    instrument : Any
        Opaque context stored on the resulting chord.

    Returns
    -------
    ChordDefinition
        The parsed chord.

    Raises
    ------
    MalformedRootError
        If the symbol does not start with a note name.
    MalformedBassError
        If the text after "/" is not a note name.

    Examples
    --------
    >>> chord = parse_chord_strict("C7sus4")
    >>> chord.quality
    <Quality.SEVEN_SUS_FOUR: '7sus4'>
    >>> parse_chord_strict("7")
    Traceback (most recent call last):
    ...
    chord_symbols.errors.MalformedRootError: Unrecognized chord '7': no root note
    """
    text = name.strip()

    root_split = split_pitch_class(text)
    if root_split is None:
        raise MalformedRootError(name, "no root note")
    root, remainder = root_split

    region, bass_text = split_bass(remainder)
    bass = None
    if bass_text is not None:
        bass = parse_pitch_class(bass_text)
        if bass is None:
            raise MalformedBassError(name, f"invalid bass note {bass_text!r}")

    quality = from_token(region)
    if quality is None:
        logger.debug("Unknown quality %r in chord %r", region, name)
        quality = Quality.UNKNOWN

    return ChordDefinition(
        name=name,
        root=root,
        quality=quality,
        bass=bass,
        instrument=instrument,
    )


def parse_chord(name: str, instrument: Any = None) -> ChordDefinition | None:
    """Parse a chord symbol into a ChordDefinition.

    Parameters
    ----------
    name : str
        The chord symbol to parse.
    instrument : Any
        Opaque context stored on the resulting chord.

    Returns
    -------
    ChordDefinition | None
        The parsed chord, or None if the root or bass is malformed.

    Examples
    --------
    >>> parse_chord("Cxyz").quality
    <Quality.UNKNOWN: 'unknown'>
    >>> parse_chord("") is None
    True
    >>> parse_chord("C/") is None
    True
    """
    try:
        return parse_chord_strict(name, instrument=instrument)
    except UnrecognizedChordError as e:
        logger.debug("Could not parse chord: %s", e)
        return None


def is_chord(text: str) -> bool:
    """Check if text is a chord symbol with a recognised quality.

    Examples
    --------
    >>> is_chord("Gm7")
    True
    >>> is_chord("Hello")
    False
    >>> is_chord("Cxyz")
    False
    """
    chord = parse_chord(text)
    return chord is not None and chord.quality is not Quality.UNKNOWN
