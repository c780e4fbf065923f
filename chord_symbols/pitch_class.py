"""Pitch class spelling, parsing and comparison.

A :class:`PitchClass` keeps the spelling it was written with ("C#", "D♭")
but compares equal to any enharmonic spelling of the same pitch class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from chord_symbols.config import (
    ASCII_ACCIDENTALS,
    FLAT_NAMES,
    FLAT_SIGNS,
    NATURAL_TO_PC,
    SHARP_NAMES,
    SHARP_SIGNS,
)

Accidental = Literal["sharp", "flat"]

# Harte interval degree to semitones above the root
INTERVAL_TO_SEMITONES: dict[str, int] = {
    "1": 0,
    "b2": 1,
    "2": 2,
    "#2": 3,
    "b3": 3,
    "3": 4,
    "#3": 5,
    "4": 5,
    "#4": 6,
    "b5": 6,
    "5": 7,
    "#5": 8,
    "b6": 8,
    "6": 9,
    "#6": 10,
    "bb7": 9,
    "b7": 10,
    "7": 11,
    "#7": 0,
    "9": 2,  # 9th = 2nd + octave
    "b9": 1,
    "#9": 3,
    "11": 5,  # 11th = 4th + octave
    "#11": 6,
    "13": 9,  # 13th = 6th + octave
    "b13": 8,
}

# Semitones above the root to the degree written for a slash bass
SEMITONES_TO_INTERVAL: tuple[str, ...] = ("1", "b2", "2", "b3", "3", "4", "b5", "5", "b6", "6", "b7", "7")


@dataclass(frozen=True, eq=False)
class PitchClass:
    """One of the twelve pitch classes, with its written spelling.

    Parameters
    ----------
    spelling : str
        The note name as written, letter upper-cased (e.g. "C#", "B♭").
    semitone : int
        Pitch class number (0-11, where C=0).

    Examples
    --------
    >>> PitchClass("C#", 1) == PitchClass("Db", 1)
    True
    >>> PitchClass("C#", 1).same_spelling(PitchClass("Db", 1))
    False
    """

    spelling: str
    semitone: int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PitchClass):
            return NotImplemented
        return self.semitone == other.semitone

    def __hash__(self) -> int:
        return hash(self.semitone)

    def __str__(self) -> str:
        return self.spelling

    @property
    def letter(self) -> str:
        return self.spelling[0]

    @property
    def accidental(self) -> str:
        """The accidental as written, or an empty string for naturals."""
        return self.spelling[1:]

    @property
    def canonical(self) -> str:
        """Spelling with unicode accidentals replaced by ``#`` and ``b``."""
        return self.letter + "".join(ASCII_ACCIDENTALS[sign] for sign in self.accidental)

    def same_spelling(self, other: PitchClass) -> bool:
        """Check whether two pitch classes are written the same way."""
        return self.canonical == other.canonical

    def normalized(self, prefer: Accidental = "sharp") -> PitchClass:
        """Respell using the preferred accidental.

        Examples
        --------
        >>> PitchClass("Db", 1).normalized().spelling
        'C#'
        >>> PitchClass("A#", 10).normalized("flat").spelling
        'Bb'
        """
        return pitch_class_from_semitone(self.semitone, prefer=prefer)

    def transpose(self, semitones: int, prefer: Accidental = "sharp") -> PitchClass:
        """Move the pitch class up (or down, if negative) by semitones.

        Examples
        --------
        >>> PitchClass("C", 0).transpose(-1).spelling
        'B'
        """
        return pitch_class_from_semitone(self.semitone + semitones, prefer=prefer)


def pitch_class_from_semitone(semitone: int, prefer: Accidental = "sharp") -> PitchClass:
    """Build a pitch class from a semitone number, wrapping at the octave."""
    pc = semitone % 12
    names = SHARP_NAMES if prefer == "sharp" else FLAT_NAMES
    return PitchClass(names[pc], pc)


def split_pitch_class(text: str) -> tuple[PitchClass, str] | None:
    """Read a pitch class from the start of a string.

    The letter may be upper or lower case and is followed by at most one
    accidental.

    Parameters
    ----------
    text : str
        Text that should start with a note name (e.g. "Bbm7").

    Returns
    -------
    tuple[PitchClass, str] | None
        The pitch class and the unconsumed remainder, or None if the text
        does not start with a note letter.

    Examples
    --------
    >>> pc, rest = split_pitch_class("Bbm7")
    >>> pc.spelling, pc.semitone, rest
    ('Bb', 10, 'm7')
    >>> split_pitch_class("H7") is None
    True
    """
    if not text:
        return None
    letter = text[0].upper()
    if letter not in NATURAL_TO_PC:
        return None

    semitone = NATURAL_TO_PC[letter]
    accidental = text[1:2]
    if accidental in SHARP_SIGNS:
        semitone += 1
    elif accidental in FLAT_SIGNS:
        semitone -= 1
    else:
        accidental = ""

    consumed = 1 + len(accidental)
    return PitchClass(letter + accidental, semitone % 12), text[consumed:]


def parse_pitch_class(text: str) -> PitchClass | None:
    """Parse a complete pitch class spelling.

    Examples
    --------
    >>> parse_pitch_class("F♯")
    PitchClass(spelling='F♯', semitone=6)
    >>> parse_pitch_class("F#m") is None
    True
    """
    result = split_pitch_class(text)
    if result is None:
        return None
    pitch_class, rest = result
    if rest:
        return None
    return pitch_class


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "F#", "Bb").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("F#")
    6
    >>> note_to_pc("Cb")
    11
    """
    pitch_class = parse_pitch_class(note)
    if pitch_class is not None:
        return pitch_class.semitone
    msg = f"Unknown note: {note}"
    raise ValueError(msg)


def interval_to_pitch_class(root: PitchClass, interval: str) -> PitchClass:
    """Resolve a Harte scale degree against a root.

    Raises
    ------
    ValueError
        If the degree is not recognized.

    Examples
    --------
    >>> interval_to_pitch_class(PitchClass("C", 0), "3").spelling
    'E'
    >>> interval_to_pitch_class(PitchClass("Bb", 10), "b7").spelling
    'Ab'
    """
    if interval not in INTERVAL_TO_SEMITONES:
        msg = f"Unknown interval: {interval}"
        raise ValueError(msg)
    flat_context = root.canonical.endswith("b") or root.canonical == "F" or interval.startswith("b")
    prefer: Accidental = "flat" if flat_context else "sharp"
    return root.transpose(INTERVAL_TO_SEMITONES[interval], prefer=prefer)


def pitch_class_to_interval(root: PitchClass, note: PitchClass) -> str:
    """Return the scale degree of ``note`` above ``root``.

    Examples
    --------
    >>> pitch_class_to_interval(PitchClass("C", 0), PitchClass("E", 4))
    '3'
    >>> pitch_class_to_interval(PitchClass("G", 7), PitchClass("F", 5))
    'b7'
    """
    return SEMITONES_TO_INTERVAL[(note.semitone - root.semitone) % 12]

