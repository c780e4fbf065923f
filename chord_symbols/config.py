"""Shared constants for chord symbol parsing and display.

All lookup tables that describe note spellings live here so the parser,
the pitch class helpers and the formatter agree on a single alphabet.
"""

from typing import Final

# Natural note letters and their pitch class (C=0)
NATURAL_TO_PC: Final[dict[str, int]] = {
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
    "A": 9,
    "B": 11,
}

SHARP_SIGNS: Final[tuple[str, ...]] = ("#", "♯")
FLAT_SIGNS: Final[tuple[str, ...]] = ("b", "♭")

# Unicode accidentals are stored as written but compared in ASCII form
ASCII_ACCIDENTALS: Final[dict[str, str]] = {
    "#": "#",
    "♯": "#",
    "b": "b",
    "♭": "b",
}

# Pitch class to note name, one table per preferred accidental
SHARP_NAMES: Final[tuple[str, ...]] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
FLAT_NAMES: Final[tuple[str, ...]] = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

BASS_SEPARATOR: Final[str] = "/"

DEFAULT_DISPLAY_STYLE: Final[str] = "short"
"""Name of the :class:`~chord_symbols.display.DisplayStyle` used by ``str(chord)``."""
