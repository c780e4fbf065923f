"""Chord symbol library for parsing, classifying and matching chord names.

This library turns chord symbols such as "Cm7", "G7/B" or "C#maj7b5" into
immutable chord objects, classifies their quality against a closed,
ordered taxonomy, renders them for display and filters collections of
chords by root, quality and bass.

Examples
--------
>>> from chord_symbols import ChordCorpus, Quality, parse_chord

>>> chord = parse_chord("G7/B")
>>> chord.root.spelling, chord.quality, chord.bass.spelling
('G', <Quality.SEVEN: '7'>, 'B')
>>> chord.display("accessible")
'G seven/B'

>>> # Filter a collection of chords
>>> corpus = ChordCorpus.from_names(["Cmaj7", "Cm7", "G7"])
>>> [c.name for c in corpus.matching(root="C", quality=Quality.MINOR_SEVEN)]
['Cm7']

>>> # Convert to Harte notation
>>> chord.to_harte()
'G:7/3'
"""

from chord_symbols.converter import (
    from_harte,
    from_pychord,
    to_harte,
    to_pychord,
)
from chord_symbols.display import DisplayStyle, format_chord
from chord_symbols.errors import MalformedBassError, MalformedRootError, UnrecognizedChordError
from chord_symbols.matching import ANY, ChordCorpus, lookup, matching
from chord_symbols.models import ChordDefinition
from chord_symbols.parser import is_chord, parse_chord, parse_chord_strict
from chord_symbols.pitch_class import PitchClass, parse_pitch_class
from chord_symbols.quality import Group, Quality, QualityDisplay, all_qualities, from_token

__all__ = [
    "ANY",
    "ChordCorpus",
    "ChordDefinition",
    "DisplayStyle",
    "Group",
    "MalformedBassError",
    "MalformedRootError",
    "PitchClass",
    "Quality",
    "QualityDisplay",
    "UnrecognizedChordError",
    "all_qualities",
    "format_chord",
    "from_harte",
    "from_pychord",
    "from_token",
    "is_chord",
    "lookup",
    "matching",
    "parse_chord",
    "parse_chord_strict",
    "parse_pitch_class",
    "to_harte",
    "to_pychord",
]
