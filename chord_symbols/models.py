"""Chord entity model for chord-symbols.

A :class:`ChordDefinition` is the immutable result of parsing a chord
symbol. It is normally built by :func:`chord_symbols.parser.parse_chord`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from chord_symbols.pitch_class import PitchClass
from chord_symbols.quality import Quality

if TYPE_CHECKING:
    from chord_symbols.display import DisplayStyle


@dataclass(frozen=True)
class ChordDefinition:
    """A parsed chord symbol.

    Parameters
    ----------
    name : str
        The symbol exactly as it was given to the parser (e.g., "Gm7/D").
    root : PitchClass
        The root note of the chord.
    quality : Quality
        The chord quality, ``Quality.UNKNOWN`` if it was not recognised.
    bass : PitchClass | None
        The bass note for slash chords.
    instrument : Any
        Opaque instrument context supplied by the caller. Carried along,
        never interpreted.

    Examples
    --------
    >>> from chord_symbols.parser import parse_chord
    >>> chord = parse_chord("G7/B")
    >>> chord.root.spelling, chord.quality, chord.bass.spelling
    ('G', <Quality.SEVEN: '7'>, 'B')
    >>> str(chord)
    'G7/B'
    """

    name: str
    root: PitchClass
    quality: Quality
    bass: PitchClass | None = None
    instrument: Any = None

    @property
    def is_slash_chord(self) -> bool:
        return self.bass is not None

    def display(self, style: DisplayStyle | str | None = None) -> str:
        """Render the chord in one of the display styles.

        Parameters
        ----------
        style : DisplayStyle | str | None
            The style to use, by enum member or name. Defaults to "short".

        Returns
        -------
        str
            The rendered chord (e.g., "C minor seven", "Cm7", "Cm⁷").
        """
        from chord_symbols.display import format_chord

        return format_chord(self, style)

    def to_harte(self) -> str:
        """Convert to Harte notation string.

        Returns
        -------
        str
            Chord in Harte notation (e.g., "G:min7", "C:maj/3").
        """
        from chord_symbols.converter import to_harte

        return to_harte(self)

    def to_pychord(self) -> str:
        """Convert to pychord notation string.

        Returns
        -------
        str
            Chord in pychord notation (e.g., "Gm7", "C/E").
        """
        from chord_symbols.converter import to_pychord

        return to_pychord(self)

    def sort_key(self) -> tuple[int, int, int]:
        """Key ordering chords by root, then quality rank, then bass.

        Chords without a bass sort before slash chords on the same root and
        quality.
        """
        bass = -1 if self.bass is None else self.bass.semitone
        return (self.root.semitone, self.quality.rank, bass)

    def __str__(self) -> str:
        """Return the short display form."""
        return self.display()
