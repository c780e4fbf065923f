"""Filter chord collections by root, quality, bass and group.

Every filter is a plain predicate over one field, so filters commute and
the original order of the corpus is always preserved. The corpus itself
is never modified.

Examples
--------
>>> corpus = ChordCorpus.from_names(["Cmaj7", "Cm7", "G7", "G7/B"])
>>> [c.name for c in corpus.matching(root="C").matching(quality=Quality.MINOR_SEVEN)]
['Cm7']
>>> [c.name for c in corpus.matching(bass=None, root="G")]
['G7']
>>> [c.name for c in corpus.lookup("G7/B")]
['G7/B']
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any, Final

from chord_symbols.models import ChordDefinition
from chord_symbols.parser import parse_chord
from chord_symbols.pitch_class import PitchClass, parse_pitch_class
from chord_symbols.quality import Group, Quality

logger = logging.getLogger(__name__)


class _AnyType:
    """Marker for a criterion that should not be applied."""

    _instance: _AnyType | None = None

    def __new__(cls) -> _AnyType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ANY"


ANY: Final = _AnyType()

RootCriterion = PitchClass | str | _AnyType
PitchCriterion = RootCriterion | None


def _resolve_pitch(value: PitchCriterion) -> PitchClass | None:
    if isinstance(value, str):
        return parse_pitch_class(value)
    if isinstance(value, PitchClass):
        return value
    return None


def _pitch_matches(actual: PitchClass | None, expected: PitchClass | None, enharmonic: bool) -> bool:
    if actual is None or expected is None:
        return actual is None and expected is None
    if enharmonic:
        return actual == expected
    return actual.same_spelling(expected)


def matching(
    corpus: Iterable[ChordDefinition],
    *,
    root: RootCriterion = ANY,
    quality: Quality | _AnyType = ANY,
    bass: PitchCriterion = ANY,
    group: Group | _AnyType = ANY,
    enharmonic: bool = True,
) -> list[ChordDefinition]:
    """Select the chords that satisfy every given criterion.

    Parameters
    ----------
    corpus : Iterable[ChordDefinition]
        The chords to filter. Not modified.
    root : PitchClass | str | ANY
        Keep chords with this root. Strings are parsed as note names. Every
        chord has a root, so ``None`` is rejected.
    quality : Quality | ANY
        Keep chords with exactly this quality.
    bass : PitchClass | str | None | ANY
        Keep chords with this bass. ``None`` keeps only chords without a
        bass note.
    group : Group | ANY
        Keep chords whose quality belongs to this group.
    enharmonic : bool
        If True (default), C# and Db are the same note. If False, root and
        bass must be spelled the same way.

    Returns
    -------
    list[ChordDefinition]
        Matching chords in corpus order. A criterion string that is not a
        valid note name matches nothing.

    Raises
    ------
    TypeError
        If ``root`` is None.

    Examples
    --------
    >>> from chord_symbols.parser import parse_chord
    >>> chords = [parse_chord("C#m"), parse_chord("Dbm"), parse_chord("D")]
    >>> [c.name for c in matching(chords, root="Db")]
    ['C#m', 'Dbm']
    >>> [c.name for c in matching(chords, root="Db", enharmonic=False)]
    ['Dbm']
    """
    if root is None:
        msg = "root criterion cannot be None; use ANY to match every root"
        raise TypeError(msg)

    chords = list(corpus)

    if root is not ANY:
        expected_root = _resolve_pitch(root)
        if expected_root is None:
            logger.debug("Unusable root criterion %r", root)
            return []
        chords = [c for c in chords if _pitch_matches(c.root, expected_root, enharmonic)]

    if quality is not ANY:
        chords = [c for c in chords if c.quality is quality]

    if bass is not ANY:
        expected_bass = _resolve_pitch(bass)
        if bass is not None and expected_bass is None:
            logger.debug("Unusable bass criterion %r", bass)
            return []
        chords = [c for c in chords if _pitch_matches(c.bass, expected_bass, enharmonic)]

    if group is not ANY:
        chords = [c for c in chords if c.quality.group is group]

    return chords


def lookup(corpus: Iterable[ChordDefinition], name: str, *, enharmonic: bool = True) -> list[ChordDefinition]:
    """Find the chords in a corpus that match a chord symbol.

    The symbol is parsed and its root, quality and bass are all used as
    criteria. A chord without a bass only matches chords without a bass.

    Parameters
    ----------
    corpus : Iterable[ChordDefinition]
        The chords to search.
    name : str
        The chord symbol to look up (e.g., "Am7").
    enharmonic : bool
        Whether enharmonic spellings match (default True).

    Returns
    -------
    list[ChordDefinition]
        Matching chords in corpus order, or an empty list if the symbol
        cannot be parsed.
    """
    chord = parse_chord(name)
    if chord is None:
        return []
    return matching(
        corpus,
        root=chord.root,
        quality=chord.quality,
        bass=chord.bass,
        enharmonic=enharmonic,
    )


class ChordCorpus:
    """An immutable, ordered collection of chords with chainable filters.

    Parameters
    ----------
    chords : Iterable[ChordDefinition]
        The chords, in the order they should be reported.
    """

    def __init__(self, chords: Iterable[ChordDefinition] = ()) -> None:
        self._chords: tuple[ChordDefinition, ...] = tuple(chords)

    @classmethod
    def from_names(cls, names: Iterable[str], instrument: Any = None) -> ChordCorpus:
        """Build a corpus by parsing chord symbols.

        Symbols with a malformed root or bass are skipped with a warning.
        """
        chords = []
        for name in names:
            chord = parse_chord(name, instrument=instrument)
            if chord is None:
                logger.warning("Skipping unparseable chord %r", name)
                continue
            chords.append(chord)
        return cls(chords)

    @property
    def chords(self) -> tuple[ChordDefinition, ...]:
        return self._chords

    def matching(self, **criteria: Any) -> ChordCorpus:
        """Return a new corpus with the chords matching ``criteria``.

        Accepts the keyword arguments of :func:`matching`.
        """
        return ChordCorpus(matching(self._chords, **criteria))

    def lookup(self, name: str, *, enharmonic: bool = True) -> ChordCorpus:
        """Return a new corpus with the chords matching a chord symbol."""
        return ChordCorpus(lookup(self._chords, name, enharmonic=enharmonic))

    def sorted(self) -> ChordCorpus:
        """Return a new corpus ordered by root, quality rank and bass."""
        return ChordCorpus(sorted(self._chords, key=ChordDefinition.sort_key))

    def __iter__(self) -> Iterator[ChordDefinition]:
        return iter(self._chords)

    def __len__(self) -> int:
        return len(self._chords)

    def __getitem__(self, index: int) -> ChordDefinition:
        return self._chords[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChordCorpus):
            return NotImplemented
        return self._chords == other._chords

    def __repr__(self) -> str:
        names = ", ".join(chord.name for chord in self._chords)
        return f"ChordCorpus([{names}])"
