"""Chord notation converter for Harte and pychord formats.

This module converts ChordDefinition objects to and from Harte notation
(e.g., "G:min7") and pychord's simplified notation (e.g., "Gm7").
"""

from __future__ import annotations

from chord_symbols.models import ChordDefinition
from chord_symbols.pitch_class import interval_to_pitch_class, parse_pitch_class, pitch_class_to_interval
from chord_symbols.quality import Quality

# Harte shorthand (with degree lists where no shorthand exists) for each quality
QUALITY_TO_HARTE: dict[Quality, str] = {
    Quality.MAJOR: "maj",
    Quality.MINOR: "min",
    Quality.AUG: "aug",
    Quality.DIM: "dim",
    Quality.SEVEN: "7",
    Quality.SEVEN_SHARP_FIVE: "7(#5,*5)",
    Quality.SEVEN_FLAT_FIVE: "7(b5,*5)",
    Quality.SEVEN_SHARP_NINE: "7(#9)",
    Quality.SEVEN_FLAT_NINE: "7(b9)",
    Quality.MINOR_SEVEN: "min7",
    Quality.MAJOR_SEVEN: "maj7",
    Quality.AUG_SEVEN: "aug(b7)",
    Quality.DIM_SEVEN: "dim7",
    Quality.MAJOR_SEVEN_SHARP_FIVE: "maj7(#5,*5)",
    Quality.MAJOR_SEVEN_FLAT_FIVE: "maj7(b5,*5)",
    Quality.MINOR_MAJOR_SEVEN: "minmaj7",
    Quality.MINOR_MAJOR_SEVEN_FLAT_FIVE: "minmaj7(b5,*5)",
    Quality.MINOR_SEVEN_FLAT_FIVE: "hdim7",
    Quality.SUS_TWO: "sus2",
    Quality.SUS_FOUR: "sus4",
    Quality.SEVEN_SUS_TWO: "sus2(b7)",
    Quality.SEVEN_SUS_FOUR: "sus4(b7)",
    Quality.NINE: "9",
    Quality.MAJOR_NINE: "maj9",
    Quality.MINOR_MAJOR_NINE: "minmaj7(9)",
    Quality.MINOR_NINE: "min9",
    Quality.NINE_FLAT_FIVE: "9(b5,*5)",
    Quality.NINE_SHARP_ELEVEN: "9(#11)",
    Quality.ELEVEN: "11",
    Quality.MAJOR_ELEVEN: "maj11",
    Quality.MINOR_ELEVEN: "min11",
    Quality.MINOR_MAJOR_ELEVEN: "minmaj7(9,11)",
    Quality.THIRTEEN: "13",
    Quality.MAJOR_THIRTEEN: "maj13",
    Quality.MINOR_THIRTEEN: "min13",
    Quality.FIVE: "5",
    Quality.SIX: "maj6",
    Quality.MINOR_SIX: "min6",
    Quality.SIX_NINE: "maj6(9)",
    Quality.MINOR_SIX_NINE: "min6(9)",
    Quality.ADD_NINE: "maj(9)",
    Quality.MINOR_ADD_NINE: "min(9)",
    Quality.AUG_NINE: "aug(b7,9)",
}

# Reverse mapping; a bare root ("C") has an empty quality and means major
HARTE_TO_QUALITY: dict[str, Quality] = {
    **{harte: quality for quality, harte in QUALITY_TO_HARTE.items()},
    "": Quality.MAJOR,
}

# Mapping from the quality names pychord accepts to qualities
PYCHORD_TO_QUALITY: dict[str, Quality] = {
    "": Quality.MAJOR,
    "maj": Quality.MAJOR,
    "m": Quality.MINOR,
    "min": Quality.MINOR,
    "-": Quality.MINOR,
    "aug": Quality.AUG,
    "+": Quality.AUG,
    "dim": Quality.DIM,
    "7": Quality.SEVEN,
    "7+5": Quality.SEVEN_SHARP_FIVE,
    "7#5": Quality.SEVEN_SHARP_FIVE,
    "7-5": Quality.SEVEN_FLAT_FIVE,
    "7b5": Quality.SEVEN_FLAT_FIVE,
    "7+9": Quality.SEVEN_SHARP_NINE,
    "7#9": Quality.SEVEN_SHARP_NINE,
    "7-9": Quality.SEVEN_FLAT_NINE,
    "7b9": Quality.SEVEN_FLAT_NINE,
    "m7": Quality.MINOR_SEVEN,
    "maj7": Quality.MAJOR_SEVEN,
    "M7": Quality.MAJOR_SEVEN,
    "dim7": Quality.DIM_SEVEN,
    "M7+5": Quality.MAJOR_SEVEN_SHARP_FIVE,
    "maj7+5": Quality.MAJOR_SEVEN_SHARP_FIVE,
    "mmaj7": Quality.MINOR_MAJOR_SEVEN,
    "mM7": Quality.MINOR_MAJOR_SEVEN,
    "m7-5": Quality.MINOR_SEVEN_FLAT_FIVE,
    "m7b5": Quality.MINOR_SEVEN_FLAT_FIVE,
    "sus2": Quality.SUS_TWO,
    "sus4": Quality.SUS_FOUR,
    "sus": Quality.SUS_FOUR,
    "7sus4": Quality.SEVEN_SUS_FOUR,
    "9": Quality.NINE,
    "maj9": Quality.MAJOR_NINE,
    "M9": Quality.MAJOR_NINE,
    "m9": Quality.MINOR_NINE,
    "9-5": Quality.NINE_FLAT_FIVE,
    "9b5": Quality.NINE_FLAT_FIVE,
    "9+11": Quality.NINE_SHARP_ELEVEN,
    "9#11": Quality.NINE_SHARP_ELEVEN,
    "11": Quality.ELEVEN,
    "m11": Quality.MINOR_ELEVEN,
    "13": Quality.THIRTEEN,
    "maj13": Quality.MAJOR_THIRTEEN,
    "M13": Quality.MAJOR_THIRTEEN,
    "5": Quality.FIVE,
    "6": Quality.SIX,
    "m6": Quality.MINOR_SIX,
    "69": Quality.SIX_NINE,
    "m69": Quality.MINOR_SIX_NINE,
    "add9": Quality.ADD_NINE,
    "Madd9": Quality.ADD_NINE,
    "madd9": Quality.MINOR_ADD_NINE,
}

# Reverse mapping to the spelling pychord documents for each quality
QUALITY_TO_PYCHORD: dict[Quality, str] = {
    Quality.MAJOR: "",
    Quality.MINOR: "m",
    Quality.AUG: "aug",
    Quality.DIM: "dim",
    Quality.SEVEN: "7",
    Quality.SEVEN_SHARP_FIVE: "7+5",
    Quality.SEVEN_FLAT_FIVE: "7-5",
    Quality.SEVEN_SHARP_NINE: "7+9",
    Quality.SEVEN_FLAT_NINE: "7-9",
    Quality.MINOR_SEVEN: "m7",
    Quality.MAJOR_SEVEN: "maj7",
    Quality.DIM_SEVEN: "dim7",
    Quality.MAJOR_SEVEN_SHARP_FIVE: "M7+5",
    Quality.MINOR_MAJOR_SEVEN: "mmaj7",
    Quality.MINOR_SEVEN_FLAT_FIVE: "m7-5",
    Quality.SUS_TWO: "sus2",
    Quality.SUS_FOUR: "sus4",
    Quality.SEVEN_SUS_FOUR: "7sus4",
    Quality.NINE: "9",
    Quality.MAJOR_NINE: "maj9",
    Quality.MINOR_NINE: "m9",
    Quality.NINE_FLAT_FIVE: "9-5",
    Quality.NINE_SHARP_ELEVEN: "9+11",
    Quality.ELEVEN: "11",
    Quality.MINOR_ELEVEN: "m11",
    Quality.THIRTEEN: "13",
    Quality.MAJOR_THIRTEEN: "maj13",
    Quality.FIVE: "5",
    Quality.SIX: "6",
    Quality.MINOR_SIX: "m6",
    Quality.SIX_NINE: "69",
    Quality.MINOR_SIX_NINE: "m69",
    Quality.ADD_NINE: "add9",
    Quality.MINOR_ADD_NINE: "madd9",
}


def quality_to_harte(quality: Quality) -> str:
    """Convert a quality to its Harte quality string.

    Raises
    ------
    ValueError
        If the quality is ``Quality.UNKNOWN``.

    Examples
    --------
    >>> quality_to_harte(Quality.MINOR_SEVEN_FLAT_FIVE)
    'hdim7'
    >>> quality_to_harte(Quality.SEVEN_FLAT_FIVE)
    '7(b5,*5)'
    """
    if quality in QUALITY_TO_HARTE:
        return QUALITY_TO_HARTE[quality]
    msg = f"No Harte quality for: {quality.name}"
    raise ValueError(msg)


def harte_to_quality(harte_quality: str) -> Quality:
    """Convert a Harte quality string to a quality.

    Unmapped strings give ``Quality.UNKNOWN``.

    Examples
    --------
    >>> harte_to_quality("min7")
    <Quality.MINOR_SEVEN: 'm7'>
    >>> harte_to_quality("maj(b9)")
    <Quality.UNKNOWN: 'unknown'>
    """
    return HARTE_TO_QUALITY.get(harte_quality, Quality.UNKNOWN)


def pychord_to_quality(pychord_quality: str) -> Quality:
    """Convert a pychord quality name to a quality.

    Unmapped names give ``Quality.UNKNOWN``.

    Examples
    --------
    >>> pychord_to_quality("m7-5")
    <Quality.MINOR_SEVEN_FLAT_FIVE: 'm7b5'>
    """
    return PYCHORD_TO_QUALITY.get(pychord_quality, Quality.UNKNOWN)


def quality_to_pychord(quality: Quality) -> str:
    """Convert a quality to a pychord quality name.

    Raises
    ------
    ValueError
        If pychord has no spelling for the quality.

    Examples
    --------
    >>> quality_to_pychord(Quality.MAJOR_SEVEN)
    'maj7'
    """
    if quality in QUALITY_TO_PYCHORD:
        return QUALITY_TO_PYCHORD[quality]
    msg = f"No pychord quality for: {quality.name}"
    raise ValueError(msg)


def to_harte(chord: ChordDefinition) -> str:
    """Convert a chord to Harte notation.

    The bass note is written as a scale degree above the root.

    Parameters
    ----------
    chord : ChordDefinition
        The chord to convert.

    Returns
    -------
    str
        Chord in Harte notation (e.g., "G:min7", "C:maj/3").

    Raises
    ------
    ValueError
        If the chord quality is unknown.

    Examples
    --------
    >>> from chord_symbols.parser import parse_chord
    >>> to_harte(parse_chord("G7/B"))
    'G:7/3'
    """
    result = f"{chord.root.canonical}:{quality_to_harte(chord.quality)}"
    if chord.bass is not None:
        result = f"{result}/{pitch_class_to_interval(chord.root, chord.bass)}"
    return result


def from_harte(chord_str: str) -> ChordDefinition:
    """Parse a Harte notation string into a ChordDefinition.

    Parameters
    ----------
    chord_str : str
        Chord in Harte notation (e.g., "G:min7", "C:maj", "F#:dim7/b3").

    Returns
    -------
    ChordDefinition
        The chord; qualities outside the taxonomy become ``Quality.UNKNOWN``.

    Raises
    ------
    ValueError
        If the string is not valid Harte notation.

    Examples
    --------
    >>> chord = from_harte("G:min7")
    >>> chord.root.spelling, chord.quality
    ('G', <Quality.MINOR_SEVEN: 'm7'>)
    """
    from harte.harte import Harte

    try:
        hc = Harte(chord_str)
    except Exception as e:  # music21 raises its own exception types
        msg = f"Invalid Harte chord: {chord_str}"
        raise ValueError(msg) from e

    root = parse_pitch_class(hc.get_root())
    if root is None:
        msg = f"Invalid Harte root in: {chord_str}"
        raise ValueError(msg)

    body, _, bass_degree = chord_str.partition("/")
    harte_quality = body.partition(":")[2]
    quality = HARTE_TO_QUALITY.get(harte_quality)
    if quality is None:
        quality = harte_to_quality(hc.get_shorthand() or "")

    bass = None
    if bass_degree and bass_degree != "1":
        bass = interval_to_pitch_class(root, bass_degree)

    return ChordDefinition(
        name=chord_str,
        root=root,
        quality=quality,
        bass=bass,
    )


def to_pychord(chord: ChordDefinition) -> str:
    """Convert a chord to pychord notation.

    Raises
    ------
    ValueError
        If pychord has no spelling for the chord quality.

    Examples
    --------
    >>> from chord_symbols.parser import parse_chord
    >>> to_pychord(parse_chord("Bbm7b5"))
    'Bbm7-5'
    """
    result = f"{chord.root.canonical}{quality_to_pychord(chord.quality)}"
    if chord.bass is not None:
        result = f"{result}/{chord.bass.canonical}"
    return result


def from_pychord(chord_str: str) -> ChordDefinition:
    """Parse a pychord notation string into a ChordDefinition.

    Parameters
    ----------
    chord_str : str
        Chord in pychord notation (e.g., "Gm7", "C", "F#dim7/A").

    Returns
    -------
    ChordDefinition
        The chord; pychord qualities outside the taxonomy become
        ``Quality.UNKNOWN``.

    Raises
    ------
    ValueError
        If pychord cannot parse the string, or the text after "/" is not a
        note name.

    Examples
    --------
    >>> chord = from_pychord("Gm7")
    >>> chord.root.spelling, chord.quality
    ('G', <Quality.MINOR_SEVEN: 'm7'>)
    """
    from pychord import Chord as PyChord

    pc = PyChord(chord_str)
    root = parse_pitch_class(pc.root)
    if root is None:
        msg = f"Invalid pychord root in: {chord_str}"
        raise ValueError(msg)

    bass = None
    if "/" in chord_str:
        # pychord takes a numeric suffix ("C6/9") as an inversion rather than a bass
        bass_text = pc.on or chord_str.rpartition("/")[2]
        bass = parse_pitch_class(bass_text)
        if bass is None:
            msg = f"Invalid pychord bass {bass_text!r} in: {chord_str}"
            raise ValueError(msg)

    return ChordDefinition(
        name=chord_str,
        root=root,
        quality=pychord_to_quality(str(pc.quality)),
        bass=bass,
    )
