"""Closed, ordered taxonomy of chord qualities.

Every quality is an enum member whose value is its raw storage token
(e.g. ``"m7"``). Ordering, grouping and display forms are fixed lookup
tables built once at import time.

Notes
-----
Raw tokens are persisted by chord databases. Changing one is a breaking
schema change.

Examples
--------
>>> from_token("m7")
<Quality.MINOR_SEVEN: 'm7'>
>>> Quality.SEVEN < Quality.MINOR_SEVEN
True
>>> display(Quality.MINOR_SEVEN_FLAT_FIVE).alt_symbol
'ø⁷'
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Group(Enum):
    """Coarse quality classification used for filtering chord lookups."""

    MAJOR = "major"
    MINOR = "minor"
    DIMINISHED = "diminished"
    AUGMENTED = "augmented"
    SUSPENDED = "suspended"
    OTHER = "other"


class QualityDisplay(NamedTuple):
    """Human facing renderings of a quality.

    These are presentation data and may change between releases; never use
    them as identifiers.

    Parameters
    ----------
    accessible : str
        Spoken form for text to speech (e.g. "seven flat five").
    short : str
        Plain text form (e.g. "m7b5").
    symbol : str
        Notation with superscripts (e.g. "m⁷♭⁵").
    alt_symbol : str
        Alternative notation symbol (e.g. "ø⁷").
    """

    accessible: str
    short: str
    symbol: str
    alt_symbol: str


class Quality(Enum):
    """All chord qualities, in rank order.

    The value of each member is its raw token. Comparison operators use the
    rank from :data:`ALL_QUALITIES`, never the token or the display text.
    """

    # Triads
    MAJOR = ""
    MINOR = "m"
    AUG = "aug"
    DIM = "dim"

    # Sevenths
    SEVEN = "7"
    SEVEN_SHARP_FIVE = "7#5"
    SEVEN_FLAT_FIVE = "7b5"
    SEVEN_SHARP_NINE = "7#9"
    SEVEN_FLAT_NINE = "7b9"
    MINOR_SEVEN = "m7"
    MAJOR_SEVEN = "maj7"
    AUG_SEVEN = "aug7"
    DIM_SEVEN = "dim7"
    MAJOR_SEVEN_SHARP_FIVE = "maj7#5"
    MAJOR_SEVEN_FLAT_FIVE = "maj7b5"
    MINOR_MAJOR_SEVEN = "mMaj7"
    MINOR_MAJOR_SEVEN_FLAT_FIVE = "mMaj7b5"
    MINOR_SEVEN_FLAT_FIVE = "m7b5"

    # Suspended
    SUS_TWO = "sus2"
    SUS_FOUR = "sus4"
    SEVEN_SUS_TWO = "7sus2"
    SEVEN_SUS_FOUR = "7sus4"

    # Extended
    NINE = "9"
    MAJOR_NINE = "maj9"
    MINOR_MAJOR_NINE = "mMaj9"
    MINOR_NINE = "m9"
    NINE_FLAT_FIVE = "9b5"
    NINE_SHARP_ELEVEN = "9#11"

    ELEVEN = "11"
    MAJOR_ELEVEN = "maj11"
    MINOR_ELEVEN = "m11"
    MINOR_MAJOR_ELEVEN = "mMaj11"

    THIRTEEN = "13"
    MAJOR_THIRTEEN = "maj13"
    MINOR_THIRTEEN = "m13"

    # Added
    FIVE = "5"
    SIX = "6"
    MINOR_SIX = "m6"
    SIX_NINE = "69"
    MINOR_SIX_NINE = "m69"
    ADD_NINE = "add9"
    MINOR_ADD_NINE = "madd9"

    # Augmented
    AUG_NINE = "aug9"

    # Fallback for symbols with a valid root but no recognised quality
    UNKNOWN = "unknown"

    @property
    def token(self) -> str:
        """Raw storage token."""
        return self.value

    @property
    def display_token(self) -> str:
        """Token as shown to users (``"6/9"`` rather than ``"69"``)."""
        return _DISPLAY[self].short if self is not Quality.UNKNOWN else self.value

    @property
    def rank(self) -> int:
        return _RANK[self]

    @property
    def group(self) -> Group:
        return _GROUP[self]

    @property
    def display(self) -> QualityDisplay:
        return _DISPLAY[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Quality):
            return NotImplemented
        return _RANK[self] < _RANK[other]

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Quality):
            return NotImplemented
        return _RANK[self] <= _RANK[other]

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Quality):
            return NotImplemented
        return _RANK[self] > _RANK[other]

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Quality):
            return NotImplemented
        return _RANK[self] >= _RANK[other]


# Canonical order. Rank is the index into this tuple.
ALL_QUALITIES: tuple[Quality, ...] = (
    Quality.MAJOR,
    Quality.MINOR,
    Quality.AUG,
    Quality.DIM,
    Quality.SEVEN,
    Quality.SEVEN_SHARP_FIVE,
    Quality.SEVEN_FLAT_FIVE,
    Quality.SEVEN_SHARP_NINE,
    Quality.SEVEN_FLAT_NINE,
    Quality.MINOR_SEVEN,
    Quality.MAJOR_SEVEN,
    Quality.AUG_SEVEN,
    Quality.DIM_SEVEN,
    Quality.MAJOR_SEVEN_SHARP_FIVE,
    Quality.MAJOR_SEVEN_FLAT_FIVE,
    Quality.MINOR_MAJOR_SEVEN,
    Quality.MINOR_MAJOR_SEVEN_FLAT_FIVE,
    Quality.MINOR_SEVEN_FLAT_FIVE,
    Quality.SUS_TWO,
    Quality.SUS_FOUR,
    Quality.SEVEN_SUS_TWO,
    Quality.SEVEN_SUS_FOUR,
    Quality.NINE,
    Quality.MAJOR_NINE,
    Quality.MINOR_MAJOR_NINE,
    Quality.MINOR_NINE,
    Quality.NINE_FLAT_FIVE,
    Quality.NINE_SHARP_ELEVEN,
    Quality.ELEVEN,
    Quality.MAJOR_ELEVEN,
    Quality.MINOR_ELEVEN,
    Quality.MINOR_MAJOR_ELEVEN,
    Quality.THIRTEEN,
    Quality.MAJOR_THIRTEEN,
    Quality.MINOR_THIRTEEN,
    Quality.FIVE,
    Quality.SIX,
    Quality.MINOR_SIX,
    Quality.SIX_NINE,
    Quality.MINOR_SIX_NINE,
    Quality.ADD_NINE,
    Quality.MINOR_ADD_NINE,
    Quality.AUG_NINE,
    Quality.UNKNOWN,
)

_RANK: dict[Quality, int] = {quality: index for index, quality in enumerate(ALL_QUALITIES)}

# Raw token to quality
_BY_TOKEN: dict[str, Quality] = {quality.value: quality for quality in ALL_QUALITIES}

# Alternative spellings, checked before the raw token table
ALIASES: dict[str, Quality] = {
    "69": Quality.SIX_NINE,
    "m": Quality.MINOR,
    "6/9": Quality.SIX_NINE,
    "m6/9": Quality.MINOR_SIX_NINE,
}

_DISPLAY: dict[Quality, QualityDisplay] = {
    Quality.MAJOR: QualityDisplay("major", "", "", ""),
    Quality.MINOR: QualityDisplay("minor", "m", "m", "m"),
    Quality.DIM: QualityDisplay("diminished", "dim", "dim", "dim"),
    Quality.DIM_SEVEN: QualityDisplay("dim seven", "dim7", "dim⁷", "°"),
    Quality.SUS_TWO: QualityDisplay("suss two", "sus2", "sus²", "sus²"),
    Quality.SUS_FOUR: QualityDisplay("suss four", "sus4", "sus⁴", "sus⁴"),
    Quality.SEVEN_SUS_TWO: QualityDisplay("seven sus two", "7sus2", "⁷sus²", "⁷sus²"),
    Quality.SEVEN_SUS_FOUR: QualityDisplay("seven sus four", "7sus4", "⁷sus⁴", "⁷sus⁴"),
    Quality.FIVE: QualityDisplay("power", "5", "⁵", "⁵"),
    Quality.AUG: QualityDisplay("augmented", "aug", "aug", "⁺"),
    Quality.SIX: QualityDisplay("six", "6", "⁶", "⁶"),
    Quality.SIX_NINE: QualityDisplay("six slash nine", "6/9", "⁶ᐟ⁹", "⁶ᐟ⁹"),
    Quality.SEVEN: QualityDisplay("seven", "7", "⁷", "⁷"),
    Quality.SEVEN_FLAT_FIVE: QualityDisplay("seven flat five", "7b5", "⁷♭⁵", "⁷♭⁵"),
    Quality.AUG_SEVEN: QualityDisplay("org seven", "aug7", "aug⁷", "⁺⁷"),
    Quality.NINE: QualityDisplay("nine", "9", "⁹", "⁹"),
    Quality.NINE_FLAT_FIVE: QualityDisplay("nine flat five", "9b5", "⁹♭⁵", "⁹♭⁵"),
    Quality.AUG_NINE: QualityDisplay("org nine", "aug9", "aug⁹", "⁺⁹"),
    Quality.SEVEN_FLAT_NINE: QualityDisplay("seven flat nine", "7b9", "⁷♭⁹", "⁷♭⁹"),
    Quality.SEVEN_SHARP_NINE: QualityDisplay("seven sharp nine", "7#9", "⁷♯⁹", "⁷♯⁹"),
    Quality.SEVEN_SHARP_FIVE: QualityDisplay("dominant sharp five", "7#5", "⁷♯⁵", "⁷♯⁵"),
    Quality.ELEVEN: QualityDisplay("eleven", "11", "¹¹", "¹¹"),
    Quality.NINE_SHARP_ELEVEN: QualityDisplay("nine sharp eleven", "9#11", "⁹♯¹¹", "⁹♯¹¹"),
    Quality.THIRTEEN: QualityDisplay("thirteen", "13", "¹³", "¹³"),
    Quality.MINOR_THIRTEEN: QualityDisplay("minor thirteen", "m13", "m¹³", "m¹³"),
    Quality.MAJOR_SEVEN: QualityDisplay("major seven", "maj7", "maj⁷", "M⁷"),
    Quality.MAJOR_SEVEN_FLAT_FIVE: QualityDisplay("major seven flat five", "maj7b5", "maj⁷♭⁵", "M⁷♭⁵"),
    Quality.MAJOR_SEVEN_SHARP_FIVE: QualityDisplay("major seven sharp five", "maj7#5", "maj⁷♯⁵", "M⁷♯⁵"),
    Quality.MAJOR_NINE: QualityDisplay("major nine", "maj9", "maj⁹", "M⁹"),
    Quality.MAJOR_ELEVEN: QualityDisplay("major eleven", "maj11", "maj¹¹", "m¹¹"),
    Quality.MAJOR_THIRTEEN: QualityDisplay("major thirteen", "maj13", "maj¹³", "M¹³"),
    Quality.MINOR_SIX: QualityDisplay("minor six", "m6", "m⁶", "m⁶"),
    Quality.MINOR_SIX_NINE: QualityDisplay("minor six slash nine", "m6/9", "m⁶ᐟ⁹", "m⁶ᐟ⁹"),
    Quality.MINOR_SEVEN: QualityDisplay("minor seven", "m7", "m⁷", "m⁷"),
    Quality.MINOR_SEVEN_FLAT_FIVE: QualityDisplay("minor seven flat five", "m7b5", "m⁷♭⁵", "ø⁷"),
    Quality.MINOR_NINE: QualityDisplay("minor nine", "m9", "m⁹", "m⁹"),
    Quality.MINOR_ELEVEN: QualityDisplay("minor eleven", "m11", "m¹¹", "m¹¹"),
    Quality.MINOR_MAJOR_SEVEN: QualityDisplay("minor major seven", "mMaj7", "mMaj⁷", "mᴹ⁷"),
    Quality.MINOR_MAJOR_SEVEN_FLAT_FIVE: QualityDisplay(
        "minor major seven flat five", "mMaj7b5", "mMaj⁷♭⁵", "mᴹ⁷♭⁵"
    ),
    Quality.MINOR_MAJOR_NINE: QualityDisplay("minor major nine", "mMaj9", "mMaj⁹", "mᴹ⁹"),
    Quality.MINOR_MAJOR_ELEVEN: QualityDisplay("minor major eleven", "mMaj11", "mMaj¹¹", "mᴹ¹¹"),
    Quality.ADD_NINE: QualityDisplay("add nine", "add9", "add⁹", "ᵃᵈᵈ⁹"),
    Quality.MINOR_ADD_NINE: QualityDisplay("minor add nine", "madd9", "madd⁹", "mᵃᵈᵈ⁹"),
    Quality.UNKNOWN: QualityDisplay("unknown", "?", "?", "?"),
}

_GROUP_MEMBERS: dict[Group, tuple[Quality, ...]] = {
    Group.MAJOR: (
        Quality.MAJOR,
        Quality.MAJOR_SEVEN,
        Quality.MAJOR_SEVEN_FLAT_FIVE,
        Quality.MAJOR_SEVEN_SHARP_FIVE,
        Quality.MAJOR_NINE,
        Quality.MAJOR_ELEVEN,
        Quality.MAJOR_THIRTEEN,
        Quality.ADD_NINE,
    ),
    Group.MINOR: (
        Quality.MINOR,
        Quality.MINOR_SIX,
        Quality.MINOR_SIX_NINE,
        Quality.MINOR_SEVEN,
        Quality.MINOR_ELEVEN,
        Quality.MINOR_SEVEN_FLAT_FIVE,
        Quality.MINOR_MAJOR_SEVEN,
        Quality.MINOR_MAJOR_SEVEN_FLAT_FIVE,
        Quality.MINOR_MAJOR_NINE,
        Quality.MINOR_MAJOR_ELEVEN,
        Quality.MINOR_ADD_NINE,
        Quality.MINOR_NINE,
        Quality.MINOR_THIRTEEN,
    ),
    Group.DIMINISHED: (Quality.DIM, Quality.DIM_SEVEN),
    Group.SUSPENDED: (Quality.SUS_TWO, Quality.SUS_FOUR, Quality.SEVEN_SUS_TWO, Quality.SEVEN_SUS_FOUR),
    Group.AUGMENTED: (Quality.AUG, Quality.AUG_SEVEN, Quality.AUG_NINE),
    # Power chords and dominant extensions have no dedicated group
    Group.OTHER: (
        Quality.FIVE,
        Quality.SIX,
        Quality.SIX_NINE,
        Quality.SEVEN,
        Quality.SEVEN_FLAT_FIVE,
        Quality.NINE,
        Quality.NINE_FLAT_FIVE,
        Quality.SEVEN_FLAT_NINE,
        Quality.SEVEN_SHARP_NINE,
        Quality.ELEVEN,
        Quality.NINE_SHARP_ELEVEN,
        Quality.THIRTEEN,
        Quality.SEVEN_SHARP_FIVE,
        Quality.UNKNOWN,
    ),
}

_GROUP: dict[Quality, Group] = {
    quality: group_ for group_, members in _GROUP_MEMBERS.items() for quality in members
}


def all_qualities() -> tuple[Quality, ...]:
    """Return every quality in canonical rank order."""
    return ALL_QUALITIES


def compare(a: Quality, b: Quality) -> int:
    """Compare two qualities by rank.

    Returns
    -------
    int
        Negative if ``a`` ranks before ``b``, zero if equal, positive otherwise.

    Examples
    --------
    >>> compare(Quality.MAJOR, Quality.MINOR) < 0
    True
    """
    return _RANK[a] - _RANK[b]


def token(quality: Quality) -> str:
    """Return the raw storage token of a quality.

    Examples
    --------
    >>> token(Quality.SIX_NINE)
    '69'
    >>> token(Quality.MAJOR)
    ''
    """
    return quality.value


def display_token(quality: Quality) -> str:
    """Return the token shown to users.

    Examples
    --------
    >>> display_token(Quality.SIX_NINE)
    '6/9'
    """
    return quality.display_token


def from_token(text: str) -> Quality | None:
    """Resolve a token or alias to a quality.

    Aliases are checked first, then the raw tokens. Matching is exact and
    case-sensitive; prefixes never match.

    Parameters
    ----------
    text : str
        The quality part of a chord symbol (e.g. "m7", "7sus4", "").

    Returns
    -------
    Quality | None
        The matching quality, or None if the text is not a known token.

    Examples
    --------
    >>> from_token("7sus4")
    <Quality.SEVEN_SUS_FOUR: '7sus4'>
    >>> from_token("6/9")
    <Quality.SIX_NINE: '69'>
    >>> from_token("Maj7") is None
    True
    """
    if text in ALIASES:
        return ALIASES[text]
    return _BY_TOKEN.get(text)


def group(quality: Quality) -> Group:
    """Return the group of a quality.

    Examples
    --------
    >>> group(Quality.ADD_NINE)
    <Group.MAJOR: 'major'>
    >>> group(Quality.FIVE)
    <Group.OTHER: 'other'>
    """
    return _GROUP[quality]


def display(quality: Quality) -> QualityDisplay:
    """Return the display renderings of a quality."""
    return _DISPLAY[quality]


def qualities_in_group(group_: Group) -> tuple[Quality, ...]:
    """Return the qualities of a group in rank order.

    Examples
    --------
    >>> qualities_in_group(Group.DIMINISHED)
    (<Quality.DIM: 'dim'>, <Quality.DIM_SEVEN: 'dim7'>)
    """
    return tuple(quality for quality in ALL_QUALITIES if _GROUP[quality] is group_)
