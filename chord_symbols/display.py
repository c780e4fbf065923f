"""Render chords as display strings.

Output is derived from the quality's display renderings only; nothing is
re-parsed.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from chord_symbols.config import BASS_SEPARATOR, DEFAULT_DISPLAY_STYLE

if TYPE_CHECKING:
    from chord_symbols.models import ChordDefinition


class DisplayStyle(Enum):
    """Which display rendering of the quality to use."""

    ACCESSIBLE = "accessible"
    SHORT = "short"
    SYMBOL = "symbol"
    ALT_SYMBOL = "alt_symbol"


def resolve_style(style: DisplayStyle | str | None) -> DisplayStyle:
    """Accept a style as enum member, name or value.

    Raises
    ------
    ValueError
        If the style is not recognized.

    Examples
    --------
    >>> resolve_style("alt_symbol")
    <DisplayStyle.ALT_SYMBOL: 'alt_symbol'>
    >>> resolve_style(None)
    <DisplayStyle.SHORT: 'short'>
    """
    if style is None:
        style = DEFAULT_DISPLAY_STYLE
    if isinstance(style, DisplayStyle):
        return style
    try:
        return DisplayStyle(style.lower())
    except ValueError:
        msg = f"Unknown display style: {style}"
        raise ValueError(msg) from None


def format_chord(chord: ChordDefinition, style: DisplayStyle | str | None = None) -> str:
    """Format a chord for display.

    Parameters
    ----------
    chord : ChordDefinition
        The chord to render.
    style : DisplayStyle | str | None
        Display style. Defaults to ``DisplayStyle.SHORT``.

    Returns
    -------
    str
        Root spelling, the quality in the chosen style, and ``/bass`` for
        slash chords.

    Examples
    --------
    >>> from chord_symbols.parser import parse_chord
    >>> chord = parse_chord("Bbm7b5/E")
    >>> format_chord(chord)
    'Bbm7b5/E'
    >>> format_chord(chord, DisplayStyle.ALT_SYMBOL)
    'Bbø⁷/E'
    >>> format_chord(parse_chord("C"), "accessible")
    'C major'
    """
    resolved = resolve_style(style)
    quality_text = getattr(chord.quality.display, resolved.value)

    # Spoken forms need a word break between the note and the quality
    if resolved is DisplayStyle.ACCESSIBLE and quality_text:
        quality_text = " " + quality_text

    result = f"{chord.root.spelling}{quality_text}"
    if chord.bass is not None:
        result = f"{result}{BASS_SEPARATOR}{chord.bass.spelling}"
    return result
