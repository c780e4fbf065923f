"""Tests for chord symbol parsing."""

import logging

import pytest

from chord_symbols import (
    ChordDefinition,
    MalformedBassError,
    MalformedRootError,
    Quality,
    UnrecognizedChordError,
    is_chord,
    parse_chord,
    parse_chord_strict,
)
from chord_symbols.parser import split_bass


class TestRoot:
    """Test root extraction."""

    def test_bare_root_is_major(self) -> None:
        chord = parse_chord("C")
        assert chord is not None
        assert chord.root.spelling == "C"
        assert chord.quality is Quality.MAJOR
        assert chord.bass is None

    @pytest.mark.parametrize(
        ("name", "spelling", "semitone"),
        [
            ("F#", "F#", 6),
            ("Bbm7", "Bb", 10),
            ("E♭maj7", "E♭", 3),
            ("C♯m", "C♯", 1),
            ("am", "A", 9),
            ("bbm", "Bb", 10),
        ],
    )
    def test_accidentals_and_case(self, name: str, spelling: str, semitone: int) -> None:
        chord = parse_chord(name)
        assert chord is not None
        assert chord.root.spelling == spelling
        assert chord.root.semitone == semitone

    @pytest.mark.parametrize("name", ["", "7", "m7", "H", "Xmaj7", "/E", "   "])
    def test_malformed_root(self, name: str) -> None:
        assert parse_chord(name) is None

    def test_malformed_root_strict(self) -> None:
        with pytest.raises(MalformedRootError, match="no root note"):
            parse_chord_strict("7")


class TestQuality:
    """Test quality resolution."""

    @pytest.mark.parametrize(
        ("name", "quality"),
        [
            ("Cm", Quality.MINOR),
            ("Cm7", Quality.MINOR_SEVEN),
            ("C7", Quality.SEVEN),
            ("C7sus4", Quality.SEVEN_SUS_FOUR),
            ("C7sus2", Quality.SEVEN_SUS_TWO),
            ("C7b5", Quality.SEVEN_FLAT_FIVE),
            ("C7#9", Quality.SEVEN_SHARP_NINE),
            ("C#maj7b5", Quality.MAJOR_SEVEN_FLAT_FIVE),
            ("CmMaj7", Quality.MINOR_MAJOR_SEVEN),
            ("Cm7b5", Quality.MINOR_SEVEN_FLAT_FIVE),
            ("Cdim7", Quality.DIM_SEVEN),
            ("Caug9", Quality.AUG_NINE),
            ("C5", Quality.FIVE),
            ("C69", Quality.SIX_NINE),
            ("Cm69", Quality.MINOR_SIX_NINE),
            ("Cadd9", Quality.ADD_NINE),
            ("C9#11", Quality.NINE_SHARP_ELEVEN),
        ],
    )
    def test_known_qualities(self, name: str, quality: Quality) -> None:
        chord = parse_chord(name)
        assert chord is not None
        assert chord.quality is quality

    def test_longest_token_wins(self) -> None:
        """'7sus4' is one token, not '7' followed by leftover text."""
        chord = parse_chord("C7sus4")
        assert chord is not None
        assert chord.quality is Quality.SEVEN_SUS_FOUR
        assert chord.bass is None

    def test_unknown_quality_is_tolerated(self) -> None:
        chord = parse_chord("Cxyz")
        assert chord is not None
        assert chord.root.spelling == "C"
        assert chord.quality is Quality.UNKNOWN
        assert chord.bass is None

    def test_tokens_are_case_sensitive(self) -> None:
        chord = parse_chord("CMaj7")
        assert chord is not None
        assert chord.quality is Quality.UNKNOWN

    def test_unknown_quality_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="chord_symbols.parser"):
            parse_chord("Cxyz")
        assert "Unknown quality 'xyz'" in caplog.text


class TestBass:
    """Test slash chords."""

    def test_slash_chord(self) -> None:
        chord = parse_chord("G7/B")
        assert chord is not None
        assert chord.root.spelling == "G"
        assert chord.quality is Quality.SEVEN
        assert chord.bass is not None
        assert chord.bass.spelling == "B"

    def test_major_slash_chord(self) -> None:
        chord = parse_chord("C/E")
        assert chord is not None
        assert chord.quality is Quality.MAJOR
        assert chord.bass.spelling == "E"

    def test_bass_with_accidental(self) -> None:
        chord = parse_chord("Am7/G♯")
        assert chord is not None
        assert chord.bass.spelling == "G♯"
        assert chord.bass.semitone == 8

    @pytest.mark.parametrize("name", ["C/", "G7/H", "C/Em", "Am/9"])
    def test_malformed_bass(self, name: str) -> None:
        assert parse_chord(name) is None

    def test_malformed_bass_strict(self) -> None:
        with pytest.raises(MalformedBassError, match="invalid bass note 'H'"):
            parse_chord_strict("G7/H")

    def test_six_nine_is_not_a_slash_chord(self) -> None:
        chord = parse_chord("C6/9")
        assert chord is not None
        assert chord.quality is Quality.SIX_NINE
        assert chord.bass is None

    def test_six_nine_with_bass(self) -> None:
        chord = parse_chord("Cm6/9/G")
        assert chord is not None
        assert chord.quality is Quality.MINOR_SIX_NINE
        assert chord.bass.spelling == "G"

    @pytest.mark.parametrize(
        ("remainder", "expected"),
        [
            ("", ("", None)),
            ("m7/D", ("m7", "D")),
            ("/E", ("", "E")),
            ("6/9", ("6/9", None)),
            ("6/9/E", ("6/9", "E")),
            ("/", ("", "")),
        ],
    )
    def test_split_bass(self, remainder: str, expected: tuple[str, str | None]) -> None:
        assert split_bass(remainder) == expected


class TestChordDefinition:
    """Test the resulting chord object."""

    def test_name_is_verbatim(self) -> None:
        chord = parse_chord(" c#m7 ")
        assert chord is not None
        assert chord.name == " c#m7 "
        assert chord.root.spelling == "C#"

    def test_instrument_is_carried(self) -> None:
        chord = parse_chord("Am", instrument="ukulele")
        assert chord is not None
        assert chord.instrument == "ukulele"

    def test_chord_is_immutable(self) -> None:
        chord = parse_chord("C")
        with pytest.raises(AttributeError):
            chord.quality = Quality.MINOR  # type: ignore[misc]

    def test_strict_returns_same_chord(self) -> None:
        assert parse_chord_strict("Dm7/C") == parse_chord("Dm7/C")

    def test_is_slash_chord(self) -> None:
        assert parse_chord("C/G").is_slash_chord
        assert not parse_chord("C").is_slash_chord

    def test_sort_key(self) -> None:
        names = ["G7", "C/G", "Cm", "C", "Db"]
        chords = sorted((parse_chord(n) for n in names), key=ChordDefinition.sort_key)
        assert [c.name for c in chords] == ["C", "C/G", "Cm", "Db", "G7"]


class TestErrors:
    """Test the error hierarchy."""

    def test_errors_are_value_errors(self) -> None:
        assert issubclass(UnrecognizedChordError, ValueError)
        assert issubclass(MalformedRootError, UnrecognizedChordError)
        assert issubclass(MalformedBassError, UnrecognizedChordError)

    def test_error_keeps_input(self) -> None:
        with pytest.raises(UnrecognizedChordError) as exc_info:
            parse_chord_strict("")
        assert exc_info.value.name == ""


class TestIsChord:
    """Test chord detection."""

    @pytest.mark.parametrize("text", ["C", "Am", "Gm7", "Bbmaj7", "F#m7b5", "C/E", "Dsus4"])
    def test_valid_chords(self, text: str) -> None:
        assert is_chord(text) is True

    @pytest.mark.parametrize("text", ["Hello", "love", "the", "Cxyz", "", "G/x"])
    def test_non_chords(self, text: str) -> None:
        assert is_chord(text) is False
