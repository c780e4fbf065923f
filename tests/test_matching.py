"""Tests for chord corpus matching."""

import itertools
import logging

import pytest

from chord_symbols import ANY, ChordCorpus, Group, Quality, lookup, matching, parse_chord, parse_pitch_class
from chord_symbols.models import ChordDefinition


def _chords(*names: str) -> list[ChordDefinition]:
    return [parse_chord(name) for name in names]


def _names(chords) -> list[str]:
    return [chord.name for chord in chords]


@pytest.fixture
def corpus() -> list[ChordDefinition]:
    """A small corpus covering roots, qualities and slash chords."""
    return _chords("Cmaj7", "Cm7", "G7", "G7/B", "C#m", "Dbm", "Dsus4", "Am7/G", "C")


class TestSingleFilters:
    """Test each criterion on its own."""

    def test_no_criteria_returns_corpus(self, corpus: list[ChordDefinition]) -> None:
        assert matching(corpus) == corpus

    def test_root(self, corpus: list[ChordDefinition]) -> None:
        assert _names(matching(corpus, root="C")) == ["Cmaj7", "Cm7", "C"]

    def test_root_pitch_class(self, corpus: list[ChordDefinition]) -> None:
        root = parse_pitch_class("G")
        assert _names(matching(corpus, root=root)) == ["G7", "G7/B"]

    def test_quality_is_exact(self, corpus: list[ChordDefinition]) -> None:
        """MINOR does not match MINOR_SEVEN, even though both are minor chords."""
        assert _names(matching(corpus, quality=Quality.MINOR)) == ["C#m", "Dbm"]

    def test_bass(self, corpus: list[ChordDefinition]) -> None:
        assert _names(matching(corpus, bass="B")) == ["G7/B"]

    def test_bass_none_means_no_bass(self) -> None:
        chords = _chords("G7", "G7/B")
        assert _names(matching(chords, bass=None)) == ["G7"]

    def test_group(self, corpus: list[ChordDefinition]) -> None:
        assert _names(matching(corpus, group=Group.MINOR)) == ["Cm7", "C#m", "Dbm", "Am7/G"]
        assert _names(matching(corpus, group=Group.SUSPENDED)) == ["Dsus4"]

    def test_explicit_any(self, corpus: list[ChordDefinition]) -> None:
        assert matching(corpus, root=ANY, quality=ANY, bass=ANY, group=ANY) == corpus

    def test_any_repr(self) -> None:
        assert repr(ANY) == "ANY"


class TestEnharmonic:
    """Test enharmonic matching of roots and basses."""

    def test_enharmonic_roots_match(self, corpus: list[ChordDefinition]) -> None:
        assert _names(matching(corpus, root="Db")) == ["C#m", "Dbm"]
        assert _names(matching(corpus, root="C♯")) == ["C#m", "Dbm"]

    def test_spelling_match(self, corpus: list[ChordDefinition]) -> None:
        assert _names(matching(corpus, root="Db", enharmonic=False)) == ["Dbm"]
        assert _names(matching(corpus, root="C♯", enharmonic=False)) == ["C#m"]

    def test_enharmonic_bass(self) -> None:
        chords = _chords("E/G#", "E/Ab")
        assert _names(matching(chords, bass="Ab")) == ["E/G#", "E/Ab"]
        assert _names(matching(chords, bass="Ab", enharmonic=False)) == ["E/Ab"]


class TestComposition:
    """Test that filters compose and commute."""

    def test_root_then_quality(self, corpus: list[ChordDefinition]) -> None:
        by_root = matching(corpus, root="C")
        assert _names(matching(by_root, quality=Quality.MINOR_SEVEN)) == ["Cm7"]

    def test_quality_then_root(self, corpus: list[ChordDefinition]) -> None:
        by_quality = matching(corpus, quality=Quality.MINOR_SEVEN)
        assert _names(matching(by_quality, root="C")) == ["Cm7"]

    def test_filters_commute(self, corpus: list[ChordDefinition]) -> None:
        filters = [
            {"root": "G"},
            {"quality": Quality.SEVEN},
            {"bass": None},
        ]
        results = []
        for order in itertools.permutations(filters):
            chords = corpus
            for criteria in order:
                chords = matching(chords, **criteria)
            results.append(_names(chords))
        assert all(result == ["G7"] for result in results)

    def test_combined_call(self, corpus: list[ChordDefinition]) -> None:
        assert _names(matching(corpus, root="A", quality=Quality.MINOR_SEVEN, bass="G")) == ["Am7/G"]

    def test_corpus_not_modified(self, corpus: list[ChordDefinition]) -> None:
        before = list(corpus)
        matching(corpus, root="C", bass=None)
        assert corpus == before

    def test_accepts_generators(self) -> None:
        chords = (chord for chord in _chords("C", "D", "C/E"))
        assert _names(matching(chords, root="C")) == ["C", "C/E"]


class TestInvalidCriteria:
    """Test how bad criteria are handled."""

    def test_none_root_raises(self, corpus: list[ChordDefinition]) -> None:
        with pytest.raises(TypeError, match="root criterion cannot be None"):
            matching(corpus, root=None)

    def test_none_root_raises_on_corpus(self) -> None:
        with pytest.raises(TypeError):
            ChordCorpus.from_names(["C", "G7"]).matching(root=None)

    @pytest.mark.parametrize("root", ["H", "", "Cm", "7"])
    def test_invalid_root(self, corpus: list[ChordDefinition], root: str) -> None:
        assert matching(corpus, root=root) == []

    def test_invalid_bass(self, corpus: list[ChordDefinition]) -> None:
        assert matching(corpus, bass="X") == []

    def test_invalid_criterion_is_logged(self, corpus: list[ChordDefinition], caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="chord_symbols.matching"):
            matching(corpus, root="H")
        assert "Unusable root criterion 'H'" in caplog.text


class TestLookup:
    """Test lookup by chord symbol."""

    def test_lookup(self, corpus: list[ChordDefinition]) -> None:
        assert _names(lookup(corpus, "Cm7")) == ["Cm7"]

    def test_lookup_without_bass_skips_slash_chords(self, corpus: list[ChordDefinition]) -> None:
        assert _names(lookup(corpus, "G7")) == ["G7"]

    def test_lookup_slash_chord(self, corpus: list[ChordDefinition]) -> None:
        assert _names(lookup(corpus, "G7/B")) == ["G7/B"]

    def test_lookup_enharmonic(self, corpus: list[ChordDefinition]) -> None:
        assert _names(lookup(corpus, "Dbm")) == ["C#m", "Dbm"]
        assert _names(lookup(corpus, "Dbm", enharmonic=False)) == ["Dbm"]

    @pytest.mark.parametrize("name", ["", "7", "G7/"])
    def test_unparseable_lookup_is_empty(self, corpus: list[ChordDefinition], name: str) -> None:
        assert lookup(corpus, name) == []

    def test_unknown_quality_only_matches_unknown(self) -> None:
        chords = _chords("Cxyz", "C", "Cm")
        assert _names(lookup(chords, "Cabc")) == ["Cxyz"]


class TestChordCorpus:
    """Test the chainable corpus wrapper."""

    def test_from_names(self) -> None:
        corpus = ChordCorpus.from_names(["C", "Am", "G7"])
        assert len(corpus) == 3
        assert corpus[1].quality is Quality.MINOR

    def test_from_names_skips_unparseable(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="chord_symbols.matching"):
            corpus = ChordCorpus.from_names(["C", "7", "G/"])
        assert _names(corpus) == ["C"]
        assert "Skipping unparseable chord '7'" in caplog.text

    def test_from_names_instrument(self) -> None:
        corpus = ChordCorpus.from_names(["C"], instrument="guitar")
        assert corpus[0].instrument == "guitar"

    def test_chained_matching(self) -> None:
        corpus = ChordCorpus.from_names(["Cmaj7", "Cm7", "G7"])
        result = corpus.matching(root="C").matching(quality=Quality.MINOR_SEVEN)
        assert isinstance(result, ChordCorpus)
        assert _names(result) == ["Cm7"]

    def test_chain_order_independent(self) -> None:
        corpus = ChordCorpus.from_names(["Cmaj7", "Cm7", "G7"])
        a = corpus.matching(root="C").matching(quality=Quality.MINOR_SEVEN)
        b = corpus.matching(quality=Quality.MINOR_SEVEN).matching(root="C")
        assert a == b

    def test_lookup(self) -> None:
        corpus = ChordCorpus.from_names(["G7", "G7/B"])
        assert _names(corpus.lookup("G7/B")) == ["G7/B"]

    def test_sorted(self) -> None:
        corpus = ChordCorpus.from_names(["G7", "Cm", "C", "C/E"])
        assert _names(corpus.sorted()) == ["C", "C/E", "Cm", "G7"]

    def test_chords_is_tuple(self) -> None:
        corpus = ChordCorpus.from_names(["C"])
        assert isinstance(corpus.chords, tuple)

    def test_repr(self) -> None:
        assert repr(ChordCorpus.from_names(["C", "Am"])) == "ChordCorpus([C, Am])"

    def test_empty(self) -> None:
        corpus = ChordCorpus()
        assert len(corpus) == 0
        assert list(corpus.matching(root="C")) == []
