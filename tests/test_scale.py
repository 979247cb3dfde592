"""
Tests for scale filters.
"""

from chord_theory.core import (
    QUALITIES,
    ChordQuality,
    ScaleMode,
    get_scale_notes,
    get_valid_qualities_for_root,
    is_quality_valid_for_scale_degree,
    is_root_in_scale,
)
from chord_theory.core.scale import MODE_STEPS

C_MAJOR = ["C", "D", "E", "F", "G", "A", "B"]


class TestScaleMode:
    """Tests for ScaleMode."""

    def test_steps_span_an_octave(self) -> None:
        """Every mode's steps sum to 12 semitones."""
        for mode in ScaleMode:
            assert sum(MODE_STEPS[mode]) == 12, mode

    def test_offsets(self) -> None:
        """Offsets are cumulative from the tonic."""
        assert ScaleMode.MAJOR.offsets == (0, 2, 4, 5, 7, 9, 11)
        assert ScaleMode.HARMONIC_MINOR.offsets == (0, 2, 3, 5, 7, 8, 11)


class TestScaleNotes:
    """Tests for get_scale_notes."""

    def test_c_major(self) -> None:
        """C major."""
        assert get_scale_notes("C", "major") == C_MAJOR

    def test_modes(self) -> None:
        """Relative modes share notes."""
        assert get_scale_notes("A", "minor") == ["A", "B", "C", "D", "E", "F", "G"]
        assert get_scale_notes("D", "dorian") == ["D", "E", "F", "G", "A", "B", "C"]

    def test_sharp_keys(self) -> None:
        """Sharp keys are spelled with sharps."""
        assert get_scale_notes("D", "major") == ["D", "E", "F#", "G", "A", "B", "C#"]
        assert get_scale_notes("A", "harmonic minor") == ["A", "B", "C", "D", "E", "F", "G#"]

    def test_flat_keys(self) -> None:
        """Flat keys are spelled with flats, one letter per degree."""
        assert get_scale_notes("F", "major") == ["F", "G", "A", "Bb", "C", "D", "E"]
        assert get_scale_notes("Bb", "major") == ["Bb", "C", "D", "Eb", "F", "G", "A"]
        assert get_scale_notes("Eb", "major")[0] == "Eb"
        assert get_scale_notes("D", "minor") == ["D", "E", "F", "G", "A", "Bb", "C"]

    def test_flat_scale_filters(self) -> None:
        """Flat-spelled scales filter the same pitch classes."""
        f_major = get_scale_notes("F", "major")
        assert is_root_in_scale(70, f_major)
        assert not is_root_in_scale(71, f_major)

    def test_unknown_scale(self) -> None:
        """Unknown key or mode yields no notes."""
        assert get_scale_notes("C", "bebop") == []
        assert get_scale_notes("H", "major") == []


class TestRootInScale:
    """Tests for is_root_in_scale."""

    def test_in_and_out(self) -> None:
        """Diatonic roots pass, chromatic ones don't."""
        assert is_root_in_scale(60, C_MAJOR)
        assert is_root_in_scale(71, C_MAJOR)
        assert not is_root_in_scale(61, C_MAJOR)

    def test_no_filter(self) -> None:
        """An empty scale lets everything through."""
        assert is_root_in_scale(61, [])

    def test_enharmonic(self) -> None:
        """Flat spellings match sharp roots."""
        assert is_root_in_scale(61, ["Db", "Eb"])

    def test_unknown_names_are_skipped(self) -> None:
        """Names that do not parse are treated as outside the scale."""
        assert is_root_in_scale(60, ["C", "Q#", "E"])
        assert not is_root_in_scale(62, ["C", "Q#", "E"])
        assert is_quality_valid_for_scale_degree(60, "5", ["C", "nonsense", "G"])
        assert not is_quality_valid_for_scale_degree(60, "", ["C", "nonsense", "G"])


class TestQualityFilter:
    """Tests for quality filtering."""

    def test_diatonic_chords(self) -> None:
        """Diatonic qualities fit, chromatic ones don't."""
        assert is_quality_valid_for_scale_degree(62, "m", C_MAJOR)
        assert not is_quality_valid_for_scale_degree(62, "", C_MAJOR)
        assert is_quality_valid_for_scale_degree(67, "7", C_MAJOR)
        assert is_quality_valid_for_scale_degree(71, "m7b5", C_MAJOR)

    def test_root_outside_scale(self) -> None:
        """A chromatic root fails regardless of quality."""
        assert not is_quality_valid_for_scale_degree(61, "", C_MAJOR)

    def test_valid_qualities_on_tonic(self) -> None:
        """Qualities on C within C major, in table order."""
        valid = get_valid_qualities_for_root(60, C_MAJOR)
        assert [q.value for q in valid] == [
            "",
            "sus4",
            "sus2",
            "5",
            "maj7",
            "6",
            "add9",
            "add11",
            "add13",
            "maj9",
            "maj11",
            "maj13",
        ]

    def test_no_filter_returns_all(self) -> None:
        """An empty scale allows every quality."""
        assert get_valid_qualities_for_root(61, []) == list(QUALITIES)

    def test_minor_chords_on_supertonic(self) -> None:
        """D in C major takes minor qualities."""
        valid = get_valid_qualities_for_root(62, C_MAJOR)
        assert ChordQuality.MINOR in valid
        assert ChordQuality.MINOR_7 in valid
        assert ChordQuality.MAJOR not in valid
