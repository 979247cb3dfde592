"""
Tests for chord names and inversion tooltips.
"""

import pytest

from chord_theory import Chord, get_chord_name, get_chord_tooltip
from chord_theory.core import get_bass_note, inversion_ordinal, ordinal_suffix
from chord_theory.core.pitch import PitchClass


class TestChordName:
    """Tests for get_chord_name."""

    @pytest.mark.parametrize(
        ("root", "quality", "expected"),
        [
            (60, "", "C"),
            (62, "", "D"),
            (66, "", "F#"),
            (69, "m", "Am"),
            (61, "m", "C#m"),
            (60, "maj7", "Cmaj7"),
            (67, "7", "G7"),
            (62, "m7", "Dm7"),
            (71, "m7b5", "Bm7b5"),
            (60, "maj9", "Cmaj9"),
            (67, "13", "G13"),
            (60, "add9", "Cadd9"),
            (64, "5", "E5"),
        ],
    )
    def test_names(self, root: int, quality: str, expected: str) -> None:
        """Root name plus quality suffix."""
        assert get_chord_name(Chord(root=root, quality=quality)) == expected

    def test_name_ignores_octave_and_inversion(self) -> None:
        """Only root pitch class and quality matter."""
        chord = Chord(root=48, quality="m7", inversion=2, voicing="wide", octave=2)
        assert get_chord_name(chord) == "Cm7"

    def test_root_wraps(self) -> None:
        """Low and negative roots use the pitch class."""
        assert get_chord_name(Chord(root=0)) == "C"
        assert get_chord_name(Chord(root=-1)) == "B"


class TestChordTooltip:
    """Tests for get_chord_tooltip."""

    def test_root_position(self) -> None:
        """Root position has no tooltip."""
        assert get_chord_tooltip(Chord(root=60, quality="maj7")) == ""

    def test_first_inversion(self) -> None:
        """C major first inversion has E in the bass."""
        chord = Chord(root=60, quality="", inversion=1)
        assert get_chord_tooltip(chord) == "First inversion (E in bass)"

    def test_second_inversion(self) -> None:
        """Cmaj7 second inversion has G in the bass."""
        chord = Chord(root=60, quality="maj7", inversion=2)
        assert get_chord_tooltip(chord) == "Second inversion (G in bass)"

    def test_third_inversion(self) -> None:
        """Dm7 third inversion has C in the bass."""
        chord = Chord(root=62, quality="m7", inversion=3)
        assert get_chord_tooltip(chord) == "Third inversion (C in bass)"

    def test_word_ordinals_up_to_six(self) -> None:
        """Fourth to Sixth are words."""
        assert get_chord_tooltip(Chord(root=60, inversion=4)) == "Fourth inversion (E in bass)"
        assert get_chord_tooltip(Chord(root=60, inversion=6)) == "Sixth inversion (C in bass)"

    def test_numeric_ordinal(self) -> None:
        """Beyond six the ordinal is numeric."""
        assert get_chord_tooltip(Chord(root=60, inversion=7)) == "7th inversion (E in bass)"

    def test_bass_note(self) -> None:
        """Bass note is the first note after inversion."""
        assert get_bass_note(Chord(root=60, quality="maj7", inversion=3)) == PitchClass.B
        assert get_bass_note(Chord(root=60)) == PitchClass.C


class TestOrdinals:
    """Tests for ordinal helpers."""

    @pytest.mark.parametrize(
        ("n", "suffix"),
        [
            (1, "st"),
            (2, "nd"),
            (3, "rd"),
            (4, "th"),
            (11, "th"),
            (12, "th"),
            (13, "th"),
            (21, "st"),
            (22, "nd"),
            (23, "rd"),
            (101, "st"),
            (111, "th"),
            (112, "th"),
        ],
    )
    def test_suffix(self, n: int, suffix: str) -> None:
        """Standard English ordinal suffixes."""
        assert ordinal_suffix(n) == suffix

    def test_inversion_ordinal(self) -> None:
        """Words for 1-6, numbers after."""
        assert inversion_ordinal(1) == "First"
        assert inversion_ordinal(6) == "Sixth"
        assert inversion_ordinal(7) == "7th"
        assert inversion_ordinal(11) == "11th"
        assert inversion_ordinal(22) == "22nd"
