"""
Tests for Chord and Progression models.
"""

import pytest
from pydantic import ValidationError

from chord_theory import Chord, ChordQuality, Progression, VoicingPreset


class TestChord:
    """Tests for the Chord model."""

    def test_defaults(self) -> None:
        """Only the root is required."""
        chord = Chord(root=60)
        assert chord.quality == ChordQuality.MAJOR
        assert chord.inversion == 0
        assert chord.voicing == VoicingPreset.CLOSE
        assert chord.octave == 0
        assert chord.duration == "1m"

    def test_suffix_coercion(self) -> None:
        """Quality and voicing strings coerce to enums."""
        chord = Chord(root=60, quality="maj7", voicing="drop2")
        assert chord.quality is ChordQuality.MAJOR_7
        assert chord.voicing is VoicingPreset.DROP2

    def test_unknown_quality(self) -> None:
        """Unknown qualities fail validation."""
        with pytest.raises(ValidationError):
            Chord(root=60, quality="maj15")

    def test_negative_inversion(self) -> None:
        """Negative inversions fail validation."""
        with pytest.raises(ValidationError):
            Chord(root=60, inversion=-1)

    def test_unknown_duration(self) -> None:
        """Durations are limited to the UI set."""
        with pytest.raises(ValidationError):
            Chord(root=60, duration="3m")

    def test_frozen(self) -> None:
        """Chords are immutable; edits go through model_copy."""
        chord = Chord(root=60)
        with pytest.raises(ValidationError):
            chord.inversion = 1  # type: ignore[misc]
        inverted = chord.model_copy(update={"inversion": 1})
        assert inverted.notes == [64, 67, 72]
        assert chord.notes == [60, 64, 67]

    def test_convenience_properties(self) -> None:
        """Notes, name and tooltip come from the engine."""
        chord = Chord(root=60, quality="", inversion=1)
        assert chord.notes == [64, 67, 72]
        assert chord.name == "C"
        assert str(chord) == "C"
        assert chord.tooltip == "First inversion (E in bass)"

    def test_json_round_trip(self) -> None:
        """All fields survive a JSON round trip."""
        chord = Chord(root=66, quality="m7b5", inversion=2, voicing="drop3", octave=-1)
        data = chord.model_dump(mode="json")
        assert data["quality"] == "m7b5"
        assert data["voicing"] == "drop3"
        assert Chord.model_validate(data) == chord
        assert Chord.model_validate_json(chord.model_dump_json()) == chord

    def test_major_quality_serializes_empty(self) -> None:
        """The major triad suffix is the empty string."""
        assert Chord(root=60).model_dump(mode="json")["quality"] == ""


class TestProgression:
    """Tests for the Progression model."""

    def test_default_slots(self) -> None:
        """Four empty slots by default."""
        prog = Progression()
        assert prog.slots == [None, None, None, None]
        assert prog.bpm == 120
        assert not prog.has_chords()

    def test_has_chords(self) -> None:
        """One chord is enough."""
        prog = Progression(slots=[None, Chord(root=60), None])
        assert prog.has_chords()
        assert prog.chords == [Chord(root=60)]

    def test_from_dicts(self) -> None:
        """Slots validate from plain data."""
        prog = Progression.model_validate(
            {"slots": [{"root": 62, "quality": "m7"}, None, {"root": 67, "quality": "7"}]}
        )
        assert [c.name for c in prog.chords] == ["Dm7", "G7"]

    def test_bpm_range(self) -> None:
        """Tempo is bounded."""
        with pytest.raises(ValidationError):
            Progression(bpm=10)
        with pytest.raises(ValidationError):
            Progression(bpm=400)
