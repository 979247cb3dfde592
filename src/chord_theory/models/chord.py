"""
Chord and progression models.

These are the values callers build from user actions and hand to the
engine. They round-trip through JSON verbatim, which is all the
persistence layer needs.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chord_theory.constants import (
    DEFAULT_BPM,
    DEFAULT_DURATION,
    MAX_BPM,
    MAX_PROGRESSION_SLOTS,
    MIN_BPM,
    NoteDuration,
)
from chord_theory.core.display import get_chord_name, get_chord_tooltip
from chord_theory.core.operations import get_chord_notes
from chord_theory.core.qualities import ChordQuality
from chord_theory.core.voicings import VoicingPreset


class Chord(BaseModel):
    """
    A chord in a progression slot.

    Immutable - edits produce a new Chord via model_copy(update=...).
    """

    root: int = Field(..., description="Root MIDI note number (60 = C4)")
    quality: ChordQuality = Field(ChordQuality.MAJOR, description="Chord quality suffix")
    inversion: int = Field(0, ge=0, description="Inversion count (0 = root position)")
    voicing: VoicingPreset = Field(VoicingPreset.CLOSE, description="Voicing preset")
    octave: int = Field(0, description="Octave transposition (each unit = 12 semitones)")
    duration: NoteDuration = Field(DEFAULT_DURATION, description="Slot length")

    model_config = {"frozen": True}

    @property
    def notes(self) -> list[int]:
        """MIDI note numbers for this chord."""
        return get_chord_notes(self)

    @property
    def name(self) -> str:
        return get_chord_name(self)

    @property
    def tooltip(self) -> str:
        return get_chord_tooltip(self)

    def __str__(self) -> str:
        return self.name


class Progression(BaseModel):
    """
    A row of chord slots. None marks a rest.
    """

    slots: list[Chord | None] = Field(
        default_factory=lambda: [None] * MAX_PROGRESSION_SLOTS,
        description="Chord slots (None = rest)",
    )
    bpm: int = Field(DEFAULT_BPM, ge=MIN_BPM, le=MAX_BPM, description="Tempo in BPM")

    def has_chords(self) -> bool:
        """True if at least one slot holds a chord."""
        return any(slot is not None for slot in self.slots)

    @property
    def chords(self) -> list[Chord]:
        """The non-empty slots, in order."""
        return [slot for slot in self.slots if slot is not None]
