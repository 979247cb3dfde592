"""
Pitch primitives - PitchClass and MIDI note helpers.

PitchClass represents the 12 chromatic pitches (octave-independent).
Absolute pitches are plain MIDI note numbers (60 = C4).
"""

from __future__ import annotations

from enum import IntEnum

from chord_theory.constants import (
    MIDI_MAX_NOTE,
    MIDI_MIN_NOTE,
    NOTE_NAMES,
    SEMITONES_PER_OCTAVE,
)

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: tuple[str, ...] = NOTE_NAMES
_FLAT_NAMES: tuple[str, ...] = (
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)

# Spellings that cross the B/C and E/F boundaries
_ENHARMONIC_NAMES: dict[str, int] = {
    "Cb": 11,
    "B#": 0,
    "Fb": 4,
    "E#": 5,
}


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    Spelling is a display concern. Chord names use sharps.
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % SEMITONES_PER_OCTAVE)

    def to_midi(self, octave: int = 4) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * SEMITONES_PER_OCTAVE

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number (negative numbers wrap)."""
        return cls(midi_note % SEMITONES_PER_OCTAVE)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db'."""
        name = name.strip()

        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))

        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        if name in _ENHARMONIC_NAMES:
            return cls(_ENHARMONIC_NAMES[name])

        # Try enum names (C, Cs, D, Ds, etc.)
        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise ValueError(f"Unknown pitch class: {name}")


def clamp_midi_note(midi_note: int) -> int:
    """Clamp a MIDI note to the piano range (A0-C8)."""
    return max(MIDI_MIN_NOTE, min(MIDI_MAX_NOTE, midi_note))


def midi_to_note_name(midi_note: int) -> str:
    """
    Scientific pitch name for a MIDI note, e.g. 60 -> 'C4', 21 -> 'A0'.

    The octave number follows the MIDI convention (C4 = 60), so
    C-1 is MIDI note 0.
    """
    pitch = PitchClass.from_midi(midi_note)
    octave = midi_note // SEMITONES_PER_OCTAVE - 1
    return f"{pitch.spell()}{octave}"
