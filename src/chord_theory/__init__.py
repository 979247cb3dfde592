"""
Chord theory engine.

Turns a symbolic chord (root, quality, inversion, voicing, octave) into
ordered MIDI note numbers, names it, and exports progressions to MIDI.

    from chord_theory import Chord, get_chord_notes

    get_chord_notes(Chord(root=60, quality="maj7", voicing="drop2"))
    # [55, 60, 64, 71]
"""

from chord_theory.core import (
    QUALITIES,
    QUALITY_ORDER,
    ChordQuality,
    VoicingPreset,
    apply_inversion,
    apply_voicing,
    get_chord_name,
    get_chord_notes,
    get_chord_tooltip,
    lookup_intervals,
)
from chord_theory.errors import (
    ChordTheoryError,
    InvalidInversionError,
    InvalidQualityError,
    InvalidVoicingError,
)
from chord_theory.models import Chord, Progression

__version__ = "0.1.0"

__all__ = [
    "Chord",
    "ChordQuality",
    "ChordTheoryError",
    "InvalidInversionError",
    "InvalidQualityError",
    "InvalidVoicingError",
    "Progression",
    "QUALITIES",
    "QUALITY_ORDER",
    "VoicingPreset",
    "apply_inversion",
    "apply_voicing",
    "get_chord_name",
    "get_chord_notes",
    "get_chord_tooltip",
    "lookup_intervals",
]
