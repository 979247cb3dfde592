"""
Core chord theory - the pure transformation engine.

Everything here is a pure function of its inputs:
- PitchClass: The 12 chromatic pitch classes (0-11)
- ChordQuality / QUALITIES: Interval table (quality -> semitone offsets)
- apply_inversion: Rotate the lowest note up an octave, n times
- VoicingPreset / apply_voicing: Spacing transforms
- get_chord_notes: The full pipeline to MIDI note numbers
- get_chord_name / get_chord_tooltip: Display helpers
- ScaleMode: Scale filters for the chord picker
"""

from chord_theory.core.display import (
    get_bass_note,
    get_chord_name,
    get_chord_tooltip,
    inversion_ordinal,
    ordinal_suffix,
)
from chord_theory.core.inversions import apply_inversion, rotate_lowest
from chord_theory.core.operations import get_chord_notes
from chord_theory.core.pitch import PitchClass, clamp_midi_note, midi_to_note_name
from chord_theory.core.qualities import (
    QUALITIES,
    QUALITY_ORDER,
    ChordQuality,
    lookup_intervals,
    parse_quality,
)
from chord_theory.core.scale import (
    ScaleMode,
    get_scale_notes,
    get_valid_qualities_for_root,
    is_quality_valid_for_scale_degree,
    is_root_in_scale,
)
from chord_theory.core.voicings import (
    VoicingPreset,
    apply_voicing,
    close_voicing,
    drop2_voicing,
    drop3_voicing,
    open_voicing,
    parse_voicing,
    wide_voicing,
)

__all__ = [
    # Pitch
    "PitchClass",
    "clamp_midi_note",
    "midi_to_note_name",
    # Qualities
    "ChordQuality",
    "QUALITIES",
    "QUALITY_ORDER",
    "lookup_intervals",
    "parse_quality",
    # Inversions
    "apply_inversion",
    "rotate_lowest",
    # Voicings
    "VoicingPreset",
    "apply_voicing",
    "parse_voicing",
    "close_voicing",
    "open_voicing",
    "drop2_voicing",
    "drop3_voicing",
    "wide_voicing",
    # Pipeline
    "get_chord_notes",
    # Display
    "get_chord_name",
    "get_chord_tooltip",
    "get_bass_note",
    "inversion_ordinal",
    "ordinal_suffix",
    # Scales
    "ScaleMode",
    "get_scale_notes",
    "is_root_in_scale",
    "is_quality_valid_for_scale_degree",
    "get_valid_qualities_for_root",
]
