"""
Chord operations - the pitch pipeline.

Turns a symbolic chord into ordered MIDI note numbers:

    quality -> intervals -> inversion -> voicing -> + root -> + octave

Inversion always runs before voicing, and the root/octave offsets come
last so they shift every note uniformly. Pure and deterministic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chord_theory.constants import SEMITONES_PER_OCTAVE
from chord_theory.core.inversions import apply_inversion
from chord_theory.core.qualities import lookup_intervals
from chord_theory.core.voicings import apply_voicing

if TYPE_CHECKING:
    from chord_theory.models.chord import Chord


def get_chord_notes(chord: Chord) -> list[int]:
    """
    Get the final MIDI note numbers for a chord.

    Args:
        chord: Root, quality, inversion, voicing and octave

    Returns:
        MIDI note numbers ready for playback or export. Not clamped to
        0-127; callers clamp to their output range.

    Raises:
        InvalidQualityError: If the quality is not in the table
        InvalidInversionError: If the inversion is negative

    Examples:
        C major, root position, close -> [60, 64, 67]
        C major, first inversion, close -> [64, 67, 72]
        Cmaj7, root position, drop2 -> [55, 60, 64, 71]
        C major, close, octave +1 -> [72, 76, 79]
    """
    intervals = lookup_intervals(chord.quality)
    inverted = apply_inversion(intervals, chord.inversion)
    voiced = apply_voicing(inverted, chord.voicing)

    notes = [chord.root + interval for interval in voiced]

    octave_offset = chord.octave * SEMITONES_PER_OCTAVE
    return [note + octave_offset for note in notes]
