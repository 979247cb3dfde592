"""
Export pipeline - chord progressions to MIDI.

The pipeline:
    Progression (chord slots)
    → MidiEvent list (clamped, de-duplicated pitches)
    → MIDI File
"""

from chord_theory.compiler.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    chord_to_events,
    chord_to_pitches,
    duration_to_ticks,
    events_to_midi,
    progression_to_events,
    progression_to_midi,
)

__all__ = [
    "TICKS_PER_BEAT",
    "MidiEvent",
    "chord_to_events",
    "chord_to_pitches",
    "duration_to_ticks",
    "events_to_midi",
    "progression_to_events",
    "progression_to_midi",
]
