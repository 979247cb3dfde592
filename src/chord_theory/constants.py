"""
Constants and enums for the chord theory engine.

No magic strings - use enums and Literal types for constrained values.
"""

from typing import Literal

# Chromatic note names, index = MIDI note % 12
NOTE_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)

SEMITONES_PER_OCTAVE = 12

# Playable piano range used when exporting
MIDI_MIN_NOTE = 21  # A0
MIDI_MAX_NOTE = 108  # C8

# Progression canvas
MAX_PROGRESSION_SLOTS = 4
DEFAULT_BPM = 120
MIN_BPM = 20
MAX_BPM = 300

# Server defaults
SERVER_NAME = "chord-theory"
DEFAULT_HTTP_PORT = 8000

# Export defaults
DEFAULT_FILE_NAME = "chord-progression"
DEFAULT_VELOCITY = 100

# Chord slot durations offered by the UI (Tone.js notation)
NoteDuration = Literal[
    "8n",
    "4n",
    "4n.",
    "2n",
    "0:2:2",
    "2n.",
    "0:3:2",
    "1m",
    "1:0:2",
    "1:1:0",
    "1:1:2",
    "1:2:0",
    "1:2:2",
    "1:3:0",
    "1:3:2",
    "2m",
]

# Length of each duration in eighths of a 4/4 bar
DURATION_EIGHTHS: dict[str, int] = {
    "8n": 1,
    "4n": 2,
    "4n.": 3,
    "2n": 4,
    "0:2:2": 5,
    "2n.": 6,
    "0:3:2": 7,
    "1m": 8,
    "1:0:2": 9,
    "1:1:0": 10,
    "1:1:2": 11,
    "1:2:0": 12,
    "1:2:2": 13,
    "1:3:0": 14,
    "1:3:2": 15,
    "2m": 16,
}

DEFAULT_DURATION: NoteDuration = "1m"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_QUALITY = "Unknown chord quality: '{quality}'."
    INVALID_INVERSION = "Inversion must be >= 0, got {inversion}."
    INVALID_VOICING = "Unknown voicing preset: '{voicing}'."
    EMPTY_PROGRESSION = "Progression has no chords to export."
    UNKNOWN_DURATION = "Unknown duration: '{duration}'."
    INVALID_OUTPUT_NAME = "Output name must be a plain file name, got '{name}'."
