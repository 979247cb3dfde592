"""
Display helpers - chord names and inversion tooltips.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chord_theory.core.inversions import apply_inversion
from chord_theory.core.pitch import PitchClass
from chord_theory.core.qualities import lookup_intervals, parse_quality

if TYPE_CHECKING:
    from chord_theory.models.chord import Chord

_INVERSION_NAMES: tuple[str, ...] = (
    "",
    "First",
    "Second",
    "Third",
    "Fourth",
    "Fifth",
    "Sixth",
)


def ordinal_suffix(n: int) -> str:
    """English ordinal suffix: 1 -> 'st', 2 -> 'nd', 3 -> 'rd', 11-13 -> 'th'."""
    if 11 <= n % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def inversion_ordinal(inversion: int) -> str:
    """'First'..'Sixth' for small inversions, then '7th', '8th', ..."""
    if 0 < inversion < len(_INVERSION_NAMES):
        return _INVERSION_NAMES[inversion]
    return f"{inversion}{ordinal_suffix(inversion)}"


def get_chord_name(chord: Chord) -> str:
    """
    Human-readable chord name: root name + quality suffix.

    Examples:
        root 60, 'maj7' -> 'Cmaj7'
        root 69, 'm7' -> 'Am7'
        root 66, '' -> 'F#'
    """
    root_name = PitchClass.from_midi(chord.root).spell()
    return f"{root_name}{parse_quality(chord.quality).suffix}"


def get_bass_note(chord: Chord) -> PitchClass:
    """Pitch class of the first note after inversion."""
    inverted = apply_inversion(lookup_intervals(chord.quality), chord.inversion)
    return PitchClass.from_midi(chord.root + inverted[0])


def get_chord_tooltip(chord: Chord) -> str:
    """
    Inversion description, or '' for root position.

    Examples:
        C, inversion 1 -> 'First inversion (E in bass)'
        Cmaj7, inversion 2 -> 'Second inversion (G in bass)'
        C, inversion 7 -> '7th inversion (E in bass)'
    """
    if chord.inversion == 0:
        return ""

    bass = get_bass_note(chord)
    return f"{inversion_ordinal(chord.inversion)} inversion ({bass.spell()} in bass)"
