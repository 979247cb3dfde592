"""
Scale primitives - ScaleMode and scale-membership filters.

Scales are step patterns from a root. The filters answer one question
for the chord picker: does a root, or a whole chord, stay inside the
selected scale? An empty scale means "no filter" and lets everything
through.
"""

from __future__ import annotations

import logging
from enum import Enum
from itertools import accumulate

from chord_theory.constants import SEMITONES_PER_OCTAVE
from chord_theory.core.pitch import PitchClass
from chord_theory.core.qualities import QUALITIES, ChordQuality, lookup_intervals

logger = logging.getLogger(__name__)


class ScaleMode(str, Enum):
    """Scale modes in order of popularity."""

    MAJOR = "major"
    MINOR = "minor"
    HARMONIC_MINOR = "harmonic minor"
    MELODIC_MINOR = "melodic minor"
    DORIAN = "dorian"
    PHRYGIAN = "phrygian"
    LYDIAN = "lydian"
    MIXOLYDIAN = "mixolydian"
    LOCRIAN = "locrian"

    @property
    def offsets(self) -> tuple[int, ...]:
        """Semitones from the tonic for each of the 7 degrees."""
        steps = MODE_STEPS[self]
        return (0, *accumulate(steps[:-1]))


# Step patterns, degree to degree (not cumulative); each sums to an octave
MODE_STEPS: dict[ScaleMode, tuple[int, ...]] = {
    ScaleMode.MAJOR: (2, 2, 1, 2, 2, 2, 1),
    ScaleMode.MINOR: (2, 1, 2, 2, 1, 2, 2),
    ScaleMode.HARMONIC_MINOR: (2, 1, 2, 2, 1, 3, 1),
    ScaleMode.MELODIC_MINOR: (2, 1, 2, 2, 2, 2, 1),
    ScaleMode.DORIAN: (2, 1, 2, 2, 2, 1, 2),
    ScaleMode.PHRYGIAN: (1, 2, 2, 2, 1, 2, 2),
    ScaleMode.LYDIAN: (2, 2, 2, 1, 2, 2, 1),
    ScaleMode.MIXOLYDIAN: (2, 2, 1, 2, 2, 1, 2),
    ScaleMode.LOCRIAN: (1, 2, 2, 1, 2, 2, 2),
}


def get_scale_notes(key: str, mode: ScaleMode | str) -> list[str]:
    """
    Get the note names of a scale.

    Args:
        key: Tonic name, e.g. 'C', 'D#', 'Bb'
        mode: Scale mode, e.g. 'major', 'dorian'

    Returns:
        Names of the 7 degrees, e.g. ['C', 'D', 'E', 'F', 'G', 'A', 'B'],
        or [] if the key or mode is unknown. Flat keys are spelled with
        flats (F major has Bb, not A#).
    """
    try:
        tonic = PitchClass.parse(key)
        scale_mode = ScaleMode(mode)
    except ValueError:
        return []
    degrees = [tonic.transpose(offset) for offset in scale_mode.offsets]
    sharps = [degree.spell() for degree in degrees]
    flats = [degree.spell(prefer_flats=True) for degree in degrees]
    # Prefer the spelling that uses each letter once; otherwise follow the key
    if "b" in key[1:]:
        candidates = (flats, sharps)
    else:
        candidates = (sharps, flats)
    for names in candidates:
        if len({name[0] for name in names}) == len(names):
            return names
    return candidates[0]


def _scale_pitch_classes(scale_notes: list[str]) -> set[PitchClass]:
    """Pitch classes of the scale; names that do not parse are left out."""
    pitch_classes: set[PitchClass] = set()
    for note in scale_notes:
        try:
            pitch_classes.add(PitchClass.parse(note))
        except ValueError:
            logger.debug("Ignoring unknown scale note %r", note)
    return pitch_classes


def is_root_in_scale(root_midi: int, scale_notes: list[str]) -> bool:
    """
    Check whether a root note (MIDI number) belongs to the scale.

    Enharmonic spellings compare equal (Db matches C#).
    """
    if not scale_notes:
        return True
    return PitchClass.from_midi(root_midi) in _scale_pitch_classes(scale_notes)


def is_quality_valid_for_scale_degree(
    root_midi: int,
    quality: ChordQuality | str,
    scale_notes: list[str],
) -> bool:
    """
    Check whether every tone of a chord lies in the scale.

    Args:
        root_midi: MIDI note number of the chord root
        quality: Chord quality
        scale_notes: Note names of the scale ([] = no filter)
    """
    if not scale_notes:
        return True
    if not is_root_in_scale(root_midi, scale_notes):
        return False

    pitch_classes = _scale_pitch_classes(scale_notes)
    root = PitchClass.from_midi(root_midi)
    return all(
        root.transpose(interval % SEMITONES_PER_OCTAVE) in pitch_classes
        for interval in lookup_intervals(quality)
    )


def get_valid_qualities_for_root(root_midi: int, scale_notes: list[str]) -> list[ChordQuality]:
    """All qualities (table order) whose chord on this root fits the scale."""
    return [
        quality
        for quality in QUALITIES
        if is_quality_valid_for_scale_degree(root_midi, quality, scale_notes)
    ]
