"""
Voicing presets - spacing transforms over an inverted interval set.

Voicings run after inversion and before the root offset, so they see
the bass/soprano shape the inversion produced. Every transform returns
a new list and preserves the number of notes.

- close: notes as close together as possible (identity)
- open: raise the inner voices an octave, keep bass and soprano
- drop2: drop the second-highest note an octave
- drop3: drop the third-highest note an octave
- wide: spread note i up by i octaves
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from chord_theory.constants import SEMITONES_PER_OCTAVE
from chord_theory.errors import InvalidVoicingError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

# Smallest chord each transform applies to; smaller chords pass through
OPEN_MIN_NOTES = 3
DROP2_MIN_NOTES = 3
DROP3_MIN_NOTES = 4


class VoicingPreset(str, Enum):
    """Available voicing presets."""

    CLOSE = "close"
    OPEN = "open"
    DROP2 = "drop2"
    DROP3 = "drop3"
    WIDE = "wide"


def close_voicing(notes: Sequence[int]) -> list[int]:
    """
    Close voicing - no transformation.

    close_voicing([0, 4, 7]) -> [0, 4, 7]
    """
    return list(notes)


def open_voicing(notes: Sequence[int]) -> list[int]:
    """
    Open voicing - spread the middle notes up an octave.

    Bass and top stay in place; the result is sorted ascending.

    open_voicing([0, 4, 7, 11]) -> [0, 11, 16, 19]
    """
    if len(notes) < OPEN_MIN_NOTES:
        logger.debug("open voicing needs %d notes, got %d", OPEN_MIN_NOTES, len(notes))
        return list(notes)
    ordered = sorted(notes)
    middle = [note + SEMITONES_PER_OCTAVE for note in ordered[1:-1]]
    return sorted([ordered[0], *middle, ordered[-1]])


def _drop(notes: Sequence[int], from_top: int, min_notes: int) -> list[int]:
    """Lower the note `from_top` places below the highest by an octave."""
    if len(notes) < min_notes:
        logger.debug("drop%d voicing needs %d notes, got %d", from_top, min_notes, len(notes))
        return list(notes)
    ordered = sorted(notes)
    # Select by sorted position so duplicate values cannot hit the wrong note
    ordered[len(ordered) - from_top] -= SEMITONES_PER_OCTAVE
    return sorted(ordered)


def drop2_voicing(notes: Sequence[int]) -> list[int]:
    """
    Drop 2 voicing - drop the second-highest note down an octave.

    Common jazz voicing with a strong bass interval.

    drop2_voicing([0, 4, 7, 11]) -> [-5, 0, 4, 11]
    """
    return _drop(notes, 2, DROP2_MIN_NOTES)


def drop3_voicing(notes: Sequence[int]) -> list[int]:
    """
    Drop 3 voicing - drop the third-highest note down an octave.

    drop3_voicing([0, 4, 7, 11]) -> [-8, 0, 7, 11]
    """
    return _drop(notes, 3, DROP3_MIN_NOTES)


def wide_voicing(notes: Sequence[int]) -> list[int]:
    """
    Wide voicing - each note goes up by (index * octave).

    wide_voicing([0, 4, 7]) -> [0, 16, 31]
    """
    return [note + index * SEMITONES_PER_OCTAVE for index, note in enumerate(notes)]


def parse_voicing(voicing: VoicingPreset | str) -> VoicingPreset:
    """
    Coerce a preset name to a VoicingPreset.

    Raises:
        InvalidVoicingError: If the name is unknown
    """
    if isinstance(voicing, VoicingPreset):
        return voicing
    try:
        return VoicingPreset(voicing)
    except ValueError:
        raise InvalidVoicingError(voicing) from None


def apply_voicing(notes: Sequence[int], voicing: VoicingPreset | str) -> list[int]:
    """
    Apply a voicing preset to an interval set.

    Args:
        notes: Already-inverted intervals (not yet offset by the root)
        voicing: The preset (or its name)

    Returns:
        New list of voiced intervals
    """
    preset = parse_voicing(voicing)
    if preset == VoicingPreset.CLOSE:
        return close_voicing(notes)
    elif preset == VoicingPreset.OPEN:
        return open_voicing(notes)
    elif preset == VoicingPreset.DROP2:
        return drop2_voicing(notes)
    elif preset == VoicingPreset.DROP3:
        return drop3_voicing(notes)
    elif preset == VoicingPreset.WIDE:
        return wide_voicing(notes)
    raise InvalidVoicingError(voicing)
