"""
Chord inversions - rotate the lowest note up an octave.

Each rotation removes the lowest-valued note and re-appends it at the
end, one octave higher. Rotations accumulate: inverting a triad four
times puts every note at least an octave up.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chord_theory.constants import SEMITONES_PER_OCTAVE
from chord_theory.errors import InvalidInversionError

if TYPE_CHECKING:
    from collections.abc import Sequence


def rotate_lowest(intervals: Sequence[int]) -> list[int]:
    """
    Apply one inversion step.

    The lowest value moves to the end, raised by an octave. On a tie the
    first occurrence moves. Every other note keeps its value and order.

    Example:
        rotate_lowest([0, 4, 7]) -> [4, 7, 12]
    """
    rotated = list(intervals)
    if not rotated:
        return rotated
    lowest = rotated.index(min(rotated))
    rotated.append(rotated.pop(lowest) + SEMITONES_PER_OCTAVE)
    return rotated


def apply_inversion(intervals: Sequence[int], inversion: int) -> list[int]:
    """
    Invert an interval set `inversion` times.

    Never mutates the input and always returns a new list, including
    for root position.

    Args:
        intervals: Semitone offsets from the root (e.g. [0, 4, 7])
        inversion: Number of rotations (0 = root position)

    Returns:
        New list with the inversion applied

    Raises:
        InvalidInversionError: If inversion is negative

    Examples:
        apply_inversion([0, 4, 7], 1) -> [4, 7, 12]
        apply_inversion([0, 4, 7], 2) -> [7, 12, 16]
        apply_inversion([0, 4, 7], 4) -> [16, 19, 24]
        apply_inversion([0, 4, 7, 11], 1) -> [4, 7, 11, 12]
    """
    if inversion < 0:
        raise InvalidInversionError(inversion)

    inverted = list(intervals)
    for _ in range(inversion):
        inverted = rotate_lowest(inverted)
    return inverted
