"""
Chord qualities - the interval table.

A quality is an interval stack measured from the root (0 = root).
The enum value is the display suffix: '' is a plain major triad,
'maj7' displays as 'Cmaj7'.

The table is built once at import and exposed read-only.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from chord_theory.errors import InvalidQualityError


class ChordQuality(str, Enum):
    """Closed set of chord qualities. Value = display suffix."""

    # Triads
    MAJOR = ""
    MINOR = "m"
    DIMINISHED = "dim"
    AUGMENTED = "aug"
    SUS4 = "sus4"
    SUS2 = "sus2"
    POWER = "5"

    # Sevenths
    MAJOR_7 = "maj7"
    DOMINANT_7 = "7"
    MINOR_7 = "m7"
    MINOR_MAJOR_7 = "mMaj7"
    DIMINISHED_7 = "dim7"
    HALF_DIMINISHED_7 = "m7b5"
    AUGMENTED_MAJOR_7 = "augMaj7"
    AUGMENTED_7 = "aug7"

    # Sixths
    MAJOR_6 = "6"
    MINOR_6 = "m6"

    # Add chords (no 7th)
    ADD_9 = "add9"
    MINOR_ADD_9 = "madd9"
    ADD_11 = "add11"
    ADD_13 = "add13"

    # Ninths
    MAJOR_9 = "maj9"
    DOMINANT_9 = "9"
    MINOR_9 = "m9"
    MINOR_MAJOR_9 = "mMaj9"

    # Altered dominants
    DOMINANT_7_FLAT_9 = "7b9"
    DOMINANT_7_SHARP_9 = "7#9"
    DOMINANT_7_FLAT_5 = "7b5"
    DOMINANT_7_SHARP_5 = "7#5"
    DOMINANT_7_SHARP_11 = "7#11"

    # Elevenths
    MAJOR_11 = "maj11"
    DOMINANT_11 = "11"
    MINOR_11 = "m11"

    # Thirteenths
    MAJOR_13 = "maj13"
    DOMINANT_13 = "13"
    MINOR_13 = "m13"

    @property
    def suffix(self) -> str:
        """Display suffix appended to the root name."""
        return self.value

    @property
    def intervals(self) -> tuple[int, ...]:
        """Semitone offsets from the root."""
        return QUALITIES[self]


Q = ChordQuality

QUALITIES: MappingProxyType[ChordQuality, tuple[int, ...]] = MappingProxyType(
    {
        Q.MAJOR: (0, 4, 7),
        Q.MINOR: (0, 3, 7),
        Q.DIMINISHED: (0, 3, 6),
        Q.AUGMENTED: (0, 4, 8),
        Q.SUS4: (0, 5, 7),
        Q.SUS2: (0, 2, 7),
        Q.POWER: (0, 7),
        Q.MAJOR_7: (0, 4, 7, 11),
        Q.DOMINANT_7: (0, 4, 7, 10),
        Q.MINOR_7: (0, 3, 7, 10),
        Q.MINOR_MAJOR_7: (0, 3, 7, 11),
        Q.DIMINISHED_7: (0, 3, 6, 9),
        Q.HALF_DIMINISHED_7: (0, 3, 6, 10),
        Q.AUGMENTED_MAJOR_7: (0, 4, 8, 11),
        Q.AUGMENTED_7: (0, 4, 8, 10),
        Q.MAJOR_6: (0, 4, 7, 9),
        Q.MINOR_6: (0, 3, 7, 9),
        Q.ADD_9: (0, 4, 7, 14),
        Q.MINOR_ADD_9: (0, 3, 7, 14),
        Q.ADD_11: (0, 4, 7, 17),
        Q.ADD_13: (0, 4, 7, 21),
        Q.MAJOR_9: (0, 4, 7, 11, 14),
        Q.DOMINANT_9: (0, 4, 7, 10, 14),
        Q.MINOR_9: (0, 3, 7, 10, 14),
        Q.MINOR_MAJOR_9: (0, 3, 7, 11, 14),
        Q.DOMINANT_7_FLAT_9: (0, 4, 7, 10, 13),
        Q.DOMINANT_7_SHARP_9: (0, 4, 7, 10, 15),  # Hendrix chord
        Q.DOMINANT_7_FLAT_5: (0, 4, 6, 10),
        Q.DOMINANT_7_SHARP_5: (0, 4, 8, 10),
        Q.DOMINANT_7_SHARP_11: (0, 4, 7, 10, 14, 18),  # Lydian dominant
        Q.MAJOR_11: (0, 4, 7, 11, 14, 17),
        Q.DOMINANT_11: (0, 4, 7, 10, 14, 17),
        Q.MINOR_11: (0, 3, 7, 10, 14, 17),
        Q.MAJOR_13: (0, 4, 7, 11, 14, 21),
        Q.DOMINANT_13: (0, 4, 7, 10, 14, 21),
        Q.MINOR_13: (0, 3, 7, 10, 14, 21),
    }
)

# Display order for pickers (most common first)
QUALITY_ORDER: tuple[ChordQuality, ...] = (
    Q.MAJOR,
    Q.MINOR,
    Q.SUS4,
    Q.SUS2,
    Q.POWER,
    # Jazz big three
    Q.DOMINANT_7,
    Q.MAJOR_7,
    Q.MINOR_7,
    Q.MAJOR_6,
    Q.MINOR_6,
    Q.DOMINANT_9,
    Q.MAJOR_9,
    Q.MINOR_9,
    Q.ADD_9,
    Q.MINOR_ADD_9,
    # Color chords
    Q.DIMINISHED,
    Q.AUGMENTED,
    Q.DIMINISHED_7,
    Q.HALF_DIMINISHED_7,
    Q.DOMINANT_7_SHARP_9,
    Q.DOMINANT_7_FLAT_9,
    Q.DOMINANT_7_SHARP_5,
    Q.DOMINANT_7_FLAT_5,
    # Extensions
    Q.DOMINANT_11,
    Q.MINOR_11,
    Q.MAJOR_11,
    Q.DOMINANT_13,
    Q.MINOR_13,
    Q.MAJOR_13,
    Q.DOMINANT_7_SHARP_11,
    Q.MINOR_MAJOR_7,
    Q.MINOR_MAJOR_9,
    Q.AUGMENTED_MAJOR_7,
    Q.AUGMENTED_7,
    Q.ADD_11,
    Q.ADD_13,
)

del Q


def parse_quality(quality: ChordQuality | str) -> ChordQuality:
    """
    Coerce a quality suffix ('', 'm', 'maj7', ...) to a ChordQuality.

    Raises:
        InvalidQualityError: If the suffix is not in the table
    """
    if isinstance(quality, ChordQuality):
        return quality
    try:
        return ChordQuality(quality)
    except ValueError:
        raise InvalidQualityError(quality) from None


def lookup_intervals(quality: ChordQuality | str) -> tuple[int, ...]:
    """
    Get the canonical interval set for a quality.

    The returned tuple is the table entry itself; it is immutable, so
    callers that need to edit it take a list copy.

    Args:
        quality: A ChordQuality or its suffix string

    Returns:
        Ascending semitone offsets from the root, starting at 0

    Raises:
        InvalidQualityError: If the quality is not in the table
    """
    return QUALITIES[parse_quality(quality)]
