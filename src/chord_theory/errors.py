"""
Errors raised by the chord theory engine.

All of them are ValueErrors: a bad quality, inversion or voicing is a
caller construction bug, reported synchronously at the call site.
"""

from __future__ import annotations

from chord_theory.constants import ErrorMessages


class ChordTheoryError(ValueError):
    """Base class for chord theory errors."""


class InvalidQualityError(ChordTheoryError):
    """The chord quality is not in the interval table."""

    def __init__(self, quality: object) -> None:
        self.quality = quality
        super().__init__(ErrorMessages.INVALID_QUALITY.format(quality=quality))


class InvalidInversionError(ChordTheoryError):
    """The inversion count is negative."""

    def __init__(self, inversion: int) -> None:
        self.inversion = inversion
        super().__init__(ErrorMessages.INVALID_INVERSION.format(inversion=inversion))


class InvalidVoicingError(ChordTheoryError):
    """The voicing preset name is unknown."""

    def __init__(self, voicing: object) -> None:
        self.voicing = voicing
        super().__init__(ErrorMessages.INVALID_VOICING.format(voicing=voicing))
