"""
Pydantic models for the chord theory engine.

- Chord: One chord value (root, quality, inversion, voicing, octave)
- Progression: Chord slots with rests, plus tempo
"""

from chord_theory.models.chord import Chord, Progression

__all__ = [
    "Chord",
    "Progression",
]
