#!/usr/bin/env python3
"""
Example: Build a progression and export it to MIDI.

This walks the whole pipeline: chord values -> notes -> names -> MIDI.
Run this script to create a playable MIDI file you can open in any DAW.

Usage:
    python examples/export_progression.py
    # Creates: examples/output/ii-V-I.mid
"""

from pathlib import Path

from chord_theory import Chord, Progression
from chord_theory.compiler import progression_to_midi
from chord_theory.core import midi_to_note_name


def main() -> None:
    """Print a ii-V-I with its voicings and export it."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    # Jazz ii-V-I in C: Dm7 - G7 - Cmaj7, then a bar of rest
    progression = Progression(
        slots=[
            Chord(root=62, quality="m7", voicing="drop2"),
            Chord(root=67, quality="7", inversion=1, voicing="drop2", duration="2n"),
            Chord(root=60, quality="maj7", voicing="open", duration="2m"),
            None,
        ],
        bpm=96,
    )

    for chord in progression.chords:
        names = " ".join(midi_to_note_name(note) for note in chord.notes)
        tooltip = f"  [{chord.tooltip}]" if chord.tooltip else ""
        print(f"{chord.name:<8} {chord.voicing.value:<6} {names}{tooltip}")

    mid = progression_to_midi(progression.slots, bpm=progression.bpm)
    path = output_dir / "ii-V-I.mid"
    mid.save(str(path))
    print(f"\nCreated: {path}")


if __name__ == "__main__":
    main()
