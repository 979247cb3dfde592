"""
MIDI export - the end of the pipeline.

Converts chord progressions to MIDI files using mido.
All operations are deterministic: same input → same output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chord_theory.constants import (
    DEFAULT_BPM,
    DEFAULT_DURATION,
    DEFAULT_VELOCITY,
    DURATION_EIGHTHS,
    ErrorMessages,
)
from chord_theory.core.operations import get_chord_notes
from chord_theory.core.pitch import clamp_midi_note

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chord_theory.models.chord import Chord

logger = logging.getLogger(__name__)

# Standard ticks per beat (quarter note) - industry standard
TICKS_PER_BEAT = 480

BEATS_PER_BAR = 4


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int  # Absolute start time in ticks
    duration_ticks: int  # Duration in ticks
    velocity: int  # 0-127
    channel: int = 0  # 0-15

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = DEFAULT_BPM,
    ticks_per_beat: int = TICKS_PER_BEAT,
    time_signature: tuple[int, int] | None = None,
) -> MidiFile:
    """
    Convert a sequence of MidiEvents to a MidiFile.

    Args:
        events: Sequence of MidiEvent objects
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)
        time_signature: Optional (numerator, denominator) meta event

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    # Set tempo (microseconds per beat)
    tempo_us = int(60_000_000 / tempo_bpm)
    track.append(MetaMessage("set_tempo", tempo=tempo_us, time=0))

    if time_signature is not None:
        numerator, denominator = time_signature
        track.append(
            MetaMessage(
                "time_signature",
                numerator=numerator,
                denominator=denominator,
                clocks_per_click=24,
                notated_32nd_notes_per_beat=8,
                time=0,
            )
        )

    messages: list[tuple[int, Message]] = []

    for event in events:
        messages.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                    time=0,  # Will be converted to delta
                ),
            )
        )
        messages.append(
            (
                event.start_ticks + event.duration_ticks,
                Message(
                    "note_off",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=0,
                    time=0,  # Will be converted to delta
                ),
            )
        )

    # note_off before note_on at the same tick so repeated chords retrigger cleanly
    messages.sort(key=lambda x: (x[0], x[1].type != "note_off"))

    current_time = 0
    for abs_time, msg in messages:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))

    return mid


def duration_to_ticks(duration: str, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """
    Convert a slot duration ('4n', '1m', '1:2:2', ...) to ticks in 4/4.

    Raises:
        ValueError: If the duration is not one of the UI durations
    """
    if duration not in DURATION_EIGHTHS:
        raise ValueError(ErrorMessages.UNKNOWN_DURATION.format(duration=duration))
    # One eighth of a bar is half a beat
    return DURATION_EIGHTHS[duration] * ticks_per_beat // 2


def chord_to_pitches(chord: Chord) -> list[int]:
    """
    Exportable pitches for a chord.

    Notes are clamped to the piano range; notes that collapse onto the
    same key after clamping are written once.
    """
    clamped = [clamp_midi_note(note) for note in get_chord_notes(chord)]
    return list(dict.fromkeys(clamped))


def chord_to_events(
    chord: Chord,
    start_ticks: int,
    duration_ticks: int,
    velocity: int = DEFAULT_VELOCITY,
    channel: int = 0,
) -> list[MidiEvent]:
    """Events for one chord, all notes struck together."""
    return [
        MidiEvent(
            pitch=pitch,
            start_ticks=start_ticks,
            duration_ticks=duration_ticks,
            velocity=velocity,
            channel=channel,
        )
        for pitch in chord_to_pitches(chord)
    ]


def progression_to_events(
    slots: Sequence[Chord | None],
    ticks_per_beat: int = TICKS_PER_BEAT,
    velocity: int = DEFAULT_VELOCITY,
) -> tuple[list[MidiEvent], int]:
    """
    Lay a progression out end to end.

    Each chord lasts its own duration; an empty slot is a whole-bar rest.

    Returns:
        (events, total length in ticks)
    """
    events: list[MidiEvent] = []
    cursor = 0
    for slot in slots:
        if slot is None:
            cursor += duration_to_ticks(DEFAULT_DURATION, ticks_per_beat)
            continue
        length = duration_to_ticks(slot.duration, ticks_per_beat)
        events.extend(chord_to_events(slot, cursor, length, velocity))
        cursor += length
    return events, cursor


def progression_to_midi(
    slots: Sequence[Chord | None],
    bpm: int = DEFAULT_BPM,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Convert chord slots to a single-track 4/4 MidiFile.

    Args:
        slots: Chords in order; None is a rest
        bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)

    Returns:
        A mido MidiFile ready to be saved

    Raises:
        ValueError: If there are no chords to export
    """
    if not any(slot is not None for slot in slots):
        raise ValueError(ErrorMessages.EMPTY_PROGRESSION)

    events, total_ticks = progression_to_events(slots, ticks_per_beat)
    logger.debug(
        "Exporting %d slots as %d note events over %d ticks", len(slots), len(events), total_ticks
    )
    return events_to_midi(
        events,
        tempo_bpm=bpm,
        ticks_per_beat=ticks_per_beat,
        time_signature=(BEATS_PER_BAR, 4),
    )
