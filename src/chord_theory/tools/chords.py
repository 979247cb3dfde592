"""
Chord tools - MCP tools for building and naming chords.

Tools for resolving a chord to MIDI notes, describing it, and listing
the available qualities and voicings.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chord_theory.core import (
    QUALITY_ORDER,
    VoicingPreset,
    get_bass_note,
    lookup_intervals,
    midi_to_note_name,
)
from chord_theory.models import Chord

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_chord_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register chord tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chord_notes(
        root: int,
        quality: str = "",
        inversion: int = 0,
        voicing: str = "close",
        octave: int = 0,
    ) -> str:
        """
        Resolve a chord to MIDI note numbers.

        Applies the inversion, then the voicing, then the root and
        octave offsets.

        Args:
            root: Root MIDI note (60 = C4)
            quality: Quality suffix ('' = major, 'm', 'maj7', '7', ...)
            inversion: Inversion count (0 = root position)
            voicing: close, open, drop2, drop3 or wide
            octave: Octave transposition

        Returns:
            JSON string with notes, note names, chord name and tooltip

        Example:
            chord_notes(root=60, quality="maj7", voicing="drop2")
        """
        try:
            chord = Chord(
                root=root,
                quality=quality,
                inversion=inversion,
                voicing=voicing,
                octave=octave,
            )
            notes = chord.notes

            return json.dumps(
                {
                    "status": "success",
                    "chord": chord.model_dump(mode="json"),
                    "name": chord.name,
                    "tooltip": chord.tooltip,
                    "notes": notes,
                    "note_names": [midi_to_note_name(note) for note in notes],
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to resolve chord notes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_notes"] = chord_notes

    @mcp.tool  # type: ignore[arg-type]
    async def chord_describe(root: int, quality: str = "", inversion: int = 0) -> str:
        """
        Get the display name and inversion tooltip for a chord.

        Args:
            root: Root MIDI note (60 = C4)
            quality: Quality suffix
            inversion: Inversion count

        Returns:
            JSON string with name and tooltip

        Example:
            chord_describe(root=60, quality="", inversion=1)
        """
        try:
            chord = Chord(root=root, quality=quality, inversion=inversion)

            return json.dumps(
                {
                    "status": "success",
                    "name": chord.name,
                    "tooltip": chord.tooltip,
                    "bass_note": get_bass_note(chord).spell(),
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to describe chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_describe"] = chord_describe

    @mcp.tool  # type: ignore[arg-type]
    async def chord_list_qualities() -> str:
        """
        List chord qualities in display order.

        Returns:
            JSON string with each quality suffix and its intervals

        Example:
            chord_list_qualities()
        """
        try:
            qualities = [
                {
                    "quality": quality.value,
                    "name": quality.name.lower(),
                    "intervals": list(lookup_intervals(quality)),
                }
                for quality in QUALITY_ORDER
            ]

            return json.dumps(
                {
                    "status": "success",
                    "qualities": qualities,
                    "count": len(qualities),
                }
            )
        except Exception as e:
            logger.exception("Failed to list qualities")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_list_qualities"] = chord_list_qualities

    @mcp.tool  # type: ignore[arg-type]
    async def chord_list_voicings() -> str:
        """
        List voicing presets.

        Returns:
            JSON string with the preset names

        Example:
            chord_list_voicings()
        """
        return json.dumps(
            {
                "status": "success",
                "voicings": [preset.value for preset in VoicingPreset],
            }
        )

    tools["chord_list_voicings"] = chord_list_voicings

    return tools
