"""
Export tools - MCP tools for MIDI export.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chord_theory.compiler import progression_to_events, progression_to_midi
from chord_theory.constants import DEFAULT_BPM, DEFAULT_FILE_NAME, ErrorMessages
from chord_theory.models import Progression

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def resolve_output_path(output_dir: Path, output_name: str | None) -> Path:
    """
    Path of the .mid file for `output_name` inside `output_dir`.

    Raises:
        ValueError: If the name would place the file anywhere else
    """
    filename = f"{output_name or DEFAULT_FILE_NAME}.mid"
    output_path = output_dir / filename
    if output_path.resolve().parent != output_dir.resolve():
        raise ValueError(ErrorMessages.INVALID_OUTPUT_NAME.format(name=output_name))
    return output_path


def register_export_tools(mcp: ChukMCPServer, output_dir: Path) -> dict[str, Any]:
    """
    Register export tools with the MCP server.

    Args:
        mcp: The MCP server instance
        output_dir: Directory for output files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chord_export_midi(
        progression: list[dict[str, Any] | None],
        bpm: int = DEFAULT_BPM,
        output_name: str | None = None,
    ) -> str:
        """
        Export a chord progression to a MIDI file.

        Each chord lasts its duration (default one bar); null slots
        are whole-bar rests.

        Args:
            progression: Chord slots, e.g. [{"root": 60, "quality": "maj7"}, null]
            bpm: Tempo in beats per minute
            output_name: Optional output filename (without .mid extension)

        Returns:
            JSON string with the file path and export summary

        Example:
            chord_export_midi(progression=[{"root": 62, "quality": "m7"},
                                           {"root": 67, "quality": "7"},
                                           {"root": 60, "quality": "maj7"}])
        """
        try:
            output_path = resolve_output_path(output_dir, output_name)
            prog = Progression.model_validate({"slots": progression, "bpm": bpm})
            midi = progression_to_midi(prog.slots, bpm=prog.bpm)
            events, total_ticks = progression_to_events(prog.slots)

            output_dir.mkdir(parents=True, exist_ok=True)
            midi.save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "export": {
                        "chords": len(prog.chords),
                        "rests": len(prog.slots) - len(prog.chords),
                        "events": len(events),
                        "total_ticks": total_ticks,
                        "names": [chord.name for chord in prog.chords],
                    },
                    "message": f"Exported {len(prog.chords)} chords to {output_path.name}",
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to export MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_export_midi"] = chord_export_midi

    return tools
