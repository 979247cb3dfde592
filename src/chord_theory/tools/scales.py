"""
Scale tools - MCP tools for the scale filter.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chord_theory.core import (
    ScaleMode,
    get_scale_notes,
    get_valid_qualities_for_root,
    is_root_in_scale,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_scale_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register scale filter tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def scale_valid_qualities(key: str, mode: str, root: int) -> str:
        """
        List the chord qualities on a root that stay inside a scale.

        Args:
            key: Scale tonic ('C', 'F#', 'Bb', ...)
            mode: Scale mode ('major', 'minor', 'dorian', ...)
            root: Chord root MIDI note

        Returns:
            JSON string with scale notes and valid quality suffixes

        Example:
            scale_valid_qualities(key="C", mode="major", root=62)
        """
        try:
            notes = get_scale_notes(key, mode)
            if not notes:
                return json.dumps(
                    {
                        "status": "error",
                        "message": f"Unknown scale: {key} {mode}",
                        "modes": [m.value for m in ScaleMode],
                    }
                )

            qualities = get_valid_qualities_for_root(root, notes)

            return json.dumps(
                {
                    "status": "success",
                    "scale_notes": notes,
                    "root_in_scale": is_root_in_scale(root, notes),
                    "qualities": [quality.value for quality in qualities],
                }
            )
        except Exception as e:
            logger.exception("Failed to filter qualities by scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scale_valid_qualities"] = scale_valid_qualities

    return tools
