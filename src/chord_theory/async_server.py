#!/usr/bin/env python3
"""
Async Chord Theory MCP Server using chuk-mcp-server

This server exposes the chord-theory engine as MCP tools:
- Resolving chords (root, quality, inversion, voicing, octave) to MIDI notes
- Chord names and inversion descriptions
- Scale-aware filtering of chord qualities
- Exporting chord progressions to MIDI files
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chord_theory.constants import SERVER_NAME
from chord_theory.tools import (
    register_chord_tools,
    register_export_tools,
    register_scale_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer(SERVER_NAME)

# Paths - use standard project structure
BASE_PATH = Path.cwd()
OUTPUT_DIR = BASE_PATH / "output"

# Register all tools
chord_tools = register_chord_tools(mcp)
scale_tools = register_scale_tools(mcp)
export_tools = register_export_tools(mcp, OUTPUT_DIR)

# Export tool functions for direct access
chord_notes = chord_tools["chord_notes"]
chord_describe = chord_tools["chord_describe"]
chord_list_qualities = chord_tools["chord_list_qualities"]
chord_list_voicings = chord_tools["chord_list_voicings"]

scale_valid_qualities = scale_tools["scale_valid_qualities"]

chord_export_midi = export_tools["chord_export_midi"]

logger.info("Chord Theory MCP Server initialized")
logger.info(f"  Output dir: {OUTPUT_DIR}")
