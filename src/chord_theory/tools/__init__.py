"""
MCP tool implementations.

Tools are organized by domain:
- chords - Resolve, name and list chords
- scales - Scale filter for chord qualities
- export - MIDI export
"""

from chord_theory.tools.chords import register_chord_tools
from chord_theory.tools.export import register_export_tools
from chord_theory.tools.scales import register_scale_tools

__all__ = [
    "register_chord_tools",
    "register_export_tools",
    "register_scale_tools",
]
