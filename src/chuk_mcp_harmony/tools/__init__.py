"""
MCP tool implementations.

Tools are organized by domain:
- keys - Key descriptions, diatonic chords, related keys and modes
- analysis - Chord analysis, identification, gravity and voice leading
- circle - Circle of fifths and chromatic circle
"""

from chuk_mcp_harmony.tools.analysis import register_analysis_tools
from chuk_mcp_harmony.tools.circle import register_circle_tools
from chuk_mcp_harmony.tools.keys import register_key_tools

__all__ = [
    "register_analysis_tools",
    "register_circle_tools",
    "register_key_tools",
]
