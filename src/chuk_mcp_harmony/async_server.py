#!/usr/bin/env python3
"""
Async Harmony MCP Server using chuk-mcp-server

This server provides MCP tools for Western tonal harmony: keys, modes,
diatonic chords, roman-numeral analysis and the circle of fifths.

The server provides tools for:
- Describing keys, their diatonic chords, related keys and modes
- Analyzing and identifying chords
- Scoring tonal gravity and voice-leading inertia
- Reading the circle of fifths and the chromatic circle
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_harmony.analysis import TonalKeyLoader
from chuk_mcp_harmony.constants import SuccessMessages
from chuk_mcp_harmony.tools import (
    register_analysis_tools,
    register_circle_tools,
    register_key_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-harmony")

# Paths - project tables live beside the working directory
BASE_PATH = Path.cwd()
TONAL_KEYS_DIR = BASE_PATH / "tonal_keys"
TONAL_KEYS_LIBRARY_PATH = Path(__file__).parent / "analysis" / "library"

tonal_key_loader = TonalKeyLoader(
    library_path=TONAL_KEYS_LIBRARY_PATH,
    project_path=TONAL_KEYS_DIR,
)

# Register all tools
key_tools = register_key_tools(mcp)
analysis_tools = register_analysis_tools(mcp, tonal_key_loader)
circle_tools = register_circle_tools(mcp)

# Export tool functions for direct access
harmony_describe_key = key_tools["harmony_describe_key"]
harmony_diatonic_chords = key_tools["harmony_diatonic_chords"]
harmony_related_keys = key_tools["harmony_related_keys"]
harmony_relative_modes = key_tools["harmony_relative_modes"]

harmony_analyze_chord = analysis_tools["harmony_analyze_chord"]
harmony_identify_chord = analysis_tools["harmony_identify_chord"]
harmony_tonal_gravity = analysis_tools["harmony_tonal_gravity"]
harmony_voice_leading = analysis_tools["harmony_voice_leading"]

harmony_circle_of_fifths = circle_tools["harmony_circle_of_fifths"]
harmony_chromatic_circle = circle_tools["harmony_chromatic_circle"]


def use_tonal_keys_dir(path: Path) -> None:
    """Point the tonal key loader at another project directory."""
    tonal_key_loader.project_path = path
    tonal_key_loader.clear_cache()
    logger.info(f"  Tonal keys dir: {path}")


logger.info(SuccessMessages.SERVER_INITIALIZED)
logger.info(f"  Library path: {TONAL_KEYS_LIBRARY_PATH}")
logger.info(f"  Tonal keys dir: {TONAL_KEYS_DIR}")
