"""
Functional analysis of chords and progressions.

- ChordAnalyzer: Tonal gravity and voice-leading inertia
- TonalKeyLoader: Loads functional nuclei tables from YAML
"""

from chuk_mcp_harmony.analysis.analyzer import ChordAnalyzer, format_analysis, voice_leading_cost
from chuk_mcp_harmony.analysis.loader import TonalKeyLoader

__all__ = [
    "ChordAnalyzer",
    "TonalKeyLoader",
    "format_analysis",
    "voice_leading_cost",
]
