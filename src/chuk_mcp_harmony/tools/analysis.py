"""
Analysis tools - MCP tools for chord analysis.

Roman-numeral analysis within a key, chord identification from notes,
tonal gravity and voice-leading inertia.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_harmony.analysis import ChordAnalyzer, TonalKeyLoader
from chuk_mcp_harmony.core.chord import Chord, ChordPattern
from chuk_mcp_harmony.core.key import Key
from chuk_mcp_harmony.core.pitch import Note, PitchClass

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _chord(root: str, quality: str) -> Chord:
    """Chord from a root name and a quality suffix or name ('', 'm', 'dim', '7', ...)."""
    return Chord.from_pattern(Note(PitchClass.parse(root)), ChordPattern.parse(quality))


def register_analysis_tools(mcp: ChukMCPServer, tonal_key_loader: TonalKeyLoader) -> dict[str, Any]:
    """
    Register chord analysis tools with the MCP server.

    Args:
        mcp: The MCP server instance
        tonal_key_loader: Loader for functional nuclei tables

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_analyze_chord(key: str, root: str, quality: str = "") -> str:
        """
        Roman-numeral analysis of a chord within a key.

        Args:
            key: Key name ('C', 'Am', 'E♭')
            root: Chord root ('G', 'B♭', 'F#')
            quality: Chord suffix ('', 'm', 'dim', 'aug', 'maj7', 'm7', '7')

        Returns:
            JSON string with degree names, diatonic flag and function

        Example:
            harmony_analyze_chord(key="C", root="G", quality="7")
        """
        try:
            k = Key.parse(key)
            chord = _chord(root, quality)
            analysis = k.analyze_chord(chord)
            return json.dumps(
                {
                    "status": "success",
                    "key": k.context_name,
                    "chord": chord.name_for(k),
                    "analysis": analysis.model_dump(by_alias=True, mode="json"),
                }
            )
        except Exception as e:
            logger.exception("Failed to analyze chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_analyze_chord"] = harmony_analyze_chord

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_identify_chord(notes: list[str]) -> str:
        """
        Identify a chord from its notes.

        The lowest note is taken as the root.

        Args:
            notes: Note names with optional octave ('C4', 'E♭4', 'G')

        Returns:
            JSON string with the chord name, root and quality

        Example:
            harmony_identify_chord(notes=["G3", "B3", "D4", "F4"])
        """
        try:
            chord = Chord.from_notes([Note.parse(n) for n in notes])
            return json.dumps(
                {
                    "status": "success",
                    "chord": str(chord),
                    "root": str(chord.root),
                    "quality": chord.pattern.name,
                    "suffix": chord.pattern.suffix,
                    "notes": chord.note_names(),
                }
            )
        except Exception as e:
            logger.exception("Failed to identify chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_identify_chord"] = harmony_identify_chord

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_tonal_gravity(
        root: str,
        quality: str,
        key_root: str,
        table: str = "major",
    ) -> str:
        """
        Pull of a chord toward tonic, subdominant and dominant.

        Args:
            root: Chord root
            quality: Chord suffix
            key_root: Tonic of the key
            table: Tonal key table name (default 'major')

        Returns:
            JSON string with normalized scores that sum to 1 (or are all 0)

        Example:
            harmony_tonal_gravity(root="G", quality="7", key_root="C")
        """
        try:
            analyzer = ChordAnalyzer(tonal_key_loader.get_tonal_key(table))
            chord = _chord(root, quality)
            gravity = analyzer.calculate_gravity(chord, PitchClass.parse(key_root))
            return json.dumps(
                {
                    "status": "success",
                    "chord": str(chord),
                    "table": table,
                    "gravity": gravity.model_dump(),
                }
            )
        except Exception as e:
            logger.exception("Failed to calculate tonal gravity")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_tonal_gravity"] = harmony_tonal_gravity

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_voice_leading(
        from_root: str,
        from_quality: str,
        to_root: str,
        to_quality: str,
    ) -> str:
        """
        Voice-leading inertia between two chords.

        1.0 means every voice stays put; lower values mean larger moves.

        Args:
            from_root: Root of the first chord
            from_quality: Suffix of the first chord
            to_root: Root of the second chord
            to_quality: Suffix of the second chord

        Returns:
            JSON string with the inertia score

        Example:
            harmony_voice_leading(from_root="G", from_quality="7", to_root="C", to_quality="")
        """
        try:
            analyzer = ChordAnalyzer(tonal_key_loader.get_tonal_key("major"))
            source = _chord(from_root, from_quality)
            target = _chord(to_root, to_quality)
            return json.dumps(
                {
                    "status": "success",
                    "from": str(source),
                    "to": str(target),
                    "inertia": analyzer.calculate_inertia(source, target),
                }
            )
        except Exception as e:
            logger.exception("Failed to calculate voice leading")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_voice_leading"] = harmony_voice_leading

    return tools
