"""
Key tools - MCP tools for describing keys and their relations.

Keys are named like 'C', 'F#m', 'E♭', 'Bbm' or 'D_dorian'.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_harmony.core.key import Key
from chuk_mcp_harmony.core.modal import ModalContext
from chuk_mcp_harmony.core.scale import MAJOR_MODES

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _key_summary(key: Key) -> dict[str, Any]:
    return key.to_dto().model_dump(by_alias=True)


def register_key_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register key tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_describe_key(key: str) -> str:
        """
        Describe a key: names, signature and scale.

        Args:
            key: Key name ('C', 'F#m', 'E♭', 'D_dorian')

        Returns:
            JSON string with the key summary, signature and spelled scale

        Example:
            harmony_describe_key(key="E♭")
        """
        try:
            k = Key.parse(key)
            signature = k.key_signature
            return json.dumps(
                {
                    "status": "success",
                    "key": _key_summary(k),
                    "key_signature": str(signature),
                    "accidentals": [
                        f"{pc.sharp_name}{accidental.symbol}"
                        for pc, accidental in signature.accidentals.items()
                    ],
                    "scale": [note.name_for(signature) for note in k.scale.notes],
                    "degree_names": list(k.scale_degree_names),
                }
            )
        except Exception as e:
            logger.exception("Failed to describe key")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_describe_key"] = harmony_describe_key

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_diatonic_chords(key: str) -> str:
        """
        List the diatonic triads of a key with their roman-numeral analysis.

        Args:
            key: Key name

        Returns:
            JSON string with one entry per scale degree

        Example:
            harmony_diatonic_chords(key="Am")
        """
        try:
            k = Key.parse(key)
            chords = k.diatonic_chords_info()
            return json.dumps(
                {
                    "status": "success",
                    "key": k.context_name,
                    "chords": [c.model_dump(by_alias=True, mode="json") for c in chords],
                    "count": len(chords),
                }
            )
        except Exception as e:
            logger.exception("Failed to list diatonic chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_diatonic_chords"] = harmony_diatonic_chords

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_related_keys(key: str) -> str:
        """
        Get the closely related keys of a key.

        Args:
            key: Key name

        Returns:
            JSON string with relative, parallel, dominant and subdominant keys

        Example:
            harmony_related_keys(key="G")
        """
        try:
            k = Key.parse(key)
            return json.dumps(
                {
                    "status": "success",
                    "key": _key_summary(k),
                    "relative": _key_summary(k.relative_key()),
                    "parallel": _key_summary(k.parallel_key()),
                    "dominant": _key_summary(k.dominant_key()),
                    "subdominant": _key_summary(k.subdominant_key()),
                }
            )
        except Exception as e:
            logger.exception("Failed to get related keys")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_related_keys"] = harmony_related_keys

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_relative_modes(key: str) -> str:
        """
        List the seven modes that share a major key's notes.

        Args:
            key: A major key name

        Returns:
            JSON string with the modes, Ionian through Locrian

        Example:
            harmony_relative_modes(key="C")
        """
        try:
            parent = Key.parse(key)
            modes = []
            for index in range(len(MAJOR_MODES)):
                mode_key = Key.from_relative_mode(parent, index)
                context = ModalContext(mode_key.center_pitch, mode_key.pattern)
                modes.append(
                    {
                        "degree": index + 1,
                        "mode": context.to_dto().model_dump(by_alias=True),
                        "scale": [
                            note.name_for(context.key_signature) for note in context.scale.notes
                        ],
                    }
                )
            return json.dumps(
                {
                    "status": "success",
                    "parent": _key_summary(parent),
                    "modes": modes,
                }
            )
        except Exception as e:
            logger.exception("Failed to list relative modes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_relative_modes"] = harmony_relative_modes

    return tools
