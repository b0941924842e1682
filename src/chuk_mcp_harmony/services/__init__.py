"""
Services over the core primitives.

- CircleOfFifthsService: Major/minor key pairs around the circle
- ChromaticCircleService: Pitch classes in semitone order
- ModeService: Church modes derived from the major scale
- geometry: Angles and coordinates for 12-segment layouts
"""

from chuk_mcp_harmony.services.chromatic_circle import ChromaticCircleService, ChromaticSegment
from chuk_mcp_harmony.services.circle_of_fifths import (
    CircleOfFifthsService,
    CircleSegment,
    generate_key_signature,
)
from chuk_mcp_harmony.services.geometry import (
    Point,
    RingSectors,
    SectorGeometry,
    annular_sector,
    normalize_angle,
    polar_to_cartesian,
    ring_sectors,
    segment_angle,
    text_position,
)
from chuk_mcp_harmony.services.modes import CHURCH_MODES, ChurchMode, ModeService

__all__ = [
    "CircleOfFifthsService",
    "CircleSegment",
    "generate_key_signature",
    "ChromaticCircleService",
    "ChromaticSegment",
    "ModeService",
    "ChurchMode",
    "CHURCH_MODES",
    "Point",
    "SectorGeometry",
    "RingSectors",
    "segment_angle",
    "normalize_angle",
    "polar_to_cartesian",
    "text_position",
    "annular_sector",
    "ring_sectors",
]
