"""
Circle of fifths - the 12 major/minor key pairs in fifths order.

Position i holds the major key whose tonic is i fifths above C and its
relative minor (three fifths further on). Segments are built once per
process; they are immutable, so every caller shares the same tuple.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cache

from chuk_mcp_harmony.constants import FLAT_SYMBOL, SEGMENT_COUNT, SHARP_SYMBOL, SuccessMessages
from chuk_mcp_harmony.core.errors import InvalidPosition
from chuk_mcp_harmony.core.key import Key
from chuk_mcp_harmony.core.pitch import Interval
from chuk_mcp_harmony.models.dto import CircleSegmentDTO

logger = logging.getLogger(__name__)

# Position where sharp and flat spellings meet (F#/G♭)
ENHARMONIC_POSITION = 6


@dataclass(frozen=True)
class CircleSegment:
    """One position on the circle: a major key, its relative minor and the signature label."""

    position: int
    major_key: Key
    minor_key: Key
    key_signature: str

    def to_dto(self) -> CircleSegmentDTO:
        return CircleSegmentDTO(
            position=self.position,
            major_key=self.major_key.to_dto(),
            minor_key=self.minor_key.to_dto(),
            key_signature=self.key_signature,
        )


def generate_key_signature(position: int) -> str:
    """
    Signature label for a circle position.

    0 -> '', 2 -> '♯2', 6 -> '♯♭6', 9 -> '♭3'
    """
    if not isinstance(position, int) or not 0 <= position < SEGMENT_COUNT:
        raise InvalidPosition(position)
    if position == 0:
        return ""
    if position < ENHARMONIC_POSITION:
        return f"{SHARP_SYMBOL}{position}"
    if position == ENHARMONIC_POSITION:
        return f"{SHARP_SYMBOL}{FLAT_SYMBOL}{position}"
    return f"{FLAT_SYMBOL}{SEGMENT_COUNT - position}"


@cache
def _build_segments() -> tuple[CircleSegment, ...]:
    segments = tuple(
        CircleSegment(
            position=i,
            major_key=Key.from_circle_of_fifths(i, True),
            minor_key=Key.from_circle_of_fifths(i + Interval.MINOR_THIRD.semitones, False),
            key_signature=generate_key_signature(i),
        )
        for i in range(SEGMENT_COUNT)
    )
    logger.debug(
        SuccessMessages.SEGMENTS_BUILT.format(count=len(segments), circle="circle-of-fifths")
    )
    return segments


class CircleOfFifthsService:
    """Read-only access to the circle-of-fifths segments."""

    SEGMENT_COUNT = SEGMENT_COUNT

    @staticmethod
    def get_segment_count() -> int:
        return SEGMENT_COUNT

    @staticmethod
    def get_segments() -> tuple[CircleSegment, ...]:
        return _build_segments()

    @staticmethod
    def get_segment(position: int) -> CircleSegment:
        if not isinstance(position, int) or not 0 <= position < SEGMENT_COUNT:
            raise InvalidPosition(position)
        return _build_segments()[position]

    @staticmethod
    def generate_key_signature(position: int) -> str:
        return generate_key_signature(position)

    @staticmethod
    def get_all_keys() -> list[Key]:
        """All 24 keys: the 12 majors in circle order, then the 12 minors."""
        segments = _build_segments()
        return [s.major_key for s in segments] + [s.minor_key for s in segments]

    @staticmethod
    def get_segment_dtos() -> list[CircleSegmentDTO]:
        return [segment.to_dto() for segment in _build_segments()]
