"""
Chromatic circle - the 12 pitch classes in semitone order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cache

from chuk_mcp_harmony.constants import SEGMENT_COUNT, SuccessMessages
from chuk_mcp_harmony.core.errors import InvalidPosition
from chuk_mcp_harmony.core.pitch import PitchClass
from chuk_mcp_harmony.models.dto import ChromaticSegmentDTO

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChromaticSegment:
    position: int
    pitch_class: PitchClass

    @property
    def display_name(self) -> str:
        """'C', or 'F#/G♭' for pitch classes with two spellings."""
        sharp = self.pitch_class.sharp_name
        flat = self.pitch_class.flat_name
        return sharp if sharp == flat else f"{sharp}/{flat}"

    def to_dto(self) -> ChromaticSegmentDTO:
        return ChromaticSegmentDTO(position=self.position, pitch_class_name=self.display_name)


@cache
def _build_segments() -> tuple[ChromaticSegment, ...]:
    segments = tuple(
        ChromaticSegment(i, PitchClass.from_chromatic_index(i)) for i in range(SEGMENT_COUNT)
    )
    logger.debug(SuccessMessages.SEGMENTS_BUILT.format(count=len(segments), circle="chromatic"))
    return segments


class ChromaticCircleService:
    """Read-only access to the chromatic circle segments."""

    SEGMENT_COUNT = SEGMENT_COUNT

    @staticmethod
    def get_segments() -> tuple[ChromaticSegment, ...]:
        return _build_segments()

    @staticmethod
    def get_segment(position: int) -> ChromaticSegment:
        if not isinstance(position, int) or not 0 <= position < SEGMENT_COUNT:
            raise InvalidPosition(position)
        return _build_segments()[position]

    @staticmethod
    def get_segment_dtos() -> list[ChromaticSegmentDTO]:
        return [segment.to_dto() for segment in _build_segments()]
