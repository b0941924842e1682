"""
Circle geometry - angles and coordinates for 12-segment circle layouts.

Shared by the circle of fifths and the chromatic circle. Position 0 is
drawn at the top, slightly left of center (-105 degrees), and positions
advance clockwise in 30-degree steps. Only coordinates are produced;
drawing them is the caller's business.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from chuk_mcp_harmony.constants import SEGMENT_COUNT, ErrorMessages
from chuk_mcp_harmony.core.errors import InvalidPosition, InvalidRadii, InvalidRadiiOrder

ANGLE_OFFSET = -105  # degrees
ANGLE_PER_SEGMENT = 360 // SEGMENT_COUNT  # degrees
CENTER_RADIUS = 90.0

_FULL_TURN = 2 * math.pi
_HALF_SEGMENT = math.radians(ANGLE_PER_SEGMENT) / 2


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class SectorGeometry:
    """
    One ring sector of a segment: the area between two radii.

    Corner points run inner-start, outer-start, outer-end, inner-end, which
    is the order a closed outline visits them.
    """

    position: int
    inner_radius: float
    outer_radius: float
    start_angle: float
    end_angle: float
    inner_start: Point
    outer_start: Point
    outer_end: Point
    inner_end: Point
    large_arc: bool


@dataclass(frozen=True)
class RingSectors:
    """The three stacked sectors of a circle-of-fifths segment."""

    minor: SectorGeometry
    major: SectorGeometry
    signature: SectorGeometry


def _validate_position(position: int) -> None:
    if not isinstance(position, int) or not 0 <= position < SEGMENT_COUNT:
        raise InvalidPosition(position)


def segment_angle(position: int) -> float:
    """Start angle of a segment in radians."""
    _validate_position(position)
    return math.radians(position * ANGLE_PER_SEGMENT + ANGLE_OFFSET)


def normalize_angle(angle: float) -> float:
    """Wrap an angle in radians into [0, 2π)."""
    normalized = math.fmod(angle, _FULL_TURN)
    if normalized < 0:
        normalized += _FULL_TURN
    # fmod can leave a hair under a full turn for exact multiples
    if math.isclose(normalized, _FULL_TURN):
        return 0.0
    return normalized


def polar_to_cartesian(radius: float, angle: float) -> Point:
    return Point(radius * math.cos(angle), radius * math.sin(angle))


def text_position(position: int, radius: float) -> Point:
    """Center of a segment at the given radius, where its label goes."""
    _validate_position(position)
    if radius < 0:
        raise InvalidRadii(ErrorMessages.INVALID_RADIUS.format(radius=radius))
    return polar_to_cartesian(radius, segment_angle(position) + _HALF_SEGMENT)


def annular_sector(position: int, inner_radius: float, outer_radius: float) -> SectorGeometry:
    """
    Geometry of the area between two radii within one segment.

    Raises:
        InvalidPosition: position outside 0-11
        InvalidRadii: negative radii, or inner not strictly inside outer
    """
    _validate_position(position)
    if inner_radius < 0 or outer_radius < 0 or inner_radius >= outer_radius:
        raise InvalidRadii(
            ErrorMessages.INVALID_RADII.format(inner=inner_radius, outer=outer_radius)
        )

    start = segment_angle(position)
    end = segment_angle((position + 1) % SEGMENT_COUNT)

    return SectorGeometry(
        position=position,
        inner_radius=inner_radius,
        outer_radius=outer_radius,
        start_angle=start,
        end_angle=end,
        inner_start=polar_to_cartesian(inner_radius, start),
        outer_start=polar_to_cartesian(outer_radius, start),
        outer_end=polar_to_cartesian(outer_radius, end),
        inner_end=polar_to_cartesian(inner_radius, end),
        large_arc=normalize_angle(end - start) > math.pi,
    )


def ring_sectors(
    position: int,
    minor_outer: float,
    major_outer: float,
    signature_outer: float,
    center: float = CENTER_RADIUS,
) -> RingSectors:
    """
    Minor, major and key-signature sectors of a circle-of-fifths segment.

    The minor ring starts at the empty center; each ring ends where the
    next begins.

    Raises:
        InvalidPosition: position outside 0-11
        InvalidRadii: a negative radius
        InvalidRadiiOrder: radii not strictly ascending
    """
    _validate_position(position)
    if minor_outer < 0 or major_outer < 0 or signature_outer < 0:
        raise InvalidRadii(
            ErrorMessages.INVALID_RADII_SET.format(
                minor=minor_outer, major=major_outer, signature=signature_outer
            )
        )
    if minor_outer >= major_outer or major_outer >= signature_outer:
        raise InvalidRadiiOrder(ErrorMessages.INVALID_RADII_ORDER)

    return RingSectors(
        minor=annular_sector(position, center, minor_outer),
        major=annular_sector(position, minor_outer, major_outer),
        signature=annular_sector(position, major_outer, signature_outer),
    )
