"""
Mode service - church modes as rotations of the major scale.

Starting the major pattern on its second degree gives Dorian, on its
third Phrygian, and so on through Locrian.
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_harmony.constants import ErrorMessages
from chuk_mcp_harmony.core.errors import InvalidDegree
from chuk_mcp_harmony.core.scale import MAJOR_MODES, ScalePattern


@dataclass(frozen=True)
class ChurchMode:
    """A named mode with the major-scale degree it starts on."""

    name: str
    degree: int
    pattern: ScalePattern


_MODE_NAMES = ("Ionian", "Dorian", "Phrygian", "Lydian", "Mixolydian", "Aeolian", "Locrian")

CHURCH_MODES: tuple[ChurchMode, ...] = tuple(
    ChurchMode(name, degree, pattern)
    for degree, (name, pattern) in enumerate(zip(_MODE_NAMES, MAJOR_MODES), start=1)
)


class ModeService:
    """Derives scale patterns from other patterns."""

    @staticmethod
    def derive(
        base: ScalePattern, start_degree: int, name: str, short_symbol: str = ""
    ) -> ScalePattern:
        """
        Rotate a pattern to start on one of its degrees.

        ModeService.derive(ScalePattern.MAJOR, 2, "Dorian") == ScalePattern.DORIAN
        """
        return base.derive(start_degree, name, short_symbol)

    @staticmethod
    def church_mode(name: str) -> ChurchMode:
        """Look up a church mode by name (case-insensitive)."""
        wanted = name.strip().lower()
        for mode in CHURCH_MODES:
            if mode.name.lower() == wanted:
                return mode
        raise ValueError(ErrorMessages.UNKNOWN_MODE.format(name=name))

    @staticmethod
    def mode_for_degree(degree: int) -> ChurchMode:
        if not 1 <= degree <= len(CHURCH_MODES):
            raise InvalidDegree(degree)
        return CHURCH_MODES[degree - 1]

    @staticmethod
    def all_modes() -> tuple[ChurchMode, ...]:
        return CHURCH_MODES
