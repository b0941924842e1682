"""
Key signatures - which pitch classes carry sharps or flats.

A key signature knows nothing about tonics or modes; it is identified purely
by its circle-of-fifths position (0 = no accidentals, C major / A minor).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cache

from chuk_mcp_harmony.constants import ErrorMessages
from chuk_mcp_harmony.core.pitch import FLAT_KEY_ORDER, SHARP_KEY_ORDER, Accidental, PitchClass

NO_ACCIDENTALS = 0
ENHARMONIC_BOUNDARY = 6


def is_sharp_system(fifths_index: int) -> bool:
    """Positions 1-6 can be written with sharps."""
    return 1 <= fifths_index <= ENHARMONIC_BOUNDARY


def is_flat_system(fifths_index: int) -> bool:
    """Positions 6-11 can be written with flats."""
    return ENHARMONIC_BOUNDARY <= fifths_index <= 11


@dataclass(frozen=True)
class KeySignature:
    """
    The accidentals implied by a circle-of-fifths position.

    Use KeySignature.from_fifths_index() - it hands out one shared
    instance per position.

    Position 6 is both sharp and flat; the flat spelling wins.

    Examples:
        KeySignature.from_fifths_index(1).accidentals = {F: ♯}
        KeySignature.from_fifths_index(10).accidentals = {B: ♭, E: ♭}
    """

    fifths_index: int
    accidentals: dict[PitchClass, Accidental] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.fifths_index, int) or not 0 <= self.fifths_index <= 11:
            raise ValueError(ErrorMessages.INVALID_FIFTHS_INDEX.format(index=self.fifths_index))
        object.__setattr__(self, "accidentals", self._calculate_accidentals())

    @classmethod
    def from_fifths_index(cls, fifths_index: int) -> KeySignature:
        """Shared instance for a circle-of-fifths position (0-11)."""
        return _signature_for(fifths_index)

    @property
    def primary_accidental(self) -> Accidental | None:
        """FLAT for 6-11, SHARP for 1-5, None for the empty signature."""
        if is_flat_system(self.fifths_index):
            return Accidental.FLAT
        if is_sharp_system(self.fifths_index):
            return Accidental.SHARP
        return None

    @property
    def prefers_flats(self) -> bool:
        return self.primary_accidental is Accidental.FLAT

    def accidental_for(self, pitch_class: PitchClass) -> Accidental:
        """Accidental the signature applies to a natural letter (NATURAL if none)."""
        return self.accidentals.get(pitch_class, Accidental.NATURAL)

    def _calculate_accidentals(self) -> dict[PitchClass, Accidental]:
        primary = self.primary_accidental
        if primary is Accidental.FLAT:
            return {pc: Accidental.FLAT for pc in FLAT_KEY_ORDER[: 12 - self.fifths_index]}
        if primary is Accidental.SHARP:
            return {pc: Accidental.SHARP for pc in SHARP_KEY_ORDER[: self.fifths_index]}
        return {}

    def __str__(self) -> str:
        if self.primary_accidental is None:
            return "no accidentals"
        return f"{len(self.accidentals)}{self.primary_accidental.symbol}"


@cache
def _signature_for(fifths_index: int) -> KeySignature:
    return KeySignature(fifths_index)
