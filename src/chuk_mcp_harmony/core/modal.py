"""
ModalContext - a church mode understood through its parent major key.

D Dorian uses the notes of C major starting on D, so it shares C major's
key signature. A modal context has no harmonic functions of its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property

from chuk_mcp_harmony.constants import ErrorMessages, HarmonicFunction, PatternQuality
from chuk_mcp_harmony.core.chord import Chord
from chuk_mcp_harmony.core.context import (
    analyze_chord,
    context_name,
    derive_diatonic_triads,
    diatonic_chords_info,
    relative_major_tonic,
    short_name,
)
from chuk_mcp_harmony.core.errors import InvalidContext
from chuk_mcp_harmony.core.key import Key
from chuk_mcp_harmony.core.pitch import PitchClass
from chuk_mcp_harmony.core.scale import MAJOR_MODES, Scale, ScalePattern, major_mode_degree
from chuk_mcp_harmony.core.signature import KeySignature
from chuk_mcp_harmony.models.dto import ChordAnalysisResult, DiatonicChordInfo, KeyDTO


@dataclass(frozen=True)
class ModalContext:
    """
    A mode of the major scale on a given center.

    Examples:
        ModalContext(PitchClass.D, ScalePattern.DORIAN).parent_key = C Major
        ModalContext(PitchClass.Fs, ScalePattern.LYDIAN).mode_of = 4
    """

    center_pitch: PitchClass
    pattern: ScalePattern

    def __post_init__(self) -> None:
        if major_mode_degree(self.pattern) is None:
            raise InvalidContext(ErrorMessages.NOT_A_MAJOR_MODE.format(pattern=self.pattern.name))

    @property
    def mode_of(self) -> int:
        """Degree of the parent major scale the mode starts on (1-7)."""
        return MAJOR_MODES.index(self.pattern) + 1

    def relative_major_tonic(self) -> PitchClass:
        return relative_major_tonic(self.center_pitch, self.pattern)

    @cached_property
    def parent_key(self) -> Key:
        return Key.major(self.relative_major_tonic())

    @cached_property
    def scale(self) -> Scale:
        return Scale(self.center_pitch, self.pattern)

    @property
    def key_signature(self) -> KeySignature:
        return self.parent_key.key_signature

    @cached_property
    def diatonic_triads(self) -> dict[int, Chord]:
        return derive_diatonic_triads(self)

    @cached_property
    def diatonic_chords(self) -> tuple[Chord, ...]:
        return tuple(self.diatonic_triads.values())

    @property
    def context_name(self) -> str:
        return context_name(self)

    @property
    def short_name(self) -> str:
        return short_name(self)

    def function_of(self, degree: int) -> HarmonicFunction | None:
        return None

    def analyze_chord(self, chord: Chord) -> ChordAnalysisResult:
        return analyze_chord(self, chord)

    def diatonic_chords_info(self) -> list[DiatonicChordInfo]:
        return diatonic_chords_info(self)

    def contains(self, pitch_class: PitchClass) -> bool:
        return self.scale.contains(pitch_class)

    def to_dto(self) -> KeyDTO:
        return KeyDTO(
            short_name=self.short_name,
            context_name=self.context_name,
            fifths_index=self.center_pitch.fifths_index,
            is_major=self.pattern.quality is PatternQuality.MAJOR,
            type="modal",
        )

    def __str__(self) -> str:
        return self.context_name
