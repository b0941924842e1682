"""
Key - a tonal center with a scale pattern, plus its harmonic relations.

Keys are usually major or minor, but any scale pattern is accepted
(Key.from_relative_mode builds D Dorian, E Phrygian, ... from C major).
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import ClassVar

from chuk_mcp_harmony.constants import ErrorMessages, HarmonicFunction, PatternQuality
from chuk_mcp_harmony.core.chord import Chord
from chuk_mcp_harmony.core.context import (
    analyze_chord,
    build_triad,
    context_name,
    derive_diatonic_triads,
    diatonic_chords_info,
    relative_major_tonic,
)
from chuk_mcp_harmony.core.errors import InvalidContext, InvalidDegree
from chuk_mcp_harmony.core.pitch import PitchClass
from chuk_mcp_harmony.core.scale import MAJOR_MODES, Scale, ScalePattern
from chuk_mcp_harmony.core.signature import KeySignature
from chuk_mcp_harmony.models.dto import ChordAnalysisResult, DiatonicChordInfo, KeyDTO

_T = HarmonicFunction.TONIC
_S = HarmonicFunction.SUBDOMINANT
_D = HarmonicFunction.DOMINANT

_MAJOR_FUNCTIONS: dict[int, HarmonicFunction] = {1: _T, 2: _S, 3: _T, 4: _S, 5: _D, 6: _T, 7: _D}
_MINOR_FUNCTIONS: dict[int, HarmonicFunction] = {1: _T, 2: _S, 3: _T, 4: _S, 5: _D, 6: _S, 7: _D}

_MAJOR_DEGREE_NAMES: tuple[str, ...] = (
    "Tonic",
    "Supertonic",
    "Mediant",
    "Subdominant",
    "Dominant",
    "Submediant",
    "Leading Tone",
)
_MINOR_DEGREE_NAMES: tuple[str, ...] = (*_MAJOR_DEGREE_NAMES[:6], "Subtonic")

_SCALE_NAMES: dict[str, ScalePattern] = {
    "major": ScalePattern.MAJOR,
    "ionian": ScalePattern.MAJOR,
    "minor": ScalePattern.AEOLIAN,
    "natural_minor": ScalePattern.AEOLIAN,
    "aeolian": ScalePattern.AEOLIAN,
    "harmonic_minor": ScalePattern.HARMONIC_MINOR,
    "dorian": ScalePattern.DORIAN,
    "phrygian": ScalePattern.PHRYGIAN,
    "lydian": ScalePattern.LYDIAN,
    "mixolydian": ScalePattern.MIXOLYDIAN,
    "locrian": ScalePattern.LOCRIAN,
}


@dataclass(frozen=True)
class Key:
    """
    A key is a center pitch class plus a scale pattern.

    Examples:
        Key.major(PitchClass.C) = C Major
        Key.minor(PitchClass.A) = A Minor
        Key.from_circle_of_fifths(7, True) = D♭ Major

    The key signature follows the relative major, so A minor has no
    accidentals and C minor is spelled with flats.
    """

    center_pitch: PitchClass
    pattern: ScalePattern

    DEFAULT: ClassVar[Key]

    # --- construction ---

    @classmethod
    def major(cls, tonic: PitchClass) -> Key:
        return cls(tonic, ScalePattern.MAJOR)

    @classmethod
    def minor(cls, tonic: PitchClass) -> Key:
        return cls(tonic, ScalePattern.AEOLIAN)

    @classmethod
    def from_circle_of_fifths(cls, index: int, is_major: bool) -> Key:
        """Major or minor key whose tonic sits at a circle-of-fifths position."""
        tonic = PitchClass.from_fifths_index(index)
        return cls.major(tonic) if is_major else cls.minor(tonic)

    @classmethod
    def from_relative_mode(cls, parent: Key, index: int) -> Key:
        """
        Mode of a major key starting on one of its degrees.

        Args:
            parent: A major key
            index: 0 = Ionian, 1 = Dorian, ... 6 = Locrian

        Example:
            Key.from_relative_mode(Key.major(PitchClass.C), 1) = D Dorian
        """
        if not 0 <= index <= 6:
            raise InvalidDegree(index, ErrorMessages.INVALID_RELATIVE_MODE.format(index=index))
        if parent.pattern != ScalePattern.MAJOR:
            raise InvalidContext(ErrorMessages.PARENT_NOT_MAJOR.format(key=parent.context_name))
        return cls(parent.scale.notes[index].pitch_class, MAJOR_MODES[index])

    @classmethod
    def parse(cls, name: str) -> Key:
        """
        Parse a key from a short name or 'root_scale' form.

        Accepts 'C', 'F#m', 'E♭', 'Bbm', 'C_major', 'D_minor', 'F#_dorian'.
        """
        text = name.strip()
        try:
            if "_" in text:
                root_text, scale_text = text.split("_", 1)
                pattern = _SCALE_NAMES[scale_text.lower()]
                return cls(PitchClass.parse(root_text), pattern)
            if len(text) > 1 and text.endswith("m"):
                return cls.minor(PitchClass.parse(text[:-1]))
            return cls.major(PitchClass.parse(text))
        except (KeyError, ValueError) as e:
            raise ValueError(ErrorMessages.INVALID_KEY.format(key=name)) from e

    @classmethod
    def default(cls) -> Key:
        return cls.DEFAULT

    # --- derived state ---

    @cached_property
    def scale(self) -> Scale:
        return Scale(self.center_pitch, self.pattern)

    @cached_property
    def key_signature(self) -> KeySignature:
        tonic = relative_major_tonic(self.center_pitch, self.pattern)
        return KeySignature.from_fifths_index(tonic.fifths_index)

    @cached_property
    def diatonic_triads(self) -> dict[int, Chord]:
        return derive_diatonic_triads(self)

    @cached_property
    def diatonic_chords(self) -> tuple[Chord, ...]:
        """The key's triads in degree order (computed once)."""
        return tuple(self.diatonic_triads.values())

    @property
    def tonic(self) -> PitchClass:
        return self.center_pitch

    @property
    def is_major(self) -> bool:
        return self.pattern.quality is PatternQuality.MAJOR

    @property
    def context_name(self) -> str:
        return context_name(self)

    @property
    def short_name(self) -> str:
        """'C', 'D♭', 'F#m', 'Bdim', or 'E Phrygian' for other modes."""
        quality = self.pattern.quality
        if quality is PatternQuality.MAJOR:
            return self.center_pitch.flat_name
        tonic = self.center_pitch.sharp_name
        if quality is PatternQuality.MINOR:
            return f"{tonic}m"
        if quality is PatternQuality.DIMINISHED:
            return f"{tonic}dim"
        return f"{tonic} {self.pattern.name}"

    @property
    def scale_degree_names(self) -> tuple[str, ...]:
        """Functional names of the seven degrees; the seventh is Leading Tone or Subtonic."""
        return _MAJOR_DEGREE_NAMES if self.is_major else _MINOR_DEGREE_NAMES

    # --- chords and analysis ---

    def build_triad(self, degree: int) -> Chord:
        return build_triad(self, degree)

    def tonic_chord(self) -> Chord:
        return build_triad(self, 1)

    def subdominant_chord(self) -> Chord:
        return build_triad(self, 4)

    def dominant_chord(self) -> Chord:
        return build_triad(self, 5)

    def function_of(self, degree: int) -> HarmonicFunction | None:
        functions = _MAJOR_FUNCTIONS if self.is_major else _MINOR_FUNCTIONS
        return functions.get(degree)

    def analyze_chord(self, chord: Chord) -> ChordAnalysisResult:
        return analyze_chord(self, chord)

    def diatonic_chords_info(self) -> list[DiatonicChordInfo]:
        return diatonic_chords_info(self)

    def contains(self, pitch_class: PitchClass) -> bool:
        return self.scale.contains(pitch_class)

    # --- related keys ---

    def relative_key(self) -> Key:
        """Relative minor (a major sixth up) or relative major (a minor third up)."""
        if self.is_major:
            return Key.minor(self.center_pitch.transpose(9))
        return Key.major(self.center_pitch.transpose(3))

    def parallel_key(self) -> Key:
        """Same tonic, opposite mode."""
        if self.is_major:
            return Key.minor(self.center_pitch)
        return Key.major(self.center_pitch)

    def dominant_key(self) -> Key:
        """A fifth up, same pattern."""
        return self.transpose(7)

    def subdominant_key(self) -> Key:
        """A fourth up, same pattern."""
        return self.transpose(5)

    def transpose(self, semitones: int) -> Key:
        return Key(self.center_pitch.transpose(semitones), self.pattern)

    def with_pattern(self, pattern: ScalePattern) -> Key:
        return Key(self.center_pitch, pattern)

    def to_dto(self) -> KeyDTO:
        return KeyDTO(
            short_name=self.short_name,
            context_name=self.context_name,
            fifths_index=self.center_pitch.fifths_index,
            is_major=self.is_major,
            type="key",
        )

    def __str__(self) -> str:
        return self.context_name

    def __repr__(self) -> str:
        return f"Key({self.center_pitch!r}, {self.pattern!r})"


Key.DEFAULT = Key.major(PitchClass.C)
