"""
Scale primitives - ScalePattern, Scale and degree lookups.

Scales are interval patterns from a root. A Scale applies a pattern to a
root pitch class; degrees are 1-based positions within it.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from functools import cached_property
from typing import ClassVar

from chuk_mcp_harmony.constants import DEFAULT_OCTAVE, ErrorMessages, PatternQuality
from chuk_mcp_harmony.core.errors import InvalidDegree
from chuk_mcp_harmony.core.pitch import Accidental, Interval, Note, PitchClass, modulo12


def derive_quality(semitones: Iterable[int]) -> PatternQuality:
    """
    Classify an interval set by its third and fifth.

    Checked in order: augmented (M3 + #5), major (M3 + P5),
    minor (m3 + P5), diminished (m3 + b5). Anything else is OTHER.
    """
    present = set(semitones)
    if {4, 8} <= present:
        return PatternQuality.AUGMENTED
    if {4, 7} <= present:
        return PatternQuality.MAJOR
    if {3, 7} <= present:
        return PatternQuality.MINOR
    if {3, 6} <= present:
        return PatternQuality.DIMINISHED
    return PatternQuality.OTHER


@dataclass(frozen=True)
class ScalePattern:
    """
    A scale defined by its intervals from the root.

    Intervals are cumulative (0, 2, 4, 5, ... for major), sorted and
    deduplicated on construction, so two patterns with the same interval
    set are equal however they were built. The name and short symbol are
    display-only.

    Use from_steps() for the familiar step notation:
    a major scale is W W H W W W H (2 2 1 2 2 2 1 semitones).
    """

    name: str = field(compare=False)
    intervals: tuple[Interval, ...]
    short_symbol: str = field(default="", compare=False)

    # Catalog (defined after class)
    MAJOR: ClassVar[ScalePattern]
    AEOLIAN: ClassVar[ScalePattern]
    NATURAL_MINOR: ClassVar[ScalePattern]
    DORIAN: ClassVar[ScalePattern]
    PHRYGIAN: ClassVar[ScalePattern]
    LYDIAN: ClassVar[ScalePattern]
    MIXOLYDIAN: ClassVar[ScalePattern]
    LOCRIAN: ClassVar[ScalePattern]
    HARMONIC_MINOR: ClassVar[ScalePattern]

    def __post_init__(self) -> None:
        values = sorted({modulo12(i.semitones) for i in self.intervals} | {0})
        object.__setattr__(self, "intervals", tuple(Interval(v) for v in values))

    @classmethod
    def from_steps(
        cls, name: str, steps: Sequence[int], short_symbol: str = ""
    ) -> ScalePattern:
        """
        Build a pattern from successive step sizes.

        The steps must sum to an octave (12 semitones).
        """
        total = sum(steps)
        if total != 12:
            raise ValueError(f"Scale steps must sum to 12 semitones, got {total}")
        cumulative = [0]
        for step in steps[:-1]:
            cumulative.append(cumulative[-1] + step)
        return cls(name, tuple(Interval(s) for s in cumulative), short_symbol)

    @property
    def semitones(self) -> tuple[int, ...]:
        """Semitone offsets from the root, e.g. (0, 2, 4, 5, 7, 9, 11)."""
        return tuple(i.semitones for i in self.intervals)

    @property
    def semitones_with_octave(self) -> tuple[int, ...]:
        """Offsets from the root including the closing octave (12)."""
        return (*self.semitones, 12)

    @property
    def steps(self) -> tuple[Interval, ...]:
        """Distances between successive degrees, ending with the return to the octave."""
        bounds = self.semitones_with_octave
        return tuple(Interval(b - a) for a, b in zip(bounds, bounds[1:]))

    @cached_property
    def quality(self) -> PatternQuality:
        return derive_quality(self.semitones)

    @property
    def has_major_third(self) -> bool:
        return Interval.MAJOR_THIRD in self.intervals

    def matches(self, intervals: Iterable[Interval]) -> bool:
        """True if the sorted interval values equal this pattern's, same length."""
        return sorted(i.semitones for i in intervals) == list(self.semitones)

    def derive(self, start_degree: int, name: str, short_symbol: str = "") -> ScalePattern:
        """
        Rotate the pattern to start on another degree (a mode).

        MAJOR.derive(2, "Dorian") == DORIAN
        """
        if not 1 <= start_degree <= len(self):
            raise InvalidDegree(
                start_degree,
                ErrorMessages.INVALID_SCALE_DEGREE.format(size=len(self), degree=start_degree),
            )
        offset = self.semitones[start_degree - 1]
        return ScalePattern(
            name,
            tuple(Interval(modulo12(s - offset)) for s in self.semitones),
            short_symbol,
        )

    def __len__(self) -> int:
        return len(self.intervals)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"ScalePattern.{self.name.upper().replace(' ', '_')}"


ScalePattern.MAJOR = ScalePattern.from_steps("Major", (2, 2, 1, 2, 2, 2, 1))
ScalePattern.AEOLIAN = ScalePattern.from_steps("Minor", (2, 1, 2, 2, 1, 2, 2), "m")
ScalePattern.NATURAL_MINOR = ScalePattern.AEOLIAN
ScalePattern.DORIAN = ScalePattern.from_steps("Dorian", (2, 1, 2, 2, 2, 1, 2), "dor")
ScalePattern.PHRYGIAN = ScalePattern.from_steps("Phrygian", (1, 2, 2, 2, 1, 2, 2), "phr")
ScalePattern.LYDIAN = ScalePattern.from_steps("Lydian", (2, 2, 2, 1, 2, 2, 1), "lyd")
ScalePattern.MIXOLYDIAN = ScalePattern.from_steps("Mixolydian", (2, 2, 1, 2, 2, 1, 2), "mix")
ScalePattern.LOCRIAN = ScalePattern.from_steps("Locrian", (1, 2, 2, 1, 2, 2, 2), "loc")
ScalePattern.HARMONIC_MINOR = ScalePattern.from_steps(
    "Harmonic Minor", (2, 1, 2, 2, 1, 3, 1), "hm"
)

# The seven modes of the major scale, indexed by the degree they start on
MAJOR_MODES: tuple[ScalePattern, ...] = (
    ScalePattern.MAJOR,
    ScalePattern.DORIAN,
    ScalePattern.PHRYGIAN,
    ScalePattern.LYDIAN,
    ScalePattern.MIXOLYDIAN,
    ScalePattern.AEOLIAN,
    ScalePattern.LOCRIAN,
)


def major_mode_degree(pattern: ScalePattern) -> int | None:
    """Degree of the major scale this pattern is a mode of (1-7), or None."""
    for degree, mode in enumerate(MAJOR_MODES, start=1):
        if mode == pattern:
            return degree
    return None


@dataclass(frozen=True)
class DegreeWithAccidental:
    """A scale degree number with an optional sharp or flat, e.g. ♭7."""

    degree: int
    accidental: Accidental = Accidental.NATURAL

    def __str__(self) -> str:
        return f"{self.accidental.symbol}{self.degree}"


@dataclass(frozen=True)
class DegreeAnalysis:
    """
    Where a semitone offset falls within a scale.

    For a scale tone both notations carry the plain degree. Between two
    scale tones, sharp_notation raises the lower neighbor and
    flat_notation lowers the upper one.
    """

    is_scale_degree: bool
    degree: int
    sharp_notation: DegreeWithAccidental
    flat_notation: DegreeWithAccidental


@dataclass(frozen=True)
class Scale:
    """
    A scale pattern applied to a root pitch class.

    Examples:
        Scale(PitchClass.C, ScalePattern.MAJOR) = C D E F G A B
        Scale(PitchClass.D, ScalePattern.DORIAN) = D E F G A B C
    """

    root: PitchClass
    pattern: ScalePattern

    @cached_property
    def notes(self) -> tuple[Note, ...]:
        """Scale notes ascending from the root in the default octave."""
        current = Note(self.root, DEFAULT_OCTAVE)
        notes = [current]
        for step in self.pattern.steps[:-1]:
            current = current.transpose_by(step)
            notes.append(current)
        return tuple(notes)

    @property
    def pitch_classes(self) -> list[PitchClass]:
        return [note.pitch_class for note in self.notes]

    def get_note_for_degree(self, degree: int) -> Note:
        """Note at a 1-based degree."""
        if not 1 <= degree <= len(self.notes):
            raise InvalidDegree(
                degree,
                ErrorMessages.INVALID_SCALE_DEGREE.format(size=len(self.notes), degree=degree),
            )
        return self.notes[degree - 1]

    def contains(self, pitch_class: PitchClass) -> bool:
        return pitch_class in self.pitch_classes

    def get_degree_from_steps(self, steps: int) -> DegreeAnalysis:
        """
        Locate a semitone offset from the root within the scale.

        Offsets are taken modulo 12. Offsets that fall between scale tones
        are reported against both neighbors; a flat above the last degree
        wraps around to degree 1.
        """
        step = modulo12(steps)
        bounds = self.pattern.semitones_with_octave
        size = len(self.pattern)

        if step in bounds[:-1]:
            degree = bounds.index(step) + 1
            natural = DegreeWithAccidental(degree)
            return DegreeAnalysis(True, degree, natural, natural)

        upper_index = next(i for i, value in enumerate(bounds) if value > step)
        lower_degree = upper_index
        upper_degree = upper_index + 1
        if upper_degree > size:
            upper_degree = 1
        return DegreeAnalysis(
            False,
            lower_degree,
            DegreeWithAccidental(lower_degree, Accidental.SHARP),
            DegreeWithAccidental(upper_degree, Accidental.FLAT),
        )

    def __str__(self) -> str:
        return " ".join(pc.sharp_name for pc in self.pitch_classes)
