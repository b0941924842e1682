"""
Chord primitives - ChordPattern and Chord.

Chords are stacks of intervals above a root. A ChordPattern is the
blueprint; a Chord is the blueprint built on a concrete root note.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from functools import cached_property
from typing import TYPE_CHECKING, Any, ClassVar

from chuk_mcp_harmony.constants import DEFAULT_OCTAVE, ErrorMessages, PatternQuality
from chuk_mcp_harmony.core.errors import EmptyChordInput, UnrecognizedChordQuality
from chuk_mcp_harmony.core.pitch import Interval, Note, PitchClass
from chuk_mcp_harmony.core.scale import derive_quality

if TYPE_CHECKING:
    from chuk_mcp_harmony.core.context import MusicalContext
    from chuk_mcp_harmony.models.dto import KeyDTO

# Roman-numeral decorations by chord suffix
_DEGREE_MARKS: dict[str, str] = {
    "dim": "°",
    "half-diminished": "ø",
    "aug": "+",
}


@dataclass(frozen=True)
class ChordPattern:
    """
    A chord quality defined by its intervals from the root.

    The root itself is implied and not listed: a major triad is (M3, P5).
    Intervals are sorted on construction, so equality ignores the order
    they were given in.

    The catalog constants are the canonical instances - Chord equality
    compares patterns by identity.
    """

    suffix: str = field(compare=False)
    intervals: tuple[Interval, ...]
    name: str = field(default="", compare=False)

    # Catalog (defined after class)
    MAJOR_TRIAD: ClassVar[ChordPattern]
    MINOR_TRIAD: ClassVar[ChordPattern]
    DIMINISHED_TRIAD: ClassVar[ChordPattern]
    AUGMENTED_TRIAD: ClassVar[ChordPattern]
    MAJOR_SEVENTH: ClassVar[ChordPattern]
    MINOR_SEVENTH: ClassVar[ChordPattern]
    DOMINANT_SEVENTH: ClassVar[ChordPattern]

    def __post_init__(self) -> None:
        object.__setattr__(self, "intervals", tuple(Interval.sort(list(self.intervals))))

    @cached_property
    def quality(self) -> PatternQuality:
        return derive_quality(i.semitones for i in self.intervals)

    @property
    def semitones(self) -> tuple[int, ...]:
        return tuple(i.semitones for i in self.intervals)

    def matches(self, intervals: Iterable[Interval]) -> bool:
        """True if the sorted interval values equal this pattern's, same length."""
        return sorted(i.semitones for i in intervals) == list(self.semitones)

    def degree_name_for(self, roman: str) -> str:
        """
        Decorate a roman numeral for this chord quality.

        Ⅶ + dim -> Ⅶ°, Ⅱ + m -> Ⅱm, Ⅴ + 7 -> Ⅴ7, Ⅰ + (major) -> Ⅰ
        """
        return roman + _DEGREE_MARKS.get(self.suffix, self.suffix)

    @classmethod
    def catalog(cls) -> tuple[ChordPattern, ...]:
        return _CATALOG

    @classmethod
    def find_by_intervals(cls, intervals: Iterable[Interval]) -> ChordPattern | None:
        """
        Linear scan of the catalog for an exact interval match.

        Unisons and octaves are dropped first: patterns leave the root
        implied, so intervals measured from the root itself still match.
        """
        interval_list = [i for i in intervals if i.semitones % 12 != 0]
        for pattern in _CATALOG:
            if pattern.matches(interval_list):
                return pattern
        return None

    @classmethod
    def require_by_intervals(cls, intervals: Iterable[Interval]) -> ChordPattern:
        """Like find_by_intervals but raises UnrecognizedChordQuality on a miss."""
        interval_list = list(intervals)
        pattern = cls.find_by_intervals(interval_list)
        if pattern is None:
            raise UnrecognizedChordQuality([i.name for i in interval_list])
        return pattern

    @classmethod
    def parse(cls, suffix: str) -> ChordPattern:
        """Look up a catalog pattern by suffix ('', 'm', 'dim', ...) or name."""
        key = suffix.strip()
        for pattern in _CATALOG:
            if key in (pattern.suffix, pattern.name):
                return pattern
        raise ValueError(ErrorMessages.UNKNOWN_QUALITY.format(quality=suffix))

    def __str__(self) -> str:
        return self.name or self.suffix

    def __repr__(self) -> str:
        return f"ChordPattern.{self.name.upper().replace(' ', '_')}"


ChordPattern.MAJOR_TRIAD = ChordPattern("", (Interval.M3, Interval.P5), "major triad")
ChordPattern.MINOR_TRIAD = ChordPattern("m", (Interval.m3, Interval.P5), "minor triad")
ChordPattern.DIMINISHED_TRIAD = ChordPattern(
    "dim", (Interval.m3, Interval.TT), "diminished triad"
)
ChordPattern.AUGMENTED_TRIAD = ChordPattern("aug", (Interval.M3, Interval.m6), "augmented triad")
ChordPattern.MAJOR_SEVENTH = ChordPattern(
    "maj7", (Interval.M3, Interval.P5, Interval.M7), "major seventh"
)
ChordPattern.MINOR_SEVENTH = ChordPattern(
    "m7", (Interval.m3, Interval.P5, Interval.m7), "minor seventh"
)
ChordPattern.DOMINANT_SEVENTH = ChordPattern(
    "7", (Interval.M3, Interval.P5, Interval.m7), "dominant seventh"
)

_CATALOG: tuple[ChordPattern, ...] = (
    ChordPattern.MAJOR_TRIAD,
    ChordPattern.MINOR_TRIAD,
    ChordPattern.DIMINISHED_TRIAD,
    ChordPattern.AUGMENTED_TRIAD,
    ChordPattern.MAJOR_SEVENTH,
    ChordPattern.MINOR_SEVENTH,
    ChordPattern.DOMINANT_SEVENTH,
)


@dataclass(frozen=True, eq=False)
class Chord:
    """
    A concrete chord: a root note plus a pattern.

    Two chords are equal when they share a root pitch class (octave is
    ignored) and the very same catalog pattern.
    """

    root: Note
    pattern: ChordPattern

    @classmethod
    def from_pattern(cls, root: Note, pattern: ChordPattern) -> Chord:
        return cls(root, pattern)

    @classmethod
    def major(cls, root: Note) -> Chord:
        return cls(root, ChordPattern.MAJOR_TRIAD)

    @classmethod
    def minor(cls, root: Note) -> Chord:
        return cls(root, ChordPattern.MINOR_TRIAD)

    @classmethod
    def dominant_seventh(cls, root: Note) -> Chord:
        return cls(root, ChordPattern.DOMINANT_SEVENTH)

    @classmethod
    def from_notes(cls, notes: Sequence[Any]) -> Chord:
        """
        Identify a chord from its notes.

        Non-Note entries are dropped. The lowest remaining note is the root;
        the intervals above it must match a catalog pattern.

        Raises:
            EmptyChordInput: no notes left after filtering
            UnrecognizedChordQuality: no pattern matches the intervals
        """
        valid = [note for note in notes if isinstance(note, Note)]
        if not valid:
            raise EmptyChordInput()

        ordered = Note.sort_by_pitch(valid)
        root = ordered[0]
        intervals = [Interval.between(root.pitch_class, n.pitch_class) for n in ordered[1:]]
        return cls(root, ChordPattern.require_by_intervals(intervals))

    @classmethod
    def from_key_dto(cls, dto: KeyDTO, octave: int = DEFAULT_OCTAVE) -> Chord:
        """Tonic triad of the key a DTO describes."""
        root = Note(PitchClass.from_fifths_index(dto.fifths_index), octave)
        return cls.major(root) if dto.is_major else cls.minor(root)

    @cached_property
    def notes(self) -> tuple[Note, ...]:
        """Root followed by the root transposed by each pattern interval."""
        return (self.root, *(self.root.transpose_by(i) for i in self.pattern.intervals))

    @property
    def pitch_classes(self) -> list[PitchClass]:
        return [note.pitch_class for note in self.notes]

    @property
    def quality(self) -> PatternQuality:
        return self.pattern.quality

    def intervals_from_key(self, key_root: PitchClass) -> list[Interval]:
        """Interval from a key root to every note of the chord."""
        return [Interval.between(key_root, note.pitch_class) for note in self.notes]

    def name_for(self, context: MusicalContext) -> str:
        """Chord symbol with the root spelled for the context's key signature."""
        return f"{self.root.name_for(context.key_signature)}{self.pattern.suffix}"

    def name_for_circle_of_fifths(self) -> str:
        """Chord symbol using the circle display convention: flats for major, sharps otherwise."""
        pitch = self.root.pitch_class
        root_name = pitch.flat_name if self.pattern.suffix == "" else pitch.sharp_name
        return f"{root_name}{self.pattern.suffix}"

    def note_names(self, context: MusicalContext | None = None) -> list[str]:
        if context is None:
            return [str(note) for note in self.notes]
        return [note.name_for(context.key_signature) for note in self.notes]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chord):
            return NotImplemented
        return self.root.pitch_class == other.root.pitch_class and self.pattern is other.pattern

    def __hash__(self) -> int:
        return hash((self.root.pitch_class, id(self.pattern)))

    def __str__(self) -> str:
        return f"{self.root.pitch_class.sharp_name}{self.pattern.suffix}"
