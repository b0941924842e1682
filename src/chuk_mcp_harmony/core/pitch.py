"""
Pitch primitives - PitchClass, Accidental, Interval and Note.

These are the foundational types for all pitch-related operations.
PitchClass represents the 12 chromatic pitches (octave-independent).
Interval represents the distance between pitches in semitones.
Note pins a pitch class to an octave.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import total_ordering
from typing import TYPE_CHECKING, ClassVar

from chuk_mcp_harmony.constants import DEFAULT_OCTAVE, ErrorMessages

if TYPE_CHECKING:
    from chuk_mcp_harmony.core.signature import KeySignature

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
_FLAT_NAMES: list[str] = ["C", "D♭", "D", "E♭", "E", "F", "G♭", "G", "A♭", "A", "B♭", "B"]

_LETTER_VALUES: dict[str, int] = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}
_NOTE_PATTERN = re.compile(r"^([A-Ga-g][#♯b♭]*)(-?\d+)?$")


def modulo12(n: int) -> int:
    """Wrap any integer into 0-11."""
    return n % 12


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == D♭ == 1).

    Spelling is a display concern: every pitch class has a canonical
    sharp name and flat name, and a key signature decides between them.
    """

    C = 0
    Cs = 1  # C# / D♭
    D = 2
    Ds = 3  # D# / E♭
    E = 4
    F = 5
    Fs = 6  # F# / G♭
    G = 7
    Gs = 8  # G# / A♭
    A = 9
    As = 10  # A# / B♭
    B = 11

    @property
    def index(self) -> int:
        """Chromatic index (0-11)."""
        return self.value

    @property
    def fifths_index(self) -> int:
        """Position on the circle of fifths, C = 0, G = 1, ... F = 11."""
        return (self.value * 7) % 12

    @property
    def sharp_name(self) -> str:
        return _SHARP_NAMES[self.value]

    @property
    def flat_name(self) -> str:
        return _FLAT_NAMES[self.value]

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        return self.flat_name if prefer_flats else self.sharp_name

    def name_for(self, key_signature: KeySignature) -> str:
        """Spell this pitch class the way the given key signature does."""
        return self.spell(prefer_flats=key_signature.prefers_flats)

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass(modulo12(self.value + semitones))

    def interval_to(self, other: PitchClass) -> Interval:
        """Get the interval from this pitch class to another (ascending)."""
        return Interval.between(self, other)

    def to_midi(self, octave: int = DEFAULT_OCTAVE) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * 12

    @classmethod
    def from_chromatic_index(cls, index: int) -> PitchClass:
        """Pitch class at a chromatic index, normalized modulo 12."""
        return cls(modulo12(index))

    @classmethod
    def from_fifths_index(cls, index: int) -> PitchClass:
        """Pitch class at a circle-of-fifths position, normalized modulo 12."""
        return cls(modulo12(index * 7))

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % 12)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """
        Parse a pitch class from a string like 'C', 'C#', 'D♭', 'Eb' or 'Fs'.

        Double accidentals and enharmonic spellings (E#, Cb) are accepted.
        """
        name = name.strip()
        if not name:
            raise ValueError(ErrorMessages.UNKNOWN_PITCH.format(name=name))

        # Enum names (C, Cs, D, Ds, etc.)
        for member in cls:
            if member.name.upper() == name.upper():
                return member

        letter = name[0].upper()
        if letter not in _LETTER_VALUES:
            raise ValueError(ErrorMessages.UNKNOWN_PITCH.format(name=name))

        offset = 0
        for char in name[1:]:
            if char in "#♯":
                offset += 1
            elif char in "b♭":
                offset -= 1
            else:
                raise ValueError(ErrorMessages.UNKNOWN_PITCH.format(name=name))
        return cls(modulo12(_LETTER_VALUES[letter] + offset))


# Order in which accidentals appear in a key signature
SHARP_KEY_ORDER: tuple[PitchClass, ...] = (
    PitchClass.F,
    PitchClass.C,
    PitchClass.G,
    PitchClass.D,
    PitchClass.A,
    PitchClass.E,
    PitchClass.B,
)
FLAT_KEY_ORDER: tuple[PitchClass, ...] = tuple(reversed(SHARP_KEY_ORDER))


class Accidental(str, Enum):
    """Chromatic alteration of a natural scale degree."""

    SHARP = "♯"
    FLAT = "♭"
    NATURAL = ""

    @property
    def symbol(self) -> str:
        return self.value


_INTERVAL_NAMES: dict[int, str] = {
    0: "Root",
    1: "Minor Second",
    2: "Major Second",
    3: "Minor Third",
    4: "Major Third",
    5: "Perfect Fourth",
    6: "Tritone",
    7: "Perfect Fifth",
    8: "Minor Sixth",
    9: "Major Sixth",
    10: "Minor Seventh",
    11: "Major Seventh",
    12: "Octave",
}

_INTERVAL_SYMBOLS: dict[int, str] = {
    0: "P1",
    1: "m2",
    2: "M2",
    3: "m3",
    4: "M3",
    5: "P4",
    6: "TT",
    7: "P5",
    8: "m6",
    9: "M6",
    10: "m7",
    11: "M7",
    12: "P8",
}


@total_ordering
class Interval:
    """
    Distance between pitches in semitones.

    This is the fundamental building block - scales are interval patterns,
    chords are interval stacks from a root.

    Semitone count is canonical: equality, hashing and ordering all use it.
    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    # Aliases
    ROOT: ClassVar[Interval]
    HALF: ClassVar[Interval]
    WHOLE: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    TT: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]

    def __init__(self, semitones: int) -> None:
        """Create an interval with the given number of semitones."""
        object.__setattr__(self, "_semitones", semitones)

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    @property
    def name(self) -> str:
        """Display name, e.g. 'Major Third'. Falls back to a semitone count."""
        return _INTERVAL_NAMES.get(self._semitones, f"{self._semitones} semitones")

    @classmethod
    def between(cls, a: PitchClass, b: PitchClass) -> Interval:
        """
        Upward distance from a to b, modulo 12.

        Always 0-11; only an explicit Interval.OCTAVE carries 12.
        """
        return cls(modulo12(b.value - a.value))

    @staticmethod
    def sort(intervals: list[Interval]) -> list[Interval]:
        """Stable sort by semitone count."""
        return sorted(intervals, key=lambda i: i.semitones)

    @staticmethod
    def compare(a: Interval, b: Interval) -> int:
        """Three-way comparison: -1, 0 or 1."""
        return (a.semitones > b.semitones) - (a.semitones < b.semitones)

    def invert(self) -> Interval:
        """
        Invert the interval within an octave.

        M3 (4) -> m6 (8)
        P5 (7) -> P4 (5)
        """
        return Interval(12 - (self._semitones % 12))

    def __add__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones + other._semitones)

    def __sub__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones - other._semitones)

    def __neg__(self) -> Interval:
        """Negate the interval (descending instead of ascending)."""
        return Interval(-self._semitones)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones < other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        return f"Interval({self._semitones})"

    def __str__(self) -> str:
        """Short interval symbol, e.g. 'M3'."""
        return _INTERVAL_SYMBOLS.get(self._semitones, f"{self._semitones}st")


# Initialize class constants after class is defined
Interval.UNISON = Interval(0)
Interval.MINOR_SECOND = Interval(1)
Interval.MAJOR_SECOND = Interval(2)
Interval.MINOR_THIRD = Interval(3)
Interval.MAJOR_THIRD = Interval(4)
Interval.PERFECT_FOURTH = Interval(5)
Interval.TRITONE = Interval(6)
Interval.PERFECT_FIFTH = Interval(7)
Interval.MINOR_SIXTH = Interval(8)
Interval.MAJOR_SIXTH = Interval(9)
Interval.MINOR_SEVENTH = Interval(10)
Interval.MAJOR_SEVENTH = Interval(11)
Interval.OCTAVE = Interval(12)

Interval.ROOT = Interval.UNISON
Interval.HALF = Interval.MINOR_SECOND
Interval.WHOLE = Interval.MAJOR_SECOND
Interval.m3 = Interval.MINOR_THIRD
Interval.M3 = Interval.MAJOR_THIRD
Interval.P4 = Interval.PERFECT_FOURTH
Interval.TT = Interval.TRITONE
Interval.P5 = Interval.PERFECT_FIFTH
Interval.m6 = Interval.MINOR_SIXTH
Interval.M6 = Interval.MAJOR_SIXTH
Interval.m7 = Interval.MINOR_SEVENTH
Interval.M7 = Interval.MAJOR_SEVENTH

# Catalog in ascending order, unison through octave
INTERVAL_CATALOG: tuple[Interval, ...] = tuple(Interval(s) for s in range(13))


@dataclass(frozen=True)
class Note:
    """
    A pitch class in a specific octave.

    Examples:
        Note(PitchClass.A, 4) = A4 (440 Hz)
        Note(PitchClass.A, 4).transpose_by(Interval.MAJOR_THIRD) = C#5
    """

    pitch_class: PitchClass
    octave: int = DEFAULT_OCTAVE

    def transpose_by(self, interval: Interval) -> Note:
        """Move by an interval, carrying whole-octave crossings into the octave."""
        total = self.pitch_class.value + interval.semitones
        return Note(PitchClass(modulo12(total)), self.octave + total // 12)

    def name_for(self, key_signature: KeySignature) -> str:
        """Pitch name (no octave) spelled for the key signature."""
        return self.pitch_class.name_for(key_signature)

    def to_midi(self) -> int:
        return self.pitch_class.to_midi(self.octave)

    @classmethod
    def from_midi(cls, midi_note: int) -> Note:
        return cls(PitchClass.from_midi(midi_note), midi_note // 12 - 1)

    @classmethod
    def parse(cls, text: str, default_octave: int = DEFAULT_OCTAVE) -> Note:
        """Parse a note like 'C4', 'F#3', 'B♭5' or a bare 'E' (default octave)."""
        match = _NOTE_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(ErrorMessages.INVALID_NOTE.format(note=text))
        pitch_text, octave_text = match.groups()
        octave = int(octave_text) if octave_text is not None else default_octave
        return cls(PitchClass.parse(pitch_text), octave)

    @staticmethod
    def sort_by_pitch(notes: list[Note]) -> list[Note]:
        """Sort lowest to highest."""
        return sorted(notes, key=lambda n: (n.octave, n.pitch_class.value))

    def __str__(self) -> str:
        return f"{self.pitch_class.sharp_name}{self.octave}"
