"""
Musical context - behavior shared by keys and modal contexts.

A musical context is a center pitch plus a scale. Everything that can be
derived from that pair (diatonic triads, degree names, chord analysis)
lives here as free functions over the MusicalContext protocol, so Key and
ModalContext stay plain frozen dataclasses.
"""

from __future__ import annotations

import logging
from typing import Protocol

from chuk_mcp_harmony.constants import ROMAN_NUMERALS, HarmonicFunction
from chuk_mcp_harmony.core.chord import Chord, ChordPattern
from chuk_mcp_harmony.core.errors import InvalidDegree, UnrecognizedChordQuality
from chuk_mcp_harmony.core.pitch import Accidental, Interval, PitchClass, modulo12
from chuk_mcp_harmony.core.scale import Scale, ScalePattern, major_mode_degree
from chuk_mcp_harmony.core.signature import KeySignature
from chuk_mcp_harmony.models.dto import ChordAnalysisResult, DiatonicChordInfo

logger = logging.getLogger(__name__)

# Names for borrowed roots, by the base degree their letter falls on
NON_DIATONIC_DEGREE_NAMES: dict[ScalePattern, dict[int, str]] = {
    ScalePattern.MAJOR: {
        1: "♭Ⅱ",
        2: "♭Ⅱ",  # Neapolitan
        3: "♭Ⅲ",
        4: "♯Ⅳ",
        5: "♯Ⅳ",
        6: "♭Ⅵ",
        7: "♭Ⅶ",
    },
    ScalePattern.AEOLIAN: {
        1: "♭Ⅱ",
        2: "♭Ⅱ",
        3: "♭Ⅳ",
        4: "♭Ⅳ",
        5: "♭Ⅴ",
        6: "♯Ⅵ",  # melodic minor
        7: "♯Ⅶ",  # harmonic minor
    },
}


class MusicalContext(Protocol):
    """Anything with a tonal center, a scale and a key signature."""

    @property
    def center_pitch(self) -> PitchClass: ...

    @property
    def scale(self) -> Scale: ...

    @property
    def key_signature(self) -> KeySignature: ...

    @property
    def diatonic_triads(self) -> dict[int, Chord]: ...

    def function_of(self, degree: int) -> HarmonicFunction | None: ...


def degree_name(degree: int, accidental: Accidental = Accidental.NATURAL) -> str:
    """
    Roman numeral for a degree, with an optional accidental prefix.

    degree_name(5) -> 'Ⅴ', degree_name(7, Accidental.FLAT) -> '♭Ⅶ'
    """
    if not 1 <= degree <= 7:
        raise InvalidDegree(degree)
    return accidental.symbol + ROMAN_NUMERALS[degree - 1]


def relative_major_tonic(center: PitchClass, pattern: ScalePattern) -> PitchClass:
    """
    Tonic of the major key that shares this context's key signature.

    Modes of the major scale map to their parent; other minor-third
    patterns use the relative major (a minor third up).
    """
    mode_degree = major_mode_degree(pattern)
    if mode_degree is not None:
        return center.transpose(-ScalePattern.MAJOR.semitones[mode_degree - 1])
    if not pattern.has_major_third:
        return center.transpose(3)
    return center


def context_name(context: MusicalContext) -> str:
    """'C Major', 'A Minor', 'D Dorian' - flats for major-third patterns, sharps otherwise."""
    return f"{_center_name(context)} {context.scale.pattern.name}"


def short_name(context: MusicalContext) -> str:
    """Center name plus the pattern's short symbol, e.g. 'Ddor'."""
    return f"{_center_name(context)}{context.scale.pattern.short_symbol}"


def _center_name(context: MusicalContext) -> str:
    pattern = context.scale.pattern
    pitch = context.center_pitch
    return pitch.flat_name if pattern.has_major_third else pitch.sharp_name


def build_triad(context: MusicalContext, degree: int) -> Chord:
    """
    Stack the scale's own third and fifth on a degree.

    The third and fifth are taken from the scale (two and four scale steps
    up), not assumed, so the quality follows the pattern.

    Raises:
        InvalidDegree: degree outside 1-7
        UnrecognizedChordQuality: the stacked intervals match no chord pattern
    """
    notes = context.scale.notes
    if not 1 <= degree <= 7 or degree > len(notes):
        raise InvalidDegree(degree)

    size = len(notes)
    root = notes[degree - 1]
    third = notes[(degree + 1) % size]
    fifth = notes[(degree + 3) % size]

    intervals = [
        Interval.between(root.pitch_class, third.pitch_class),
        Interval.between(root.pitch_class, fifth.pitch_class),
    ]
    return Chord.from_pattern(root, ChordPattern.require_by_intervals(intervals))


def derive_diatonic_triads(context: MusicalContext) -> dict[int, Chord]:
    """
    Triads on every degree, keyed by degree.

    Degrees whose stacked intervals match no chord pattern are skipped,
    so exotic patterns may yield fewer than seven entries.
    """
    triads: dict[int, Chord] = {}
    for degree in range(1, 8):
        try:
            triads[degree] = build_triad(context, degree)
        except (InvalidDegree, UnrecognizedChordQuality) as e:
            logger.debug(f"Skipping degree {degree} of {context_name(context)}: {e}")
    return triads


def analyze_pitch_class(context: MusicalContext, pitch_class: PitchClass) -> tuple[int, str]:
    """
    Scale degree and roman name of a pitch class within the context.

    Scale tones get their position. Other pitches are placed by the first
    letter of their spelling in this key: the scale tone sharing that letter
    gives the base degree, and the pattern's borrowed-degree table (when it
    has one) names it.
    """
    scale_pitches = context.scale.pitch_classes
    if pitch_class in scale_pitches:
        degree = scale_pitches.index(pitch_class) + 1
        return degree, degree_name(degree)

    signature = context.key_signature
    letter = pitch_class.name_for(signature)[0]
    letters = [pc.name_for(signature)[0] for pc in scale_pitches]
    if letter in letters:
        base_degree = letters.index(letter) + 1
    else:
        # No scale tone carries the letter (enharmonic spellings); use the step position
        steps = modulo12(pitch_class.value - context.center_pitch.value)
        base_degree = context.scale.get_degree_from_steps(steps).flat_notation.degree

    borrowed = NON_DIATONIC_DEGREE_NAMES.get(context.scale.pattern, {})
    return base_degree, borrowed.get(base_degree, degree_name(base_degree))


def is_diatonic_chord(context: MusicalContext, chord: Chord, degree: int) -> bool:
    """True if the chord is exactly the context's own triad on that degree."""
    native = context.diatonic_triads.get(degree)
    return native is not None and native == chord


def analyze_chord(context: MusicalContext, chord: Chord) -> ChordAnalysisResult:
    """
    Roman-numeral analysis of a chord in the context.

    A chord is diatonic only if it equals the native triad on its root's
    degree - an in-scale root with a foreign quality is not diatonic.
    """
    degree, base_name = analyze_pitch_class(context, chord.root.pitch_class)
    diatonic = is_diatonic_chord(context, chord, degree)

    steps = modulo12(chord.root.pitch_class.value - context.center_pitch.value)
    placement = context.scale.get_degree_from_steps(steps)
    flat_name = chord.pattern.degree_name_for(
        degree_name(placement.flat_notation.degree, placement.flat_notation.accidental)
    )
    sharp_name = chord.pattern.degree_name_for(
        degree_name(placement.sharp_notation.degree, placement.sharp_notation.accidental)
    )

    return ChordAnalysisResult(
        roman_degree_name=chord.pattern.degree_name_for(base_name),
        is_diatonic=diatonic,
        function=context.function_of(degree) if diatonic else None,
        is_scale_degree=placement.is_scale_degree,
        sharp_degree_name=sharp_name,
        flat_degree_name=flat_name,
        perfect_degree_name=(
            flat_name if placement.is_scale_degree else f"{sharp_name} / {flat_name}"
        ),
    )


def diatonic_chords_info(context: MusicalContext) -> list[DiatonicChordInfo]:
    """Analysis, name and notes of every diatonic triad, in degree order."""
    infos = []
    for degree, chord in context.diatonic_triads.items():
        analysis = analyze_chord(context, chord)
        infos.append(
            DiatonicChordInfo(
                **analysis.model_dump(),
                degree=degree,
                chord_name=chord.name_for(context),
                note_names=chord.note_names(context),
            )
        )
    return infos

