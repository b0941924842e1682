"""
Tests for keys, modal contexts and roman-numeral analysis.
"""

import pytest

from chuk_mcp_harmony.constants import HarmonicFunction
from chuk_mcp_harmony.core import (
    Chord,
    ChordPattern,
    InvalidContext,
    InvalidDegree,
    Key,
    ModalContext,
    Note,
    PitchClass,
    ScalePattern,
    build_triad,
    degree_name,
)
from chuk_mcp_harmony.core.pitch import Accidental


def names(key: Key | ModalContext) -> list[str]:
    return [chord.name_for(key) for chord in key.diatonic_chords]


class TestKeyConstruction:
    """Tests for Key factories and parsing."""

    def test_major_minor(self) -> None:
        """Factories pick the pattern."""
        assert Key.major(PitchClass.C).pattern is ScalePattern.MAJOR
        assert Key.minor(PitchClass.A).pattern is ScalePattern.AEOLIAN
        assert Key.default() == Key.major(PitchClass.C)

    def test_from_circle_of_fifths(self) -> None:
        """Tonic from a circle position."""
        assert Key.from_circle_of_fifths(7, True) == Key.major(PitchClass.Cs)
        assert Key.from_circle_of_fifths(3, False) == Key.minor(PitchClass.A)

    def test_parse_short_names(self) -> None:
        """Short names: bare root is major, trailing m is minor."""
        assert Key.parse("C") == Key.major(PitchClass.C)
        assert Key.parse("F#m") == Key.minor(PitchClass.Fs)
        assert Key.parse("E♭") == Key.major(PitchClass.Ds)
        assert Key.parse("Bbm") == Key.minor(PitchClass.As)

    def test_parse_root_scale_form(self) -> None:
        """'root_scale' names select any catalog pattern."""
        assert Key.parse("D_minor") == Key.minor(PitchClass.D)
        assert Key.parse("D_dorian") == Key(PitchClass.D, ScalePattern.DORIAN)
        assert Key.parse("A_harmonic_minor").pattern == ScalePattern.HARMONIC_MINOR

    def test_parse_invalid(self) -> None:
        """Unknown roots or scales raise ValueError."""
        with pytest.raises(ValueError, match="Invalid key"):
            Key.parse("H")
        with pytest.raises(ValueError, match="Invalid key"):
            Key.parse("C_blues")

    def test_hashable(self) -> None:
        """Keys work as dict keys."""
        assert len({Key.major(PitchClass.C), Key.parse("C"), Key.minor(PitchClass.C)}) == 2


class TestKeyNames:
    """Tests for key naming and signatures."""

    def test_short_names(self) -> None:
        """Major uses flats, minor uses sharps."""
        assert Key.major(PitchClass.Cs).short_name == "D♭"
        assert Key.minor(PitchClass.Cs).short_name == "C#m"
        assert Key(PitchClass.B, ScalePattern.LOCRIAN).short_name == "Bdim"

    def test_short_name_other_quality(self) -> None:
        """Patterns without a major/minor/diminished quality use the pattern name."""
        whole_tone = ScalePattern.from_steps("Whole Tone", (2, 2, 2, 2, 2, 2))
        assert Key(PitchClass.C, whole_tone).short_name == "C Whole Tone"

    def test_context_names(self) -> None:
        """Full names."""
        assert Key.major(PitchClass.Gs).context_name == "A♭ Major"
        assert Key.minor(PitchClass.Gs).context_name == "G# Minor"
        assert str(Key.major(PitchClass.C)) == "C Major"

    def test_key_signature_major(self) -> None:
        """Major keys use their own circle position."""
        assert Key.major(PitchClass.G).key_signature.fifths_index == 1
        assert str(Key.major(PitchClass.Cs).key_signature) == "5♭"

    def test_key_signature_follows_relative_major(self) -> None:
        """Minor keys share the relative major's signature."""
        assert Key.minor(PitchClass.A).key_signature.fifths_index == 0
        assert Key.minor(PitchClass.C).key_signature.fifths_index == 9
        assert Key.minor(PitchClass.C).key_signature.prefers_flats

    def test_key_signature_modes(self) -> None:
        """Modes share the parent major's signature."""
        assert Key(PitchClass.D, ScalePattern.DORIAN).key_signature.fifths_index == 0
        assert Key(PitchClass.E, ScalePattern.PHRYGIAN).key_signature.fifths_index == 0

    def test_scale_degree_names(self) -> None:
        """The seventh degree differs between major and minor."""
        assert Key.major(PitchClass.C).scale_degree_names[6] == "Leading Tone"
        assert Key.minor(PitchClass.A).scale_degree_names[6] == "Subtonic"
        assert Key.major(PitchClass.C).scale_degree_names is Key.major(PitchClass.G).scale_degree_names

    def test_to_dto(self) -> None:
        """DTO snapshot."""
        dto = Key.minor(PitchClass.Fs).to_dto()
        assert dto.short_name == "F#m"
        assert dto.context_name == "F# Minor"
        assert dto.fifths_index == 6
        assert dto.is_major is False
        assert dto.type == "key"


class TestRelatedKeys:
    """Tests for relative, parallel and neighboring keys."""

    def test_relative(self) -> None:
        """Relative minor a sixth up, relative major a third up."""
        assert Key.major(PitchClass.C).relative_key() == Key.minor(PitchClass.A)
        assert Key.minor(PitchClass.E).relative_key() == Key.major(PitchClass.G)

    def test_parallel(self) -> None:
        """Same tonic, other mode."""
        assert Key.major(PitchClass.C).parallel_key() == Key.minor(PitchClass.C)
        assert Key.minor(PitchClass.C).parallel_key() == Key.major(PitchClass.C)

    def test_dominant_and_subdominant(self) -> None:
        """A fifth up and a fourth up, same mode."""
        assert Key.major(PitchClass.C).dominant_key() == Key.major(PitchClass.G)
        assert Key.major(PitchClass.C).subdominant_key() == Key.major(PitchClass.F)
        assert Key.minor(PitchClass.A).dominant_key() == Key.minor(PitchClass.E)

    def test_transpose_and_with_pattern(self) -> None:
        """Transposition keeps the pattern; with_pattern keeps the tonic."""
        assert Key.major(PitchClass.C).transpose(2) == Key.major(PitchClass.D)
        assert Key.major(PitchClass.C).with_pattern(ScalePattern.AEOLIAN) == Key.minor(PitchClass.C)

    def test_from_relative_mode(self) -> None:
        """Modes start on the parent's degrees."""
        c_major = Key.major(PitchClass.C)
        assert Key.from_relative_mode(c_major, 0) == c_major
        assert Key.from_relative_mode(c_major, 1) == Key(PitchClass.D, ScalePattern.DORIAN)
        assert Key.from_relative_mode(Key.major(PitchClass.G), 5) == Key.minor(PitchClass.E)

    def test_from_relative_mode_invalid_index(self) -> None:
        """Index must be 0-6."""
        with pytest.raises(InvalidDegree, match="relative mode index must be between 0 and 6"):
            Key.from_relative_mode(Key.major(PitchClass.C), 7)
        with pytest.raises(InvalidDegree):
            Key.from_relative_mode(Key.major(PitchClass.C), -1)

    def test_from_relative_mode_requires_major_parent(self) -> None:
        """Minor parents are rejected."""
        with pytest.raises(InvalidContext):
            Key.from_relative_mode(Key.minor(PitchClass.A), 1)


class TestDiatonicChords:
    """Tests for diatonic triad construction."""

    def test_c_major(self) -> None:
        """C Major triads."""
        assert names(Key.major(PitchClass.C)) == ["C", "Dm", "Em", "F", "G", "Am", "Bdim"]

    def test_a_minor(self) -> None:
        """A Minor triads."""
        assert names(Key.minor(PitchClass.A)) == ["Am", "Bdim", "C", "Dm", "Em", "F", "G"]

    def test_spelled_for_key(self) -> None:
        """Roots follow the key signature."""
        assert names(Key.minor(PitchClass.C)) == ["Cm", "Ddim", "E♭", "Fm", "Gm", "A♭", "B♭"]
        assert names(Key.major(PitchClass.B)) == ["B", "C#m", "D#m", "E", "F#", "G#m", "A#dim"]

    def test_cached(self) -> None:
        """Repeated access returns the same tuple."""
        key = Key.major(PitchClass.D)
        assert key.diatonic_chords is key.diatonic_chords

    def test_primary_chords(self) -> None:
        """Tonic, subdominant and dominant triads."""
        key = Key.major(PitchClass.G)
        assert key.tonic_chord() == Chord.major(Note(PitchClass.G))
        assert key.subdominant_chord() == Chord.major(Note(PitchClass.C))
        assert key.dominant_chord() == Chord.major(Note(PitchClass.D))

    def test_build_triad_invalid_degree(self) -> None:
        """Degrees outside 1-7 raise."""
        with pytest.raises(InvalidDegree):
            build_triad(Key.major(PitchClass.C), 0)
        with pytest.raises(InvalidDegree):
            build_triad(Key.major(PitchClass.C), 8)

    def test_harmonic_minor_includes_augmented(self) -> None:
        """The harmonic minor mediant is augmented."""
        key = Key(PitchClass.A, ScalePattern.HARMONIC_MINOR)
        assert key.diatonic_triads[3].pattern is ChordPattern.AUGMENTED_TRIAD
        assert key.diatonic_triads[5] == Chord.major(Note(PitchClass.E))

    def test_unrecognized_degrees_skipped(self) -> None:
        """Degrees with no matching chord pattern are left out."""
        whole_tone = ScalePattern.from_steps("Whole Tone", (2, 2, 2, 2, 2, 2))
        key = Key(PitchClass.C, whole_tone)
        assert set(key.diatonic_triads) == {1, 2, 3, 4, 5, 6}

    def test_six_note_scale_wraps_within_scale(self) -> None:
        """Upper triad tones wrap around the scale's own length."""
        whole_tone = ScalePattern.from_steps("Whole Tone", (2, 2, 2, 2, 2, 2))
        key = Key(PitchClass.C, whole_tone)
        sixth = key.build_triad(6)
        assert sixth.root.pitch_class is PitchClass.As
        assert sixth.pattern is ChordPattern.AUGMENTED_TRIAD
        assert sixth.pitch_classes == [PitchClass.As, PitchClass.D, PitchClass.Fs]


class TestChordAnalysis:
    """Tests for roman-numeral analysis within a key."""

    def test_degree_name(self) -> None:
        """Roman numerals with accidentals."""
        assert degree_name(5) == "Ⅴ"
        assert degree_name(7, Accidental.FLAT) == "♭Ⅶ"
        with pytest.raises(InvalidDegree):
            degree_name(8)

    def test_own_chords_are_diatonic(self) -> None:
        """Every diatonic chord analyzes as diatonic."""
        for key in (Key.major(PitchClass.C), Key.minor(PitchClass.Fs), Key.major(PitchClass.As)):
            for chord in key.diatonic_chords:
                assert key.analyze_chord(chord).is_diatonic

    def test_tritone_key_chords_are_not_diatonic(self) -> None:
        """F# Major's triads never match C Major's."""
        c_major = Key.major(PitchClass.C)
        for chord in Key.major(PitchClass.Fs).diatonic_chords:
            assert not c_major.analyze_chord(chord).is_diatonic

    def test_dominant_in_c(self) -> None:
        """G in C Major."""
        result = Key.major(PitchClass.C).analyze_chord(Chord.major(Note(PitchClass.G)))
        assert result.roman_degree_name == "Ⅴ"
        assert result.is_diatonic
        assert result.function is HarmonicFunction.DOMINANT
        assert result.is_scale_degree
        assert result.perfect_degree_name == "Ⅴ"

    def test_quality_decorations(self) -> None:
        """Minor and diminished marks."""
        key = Key.major(PitchClass.C)
        assert key.analyze_chord(Chord.minor(Note(PitchClass.D))).roman_degree_name == "Ⅱm"
        leading = key.analyze_chord(Chord.from_pattern(Note(PitchClass.B), ChordPattern.DIMINISHED_TRIAD))
        assert leading.roman_degree_name == "Ⅶ°"
        assert leading.function is HarmonicFunction.DOMINANT

    def test_foreign_quality_on_scale_root(self) -> None:
        """An in-scale root with a different quality is not diatonic."""
        key = Key.major(PitchClass.C)
        result = key.analyze_chord(Chord.major(Note(PitchClass.D)))
        assert result.roman_degree_name == "Ⅱ"
        assert not result.is_diatonic
        assert result.function is None

        seventh = key.analyze_chord(Chord.dominant_seventh(Note(PitchClass.G)))
        assert seventh.roman_degree_name == "Ⅴ7"
        assert not seventh.is_diatonic

    def test_borrowed_chord_sharp_key(self) -> None:
        """F# in C Major."""
        result = Key.major(PitchClass.C).analyze_chord(Chord.major(Note(PitchClass.Fs)))
        assert result.roman_degree_name == "♯Ⅳ"
        assert not result.is_diatonic
        assert not result.is_scale_degree
        assert result.sharp_degree_name == "♯Ⅳ"
        assert result.flat_degree_name == "♭Ⅴ"
        assert result.perfect_degree_name == "♯Ⅳ / ♭Ⅴ"

    def test_neapolitan(self) -> None:
        """C#/D♭ in C Major."""
        result = Key.major(PitchClass.C).analyze_chord(Chord.major(Note(PitchClass.Cs)))
        assert result.roman_degree_name == "♭Ⅱ"

    def test_borrowed_chords_natural_key(self) -> None:
        """C Major has no accidentals, so flat roots are lettered by their sharp spelling."""
        key = Key.major(PitchClass.C)
        # E♭ reads as D#, A♭ as G#, B♭ as A#
        assert key.analyze_chord(Chord.major(Note(PitchClass.Ds))).roman_degree_name == "♭Ⅱ"
        assert key.analyze_chord(Chord.major(Note(PitchClass.Gs))).roman_degree_name == "♯Ⅳ"
        assert key.analyze_chord(Chord.major(Note(PitchClass.As))).roman_degree_name == "♭Ⅵ"
        assert key.analyze_chord(Chord.major(Note(PitchClass.As))).flat_degree_name == "♭Ⅶ"

    def test_borrowed_chords_flat_key(self) -> None:
        """Modal mixture in F Major."""
        key = Key.major(PitchClass.F)
        assert key.analyze_chord(Chord.major(Note(PitchClass.Ds))).roman_degree_name == "♭Ⅶ"
        assert key.analyze_chord(Chord.major(Note(PitchClass.Gs))).roman_degree_name == "♭Ⅲ"
        assert key.analyze_chord(Chord.major(Note(PitchClass.Cs))).roman_degree_name == "♭Ⅵ"

    def test_raised_leading_tone_in_minor(self) -> None:
        """G#dim in A Minor."""
        key = Key.minor(PitchClass.A)
        chord = Chord.from_pattern(Note(PitchClass.Gs), ChordPattern.DIMINISHED_TRIAD)
        assert key.analyze_chord(chord).roman_degree_name == "♯Ⅶ°"

    def test_minor_functions(self) -> None:
        """Minor keys treat the submediant as subdominant."""
        key = Key.minor(PitchClass.A)
        assert key.function_of(1) is HarmonicFunction.TONIC
        assert key.function_of(6) is HarmonicFunction.SUBDOMINANT
        assert key.function_of(5) is HarmonicFunction.DOMINANT
        assert Key.major(PitchClass.C).function_of(6) is HarmonicFunction.TONIC
        assert key.function_of(9) is None

    def test_diatonic_chords_info(self) -> None:
        """Info combines analysis, name and notes."""
        infos = Key.minor(PitchClass.C).diatonic_chords_info()
        assert [i.degree for i in infos] == [1, 2, 3, 4, 5, 6, 7]
        third = infos[2]
        assert third.chord_name == "E♭"
        assert third.note_names == ["E♭", "G", "B♭"]
        assert third.roman_degree_name == "Ⅲ"
        assert third.function is HarmonicFunction.TONIC

    def test_contains(self) -> None:
        """Scale membership."""
        assert Key.major(PitchClass.D).contains(PitchClass.Fs)
        assert not Key.major(PitchClass.D).contains(PitchClass.F)


class TestModalContext:
    """Tests for ModalContext."""

    def test_dorian(self) -> None:
        """D Dorian lives in C Major."""
        context = ModalContext(PitchClass.D, ScalePattern.DORIAN)
        assert context.mode_of == 2
        assert context.parent_key == Key.major(PitchClass.C)
        assert context.relative_major_tonic() == PitchClass.C
        assert context.key_signature.fifths_index == 0

    def test_lydian(self) -> None:
        """F# Lydian lives in C# Major."""
        context = ModalContext(PitchClass.Fs, ScalePattern.LYDIAN)
        assert context.mode_of == 4
        assert context.parent_key == Key.major(PitchClass.Cs)

    def test_names(self) -> None:
        """Names use the pattern's short symbol."""
        context = ModalContext(PitchClass.D, ScalePattern.DORIAN)
        assert context.context_name == "D Dorian"
        assert context.short_name == "Ddor"

    def test_rejects_non_major_modes(self) -> None:
        """Only the seven modes of major are accepted."""
        with pytest.raises(InvalidContext):
            ModalContext(PitchClass.A, ScalePattern.HARMONIC_MINOR)

    def test_no_functions(self) -> None:
        """Modal analysis reports no harmonic function."""
        context = ModalContext(PitchClass.D, ScalePattern.DORIAN)
        result = context.analyze_chord(Chord.minor(Note(PitchClass.D)))
        assert result.is_diatonic
        assert result.function is None

    def test_diatonic_chords(self) -> None:
        """D Dorian triads."""
        context = ModalContext(PitchClass.D, ScalePattern.DORIAN)
        assert names(context) == ["Dm", "Em", "F", "G", "Am", "Bdim", "C"]

    def test_to_dto(self) -> None:
        """Modal DTOs are typed 'modal'."""
        dto = ModalContext(PitchClass.G, ScalePattern.MIXOLYDIAN).to_dto()
        assert dto.type == "modal"
        assert dto.is_major is True
        assert dto.context_name == "G Mixolydian"
