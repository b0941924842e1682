"""
Tests for chord patterns and chords.
"""

import pytest

from chuk_mcp_harmony.constants import PatternQuality
from chuk_mcp_harmony.core import (
    Chord,
    ChordPattern,
    EmptyChordInput,
    Interval,
    Key,
    Note,
    PitchClass,
    UnrecognizedChordQuality,
)


class TestChordPattern:
    """Tests for ChordPattern."""

    def test_catalog(self) -> None:
        """Catalog order and contents."""
        assert [p.suffix for p in ChordPattern.catalog()] == [
            "",
            "m",
            "dim",
            "aug",
            "maj7",
            "m7",
            "7",
        ]

    def test_find_by_intervals_ignores_order(self) -> None:
        """Lookup sorts the intervals first."""
        found = ChordPattern.find_by_intervals([Interval.P5, Interval.M3])
        assert found is ChordPattern.MAJOR_TRIAD

    def test_find_by_intervals_inverts_construction(self) -> None:
        """Every catalog pattern is found from its own intervals."""
        for pattern in ChordPattern.catalog():
            assert ChordPattern.find_by_intervals(pattern.intervals) is pattern

    def test_find_by_intervals_from_built_chord(self) -> None:
        """A chord's intervals from its own root identify its pattern, for every root."""
        for pattern in ChordPattern.catalog():
            for root in PitchClass:
                chord = Chord.from_pattern(Note(root, 4), pattern)
                assert ChordPattern.find_by_intervals(chord.intervals_from_key(root)) is pattern

    def test_find_by_intervals_ignores_unison(self) -> None:
        """Root unisons and octaves do not affect the match."""
        intervals = [Interval.UNISON, Interval.M3, Interval.P5, Interval.OCTAVE]
        assert ChordPattern.find_by_intervals(intervals) is ChordPattern.MAJOR_TRIAD

    def test_find_by_intervals_miss(self) -> None:
        """No match returns None."""
        assert ChordPattern.find_by_intervals([Interval.M2, Interval.P5]) is None

    def test_require_by_intervals_raises(self) -> None:
        """The error carries the interval names."""
        with pytest.raises(UnrecognizedChordQuality) as exc_info:
            ChordPattern.require_by_intervals([Interval.M2, Interval.P5])
        assert exc_info.value.interval_names == ["Major Second", "Perfect Fifth"]

    def test_quality(self) -> None:
        """Quality from third and fifth."""
        assert ChordPattern.AUGMENTED_TRIAD.quality is PatternQuality.AUGMENTED
        assert ChordPattern.DOMINANT_SEVENTH.quality is PatternQuality.MAJOR
        assert ChordPattern.MINOR_SEVENTH.quality is PatternQuality.MINOR
        assert ChordPattern.DIMINISHED_TRIAD.quality is PatternQuality.DIMINISHED

    def test_degree_name_for(self) -> None:
        """Roman numeral decorations."""
        assert ChordPattern.MAJOR_TRIAD.degree_name_for("Ⅰ") == "Ⅰ"
        assert ChordPattern.MINOR_TRIAD.degree_name_for("Ⅱ") == "Ⅱm"
        assert ChordPattern.DIMINISHED_TRIAD.degree_name_for("Ⅶ") == "Ⅶ°"
        assert ChordPattern.AUGMENTED_TRIAD.degree_name_for("Ⅲ") == "Ⅲ+"
        assert ChordPattern.DOMINANT_SEVENTH.degree_name_for("Ⅴ") == "Ⅴ7"

    def test_parse(self) -> None:
        """Parse by suffix or name."""
        assert ChordPattern.parse("m7") is ChordPattern.MINOR_SEVENTH
        assert ChordPattern.parse("") is ChordPattern.MAJOR_TRIAD
        assert ChordPattern.parse("dominant seventh") is ChordPattern.DOMINANT_SEVENTH
        with pytest.raises(ValueError, match="Unknown chord quality"):
            ChordPattern.parse("sus4")


class TestChord:
    """Tests for Chord."""

    def test_notes(self) -> None:
        """Root plus each interval."""
        chord = Chord.major(Note(PitchClass.C, 4))
        assert chord.notes == (
            Note(PitchClass.C, 4),
            Note(PitchClass.E, 4),
            Note(PitchClass.G, 4),
        )

    def test_notes_cross_octave(self) -> None:
        """Upper notes carry into the next octave."""
        chord = Chord.dominant_seventh(Note(PitchClass.G, 4))
        assert [str(n) for n in chord.notes] == ["G4", "B4", "D5", "F5"]

    def test_from_notes(self) -> None:
        """The lowest note is the root."""
        chord = Chord.from_notes(
            [Note(PitchClass.D, 4), Note(PitchClass.F, 4), Note(PitchClass.G, 3), Note(PitchClass.B, 3)]
        )
        assert chord.root == Note(PitchClass.G, 3)
        assert chord.pattern is ChordPattern.DOMINANT_SEVENTH

    def test_from_notes_filters_invalid(self) -> None:
        """Non-Note entries are ignored."""
        chord = Chord.from_notes([Note(PitchClass.A, 4), "junk", Note(PitchClass.C, 5), Note(PitchClass.E, 5)])
        assert chord == Chord.minor(Note(PitchClass.A))

    def test_from_notes_doubled_root(self) -> None:
        """A doubled root an octave up is still the same triad."""
        chord = Chord.from_notes(
            [Note(PitchClass.C, 4), Note(PitchClass.E, 4), Note(PitchClass.G, 4), Note(PitchClass.C, 5)]
        )
        assert chord == Chord.major(Note(PitchClass.C))

    def test_from_notes_empty(self) -> None:
        """Nothing usable raises EmptyChordInput."""
        with pytest.raises(EmptyChordInput):
            Chord.from_notes([])
        with pytest.raises(EmptyChordInput):
            Chord.from_notes(["C4", None])

    def test_from_notes_unrecognized(self) -> None:
        """Inversions are not recognized: the lowest note is always the root."""
        with pytest.raises(UnrecognizedChordQuality) as exc_info:
            Chord.from_notes([Note(PitchClass.E, 4), Note(PitchClass.G, 4), Note(PitchClass.C, 5)])
        assert exc_info.value.interval_names == ["Minor Third", "Minor Sixth"]

    def test_equality_ignores_octave(self) -> None:
        """Same root pitch class and pattern are equal."""
        assert Chord.major(Note(PitchClass.C, 3)) == Chord.major(Note(PitchClass.C, 5))
        assert Chord.major(Note(PitchClass.C)) != Chord.minor(Note(PitchClass.C))
        assert hash(Chord.major(Note(PitchClass.C, 3))) == hash(Chord.major(Note(PitchClass.C, 5)))

    def test_name_for_context(self) -> None:
        """Root spelled by the context's key signature."""
        chord = Chord.major(Note(PitchClass.Ds))
        assert chord.name_for(Key.minor(PitchClass.C)) == "E♭"
        assert chord.name_for(Key.major(PitchClass.E)) == "D#"

    def test_name_for_circle_of_fifths(self) -> None:
        """Flats for major chords, sharps otherwise."""
        assert Chord.major(Note(PitchClass.Cs)).name_for_circle_of_fifths() == "D♭"
        assert Chord.minor(Note(PitchClass.Cs)).name_for_circle_of_fifths() == "C#m"

    def test_intervals_from_key(self) -> None:
        """Intervals from a key root to each note."""
        chord = Chord.major(Note(PitchClass.G))
        assert [i.semitones for i in chord.intervals_from_key(PitchClass.C)] == [7, 11, 2]

    def test_from_key_dto(self) -> None:
        """Tonic triad of the described key."""
        assert Chord.from_key_dto(Key.minor(PitchClass.A).to_dto()) == Chord.minor(Note(PitchClass.A))
        assert Chord.from_key_dto(Key.major(PitchClass.Gs).to_dto()) == Chord.major(Note(PitchClass.Gs))

    def test_note_names(self) -> None:
        """Note names with octaves, or spelled for a context."""
        chord = Chord.minor(Note(PitchClass.F, 4))
        assert chord.note_names() == ["F4", "G#4", "C5"]
        assert chord.note_names(Key.minor(PitchClass.F)) == ["F", "A♭", "C"]

    def test_str(self) -> None:
        """Sharp root plus suffix."""
        assert str(Chord.from_pattern(Note(PitchClass.B), ChordPattern.DIMINISHED_TRIAD)) == "Bdim"
