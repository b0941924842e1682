#!/usr/bin/env python3
"""
Example: Analyzing a chord progression.

Walks a I-vi-IV-V7-I progression in a key, printing the roman-numeral
analysis of each chord, its tonal gravity and the voice-leading inertia
into the next chord.

Usage:
    python examples/analyze_progression.py
"""

import tempfile
from pathlib import Path

from chuk_mcp_harmony.analysis import ChordAnalyzer, TonalKeyLoader
from chuk_mcp_harmony.core import Chord, ChordPattern, Key, Note, PitchClass
from chuk_mcp_harmony.services import CircleOfFifthsService, text_position


def main() -> None:
    """Demonstrate progression analysis."""
    print("CHUK Harmony Progression Demo")
    print("=" * 40)
    print()

    library_path = Path(__file__).parent.parent / "src/chuk_mcp_harmony/analysis/library"

    with tempfile.TemporaryDirectory() as tmp:
        loader = TonalKeyLoader(library_path=library_path, project_path=Path(tmp))

        print("Available tonal key tables:")
        for table in loader.list_tonal_keys():
            print(f"  {table.name}: {table.description}")
        print()

        key = Key.major(PitchClass.G)
        print(f"Key: {key.context_name} ({key.key_signature})")
        print()

        # I - vi - IV - V7 - I
        progression = [
            Chord.from_pattern(Note(PitchClass.G), ChordPattern.MAJOR_TRIAD),
            Chord.from_pattern(Note(PitchClass.E), ChordPattern.MINOR_TRIAD),
            Chord.from_pattern(Note(PitchClass.C), ChordPattern.MAJOR_TRIAD),
            Chord.from_pattern(Note(PitchClass.D), ChordPattern.DOMINANT_SEVENTH),
            Chord.from_pattern(Note(PitchClass.G), ChordPattern.MAJOR_TRIAD),
        ]

        print("Roman numerals:")
        for chord in progression:
            result = key.analyze_chord(chord)
            function = result.function.value if result.function else "-"
            print(f"  {chord.name_for(key):6} {result.roman_degree_name:6} {function}")
        print()

        analyzer = ChordAnalyzer(loader.get_tonal_key("major"))
        for chord, next_chord in zip(progression, progression[1:]):
            print(analyzer.format_analysis(chord, next_chord, key.tonic))
        print()

        # A borrowed chord for contrast
        borrowed = Chord.from_pattern(Note(PitchClass.F), ChordPattern.MAJOR_TRIAD)
        result = key.analyze_chord(borrowed)
        print(f"Borrowed chord {borrowed.name_for(key)}: {result.roman_degree_name}")
        print(f"  diatonic: {result.is_diatonic}")
        print()

    print("Circle of fifths neighbors:")
    for segment in CircleOfFifthsService.get_segments()[:4]:
        label = segment.key_signature or "-"
        label_at = text_position(segment.position, 150)
        print(f"  {segment.major_key.short_name:3} / {segment.minor_key.short_name:4} {label}")
        print(f"    label at ({label_at.x:.1f}, {label_at.y:.1f})")


if __name__ == "__main__":
    main()
