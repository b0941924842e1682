"""
Core harmony primitives.

These are the invariants everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- Interval: Distance between pitches in semitones
- Note: A pitch class pinned to an octave
- KeySignature: Sharps or flats for a circle-of-fifths position
- ScalePattern / Scale: Interval patterns and their application to a root
- ChordPattern / Chord: Interval stacks and concrete chords
- Key / ModalContext: Musical contexts that analyze chords
"""

from chuk_mcp_harmony.core.chord import Chord, ChordPattern
from chuk_mcp_harmony.core.context import (
    MusicalContext,
    analyze_chord,
    build_triad,
    degree_name,
    derive_diatonic_triads,
)
from chuk_mcp_harmony.core.errors import (
    EmptyChordInput,
    HarmonyError,
    InvalidContext,
    InvalidDegree,
    InvalidPosition,
    InvalidRadii,
    InvalidRadiiOrder,
    TonalKeyNotFound,
    UnrecognizedChordQuality,
)
from chuk_mcp_harmony.core.key import Key
from chuk_mcp_harmony.core.modal import ModalContext
from chuk_mcp_harmony.core.pitch import Accidental, Interval, Note, PitchClass, modulo12
from chuk_mcp_harmony.core.scale import (
    MAJOR_MODES,
    DegreeAnalysis,
    DegreeWithAccidental,
    Scale,
    ScalePattern,
)
from chuk_mcp_harmony.core.signature import KeySignature

__all__ = [
    # Pitch
    "PitchClass",
    "Accidental",
    "Interval",
    "Note",
    "modulo12",
    "KeySignature",
    # Scale
    "ScalePattern",
    "Scale",
    "MAJOR_MODES",
    "DegreeAnalysis",
    "DegreeWithAccidental",
    # Chord
    "ChordPattern",
    "Chord",
    # Context
    "MusicalContext",
    "Key",
    "ModalContext",
    "analyze_chord",
    "build_triad",
    "degree_name",
    "derive_diatonic_triads",
    # Errors
    "HarmonyError",
    "InvalidDegree",
    "InvalidPosition",
    "InvalidRadii",
    "InvalidRadiiOrder",
    "UnrecognizedChordQuality",
    "EmptyChordInput",
    "InvalidContext",
    "TonalKeyNotFound",
]
