"""
Constants and enums for the harmony engine.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class PatternQuality(str, Enum):
    """
    Quality tag derived from a pattern's interval set.

    Computed from the third and fifth above the root.
    """

    MAJOR = "major"
    MINOR = "minor"
    DIMINISHED = "diminished"
    AUGMENTED = "augmented"
    OTHER = "other"


class HarmonicFunction(str, Enum):
    """Functional role of a diatonic chord within a key."""

    TONIC = "Tonic"
    SUBDOMINANT = "Subdominant"
    DOMINANT = "Dominant"
    OTHER = "Other"


# Kind of musical context a DTO was projected from
ContextType = Literal["key", "modal"]

# Roman numerals for scale degrees 1-7
ROMAN_NUMERALS: tuple[str, ...] = ("Ⅰ", "Ⅱ", "Ⅲ", "Ⅳ", "Ⅴ", "Ⅵ", "Ⅶ")

# Octave used when a note is built without one (C4 = middle C)
DEFAULT_OCTAVE = 4

# Positions on the circle of fifths / chromatic circle
SEGMENT_COUNT = 12

# Voice-leading costs for the inertia heuristic
JUMP_COST = 4
UNUSED_NOTE_PENALTY = 3

# Gravity weights for functional nuclei
PRIMARY_WEIGHT = 3
SECONDARY_WEIGHT = 1

# Key signature labels
SHARP_SYMBOL = "♯"
FLAT_SYMBOL = "♭"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_DEGREE = "Degree must be between 1 and 7, got {degree}."
    INVALID_SCALE_DEGREE = "Degree must be between 1 and {size}, got {degree}."
    INVALID_RELATIVE_MODE = "relative mode index must be between 0 and 6, got {index}."
    INVALID_FIFTHS_INDEX = "fifths index must be an integer between 0 and 11, got {index}."
    INVALID_POSITION = "Invalid position: {position}. Must be between 0 and 11."
    INVALID_RADIUS = "Invalid radius: {radius}."
    INVALID_RADII = "Invalid radii: inner={inner}, outer={outer}."
    INVALID_RADII_SET = "Invalid radii: minor={minor}, major={major}, signature={signature}."
    INVALID_RADII_ORDER = "Radii must be in ascending order: minor < major < signature."
    UNRECOGNIZED_CHORD = "No chord pattern matches intervals: {intervals}."
    EMPTY_CHORD_INPUT = "Cannot build a chord from an empty note list."
    PARENT_NOT_MAJOR = "parent key must be a Major key, got '{key}'."
    NOT_A_MAJOR_MODE = "ModalContext requires a mode derived from Major scale, got '{pattern}'."
    UNKNOWN_MODE = "Unknown church mode: '{name}'."
    UNKNOWN_PITCH = "Unknown pitch class: '{name}'."
    INVALID_KEY = "Invalid key: '{key}'. Expected a name like 'C', 'F#m', 'E♭' or 'D_minor'."
    INVALID_NOTE = "Invalid note: '{note}'. Expected a name like 'C4', 'F#3' or 'B♭5'."
    UNKNOWN_QUALITY = "Unknown chord quality: '{quality}'."
    TONAL_KEY_NOT_FOUND = "Tonal key table '{name}' not found."


class SuccessMessages:
    """Standardized success messages."""

    SERVER_INITIALIZED = "CHUK Harmony MCP Server initialized"
    TONAL_KEY_LOADED = "Loaded tonal key table '{name}' from {path}"
    SEGMENTS_BUILT = "Built {count} {circle} segments"
