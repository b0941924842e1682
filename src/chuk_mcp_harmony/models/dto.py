"""
Flat, JSON-safe projections of engine results.

These are the only shapes that cross the engine boundary. Field names are
snake_case in Python and camelCase on the wire:

    dto.model_dump(by_alias=True)  ->  {"shortName": ..., "fifthsIndex": ...}
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_harmony.constants import ContextType, HarmonicFunction


class KeyDTO(BaseModel):
    """Snapshot of a key or modal context."""

    short_name: str = Field(..., alias="shortName", description="Compact name, e.g. 'C', 'F#m'")
    context_name: str = Field(
        ..., alias="contextName", description="Full name, e.g. 'D♭ Major', 'D Dorian'"
    )
    fifths_index: int = Field(
        ..., alias="fifthsIndex", ge=0, le=11, description="Circle-of-fifths position of the center"
    )
    is_major: bool = Field(..., alias="isMajor", description="Pattern quality is major")
    type: ContextType = Field(..., description="'key' or 'modal'")

    model_config = {"frozen": True, "populate_by_name": True}


class CircleSegmentDTO(BaseModel):
    """One position on the circle of fifths."""

    position: int = Field(..., ge=0, le=11, description="Circle position (0 = C)")
    major_key: KeyDTO = Field(..., alias="majorKey")
    minor_key: KeyDTO = Field(..., alias="minorKey")
    key_signature: str = Field(
        ..., alias="keySignature", description="Signature label, e.g. '♯2', '♭3', '♯♭6'"
    )

    model_config = {"frozen": True, "populate_by_name": True}


class ChromaticSegmentDTO(BaseModel):
    """One position on the chromatic circle."""

    position: int = Field(..., ge=0, le=11, description="Chromatic index (0 = C)")
    pitch_class_name: str = Field(
        ..., alias="pitchClassName", description="'C', or 'F#/G♭' when spellings differ"
    )

    model_config = {"frozen": True, "populate_by_name": True}


class ChordAnalysisResult(BaseModel):
    """How a chord sits within a musical context."""

    roman_degree_name: str = Field(
        ..., alias="romanDegreeName", description="Degree name with quality mark, e.g. 'Ⅱm'"
    )
    is_diatonic: bool = Field(..., alias="isDiatonic")
    function: HarmonicFunction | None = Field(
        default=None, description="Harmonic function, only for diatonic chords of a key"
    )
    is_scale_degree: bool = Field(
        default=True, alias="isScaleDegree", description="Root is a scale tone"
    )
    sharp_degree_name: str = Field(default="", alias="sharpDegreeName")
    flat_degree_name: str = Field(default="", alias="flatDegreeName")
    perfect_degree_name: str = Field(
        default="",
        alias="perfectDegreeName",
        description="Flat name for scale tones, 'sharp / flat' otherwise",
    )

    model_config = {"frozen": True, "populate_by_name": True}


class DiatonicChordInfo(ChordAnalysisResult):
    """Analysis of one diatonic triad, plus its spelled name and notes."""

    degree: int = Field(..., ge=1, le=7)
    chord_name: str = Field(..., alias="chordName")
    note_names: list[str] = Field(default_factory=list, alias="noteNames")


class GravityScores(BaseModel):
    """Normalized pull of a chord toward each harmonic function."""

    tonic: float = Field(default=0.0, ge=0.0, le=1.0)
    subdominant: float = Field(default=0.0, ge=0.0, le=1.0)
    dominant: float = Field(default=0.0, ge=0.0, le=1.0)

    model_config = {"frozen": True}

    @property
    def total(self) -> float:
        return self.tonic + self.subdominant + self.dominant


class ProgressionAnalysis(BaseModel):
    """Gravity of a chord in a key plus its voice-leading inertia to the next chord."""

    chord_name: str = Field(..., alias="chordName")
    next_chord_name: str = Field(..., alias="nextChordName")
    key_root: str = Field(..., alias="keyRoot")
    gravity: GravityScores
    inertia: float = Field(..., gt=0.0, le=1.0)

    model_config = {"frozen": True, "populate_by_name": True}
