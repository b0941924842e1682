"""
Tonal key models - functional nuclei for the gravity heuristic.

A tonal key table says which intervals above a key root pull a chord
toward tonic, subdominant or dominant. Tables are plain data loaded from
YAML so a project can ship its own.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class FunctionNucleus(BaseModel):
    """Intervals (semitones above the key root) that carry one harmonic function."""

    primary: list[int] = Field(
        default_factory=list,
        description="Core intervals, weighted heavily",
    )
    secondary: list[int] = Field(
        default_factory=list,
        description="Supporting intervals, weighted lightly",
    )

    model_config = {"frozen": True}

    @field_validator("primary", "secondary")
    @classmethod
    def validate_semitones(cls, v: list[int]) -> list[int]:
        for semitones in v:
            if not 0 <= semitones <= 11:
                raise ValueError(f"Interval must be 0-11 semitones, got {semitones}")
        return v


class FunctionalNuclei(BaseModel):
    """The three functional nuclei of a tonal key."""

    tonic: FunctionNucleus = Field(default_factory=FunctionNucleus)
    subdominant: FunctionNucleus = Field(default_factory=FunctionNucleus)
    dominant: FunctionNucleus = Field(default_factory=FunctionNucleus)

    model_config = {"frozen": True}


class TonalKey(BaseModel):
    """A named table of functional nuclei."""

    name: str = Field(..., description="Table name, e.g. 'major'")
    description: str = Field(default="", description="What the table models")
    nuclei: FunctionalNuclei = Field(default_factory=FunctionalNuclei)

    model_config = {"frozen": True}
