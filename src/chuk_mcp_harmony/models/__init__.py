"""
Pydantic models for the harmony engine.

This module provides:
- KeyDTO / CircleSegmentDTO / ChromaticSegmentDTO: Context snapshots
- ChordAnalysisResult / DiatonicChordInfo: Roman-numeral analysis
- GravityScores / ProgressionAnalysis: Functional gravity and inertia
- TonalKey: Functional nuclei tables loaded from YAML
"""

from chuk_mcp_harmony.models.dto import (
    ChordAnalysisResult,
    ChromaticSegmentDTO,
    CircleSegmentDTO,
    DiatonicChordInfo,
    GravityScores,
    KeyDTO,
    ProgressionAnalysis,
)
from chuk_mcp_harmony.models.tonal_key import FunctionalNuclei, FunctionNucleus, TonalKey

__all__ = [
    "KeyDTO",
    "CircleSegmentDTO",
    "ChromaticSegmentDTO",
    "ChordAnalysisResult",
    "DiatonicChordInfo",
    "GravityScores",
    "ProgressionAnalysis",
    "FunctionNucleus",
    "FunctionalNuclei",
    "TonalKey",
]
