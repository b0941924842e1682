"""
Chord analyzer - tonal gravity and voice-leading inertia.

Gravity measures how strongly a chord's notes pull toward the tonic,
subdominant and dominant functions of a key. Inertia measures how smoothly
one chord's notes move to the next chord's: common tones and half steps
are cheap, leaps are expensive.
"""

from __future__ import annotations

from chuk_mcp_harmony.constants import (
    JUMP_COST,
    PRIMARY_WEIGHT,
    SECONDARY_WEIGHT,
    UNUSED_NOTE_PENALTY,
)
from chuk_mcp_harmony.core.chord import Chord
from chuk_mcp_harmony.core.key import Key
from chuk_mcp_harmony.core.pitch import Note, PitchClass
from chuk_mcp_harmony.models.dto import GravityScores, ProgressionAnalysis
from chuk_mcp_harmony.models.tonal_key import FunctionNucleus, TonalKey


def voice_leading_cost(a: Note, b: Note) -> int:
    """
    Cost of moving one voice between two notes, by circular distance.

    0 for a common tone, 1 for a half step, 2 for a whole step,
    JUMP_COST for anything wider.
    """
    diff = abs(a.pitch_class.value - b.pitch_class.value)
    distance = min(diff, 12 - diff)
    if distance <= 2:
        return distance
    return JUMP_COST


class ChordAnalyzer:
    """
    Scores chords against a tonal key table.

    Example:
        analyzer = ChordAnalyzer(loader.get_tonal_key("major"))
        analyzer.calculate_gravity(Chord.dominant_seventh(Note(PitchClass.G)), PitchClass.C)
    """

    def __init__(self, tonal_key: TonalKey):
        self.tonal_key = tonal_key

    def calculate_gravity(self, chord: Chord, key_root: PitchClass) -> GravityScores:
        """
        Normalized pull of the chord toward each function.

        The three scores sum to 1, or are all 0 when no note touches any
        nucleus.
        """
        nuclei = self.tonal_key.nuclei
        tonic = self._nucleus_score(chord, key_root, nuclei.tonic)
        subdominant = self._nucleus_score(chord, key_root, nuclei.subdominant)
        dominant = self._nucleus_score(chord, key_root, nuclei.dominant)

        total = tonic + subdominant + dominant
        if total == 0:
            return GravityScores()
        return GravityScores(
            tonic=tonic / total,
            subdominant=subdominant / total,
            dominant=dominant / total,
        )

    def calculate_inertia(self, source: Chord, target: Chord) -> float:
        """
        Voice-leading smoothness from source to target, in (0, 1].

        Each note of the smaller chord is greedily paired with the cheapest
        unused note of the larger one (the target's notes lead when the
        sizes match). Every note of the larger chord left unpaired adds
        UNUSED_NOTE_PENALTY. The greedy pairing is not guaranteed optimal.
        """
        source_notes = source.notes
        target_notes = target.notes
        if len(source_notes) < len(target_notes):
            smaller, larger = source_notes, target_notes
        else:
            smaller, larger = target_notes, source_notes

        total_cost = 0
        used: set[int] = set()
        for note in smaller:
            best_cost: int | None = None
            best_index = -1
            for i, candidate in enumerate(larger):
                if i in used:
                    continue
                cost = voice_leading_cost(note, candidate)
                if best_cost is None or cost < best_cost:
                    best_cost = cost
                    best_index = i
            if best_cost is not None:
                total_cost += best_cost
                used.add(best_index)

        total_cost += (len(larger) - len(smaller)) * UNUSED_NOTE_PENALTY
        return 1 / (1 + total_cost)

    def analyze(self, chord: Chord, next_chord: Chord, key_root: PitchClass) -> ProgressionAnalysis:
        """Gravity of a chord in a key plus its inertia toward the next chord."""
        naming_key = Key.major(key_root)
        return ProgressionAnalysis(
            chord_name=chord.name_for(naming_key),
            next_chord_name=next_chord.name_for(naming_key),
            key_root=key_root.sharp_name,
            gravity=self.calculate_gravity(chord, key_root),
            inertia=self.calculate_inertia(chord, next_chord),
        )

    def format_analysis(self, chord: Chord, next_chord: Chord, key_root: PitchClass) -> str:
        """Human-readable report of gravity percentages and inertia."""
        return format_analysis(self.analyze(chord, next_chord, key_root))

    def _nucleus_score(self, chord: Chord, key_root: PitchClass, nucleus: FunctionNucleus) -> int:
        primary = set(nucleus.primary)
        secondary = set(nucleus.secondary)
        score = 0
        for interval in chord.intervals_from_key(key_root):
            if interval.semitones in primary:
                score += PRIMARY_WEIGHT
            elif interval.semitones in secondary:
                score += SECONDARY_WEIGHT
        return score


def format_analysis(analysis: ProgressionAnalysis) -> str:
    gravity = analysis.gravity
    lines = [
        f"--- Analysis for Chord [{analysis.chord_name}] in Key [{analysis.key_root}] ---",
        "Tonal Gravity:",
        f"  - Tonic:       {gravity.tonic * 100:.1f}%",
        f"  - Subdominant: {gravity.subdominant * 100:.1f}%",
        f"  - Dominant:    {gravity.dominant * 100:.1f}%",
        f"Voice-Leading Inertia (to [{analysis.next_chord_name}]): {analysis.inertia:.3f}",
        "-" * 36,
    ]
    return "\n".join(lines)
