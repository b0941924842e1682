"""
Typed failures raised by the harmony engine.

All derive from ValueError: every failure here is bad input, deterministic
and reproducible, never transient.
"""

from __future__ import annotations

from chuk_mcp_harmony.constants import ErrorMessages


class HarmonyError(ValueError):
    """Base class for all harmony engine errors."""


class InvalidDegree(HarmonyError):
    """A scale degree (or mode index) outside its legal range."""

    def __init__(self, degree: int, message: str | None = None):
        self.degree = degree
        super().__init__(message or ErrorMessages.INVALID_DEGREE.format(degree=degree))


class InvalidPosition(HarmonyError):
    """A circle position outside 0-11."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(ErrorMessages.INVALID_POSITION.format(position=position))


class InvalidRadii(HarmonyError):
    """Negative or collapsed radii passed to a geometry helper."""


class InvalidRadiiOrder(HarmonyError):
    """Ring radii that are not strictly ascending."""


class UnrecognizedChordQuality(HarmonyError):
    """An interval set that matches no chord pattern in the catalog."""

    def __init__(self, interval_names: list[str]):
        self.interval_names = interval_names
        super().__init__(
            ErrorMessages.UNRECOGNIZED_CHORD.format(intervals=", ".join(interval_names))
        )


class EmptyChordInput(HarmonyError):
    """Chord.from_notes called with no usable notes."""

    def __init__(self) -> None:
        super().__init__(ErrorMessages.EMPTY_CHORD_INPUT)


class InvalidContext(HarmonyError):
    """A key or modal context built from an unsupported pattern."""


class TonalKeyNotFound(HarmonyError):
    """No tonal-function table with the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(ErrorMessages.TONAL_KEY_NOT_FOUND.format(name=name))
