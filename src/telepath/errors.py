"""
Exceptions raised by the game core.

Every failure is a caller bug or bad external data; nothing here is retried
or recovered from inside the core.
"""
from __future__ import annotations


class TelepathError(Exception):
    """Base class for all game-core errors."""


class InvalidTransitionError(TelepathError):
    """A transition was called in the wrong phase (or for the wrong mode)."""


class InvalidInputError(TelepathError, ValueError):
    """Input is missing or unusable: empty clue, no guess yet, bad direction..."""


class ExhaustedDeckError(InvalidInputError):
    """A card had to be drawn but the deck is empty."""


class DeckValidationError(TelepathError, ValueError):
    """External deck data does not have the expected shape."""


class SnapshotError(TelepathError, ValueError):
    """A serialized game state could not be decoded."""


__all__ = [
    "TelepathError",
    "InvalidTransitionError",
    "InvalidInputError",
    "ExhaustedDeckError",
    "DeckValidationError",
    "SnapshotError",
]
