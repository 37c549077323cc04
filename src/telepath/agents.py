"""
Baseline stand-ins for the clue giver and the guesser.

Real opponents (a language model, a person) live outside the core and feed
clues and guesses through the same transition functions. These seeded random
agents do the same, which is enough to drive simulations and tests.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Protocol

from .deck import SpectrumCard
from .state import BonusDirection, MAX_POSITION, MIN_POSITION

CLUE_WORDS = (
    "Lukewarm",
    "Extreme",
    "Barely",
    "Sort of",
    "Totally",
    "Middle ground",
    "Pineapple pizza",
    "Tuesday",
    "Grandma",
    "Volcano",
)


class Psychic(Protocol):
    def give_clue(self, card: SpectrumCard, target_position: int) -> str:
        """Return a one-to-three-word clue for ``target_position`` on ``card``."""


class Guesser(Protocol):
    def guess(self, card: SpectrumCard, clue: str) -> float:
        """Return a dial position for ``clue``; the game clamps it to 0..100."""

    def bonus_direction(self, card: SpectrumCard, clue: str, guess_position: int) -> BonusDirection:
        """Bet whether the target is left or right of the other team's guess."""


@dataclass
class RandomPsychic:
    """Picks a clue uniformly from a fixed vocabulary, ignoring the target."""

    seed: int | None = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def give_clue(self, card: SpectrumCard, target_position: int) -> str:
        return self._rng.choice(CLUE_WORDS)


@dataclass
class RandomGuesser:
    """Guesses uniformly over the dial and bets a coin-flip direction."""

    seed: int | None = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def guess(self, card: SpectrumCard, clue: str) -> float:
        return self._rng.randint(MIN_POSITION, MAX_POSITION)

    def bonus_direction(self, card: SpectrumCard, clue: str, guess_position: int) -> BonusDirection:
        return self._rng.choice((BonusDirection.LEFT, BonusDirection.RIGHT))


__all__ = ["CLUE_WORDS", "Psychic", "Guesser", "RandomPsychic", "RandomGuesser"]
