"""
Immutable game data: phases, teams, rounds and the root ``GameState``.

Every record is a frozen dataclass holding only plain values, enums and
tuples, so states compare structurally and old references stay valid after a
transition. Transitions live in ``telepath.game``.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from .deck import SpectrumCard

DEFAULT_POINTS_TO_WIN = 10
MIN_POSITION = 0
MAX_POSITION = 100


class Phase(str, Enum):
    SETUP = "setup"
    PSYCHIC_CLUE = "psychic-clue"
    HUMAN_GUESS = "human-guess"
    AI_BONUS_GUESS = "ai-bonus-guess"
    REVEAL = "reveal"
    SCORE = "score"
    NEXT_ROUND = "next-round"
    GAME_OVER = "game-over"


class Mode(str, Enum):
    COOP = "coop"
    COMPETITIVE = "competitive"


class Team(str, Enum):
    HUMAN = "human"
    AI = "ai"

    @property
    def opponent(self) -> "Team":
        return Team.AI if self is Team.HUMAN else Team.HUMAN


class Personality(str, Enum):
    """Opponent profile tag; the core only carries it for collaborators."""

    LUMEN = "lumen"
    SAGE = "sage"
    FLUX = "flux"


class ScoreZone(str, Enum):
    BULLSEYE = "bullseye"
    ADJACENT = "adjacent"
    OUTER = "outer"
    MISS = "miss"


class BonusDirection(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class ActualDirection(str, Enum):
    """Where the target lies relative to the guess."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


@dataclass(frozen=True)
class BonusGuess:
    team: Team
    direction: BonusDirection


@dataclass(frozen=True)
class ScoreBreakdown:
    zone: ScoreZone
    base_points: int
    bonus_points: int
    total_points: int
    bonus_correct: bool


PLACEHOLDER_SCORE = ScoreBreakdown(
    zone=ScoreZone.MISS,
    base_points=0,
    bonus_points=0,
    total_points=0,
    bonus_correct=False,
)


@dataclass(frozen=True)
class RoundResult:
    """
    Outcome of a round. ``reveal_round`` attaches it with a placeholder score;
    ``score_round`` / ``score_coop_round`` fill in the real numbers.

    ``bonus_card_drawn`` is only set (True/False) by co-op scoring.
    """

    actual_direction: ActualDirection
    scoring_team: Team
    scoring_points: int = 0
    bonus_team: Team | None = None
    bonus_team_points: int = 0
    score: ScoreBreakdown = PLACEHOLDER_SCORE
    bonus_card_drawn: bool | None = None


@dataclass(frozen=True)
class Round:
    round_number: int
    psychic_team: Team
    card: SpectrumCard
    target_position: int
    clue: str | None = None
    guess_position: int | None = None
    bonus_guess: BonusGuess | None = None
    result: RoundResult | None = None


@dataclass(frozen=True)
class GameScore:
    """Per-team points (competitive mode)."""

    human: int = 0
    ai: int = 0

    def for_team(self, team: Team) -> int:
        return self.human if team is Team.HUMAN else self.ai

    def add(self, team: Team, points: int) -> "GameScore":
        if team is Team.HUMAN:
            return replace(self, human=self.human + points)
        return replace(self, ai=self.ai + points)


@dataclass(frozen=True)
class GameSettings:
    personality: Personality = Personality.LUMEN
    points_to_win: int = DEFAULT_POINTS_TO_WIN


@dataclass(frozen=True)
class GameState:
    phase: Phase
    mode: Mode
    settings: GameSettings
    deck: tuple[SpectrumCard, ...] = ()
    discard_pile: tuple[SpectrumCard, ...] = ()
    round: Round | None = None
    scores: GameScore = field(default_factory=GameScore)
    coop_score: int = 0
    total_cards: int = 0
    winner: Team | None = None


__all__ = [
    "DEFAULT_POINTS_TO_WIN",
    "MIN_POSITION",
    "MAX_POSITION",
    "Phase",
    "Mode",
    "Team",
    "Personality",
    "ScoreZone",
    "BonusDirection",
    "ActualDirection",
    "BonusGuess",
    "ScoreBreakdown",
    "PLACEHOLDER_SCORE",
    "RoundResult",
    "Round",
    "GameScore",
    "GameSettings",
    "GameState",
]
