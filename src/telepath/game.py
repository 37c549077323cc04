"""
Game state machine: one pure function per phase edge.

Competitive::

    setup -> psychic-clue -> human-guess -> ai-bonus-guess -> reveal -> score
          -> next-round -> psychic-clue ... | game-over

Co-op skips the side bet (``submit_team_guess`` goes straight to reveal) and
ends when the hand of cards runs out.

Each function checks the current phase, never mutates its input and returns a
new :class:`~telepath.state.GameState`. Reveal and score are separate steps so
a UI can show the target before the points land.
"""
from __future__ import annotations

import logging
import math
import numbers
import random
from dataclasses import replace
from typing import Sequence

from .deck import RandomSource, SpectrumCard
from .errors import ExhaustedDeckError, InvalidInputError, InvalidTransitionError
from .scoring import (
    calculate_coop_round_score,
    calculate_round_score,
    resolve_actual_direction,
)
from .state import (
    MAX_POSITION,
    MIN_POSITION,
    BonusDirection,
    BonusGuess,
    GameScore,
    GameSettings,
    GameState,
    Mode,
    Personality,
    Phase,
    Round,
    RoundResult,
    ScoreZone,
    Team,
)

logger = logging.getLogger(__name__)

COOP_DECK_SIZE = 7


def _assert_phase(state: GameState, expected: Phase) -> None:
    if state.phase != expected:
        raise InvalidTransitionError(
            f'Invalid state transition. Expected "{expected.value}", received "{state.phase.value}".'
        )


def _assert_mode(state: GameState, expected: Mode, action: str) -> None:
    if state.mode != expected:
        raise InvalidTransitionError(
            f"{action} is only valid in {expected.value} mode (game is {state.mode.value})."
        )


def _active_round(state: GameState) -> Round:
    if state.round is None:
        raise InvalidInputError("No active round found.")
    return state.round


def _clamp_position(value: float) -> int:
    """Clamp to 0..100 and round half up to an integer position."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or math.isnan(value):
        raise InvalidInputError(f"Position must be a number, got {value!r}.")
    if value < MIN_POSITION:
        return MIN_POSITION
    if value > MAX_POSITION:
        return MAX_POSITION
    return int(math.floor(value + 0.5))


def _create_target_position(rng: RandomSource) -> int:
    # rng() is in [0, 1); min() guards sources that can return 1.0.
    return min(int(rng() * (MAX_POSITION + 1)), MAX_POSITION)


def _draw_card(deck: Sequence[SpectrumCard]) -> tuple[SpectrumCard, tuple[SpectrumCard, ...]]:
    if not deck:
        raise ExhaustedDeckError("Cannot start round without cards in the deck.")
    return deck[0], tuple(deck[1:])


def _create_round(
    card: SpectrumCard,
    target_position: int,
    psychic_team: Team,
    round_number: int,
) -> Round:
    return Round(
        round_number=round_number,
        psychic_team=psychic_team,
        card=card,
        target_position=_clamp_position(target_position),
    )


def create_initial_game_state(
    settings: GameSettings | None = None,
    *,
    personality: Personality | str | None = None,
    points_to_win: int | None = None,
) -> GameState:
    """A fresh game waiting in ``setup``. Keyword overrides take precedence over ``settings``."""
    if settings is None:
        settings = GameSettings()
    if personality is not None:
        settings = replace(settings, personality=Personality(personality))
    if points_to_win is not None:
        settings = replace(settings, points_to_win=points_to_win)
    if (
        isinstance(settings.points_to_win, bool)
        or not isinstance(settings.points_to_win, int)
        or settings.points_to_win <= 0
    ):
        raise InvalidInputError(f"points_to_win must be a positive integer, got {settings.points_to_win!r}.")
    return GameState(phase=Phase.SETUP, mode=Mode.COMPETITIVE, settings=settings)


def start_game(
    state: GameState,
    deck: Sequence[SpectrumCard],
    *,
    starting_psychic_team: Team | str = Team.HUMAN,
    rng: RandomSource | None = None,
) -> GameState:
    """Start a competitive game from ``deck`` (already shuffled); scores reset to zero."""
    _assert_phase(state, Phase.SETUP)
    if rng is None:
        rng = random.random

    psychic_team = Team(starting_psychic_team)
    card, remaining = _draw_card(deck)
    round_ = _create_round(card, _create_target_position(rng), psychic_team, 1)
    logger.debug("Competitive game started: %d cards, %s is psychic", len(deck), psychic_team.value)

    return replace(
        state,
        phase=Phase.PSYCHIC_CLUE,
        mode=Mode.COMPETITIVE,
        deck=remaining,
        discard_pile=(),
        round=round_,
        scores=GameScore(),
        coop_score=0,
        total_cards=len(deck),
        winner=None,
    )


def start_coop_game(
    state: GameState,
    deck: Sequence[SpectrumCard],
    *,
    rng: RandomSource | None = None,
    hand_size: int = COOP_DECK_SIZE,
) -> GameState:
    """
    Start a co-op game with the top ``hand_size`` cards of ``deck``.

    The first psychic is drawn with ``rng() < 0.5`` (human) before the target.
    """
    _assert_phase(state, Phase.SETUP)
    if rng is None:
        rng = random.random

    hand = tuple(deck[:hand_size])
    psychic_team = Team.HUMAN if rng() < 0.5 else Team.AI
    card, remaining = _draw_card(hand)
    round_ = _create_round(card, _create_target_position(rng), psychic_team, 1)
    logger.debug("Co-op game started: %d card hand, %s is psychic", len(hand), psychic_team.value)

    return replace(
        state,
        phase=Phase.PSYCHIC_CLUE,
        mode=Mode.COOP,
        deck=remaining,
        discard_pile=(),
        round=round_,
        scores=GameScore(),
        coop_score=0,
        total_cards=len(hand),
        winner=None,
    )


def submit_psychic_clue(state: GameState, clue: str) -> GameState:
    _assert_phase(state, Phase.PSYCHIC_CLUE)
    if not isinstance(clue, str) or not clue.strip():
        raise InvalidInputError("Psychic clue must not be empty.")

    round_ = _active_round(state)
    return replace(
        state,
        phase=Phase.HUMAN_GUESS,
        round=replace(round_, clue=clue.strip()),
    )


def submit_human_guess(state: GameState, guess_position: float) -> GameState:
    """Competitive guess; moves on to the other team's side bet."""
    _assert_phase(state, Phase.HUMAN_GUESS)
    _assert_mode(state, Mode.COMPETITIVE, "submit_human_guess")

    round_ = _active_round(state)
    return replace(
        state,
        phase=Phase.AI_BONUS_GUESS,
        round=replace(round_, guess_position=_clamp_position(guess_position)),
    )


def submit_team_guess(state: GameState, guess_position: float) -> GameState:
    """Co-op guess; there is no side bet so the round goes straight to reveal."""
    _assert_phase(state, Phase.HUMAN_GUESS)
    _assert_mode(state, Mode.COOP, "submit_team_guess")

    round_ = _active_round(state)
    return replace(
        state,
        phase=Phase.REVEAL,
        round=replace(round_, guess_position=_clamp_position(guess_position)),
    )


def submit_bonus_guess(state: GameState, direction: BonusDirection | str) -> GameState:
    """Record the non-psychic team's bet that the target is left or right of the guess."""
    _assert_phase(state, Phase.AI_BONUS_GUESS)
    _assert_mode(state, Mode.COMPETITIVE, "submit_bonus_guess")
    try:
        direction = BonusDirection(direction)
    except ValueError:
        raise InvalidInputError(f"Bonus direction must be 'left' or 'right', got {direction!r}.") from None

    round_ = _active_round(state)
    bonus = BonusGuess(team=round_.psychic_team.opponent, direction=direction)
    return replace(
        state,
        phase=Phase.REVEAL,
        round=replace(round_, bonus_guess=bonus),
    )


def reveal_round(state: GameState) -> GameState:
    """Attach the target's direction and a zero placeholder result; points come in ``score``."""
    _assert_phase(state, Phase.REVEAL)

    round_ = _active_round(state)
    if round_.guess_position is None:
        raise InvalidInputError("Cannot reveal round before a guess is submitted.")

    result = RoundResult(
        actual_direction=resolve_actual_direction(round_.target_position, round_.guess_position),
        scoring_team=round_.psychic_team,
    )
    return replace(
        state,
        phase=Phase.SCORE,
        round=replace(round_, result=result),
    )


def _revealed_round(state: GameState) -> Round:
    round_ = _active_round(state)
    if round_.result is None:
        raise InvalidInputError("Cannot score round before reveal.")
    return round_


def _resolve_winner(scores: GameScore, points_to_win: int, psychic_team: Team) -> Team | None:
    """
    Team that reached ``points_to_win``, if any.

    Both teams can cross the line in one round (points plus side bet); the
    higher score wins and a tie goes to the psychic's team.
    """
    reached = [team for team in (psychic_team, psychic_team.opponent) if scores.for_team(team) >= points_to_win]
    if not reached:
        return None
    return max(reached, key=scores.for_team)


def score_round(state: GameState) -> GameState:
    """
    Competitive scoring: base points to the psychic's team, the side-bet
    point to the other team, then an immediate win check.
    """
    _assert_phase(state, Phase.SCORE)
    _assert_mode(state, Mode.COMPETITIVE, "score_round")

    round_ = _revealed_round(state)
    breakdown = calculate_round_score(round_)
    bonus_team = round_.bonus_guess.team if round_.bonus_guess is not None else None

    scores = state.scores.add(round_.psychic_team, breakdown.base_points)
    if bonus_team is not None and breakdown.bonus_points:
        scores = scores.add(bonus_team, breakdown.bonus_points)

    result = replace(
        round_.result,
        scoring_team=round_.psychic_team,
        scoring_points=breakdown.base_points,
        bonus_team=bonus_team,
        bonus_team_points=breakdown.bonus_points,
        score=breakdown,
    )
    winner = _resolve_winner(scores, state.settings.points_to_win, round_.psychic_team)
    if winner is not None:
        logger.debug("Game over: %s wins %d-%d", winner.value, scores.for_team(winner), scores.for_team(winner.opponent))

    return replace(
        state,
        phase=Phase.GAME_OVER if winner is not None else Phase.NEXT_ROUND,
        round=replace(round_, result=result),
        scores=scores,
        winner=winner,
    )


def score_coop_round(state: GameState) -> GameState:
    """
    Co-op scoring: base points to the shared score.

    A bullseye brings the most recently discarded card back to the bottom of
    the deck as a bonus round, if there is one to bring back. The game ends
    once the deck is empty after scoring.
    """
    _assert_phase(state, Phase.SCORE)
    _assert_mode(state, Mode.COOP, "score_coop_round")

    round_ = _revealed_round(state)
    breakdown = calculate_coop_round_score(round_)

    deck = state.deck
    discard_pile = state.discard_pile
    total_cards = state.total_cards
    bonus_card_drawn = False
    if breakdown.zone is ScoreZone.BULLSEYE and discard_pile:
        bonus_card = discard_pile[-1]
        discard_pile = discard_pile[:-1]
        deck = deck + (bonus_card,)
        total_cards += 1
        bonus_card_drawn = True
        logger.debug("Bullseye: card %d returns as a bonus round", bonus_card.id)

    result = replace(
        round_.result,
        scoring_team=round_.psychic_team,
        scoring_points=breakdown.base_points,
        bonus_team=None,
        bonus_team_points=0,
        score=breakdown,
        bonus_card_drawn=bonus_card_drawn,
    )
    game_over = not deck
    coop_score = state.coop_score + breakdown.base_points
    if game_over:
        logger.debug("Co-op game over with %d points", coop_score)

    return replace(
        state,
        phase=Phase.GAME_OVER if game_over else Phase.NEXT_ROUND,
        deck=deck,
        discard_pile=discard_pile,
        round=replace(round_, result=result),
        coop_score=coop_score,
        total_cards=total_cards,
        # Co-op is won or lost together; the shared result is reported as the human side.
        winner=Team.HUMAN if game_over else None,
    )


def start_next_round(state: GameState, rng: RandomSource | None = None) -> GameState:
    """Discard the played card, draw the next one and hand the clue to the other team."""
    _assert_phase(state, Phase.NEXT_ROUND)
    if rng is None:
        rng = random.random

    previous = _active_round(state)
    card, remaining = _draw_card(state.deck)
    round_ = _create_round(
        card,
        _create_target_position(rng),
        previous.psychic_team.opponent,
        previous.round_number + 1,
    )
    logger.debug("Round %d: %s is psychic for %s", round_.round_number, round_.psychic_team.value, card)

    return replace(
        state,
        phase=Phase.PSYCHIC_CLUE,
        deck=remaining,
        discard_pile=state.discard_pile + (previous.card,),
        round=round_,
    )


__all__ = [
    "COOP_DECK_SIZE",
    "create_initial_game_state",
    "start_game",
    "start_coop_game",
    "submit_psychic_clue",
    "submit_human_guess",
    "submit_team_guess",
    "submit_bonus_guess",
    "reveal_round",
    "score_round",
    "score_coop_round",
    "start_next_round",
]
