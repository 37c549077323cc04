"""
Round scoring: distance -> zone -> points.

Zones (|target - guess|, thresholds inclusive, shared with ``telepath.geometry``):
bullseye <= 4, adjacent <= 10, outer <= 18, anything further is a miss.

Competitive: bullseye 4, adjacent 3, outer 2, miss 0 for the psychic's team,
plus 1 point to the other team when its left/right side bet is right.
Co-op: bullseye 3, adjacent 3, outer 2, miss 0 to the shared score. Bullseye
and adjacent are worth the same there on purpose.
"""
from __future__ import annotations

import logging

from .errors import InvalidInputError
from .geometry import ADJACENT_MAX, BULLSEYE_MAX, OUTER_MAX
from .state import (
    ActualDirection,
    Mode,
    Round,
    ScoreBreakdown,
    ScoreZone,
)

logger = logging.getLogger(__name__)

BONUS_POINT_VALUE = 1

COMPETITIVE_POINTS = {
    ScoreZone.BULLSEYE: 4,
    ScoreZone.ADJACENT: 3,
    ScoreZone.OUTER: 2,
    ScoreZone.MISS: 0,
}

COOP_POINTS = {
    ScoreZone.BULLSEYE: 3,
    ScoreZone.ADJACENT: 3,
    ScoreZone.OUTER: 2,
    ScoreZone.MISS: 0,
}

# (lowest score, label), highest tier first.
COOP_RATINGS = (
    (22, "Psychic for real"),
    (19, "Galaxy brain"),
    (16, "You're on the same wavelength"),
    (13, "You won!"),
    (10, "SO CLOSE"),
    (7, "Not bad! Not great, but not bad"),
    (4, "Try turning it off and back on again"),
    (0, "Are you sure it's plugged in?"),
)


def resolve_score_zone(distance: float) -> ScoreZone:
    distance = abs(distance)
    if distance <= BULLSEYE_MAX:
        return ScoreZone.BULLSEYE
    if distance <= ADJACENT_MAX:
        return ScoreZone.ADJACENT
    if distance <= OUTER_MAX:
        return ScoreZone.OUTER
    return ScoreZone.MISS


def get_base_points(zone: ScoreZone, mode: Mode = Mode.COMPETITIVE) -> int:
    """Points for a zone under the given mode's table."""
    table = COOP_POINTS if Mode(mode) is Mode.COOP else COMPETITIVE_POINTS
    return table[ScoreZone(zone)]


def resolve_actual_direction(target_position: float, guess_position: float) -> ActualDirection:
    """LEFT if the target is left of the guess, RIGHT if right, CENTER on an exact hit."""
    if target_position == guess_position:
        return ActualDirection.CENTER
    if target_position < guess_position:
        return ActualDirection.LEFT
    return ActualDirection.RIGHT


def _require_guess(round_: Round) -> int:
    if round_.guess_position is None:
        raise InvalidInputError("Cannot score a round before a guess is submitted.")
    return round_.guess_position


def calculate_round_score(round_: Round) -> ScoreBreakdown:
    """
    Competitive score for a guessed round.

    The bonus point goes to the side-betting team only when the target is
    strictly left or right of the guess and the bet names that side; an exact
    hit (CENTER) never pays the bonus.
    """
    guess = _require_guess(round_)
    zone = resolve_score_zone(round_.target_position - guess)
    base_points = get_base_points(zone, Mode.COMPETITIVE)

    actual = resolve_actual_direction(round_.target_position, guess)
    bonus = round_.bonus_guess
    bonus_correct = (
        bonus is not None
        and actual is not ActualDirection.CENTER
        and bonus.direction.value == actual.value
    )
    bonus_points = BONUS_POINT_VALUE if bonus_correct else 0

    logger.debug(
        "Round %d scored: target=%d guess=%d zone=%s bonus_correct=%s",
        round_.round_number,
        round_.target_position,
        guess,
        zone.value,
        bonus_correct,
    )
    return ScoreBreakdown(
        zone=zone,
        base_points=base_points,
        bonus_points=bonus_points,
        total_points=base_points + bonus_points,
        bonus_correct=bonus_correct,
    )


def calculate_coop_round_score(round_: Round) -> ScoreBreakdown:
    """Co-op score for a guessed round; there is no side bet in co-op."""
    guess = _require_guess(round_)
    zone = resolve_score_zone(round_.target_position - guess)
    base_points = get_base_points(zone, Mode.COOP)
    return ScoreBreakdown(
        zone=zone,
        base_points=base_points,
        bonus_points=0,
        total_points=base_points,
        bonus_correct=False,
    )


def get_coop_rating(score: int) -> str:
    """End-of-game label for a co-op score."""
    for minimum, label in COOP_RATINGS:
        if score >= minimum:
            return label
    return COOP_RATINGS[-1][1]


__all__ = [
    "BONUS_POINT_VALUE",
    "COMPETITIVE_POINTS",
    "COOP_POINTS",
    "COOP_RATINGS",
    "resolve_score_zone",
    "get_base_points",
    "resolve_actual_direction",
    "calculate_round_score",
    "calculate_coop_round_score",
    "get_coop_rating",
]
