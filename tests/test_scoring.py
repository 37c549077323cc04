"""Tests for zone resolution and round scoring."""
import pytest

from telepath.deck import SpectrumCard
from telepath.errors import InvalidInputError
from telepath.scoring import (
    BONUS_POINT_VALUE,
    calculate_coop_round_score,
    calculate_round_score,
    get_base_points,
    get_coop_rating,
    resolve_actual_direction,
    resolve_score_zone,
)
from telepath.state import (
    ActualDirection,
    BonusDirection,
    BonusGuess,
    Mode,
    Round,
    ScoreZone,
    Team,
)

CARD = SpectrumCard(id=1, left="Cold", right="Hot")


def _round(target: int, guess: int | None, bonus: str | None = "left") -> Round:
    return Round(
        round_number=1,
        psychic_team=Team.HUMAN,
        card=CARD,
        target_position=target,
        clue="Test clue",
        guess_position=guess,
        bonus_guess=BonusGuess(team=Team.AI, direction=BonusDirection(bonus)) if bonus else None,
    )


def test_zone_thresholds_are_inclusive():
    assert resolve_score_zone(0) is ScoreZone.BULLSEYE
    assert resolve_score_zone(4) is ScoreZone.BULLSEYE
    assert resolve_score_zone(5) is ScoreZone.ADJACENT
    assert resolve_score_zone(10) is ScoreZone.ADJACENT
    assert resolve_score_zone(11) is ScoreZone.OUTER
    assert resolve_score_zone(18) is ScoreZone.OUTER
    assert resolve_score_zone(19) is ScoreZone.MISS
    assert resolve_score_zone(100) is ScoreZone.MISS


def test_points_never_increase_with_distance_and_ignore_sign():
    for mode in (Mode.COMPETITIVE, Mode.COOP):
        previous = None
        for distance in range(0, 101):
            points = get_base_points(resolve_score_zone(distance), mode)
            assert points == get_base_points(resolve_score_zone(-distance), mode)
            if previous is not None:
                assert points <= previous
            previous = points


def test_point_tables_differ_by_mode():
    assert [get_base_points(z) for z in ScoreZone] == [4, 3, 2, 0]
    assert [get_base_points(z, Mode.COOP) for z in ScoreZone] == [3, 3, 2, 0]


def test_actual_direction():
    assert resolve_actual_direction(50, 50) is ActualDirection.CENTER
    assert resolve_actual_direction(30, 50) is ActualDirection.LEFT
    assert resolve_actual_direction(80, 60) is ActualDirection.RIGHT


def test_bullseye_on_exact_hit_pays_no_bonus():
    score = calculate_round_score(_round(50, 50, "left"))
    assert score.zone is ScoreZone.BULLSEYE
    assert score.base_points == 4
    assert score.bonus_correct is False
    assert score.bonus_points == 0
    assert score.total_points == 4


def test_adjacent_outer_miss():
    assert calculate_round_score(_round(50, 58)).base_points == 3
    assert calculate_round_score(_round(50, 66)).zone is ScoreZone.OUTER
    assert calculate_round_score(_round(50, 66)).base_points == 2
    assert calculate_round_score(_round(20, 75)).zone is ScoreZone.MISS
    assert calculate_round_score(_round(20, 75)).base_points == 0


def test_correct_bonus_direction_awards_one_point():
    score = calculate_round_score(_round(80, 60, "right"))
    assert score.bonus_correct is True
    assert score.bonus_points == BONUS_POINT_VALUE == 1
    assert score.total_points == score.base_points + 1


def test_wrong_or_missing_bonus_direction():
    assert calculate_round_score(_round(80, 60, "left")).bonus_correct is False
    assert calculate_round_score(_round(80, 60, None)).bonus_points == 0


def test_scoring_without_guess_fails():
    with pytest.raises(InvalidInputError):
        calculate_round_score(_round(50, None))
    with pytest.raises(InvalidInputError):
        calculate_coop_round_score(_round(50, None, None))


def test_coop_score_uses_coop_table_and_no_bonus():
    score = calculate_coop_round_score(_round(80, 78, "right"))
    assert score.zone is ScoreZone.BULLSEYE
    assert score.base_points == 3
    assert score.bonus_points == 0
    assert score.bonus_correct is False
    assert calculate_coop_round_score(_round(50, 57, None)).base_points == 3


def test_coop_ratings():
    assert get_coop_rating(0) == "Are you sure it's plugged in?"
    assert get_coop_rating(3) == "Are you sure it's plugged in?"
    assert get_coop_rating(4) == "Try turning it off and back on again"
    assert get_coop_rating(7) == "Not bad! Not great, but not bad"
    assert get_coop_rating(10) == "SO CLOSE"
    assert get_coop_rating(13) == "You won!"
    assert get_coop_rating(16) == "You're on the same wavelength"
    assert get_coop_rating(19) == "Galaxy brain"
    assert get_coop_rating(22) == "Psychic for real"
    assert get_coop_rating(30) == "Psychic for real"
