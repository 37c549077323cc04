"""
GameState <-> plain dict / JSON.

The dict uses the data-model field names (``discardPile``, ``targetPosition``,
...) and only JSON types, so a snapshot collaborator can store it anywhere.
Decoding rebuilds the frozen records, so
``state_from_dict(state_to_dict(s)) == s``.
"""
from __future__ import annotations

import json
from typing import Any, Dict

from .deck import SpectrumCard
from .errors import SnapshotError
from .state import (
    ActualDirection,
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
    ScoreBreakdown,
    ScoreZone,
    Team,
)

SCHEMA_VERSION = 1


def _int(value: Any, field: str) -> int:
    # bool is an int subclass; floats would truncate silently.
    if isinstance(value, bool) or not isinstance(value, int):
        raise SnapshotError(f"{field} must be an integer, got {value!r}.")
    return value


def _str(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise SnapshotError(f"{field} must be a string, got {value!r}.")
    return value


def _bool(value: Any, field: str) -> bool:
    if not isinstance(value, bool):
        raise SnapshotError(f"{field} must be a boolean, got {value!r}.")
    return value


def _card_to_dict(card: SpectrumCard) -> Dict[str, Any]:
    return {"id": card.id, "left": card.left, "right": card.right}


def _card_from_dict(d: Dict[str, Any]) -> SpectrumCard:
    return SpectrumCard(
        id=_int(d["id"], "card.id"),
        left=_str(d["left"], "card.left"),
        right=_str(d["right"], "card.right"),
    )


def _score_to_dict(score: ScoreBreakdown) -> Dict[str, Any]:
    return {
        "zone": score.zone.value,
        "basePoints": score.base_points,
        "bonusPoints": score.bonus_points,
        "totalPoints": score.total_points,
        "bonusCorrect": score.bonus_correct,
    }


def _score_from_dict(d: Dict[str, Any]) -> ScoreBreakdown:
    return ScoreBreakdown(
        zone=ScoreZone(d["zone"]),
        base_points=_int(d["basePoints"], "basePoints"),
        bonus_points=_int(d["bonusPoints"], "bonusPoints"),
        total_points=_int(d["totalPoints"], "totalPoints"),
        bonus_correct=_bool(d["bonusCorrect"], "bonusCorrect"),
    )


def _result_to_dict(result: RoundResult) -> Dict[str, Any]:
    d: Dict[str, Any] = {
        "actualDirection": result.actual_direction.value,
        "scoringTeam": result.scoring_team.value,
        "scoringPoints": result.scoring_points,
        "bonusTeam": result.bonus_team.value if result.bonus_team is not None else None,
        "bonusTeamPoints": result.bonus_team_points,
        "score": _score_to_dict(result.score),
    }
    if result.bonus_card_drawn is not None:
        d["bonusCardDrawn"] = result.bonus_card_drawn
    return d


def _result_from_dict(d: Dict[str, Any]) -> RoundResult:
    bonus_team = d.get("bonusTeam")
    bonus_card_drawn = d.get("bonusCardDrawn")
    return RoundResult(
        actual_direction=ActualDirection(d["actualDirection"]),
        scoring_team=Team(d["scoringTeam"]),
        scoring_points=_int(d["scoringPoints"], "scoringPoints"),
        bonus_team=Team(bonus_team) if bonus_team is not None else None,
        bonus_team_points=_int(d["bonusTeamPoints"], "bonusTeamPoints"),
        score=_score_from_dict(d["score"]),
        bonus_card_drawn=(
            _bool(bonus_card_drawn, "bonusCardDrawn") if bonus_card_drawn is not None else None
        ),
    )


def _round_to_dict(round_: Round) -> Dict[str, Any]:
    bonus = round_.bonus_guess
    return {
        "roundNumber": round_.round_number,
        "psychicTeam": round_.psychic_team.value,
        "card": _card_to_dict(round_.card),
        "targetPosition": round_.target_position,
        "clue": round_.clue,
        "guessPosition": round_.guess_position,
        "bonusGuess": (
            {"team": bonus.team.value, "direction": bonus.direction.value} if bonus is not None else None
        ),
        "result": _result_to_dict(round_.result) if round_.result is not None else None,
    }


def _round_from_dict(d: Dict[str, Any]) -> Round:
    bonus = d.get("bonusGuess")
    result = d.get("result")
    guess = d.get("guessPosition")
    clue = d.get("clue")
    return Round(
        round_number=_int(d["roundNumber"], "roundNumber"),
        psychic_team=Team(d["psychicTeam"]),
        card=_card_from_dict(d["card"]),
        target_position=_int(d["targetPosition"], "targetPosition"),
        clue=_str(clue, "clue") if clue is not None else None,
        guess_position=_int(guess, "guessPosition") if guess is not None else None,
        bonus_guess=(
            BonusGuess(team=Team(bonus["team"]), direction=BonusDirection(bonus["direction"]))
            if bonus is not None
            else None
        ),
        result=_result_from_dict(result) if result is not None else None,
    )


def state_to_dict(state: GameState) -> Dict[str, Any]:
    """Serialize a GameState to a JSON-compatible dict tagged with ``schemaVersion``."""
    return {
        "schemaVersion": SCHEMA_VERSION,
        "phase": state.phase.value,
        "mode": state.mode.value,
        "settings": {
            "personality": state.settings.personality.value,
            "pointsToWin": state.settings.points_to_win,
        },
        "deck": [_card_to_dict(c) for c in state.deck],
        "discardPile": [_card_to_dict(c) for c in state.discard_pile],
        "round": _round_to_dict(state.round) if state.round is not None else None,
        "scores": {"human": state.scores.human, "ai": state.scores.ai},
        "coopScore": state.coop_score,
        "totalCards": state.total_cards,
        "winner": state.winner.value if state.winner is not None else None,
    }


def state_from_dict(d: Dict[str, Any]) -> GameState:
    """
    Rebuild a GameState from :func:`state_to_dict` output.

    Raises:
        SnapshotError: wrong schema version, missing or mistyped fields, unknown enum values.
    """
    if not isinstance(d, dict):
        raise SnapshotError("Game state snapshot must be an object.")
    version = d.get("schemaVersion", SCHEMA_VERSION)
    if version != SCHEMA_VERSION:
        raise SnapshotError(f"Unsupported game state schema version: {version!r}.")
    try:
        settings = d["settings"]
        scores = d["scores"]
        round_ = d.get("round")
        winner = d.get("winner")
        return GameState(
            phase=Phase(d["phase"]),
            mode=Mode(d["mode"]),
            settings=GameSettings(
                personality=Personality(settings["personality"]),
                points_to_win=_int(settings["pointsToWin"], "pointsToWin"),
            ),
            deck=tuple(_card_from_dict(c) for c in d["deck"]),
            discard_pile=tuple(_card_from_dict(c) for c in d["discardPile"]),
            round=_round_from_dict(round_) if round_ is not None else None,
            scores=GameScore(
                human=_int(scores["human"], "scores.human"),
                ai=_int(scores["ai"], "scores.ai"),
            ),
            coop_score=_int(d["coopScore"], "coopScore"),
            total_cards=_int(d["totalCards"], "totalCards"),
            winner=Team(winner) if winner is not None else None,
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise SnapshotError(f"Invalid game state snapshot: {exc}") from exc


def state_to_json(state: GameState) -> str:
    return json.dumps(state_to_dict(state), indent=2)


def state_from_json(s: str) -> GameState:
    try:
        payload = json.loads(s)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Invalid game state JSON: {exc}") from exc
    return state_from_dict(payload)


__all__ = [
    "SCHEMA_VERSION",
    "state_to_dict",
    "state_from_dict",
    "state_to_json",
    "state_from_json",
]
