"""Tests for game state serialization."""
import json

import pytest

from telepath.deck import SpectrumCard
from telepath.errors import SnapshotError
from telepath.game import (
    create_initial_game_state,
    reveal_round,
    score_coop_round,
    score_round,
    start_coop_game,
    start_game,
    start_next_round,
    submit_bonus_guess,
    submit_human_guess,
    submit_psychic_clue,
    submit_team_guess,
)
from telepath.persistence import (
    SCHEMA_VERSION,
    state_from_dict,
    state_from_json,
    state_to_dict,
    state_to_json,
)
from telepath.state import Phase

CARDS = [SpectrumCard(id=i, left=f"L{i}", right=f"R{i}") for i in range(1, 6)]


def _competitive_states():
    state = create_initial_game_state(personality="flux", points_to_win=6)
    states = [state]
    state = start_game(state, CARDS, rng=lambda: 0.7)
    states.append(state)
    for step in (
        lambda s: submit_psychic_clue(s, "Warm"),
        lambda s: submit_human_guess(s, 64),
        lambda s: submit_bonus_guess(s, "right"),
        reveal_round,
        score_round,
        lambda s: start_next_round(s, lambda: 0.2),
    ):
        state = step(state)
        states.append(state)
    return states


def _coop_states():
    state = start_coop_game(create_initial_game_state(), CARDS, rng=lambda: 0.5)
    states = [state]
    for step in (
        lambda s: submit_psychic_clue(s, "Middle"),
        lambda s: submit_team_guess(s, 0),
        reveal_round,
        score_coop_round,
        lambda s: start_next_round(s, lambda: 0.5),
        lambda s: submit_psychic_clue(s, "Middle again"),
        lambda s: submit_team_guess(s, 50),
        reveal_round,
        score_coop_round,
    ):
        state = step(state)
        states.append(state)
    return states


def test_round_trip_every_competitive_phase():
    for state in _competitive_states():
        assert state_from_dict(state_to_dict(state)) == state


def test_round_trip_every_coop_phase():
    states = _coop_states()
    assert states[-1].round.result.bonus_card_drawn is True
    for state in states:
        assert state_from_dict(state_to_dict(state)) == state


def test_round_trip_json():
    state = _competitive_states()[-2]
    restored = state_from_json(state_to_json(state))
    assert restored == state
    assert restored.phase is Phase.NEXT_ROUND


def test_dict_uses_plain_json_values():
    d = state_to_dict(_competitive_states()[-2])
    assert d["schemaVersion"] == SCHEMA_VERSION
    assert d["phase"] == "next-round"
    assert d["round"]["targetPosition"] == 70
    assert d["round"]["bonusGuess"] == {"team": "ai", "direction": "right"}
    assert d["round"]["result"]["score"]["zone"] == "adjacent"
    assert "bonusCardDrawn" not in d["round"]["result"]
    assert json.loads(json.dumps(d)) == d


def test_unsupported_version():
    d = state_to_dict(create_initial_game_state())
    d["schemaVersion"] = 99
    with pytest.raises(SnapshotError):
        state_from_dict(d)


@pytest.mark.parametrize("field, value", [("phase", "dancing"), ("mode", "solo"), ("scores", None)])
def test_malformed_snapshot(field, value):
    d = state_to_dict(create_initial_game_state())
    d[field] = value
    with pytest.raises(SnapshotError):
        state_from_dict(d)


def test_missing_field_and_bad_json():
    d = state_to_dict(create_initial_game_state())
    del d["deck"]
    with pytest.raises(SnapshotError):
        state_from_dict(d)
    with pytest.raises(SnapshotError):
        state_from_json("{not json")


@pytest.mark.parametrize(
    "mutate",
    [
        lambda d: d["round"]["card"].update(left=None),
        lambda d: d["round"]["card"].update(id="1"),
        lambda d: d["round"].update(guessPosition=42.7),
        lambda d: d["round"].update(targetPosition=True),
        lambda d: d["round"].update(clue=7),
        lambda d: d["round"]["result"]["score"].update(bonusCorrect=1),
        lambda d: d["scores"].update(human=2.0),
        lambda d: d.update(totalCards="5"),
    ],
)
def test_mistyped_fields_are_rejected_not_coerced(mutate):
    d = state_to_dict(_competitive_states()[-2])
    mutate(d)
    with pytest.raises(SnapshotError):
        state_from_dict(d)
