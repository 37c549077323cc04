"""Tests for the simulation harness."""
from telepath.play_random import main, run_random_game, summarize
from telepath.state import Mode, Phase


def test_coop_game_runs_to_the_end():
    record = run_random_game(Mode.COOP, seed=3)
    assert record.final_state.phase is Phase.GAME_OVER
    assert record.rounds_played >= 7
    assert record.rounds_played == len(record.zones)
    assert record.final_state.total_cards == record.rounds_played


def test_competitive_game_finishes_or_runs_out_of_cards():
    record = run_random_game(Mode.COMPETITIVE, seed=11, points_to_win=5)
    state = record.final_state
    assert state.phase is Phase.GAME_OVER or not state.deck
    if state.phase is Phase.GAME_OVER:
        assert max(state.scores.human, state.scores.ai) >= 5


def test_same_seed_same_game():
    assert run_random_game(Mode.COMPETITIVE, seed=9).final_state == run_random_game(
        Mode.COMPETITIVE, seed=9
    ).final_state


def test_summarize():
    records = [run_random_game(Mode.COOP, seed=s) for s in range(5)]
    summary = summarize(records)
    assert summary["mode"] == "coop"
    assert summary["games"] == 5
    assert summary["score_min"] <= summary["score_mean"] <= summary["score_max"]
    assert abs(sum(summary["zone_share"].values()) - 1.0) < 1e-9
    assert isinstance(summary["median_rating"], str)

    records = [run_random_game(Mode.COMPETITIVE, seed=s) for s in range(5)]
    summary = summarize(records)
    assert summary["human_wins"] + summary["ai_wins"] + summary["unfinished"] == 5


def test_cli_smoke(capsys):
    main(["--mode", "all", "--games", "3", "--seed", "1"])
    out = capsys.readouterr().out
    assert "coop:" in out
    assert "competitive:" in out
