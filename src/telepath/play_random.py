"""
Tiny CLI to play seeded games with the baseline agents.

Usage (from project root, after installing in editable mode):
    python -m telepath.play_random --mode all --games 200
"""
from __future__ import annotations

import argparse
import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List

import numpy as np

from .agents import RandomGuesser, RandomPsychic
from .deck import build_shuffled_deck, default_deck, load_spectrum_deck, SpectrumDeck
from .game import (
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
from .scoring import get_coop_rating
from .state import GameState, Mode, Phase, ScoreZone, Team

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    """What one simulated game produced."""

    mode: Mode
    final_state: GameState
    rounds_played: int
    zones: List[ScoreZone] = field(default_factory=list)


def run_random_game(
    mode: Mode,
    seed: int,
    deck: SpectrumDeck | None = None,
    points_to_win: int = 10,
) -> GameRecord:
    """
    Play one game to ``game-over`` (or until a competitive deck runs dry).

    Both seats are filled by random agents; every step goes through the
    public transition functions.
    """
    rng = random.Random(seed)
    if deck is None:
        deck = default_deck()
    cards = build_shuffled_deck(deck, rng.random)
    psychic = RandomPsychic(seed=seed)
    guesser = RandomGuesser(seed=seed + 1)

    state = create_initial_game_state(points_to_win=points_to_win)
    if mode is Mode.COOP:
        state = start_coop_game(state, cards, rng=rng.random)
    else:
        state = start_game(state, cards, starting_psychic_team=Team.HUMAN, rng=rng.random)

    zones: List[ScoreZone] = []
    while True:
        round_ = state.round
        state = submit_psychic_clue(state, psychic.give_clue(round_.card, round_.target_position))
        clue = state.round.clue
        if mode is Mode.COOP:
            state = submit_team_guess(state, guesser.guess(round_.card, clue))
        else:
            state = submit_human_guess(state, guesser.guess(round_.card, clue))
            state = submit_bonus_guess(
                state, guesser.bonus_direction(round_.card, clue, state.round.guess_position)
            )
        state = reveal_round(state)
        state = score_coop_round(state) if mode is Mode.COOP else score_round(state)
        zones.append(state.round.result.score.zone)

        if state.phase is Phase.GAME_OVER:
            break
        if not state.deck:
            logger.info("Seed %d: competitive deck exhausted before anyone won", seed)
            break
        state = start_next_round(state, rng.random)

    return GameRecord(mode=mode, final_state=state, rounds_played=len(zones), zones=zones)


def summarize(records: List[GameRecord]) -> Dict[str, object]:
    """Aggregate final scores, round counts and zone frequencies over many games."""
    if not records:
        raise ValueError("No games to summarize")
    mode = records[0].mode
    if mode is Mode.COOP:
        finals = np.array([r.final_state.coop_score for r in records], dtype=float)
    else:
        finals = np.array(
            [max(r.final_state.scores.human, r.final_state.scores.ai) for r in records],
            dtype=float,
        )
    rounds = np.array([r.rounds_played for r in records], dtype=float)
    all_zones = [z.value for r in records for z in r.zones]
    zone_names = [z.value for z in ScoreZone]
    counts = np.array([all_zones.count(name) for name in zone_names], dtype=float)
    share = counts / counts.sum() if counts.sum() else counts

    summary: Dict[str, object] = {
        "mode": mode.value,
        "games": len(records),
        "score_mean": float(finals.mean()),
        "score_std": float(finals.std()),
        "score_min": float(finals.min()),
        "score_max": float(finals.max()),
        "rounds_mean": float(rounds.mean()),
        "zone_share": {name: float(s) for name, s in zip(zone_names, share)},
    }
    if mode is Mode.COMPETITIVE:
        wins = [r.final_state.winner for r in records if r.final_state.winner is not None]
        summary["human_wins"] = sum(1 for w in wins if w is Team.HUMAN)
        summary["ai_wins"] = sum(1 for w in wins if w is Team.AI)
        summary["unfinished"] = len(records) - len(wins)
    else:
        summary["median_rating"] = get_coop_rating(int(np.median(finals)))
    return summary


def _print_summary(summary: Dict[str, object]) -> None:
    print(
        f"{summary['mode']}: games={summary['games']} "
        f"score={summary['score_mean']:.2f}±{summary['score_std']:.2f} "
        f"(min={summary['score_min']:.0f}, max={summary['score_max']:.0f}) "
        f"rounds={summary['rounds_mean']:.2f}"
    )
    zones = ", ".join(f"{name}={share:.1%}" for name, share in summary["zone_share"].items())
    print(f"  zones: {zones}")
    if "median_rating" in summary:
        print(f"  median rating: {summary['median_rating']}")
    else:
        print(
            f"  wins: human={summary['human_wins']} ai={summary['ai_wins']} "
            f"unfinished={summary['unfinished']}"
        )


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Play random Telepath games and print score statistics.")
    parser.add_argument(
        "--mode",
        choices=["coop", "competitive", "all"],
        default="all",
        help="Which game mode to simulate.",
    )
    parser.add_argument(
        "--games",
        type=int,
        default=100,
        help="Number of games per mode.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Base random seed; game i uses seed + i.",
    )
    parser.add_argument(
        "--points-to-win",
        type=int,
        default=10,
        help="Competitive target score.",
    )
    parser.add_argument(
        "--deck",
        type=str,
        default=None,
        help="Path to a spectrum deck JSON file (defaults to the built-in deck).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every transition.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    deck = load_spectrum_deck(args.deck) if args.deck else default_deck()
    modes = [Mode.COOP, Mode.COMPETITIVE] if args.mode == "all" else [Mode(args.mode)]
    for mode in modes:
        records = [
            run_random_game(mode, seed=args.seed + i, deck=deck, points_to_win=args.points_to_win)
            for i in range(args.games)
        ]
        _print_summary(summarize(records))


if __name__ == "__main__":
    main()
