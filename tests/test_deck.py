"""Tests for deck validation and shuffling."""
import json
import random

import pytest

from telepath.deck import (
    SpectrumCard,
    build_shuffled_deck,
    default_deck,
    is_spectrum_deck,
    load_spectrum_deck,
    shuffle_spectrum_cards,
    validate_spectrum_deck,
)
from telepath.errors import DeckValidationError


def _raw_deck(**overrides):
    d = {
        "version": "1",
        "pack": "core",
        "description": "Test pack",
        "cards": [
            {"id": 1, "left": "Cold", "right": "Hot"},
            {"id": 2, "left": "Simple", "right": "Complex"},
        ],
    }
    d.update(overrides)
    return d


def test_valid_deck():
    deck = validate_spectrum_deck(_raw_deck())
    assert deck.pack == "core"
    assert deck.cards == (
        SpectrumCard(1, "Cold", "Hot"),
        SpectrumCard(2, "Simple", "Complex"),
    )
    assert is_spectrum_deck(_raw_deck())


@pytest.mark.parametrize(
    "card",
    [
        {"id": 1.5, "left": "a", "right": "b"},
        {"id": "1", "left": "a", "right": "b"},
        {"id": True, "left": "a", "right": "b"},
        {"id": 1, "left": "   ", "right": "b"},
        {"id": 1, "right": "b"},
        {"id": 1, "left": "a", "right": 3},
        "not a card",
    ],
)
def test_bad_cards_rejected(card):
    raw = _raw_deck(cards=[{"id": 9, "left": "x", "right": "y"}, card])
    with pytest.raises(DeckValidationError, match="index 1"):
        validate_spectrum_deck(raw)
    assert not is_spectrum_deck(raw)


@pytest.mark.parametrize(
    "raw",
    [
        _raw_deck(version=""),
        _raw_deck(pack=None),
        _raw_deck(description=" "),
        _raw_deck(cards={"id": 1}),
        ["not", "a", "deck"],
    ],
)
def test_bad_envelope_rejected(raw):
    with pytest.raises(DeckValidationError):
        validate_spectrum_deck(raw)


def test_load_from_file(tmp_path):
    path = tmp_path / "deck.json"
    path.write_text(json.dumps(_raw_deck()), encoding="utf-8")
    assert len(load_spectrum_deck(path).cards) == 2

    path.write_text("{broken", encoding="utf-8")
    with pytest.raises(DeckValidationError):
        load_spectrum_deck(path)


def test_load_rejects_non_utf8_file(tmp_path):
    path = tmp_path / "deck.json"
    path.write_bytes(b'{"version": "1", "pack": "\xff"}')
    with pytest.raises(DeckValidationError):
        load_spectrum_deck(path)


def test_shuffle_is_pure_and_deterministic():
    cards = list(default_deck().cards)
    original = list(cards)
    a = shuffle_spectrum_cards(cards, random.Random(7).random)
    b = shuffle_spectrum_cards(cards, random.Random(7).random)
    assert a == b
    assert cards == original
    assert sorted(c.id for c in a) == [c.id for c in original]


def test_fisher_yates_with_fixed_source():
    cards = [SpectrumCard(i, f"L{i}", f"R{i}") for i in range(1, 5)]
    # rng() == 0 always swaps position i with 0: [1,2,3,4] -> [2,3,4,1]
    assert [c.id for c in shuffle_spectrum_cards(cards, lambda: 0.0)] == [2, 3, 4, 1]
    # rng() close to 1 always picks j == i: order unchanged
    assert [c.id for c in shuffle_spectrum_cards(cards, lambda: 0.999)] == [1, 2, 3, 4]


def test_build_shuffled_deck():
    deck = default_deck()
    shuffled = build_shuffled_deck(deck, random.Random(1).random)
    assert len(shuffled) == len(deck.cards)
    assert set(shuffled) == set(deck.cards)
