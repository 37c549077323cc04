"""
Spectrum cards and decks.

A card names the two ends of one round's spectrum (e.g. Cold <-> Hot). Decks
arrive from outside as JSON-shaped data::

    {"version": "1", "pack": "core", "description": "...",
     "cards": [{"id": 1, "left": "Cold", "right": "Hot"}, ...]}

and are validated here before being shuffled into play order.
"""
from __future__ import annotations

import json
import logging
import math
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Sequence

from .errors import DeckValidationError

logger = logging.getLogger(__name__)

RandomSource = Callable[[], float]


@dataclass(frozen=True)
class SpectrumCard:
    """One spectrum: ``left`` is the 0 end, ``right`` the 100 end."""

    id: int
    left: str
    right: str

    def __str__(self) -> str:
        return f"{self.left} <-> {self.right}"


@dataclass(frozen=True)
class SpectrumDeck:
    version: str
    pack: str
    description: str
    cards: tuple[SpectrumCard, ...]


_DEFAULT_SPECTRA = (
    ("Cold", "Hot"),
    ("Simple", "Complex"),
    ("Useless", "Useful"),
    ("Underrated", "Overrated"),
    ("Bad movie", "Good movie"),
    ("Quiet", "Loud"),
    ("Cheap", "Expensive"),
    ("Ugly", "Beautiful"),
    ("Rare", "Common"),
    ("Boring", "Exciting"),
    ("Soft", "Hard"),
    ("Casual", "Formal"),
    ("Villain", "Hero"),
    ("Forgettable", "Memorable"),
    ("Dry", "Wet"),
    ("Fantasy", "Sci-fi"),
    ("Normal pet", "Exotic pet"),
    ("Smells bad", "Smells good"),
    ("Easy to spell", "Hard to spell"),
    ("Round", "Pointy"),
)


def default_deck() -> SpectrumDeck:
    """Small built-in deck used by the simulation harness."""
    cards = tuple(
        SpectrumCard(id=i, left=left, right=right)
        for i, (left, right) in enumerate(_DEFAULT_SPECTRA, start=1)
    )
    return SpectrumDeck(
        version="1",
        pack="core",
        description="Built-in starter spectra",
        cards=cards,
    )


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _card_problem(value: Any) -> str | None:
    """Return a description of what is wrong with a card record, or None."""
    if not isinstance(value, dict):
        return "not an object"
    card_id = value.get("id")
    # bool is an int subclass; JSON true is not a card id.
    if isinstance(card_id, bool) or not isinstance(card_id, (int, float)):
        return "id must be an integer"
    if isinstance(card_id, float) and (not math.isfinite(card_id) or not card_id.is_integer()):
        return "id must be an integer"
    if _is_blank(value.get("left")):
        return "left must be a non-empty string"
    if _is_blank(value.get("right")):
        return "right must be a non-empty string"
    return None


def validate_spectrum_deck(value: Any) -> SpectrumDeck:
    """
    Check the shape of raw deck data and build a :class:`SpectrumDeck`.

    Raises:
        DeckValidationError: on a malformed envelope or any bad card record.
    """
    if not isinstance(value, dict):
        raise DeckValidationError("Invalid spectrum deck format: expected an object.")
    for key in ("version", "pack", "description"):
        if _is_blank(value.get(key)):
            raise DeckValidationError(f"Invalid spectrum deck format: {key!r} must be a non-empty string.")
    raw_cards = value.get("cards")
    if not isinstance(raw_cards, list):
        raise DeckValidationError("Invalid spectrum deck format: 'cards' must be a list.")

    cards: list[SpectrumCard] = []
    for index, raw in enumerate(raw_cards):
        problem = _card_problem(raw)
        if problem is not None:
            raise DeckValidationError(f"Invalid spectrum card at index {index}: {problem}.")
        cards.append(SpectrumCard(id=int(raw["id"]), left=raw["left"], right=raw["right"]))

    return SpectrumDeck(
        version=value["version"],
        pack=value["pack"],
        description=value["description"],
        cards=tuple(cards),
    )


def is_spectrum_deck(value: Any) -> bool:
    try:
        validate_spectrum_deck(value)
    except DeckValidationError:
        return False
    return True


def load_spectrum_deck(path: str | Path) -> SpectrumDeck:
    """Read and validate a deck from a JSON file."""
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DeckValidationError(f"Failed to parse spectrum deck {path}: {exc}") from exc
    deck = validate_spectrum_deck(payload)
    logger.info("Loaded spectrum deck %r v%s (%d cards)", deck.pack, deck.version, len(deck.cards))
    return deck


def shuffle_spectrum_cards(
    cards: Sequence[SpectrumCard],
    rng: RandomSource | None = None,
) -> list[SpectrumCard]:
    """
    Fisher-Yates shuffle returning a new list; ``cards`` is left untouched.

    ``rng`` returns floats in [0, 1). Passing the same deterministic source
    yields the same order.
    """
    if rng is None:
        rng = random.random
    shuffled = list(cards)
    for index in range(len(shuffled) - 1, 0, -1):
        swap_index = min(int(rng() * (index + 1)), index)
        shuffled[index], shuffled[swap_index] = shuffled[swap_index], shuffled[index]
    return shuffled


def build_shuffled_deck(deck: SpectrumDeck, rng: RandomSource | None = None) -> list[SpectrumCard]:
    return shuffle_spectrum_cards(deck.cards, rng)


__all__ = [
    "RandomSource",
    "SpectrumCard",
    "SpectrumDeck",
    "default_deck",
    "validate_spectrum_deck",
    "is_spectrum_deck",
    "load_spectrum_deck",
    "shuffle_spectrum_cards",
    "build_shuffled_deck",
]
