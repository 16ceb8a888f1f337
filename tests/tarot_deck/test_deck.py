# tests/tarot_deck/test_deck.py
import copy
import random
import pytest
from pydantic import ValidationError

from services.tarot_deck import (
    DeckValidationError,
    draw_cards,
    get_default_deck,
    load_deck,
    load_deck_data,
)

MINIMAL_DECK = {
    "version": "test",
    "cards": [
        {
            "name": "The Fool",
            "emoji": "🤡",
            "arcana": "Major",
            "meaning": {"upright": "Beginnings", "reversed": "Recklessness"},
            "keywords": ["beginnings"],
        },
        {
            "name": "Ace of Cups",
            "emoji": "🏆",
            "arcana": "Minor",
            "suit": "Cups",
            "meaning": {"upright": "New feelings", "reversed": "Blocked emotions"},
            "keywords": ["love"],
        },
        {
            "name": "Justice",
            "emoji": "⚖️",
            "arcana": "Major",
            "meaning": {"upright": "Fairness", "reversed": "Unfairness"},
            "keywords": ["justice"],
        },
    ],
}


@pytest.fixture(scope="module")
def deck():
    return get_default_deck()


# --- Loading ---

def test_bundled_deck_is_complete(deck):
    assert len(deck.cards) == 78
    assert sum(1 for c in deck.cards if c.arcana == "Major") == 22
    suits = {}
    for card in deck.cards:
        if card.suit:
            suits[card.suit] = suits.get(card.suit, 0) + 1
    assert suits == {"Wands": 14, "Cups": 14, "Swords": 14, "Pentacles": 14}


def test_bundled_deck_lookup(deck):
    fool = deck.get_card("The Fool")
    assert fool is not None
    assert fool.keywords == ["beginnings", "freedom", "innocence"]
    assert deck.get_card("The Joker") is None


def test_load_minimal_deck():
    deck = load_deck_data(MINIMAL_DECK)
    assert [c.name for c in deck.cards] == ["The Fool", "Ace of Cups", "Justice"]


def test_duplicate_card_name_rejected():
    data = copy.deepcopy(MINIMAL_DECK)
    data["cards"].append(copy.deepcopy(data["cards"][0]))
    with pytest.raises(DeckValidationError, match="Duplicate card name"):
        load_deck_data(data)


def test_minor_card_without_suit_rejected():
    data = copy.deepcopy(MINIMAL_DECK)
    del data["cards"][1]["suit"]
    with pytest.raises(DeckValidationError, match="has no suit"):
        load_deck_data(data)


def test_bad_arcana_rejected():
    data = copy.deepcopy(MINIMAL_DECK)
    data["cards"][0]["arcana"] = "Middle"
    with pytest.raises(ValidationError):
        load_deck_data(data)


def test_load_deck_missing_file(tmp_path):
    with pytest.raises(DeckValidationError, match="File not found"):
        load_deck(tmp_path / "nope.yml")


def test_load_deck_empty_file(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")
    with pytest.raises(DeckValidationError, match="empty"):
        load_deck(path)


# --- Drawing ---

def test_draw_three_distinct_cards(deck):
    drawn = draw_cards(deck, 3, rng=random.Random(7))
    assert len(drawn) == 3
    assert len({c.name for c in drawn}) == 3
    assert all(c.position in ("Upright", "Reversed") for c in drawn)


def test_draw_is_repeatable_with_seed(deck):
    first = draw_cards(deck, 5, rng=random.Random(42))
    second = draw_cards(deck, 5, rng=random.Random(42))
    assert [c.label for c in first] == [c.label for c in second]


def test_draw_positions_are_roughly_even(deck):
    rng = random.Random(1234)
    reversed_count = sum(
        1 for _ in range(400) for c in draw_cards(deck, 3, rng=rng) if c.position == "Reversed"
    )
    # 1200 draws; expect ~600
    assert 500 < reversed_count < 700


def test_draw_does_not_modify_deck(deck):
    names = [c.name for c in deck.cards]
    draw_cards(deck, 10)
    assert [c.name for c in deck.cards] == names


def test_draw_too_many_raises():
    deck = load_deck_data(MINIMAL_DECK)
    with pytest.raises(ValueError):
        draw_cards(deck, 4)
    with pytest.raises(ValueError):
        draw_cards(deck, -1)


def test_drawn_card_label_and_meaning():
    deck = load_deck_data(MINIMAL_DECK)
    drawn = draw_cards(deck, 3, rng=random.Random(3))
    for card in drawn:
        assert card.label == f"{card.name} ({card.position})"
        expected = card.meaning.upright if card.position == "Upright" else card.meaning.reversed
        assert card.meaning_for_position == expected
        assert card.model_dump()["label"] == card.label
