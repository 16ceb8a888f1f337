import logging
import yaml
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Union

from .models import DeckValidationError, TarotDeck

logger = logging.getLogger(__name__)

DEFAULT_DECK_PATH = Path(__file__).resolve().parents[2] / "assets" / "tarot_deck.yml"


def load_deck_data(data: Dict[str, Any]) -> TarotDeck:
    """
    Validates raw catalog data against the TarotDeck model and performs the
    checks the model cannot express: unique card names, and a suit on every
    minor arcana card (none on major arcana).

    Raises:
        pydantic.ValidationError: for schema problems.
        DeckValidationError: for the cross-card checks above.
    """
    deck = TarotDeck.model_validate(data)

    seen = set()
    for card in deck.cards:
        if card.name in seen:
            raise DeckValidationError(f"Duplicate card name found: {card.name}")
        seen.add(card.name)

        if card.arcana == "Minor" and card.suit is None:
            raise DeckValidationError(f"Minor arcana card '{card.name}' has no suit")
        if card.arcana == "Major" and card.suit is not None:
            raise DeckValidationError(f"Major arcana card '{card.name}' must not have a suit")

    if not deck.cards:
        raise DeckValidationError("Deck contains no cards")

    return deck


def load_deck(file_path: Union[str, Path]) -> TarotDeck:
    """Loads a card catalog from a YAML file and validates it."""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise DeckValidationError(f"File not found: {file_path}")
    except yaml.YAMLError as e:
        raise DeckValidationError(f"Error parsing YAML file {file_path}: {e}")

    if data is None:
        raise DeckValidationError(f"YAML file is empty or invalid: {file_path}")

    deck = load_deck_data(data)
    logger.info(f"Loaded tarot deck v{deck.version} with {len(deck.cards)} cards from {file_path}")
    return deck


@lru_cache(maxsize=1)
def get_default_deck() -> TarotDeck:
    """The bundled catalog, loaded once."""
    return load_deck(DEFAULT_DECK_PATH)
