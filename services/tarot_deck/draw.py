import logging
import random
from typing import List, Optional

from .models import DrawnCard, TarotDeck

logger = logging.getLogger(__name__)

DEFAULT_SPREAD_SIZE = 3


def draw_cards(deck: TarotDeck, count: int = DEFAULT_SPREAD_SIZE, rng: Optional[random.Random] = None) -> List[DrawnCard]:
    """
    Draws `count` distinct cards from the deck. Each card lands upright or
    reversed independently, with equal odds.

    Args:
        deck: The catalog to draw from. It is not modified.
        count: Number of cards in the spread.
        rng: Random source, injectable for repeatable draws.

    Raises:
        ValueError: If count is negative or larger than the deck.
    """
    if count < 0:
        raise ValueError(f"Cannot draw a negative number of cards: {count}")
    if count > len(deck.cards):
        raise ValueError(f"Cannot draw {count} cards from a deck of {len(deck.cards)}")

    rng = rng or random.Random()
    picked = rng.sample(deck.cards, count)
    drawn = [
        DrawnCard(**card.model_dump(), position="Upright" if rng.random() < 0.5 else "Reversed")
        for card in picked
    ]
    logger.debug(f"Drew spread: {[card.label for card in drawn]}")
    return drawn
