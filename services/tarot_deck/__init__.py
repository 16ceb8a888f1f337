from .models import TarotCard, TarotDeck, DrawnCard, DeckValidationError
from .loader import load_deck, load_deck_data, get_default_deck
from .draw import draw_cards

__all__ = [
    "TarotCard",
    "TarotDeck",
    "DrawnCard",
    "DeckValidationError",
    "load_deck",
    "load_deck_data",
    "get_default_deck",
    "draw_cards",
]
