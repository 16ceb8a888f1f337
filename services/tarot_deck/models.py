from pydantic import BaseModel, Field, computed_field
from typing import List, Literal, Optional

Arcana = Literal["Major", "Minor"]
Suit = Literal["Wands", "Cups", "Swords", "Pentacles"]
Position = Literal["Upright", "Reversed"]


class CardMeaning(BaseModel):
    upright: str
    reversed: str


class TarotCard(BaseModel):
    name: str
    emoji: str
    arcana: Arcana
    suit: Optional[Suit] = None
    meaning: CardMeaning
    keywords: List[str] = Field(default_factory=list)


class TarotDeck(BaseModel):
    version: str
    cards: List[TarotCard]

    def get_card(self, name: str) -> Optional[TarotCard]:
        for card in self.cards:
            if card.name == name:
                return card
        return None


class DrawnCard(TarotCard):
    """A catalog card as it landed in a spread."""
    position: Position

    @computed_field
    @property
    def label(self) -> str:
        """Form used when a reading's cards are saved, e.g. 'The Fool (Reversed)'."""
        return f"{self.name} ({self.position})"

    @property
    def meaning_for_position(self) -> str:
        return self.meaning.upright if self.position == "Upright" else self.meaning.reversed


class DeckValidationError(ValueError):
    """Raised when the card catalog is malformed beyond what the models catch."""
    pass
