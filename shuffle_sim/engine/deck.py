"""
Deck model for shuffle simulation.
Defines the card types and builds the canonical 108-card deck.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Color(Enum):
    RED = "Red"
    BLUE = "Blue"
    GREEN = "Green"
    YELLOW = "Yellow"
    WILD = "Wild"      # Categorical marker, not a printed color
    SKIP = "Skip"


class ValueKind(Enum):
    NUMBER = "Number"
    WILD = "Wild"
    SKIP = "Skip"


REAL_COLORS = [Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW]
NUMBERS = list(range(1, 13))
COPIES_PER_NUMBER = 2
NUM_WILD_CARDS = 8
NUM_SKIP_CARDS = 4
DECK_SIZE = len(REAL_COLORS) * len(NUMBERS) * COPIES_PER_NUMBER + NUM_WILD_CARDS + NUM_SKIP_CARDS


@dataclass(frozen=True)
class Card:
    color: Color
    kind: ValueKind
    number: Optional[int] = None

    def __post_init__(self):
        if self.kind == ValueKind.NUMBER:
            if self.color not in REAL_COLORS:
                raise ValueError(f"Number card cannot have color {self.color.value}")
            if self.number not in NUMBERS:
                raise ValueError(f"Number card value out of range: {self.number}")
        else:
            if self.number is not None:
                raise ValueError(f"{self.kind.value} card cannot carry a number")
            if self.color.value != self.kind.value:
                raise ValueError(f"{self.kind.value} card must have color {self.kind.value}")

    @classmethod
    def numbered(cls, color: Color, number: int) -> "Card":
        return cls(color=color, kind=ValueKind.NUMBER, number=number)

    @classmethod
    def wild(cls) -> "Card":
        return cls(color=Color.WILD, kind=ValueKind.WILD)

    @classmethod
    def skip(cls) -> "Card":
        return cls(color=Color.SKIP, kind=ValueKind.SKIP)

    @property
    def value_label(self) -> str:
        """Category label used by the analyzer ("Number: 7", "Wild", "Skip")."""
        if self.kind == ValueKind.NUMBER:
            return f"Number: {self.number}"
        return self.kind.value

    def __str__(self) -> str:
        if self.kind == ValueKind.NUMBER:
            return f"{self.color.value} {self.number}"
        return self.kind.value

    def __repr__(self) -> str:
        return self.__str__()


def generate_deck() -> list[Card]:
    """
    Build the canonical 108-card deck.

    Number cards come first, grouped by color with two copies of each value
    in ascending order, followed by the Wild cards and then the Skip cards.
    """
    cards = []
    for color in REAL_COLORS:
        for number in NUMBERS:
            for _ in range(COPIES_PER_NUMBER):
                cards.append(Card.numbered(color, number))

    for _ in range(NUM_WILD_CARDS):
        cards.append(Card.wild())

    for _ in range(NUM_SKIP_CARDS):
        cards.append(Card.skip())

    return cards


class Hand:
    """Cards dealt to a single player."""

    def __init__(self, cards: list[Card] = None):
        self.cards: list[Card] = cards or []

    def add(self, card: Card) -> None:
        self.cards.append(card)

    def size(self) -> int:
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)

    def __str__(self) -> str:
        return ", ".join(str(c) for c in self.cards)

    def __repr__(self) -> str:
        return f"Hand({self.__str__()})"
