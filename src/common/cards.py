# src/common/cards.py

import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from .constants import (
    NUMBER_RANKS, COPIES_PER_NUMBER,
    NINE_RANK, NINE_COPIES,
    ACTION_RANK, COPIES_PER_ACTION,
    HAND_SIZE, HIDDEN_SLOTS, HIDDEN_LABEL,
)


class CardKind(Enum):
    NUMBER = "number"
    PEEK = "peek"
    SWAP = "swap"

    @property
    def is_action(self) -> bool:
        return self is not CardKind.NUMBER


class DeckExhaustedError(RuntimeError):
    """Raised when a draw is attempted on an empty deck (there is no reshuffle)."""
    pass


class EmptyDiscardError(RuntimeError):
    """Raised when the top of an empty discard pile is requested."""
    pass


class InvalidSlotError(ValueError):
    """Raised when a hand slot index is not in 0..HAND_SIZE-1."""
    pass


@dataclass(frozen=True)
class Card:
    rank: int  # 1..9 for numbers, 10 for action cards
    kind: CardKind = CardKind.NUMBER

    def __post_init__(self) -> None:
        if self.kind is CardKind.NUMBER:
            if not 1 <= self.rank <= NINE_RANK:
                raise ValueError(f"Invalid number card rank: {self.rank}")
        elif self.rank != ACTION_RANK:
            raise ValueError(f"{self.kind.name} cards must have rank {ACTION_RANK}, got {self.rank}")

    def __str__(self) -> str:
        if self.kind is CardKind.NUMBER:
            return str(self.rank)
        return f"{self.rank}({self.kind.name.title()})"


def new_deck_cards() -> List[Card]:
    """
    The full 49-card set:
      * 4 each of 1-8
      * 9 nines
      * 4 each of Peek and Swap (worth 10)
    """
    cards = [Card(r) for _ in range(COPIES_PER_NUMBER) for r in NUMBER_RANKS]
    cards += [Card(NINE_RANK) for _ in range(NINE_COPIES)]
    for kind in (CardKind.PEEK, CardKind.SWAP):
        cards += [Card(ACTION_RANK, kind) for _ in range(COPIES_PER_ACTION)]
    return cards


class Hand:
    def __init__(self, cards: Iterable[Card]) -> None:
        self._cards: List[Card] = list(cards)
        if len(self._cards) != HAND_SIZE:
            raise ValueError(f"A hand holds exactly {HAND_SIZE} cards, got {len(self._cards)}")

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def swap(self, index: int, card: Card) -> Card:
        """Put `card` in slot `index` and return the card that was there."""
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < HAND_SIZE:
            raise InvalidSlotError(f"Slot must be 0-{HAND_SIZE - 1}, got {index!r}")
        displaced = self._cards[index]
        self._cards[index] = card
        return displaced

    def sum(self) -> int:
        return sum(c.rank for c in self._cards)

    def render(self, reveal: bool = False) -> str:
        hidden = () if reveal else HIDDEN_SLOTS
        return " ".join(
            HIDDEN_LABEL if i in hidden else str(c)
            for i, c in enumerate(self._cards)
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Hand({self.render(reveal=True)})"


class Deck:
    def __init__(self, cards: Optional[Sequence[Card]] = None, *, seed=None) -> None:
        self._rng = random.Random(seed)
        self._cards: List[Card] = list(cards) if cards is not None else new_deck_cards()

    def __len__(self) -> int:
        return len(self._cards)

    def draw(self) -> Card:
        if not self._cards:
            raise DeckExhaustedError("Deck is empty")
        # pick uniformly from what's left; the bag itself stays unordered
        idx = self._rng.randrange(len(self._cards))
        return self._cards.pop(idx)

    def draw_hand(self) -> Hand:
        return Hand(self.draw() for _ in range(HAND_SIZE))


class DiscardPile:
    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: List[Card] = list(cards)  # last = top

    def __len__(self) -> int:
        return len(self._cards)

    @property
    def top(self) -> Card:
        if not self._cards:
            raise EmptyDiscardError("Discard pile is empty")
        return self._cards[-1]

    def push(self, card: Card) -> None:
        self._cards.append(card)

    def pop(self) -> Card:
        if not self._cards:
            raise EmptyDiscardError("Discard pile is empty")
        return self._cards.pop()
