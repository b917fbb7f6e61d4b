"""Fixed-capacity card piles.

Every pile in a game is a ``Deck``: a buffer of ``DECK_SIZE`` slots
allocated once plus a logical length. Slot ``len - 1`` is the top.
Cards only ever move between decks, so the buffer never needs to grow.
"""

from __future__ import annotations

from typing import Iterator, Optional

import numpy as np

from warsim.cards import DECK_SIZE, FACES, SUITS, card_glyph, is_card
from warsim.rng import bounded


class DeckContractError(Exception):
    """Raised when a deck operation is called outside its contract."""


class Deck:
    """Ordered pile of face values with top-of-stack semantics."""

    __slots__ = ("_cards", "_len")

    capacity = DECK_SIZE

    def __init__(self) -> None:
        self._cards: list[int] = [0] * DECK_SIZE
        self._len = 0

    @classmethod
    def empty(cls) -> "Deck":
        """Create an empty deck."""
        return cls()

    @classmethod
    def full(cls) -> "Deck":
        """Create an unshuffled 52-card deck.

        Slot ``suit + face * SUITS`` holds ``face``, so the deck runs from the
        four twos at the bottom to the four aces on top.
        """
        deck = cls()
        for suit in range(SUITS):
            for face in range(FACES):
                deck._cards[suit + face * SUITS] = face
        deck._len = DECK_SIZE
        return deck

    @classmethod
    def of(cls, cards: list[int]) -> "Deck":
        """Build a deck from cards listed bottom to top."""
        deck = cls()
        for card in cards:
            deck.push(card)
        return deck

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[int]:
        """Iterate bottom to top."""
        return iter(self._cards[:self._len])

    def __repr__(self) -> str:
        return f"Deck({self.render()!r})"

    def cards(self) -> tuple[int, ...]:
        """Snapshot of the cards, bottom to top."""
        return tuple(self._cards[:self._len])

    def top(self) -> Optional[int]:
        """Peek at the top card without removing it."""
        if self._len == 0:
            return None
        return self._cards[self._len - 1]

    def clear(self) -> "Deck":
        """Drop every card; storage is kept."""
        self._len = 0
        return self

    def push(self, card: int) -> None:
        """Add a card to the top."""
        if self._len >= DECK_SIZE:
            raise DeckContractError(f"push onto full deck (capacity {DECK_SIZE})")
        if not is_card(card):
            raise DeckContractError(f"not a face value: {card!r}")
        self._cards[self._len] = card
        self._len += 1

    def pop(self) -> Optional[int]:
        """Remove and return the top card, or None when empty."""
        if self._len == 0:
            return None
        self._len -= 1
        return self._cards[self._len]

    def shuffle(self, rng: np.random.Generator) -> None:
        """Shuffle in place with Fisher-Yates."""
        cards = self._cards
        n = self._len
        while n > 1:
            k = bounded(rng, n)
            n -= 1
            cards[n], cards[k] = cards[k], cards[n]

    def sort(self) -> None:
        """Order the deck so higher cards are drawn first.

        The lowest card ends up at slot 0 and the highest on top.
        """
        self._cards[:self._len] = sorted(self._cards[:self._len])

    def render(self) -> str:
        """Glyphs from top to bottom."""
        return "".join(card_glyph(c) for c in reversed(self._cards[:self._len]))


def split(source: Deck, where: int, a: Deck, b: Deck) -> None:
    """Split source into its bottom ``where`` cards (a) and the rest (b).

    Either output may be the source deck itself.
    """
    n = len(source)
    if not 0 <= where <= n:
        raise DeckContractError(f"split point {where} outside [0, {n}]")
    # Copy first as source may alias a or b
    cards = source._cards[:n]
    a._cards[:where] = cards[:where]
    a._len = where
    b._cards[:n - where] = cards[where:]
    b._len = n - where
