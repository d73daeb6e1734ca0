"""Card Store — ordered in-memory collection of loyalty cards for one app session.

Invariants:
    - Insertion order preserved; rename and mark_used replace in place (same index)
    - list() returns a tuple snapshot; callers never alias the internal list
    - Card targets match by card_id; str targets match the first card with that name
    - A Card whose id is gone is NOT re-matched by name (deleting twice never
      removes an unrelated card)
    - Missing target raises CardNotFoundError; blank rename raises CardValidationError

Design Decisions:
    - Constructor-injected seed data, no module-level singleton: the composing
      layer owns the store lifetime
    - Not thread-safe: single-threaded UI session; callers serialize access
"""

from datetime import datetime
from typing import Iterable, Iterator

from loyalty_wallet.core.card import Card
from loyalty_wallet.core.domain_types import CardId
from loyalty_wallet.core.errors import (
    CardNotFoundError, CardValidationError, ErrorContext,
)


CardTarget = Card | str


class CardStore:
    """Owns the ordered sequence of Card values."""

    def __init__(self, cards: Iterable[Card] = ()):
        self._cards: list[Card] = []
        for card in cards:
            self.add(card)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.list())

    def list(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def add(self, card: Card) -> Card:
        if any(c.card_id == card.card_id for c in self._cards):
            raise CardValidationError(
                f"Card id {card.card_id} already stored", "card_id",
                ErrorContext(card_id=str(card.card_id)),
            )
        self._cards.append(card)
        return card

    def get(self, card_id: CardId) -> Card:
        for card in self._cards:
            if card.card_id == card_id:
                return card
        raise CardNotFoundError(str(card_id), ErrorContext(card_id=str(card_id)))

    def find_by_name(self, name: str) -> Card | None:
        """First card with exactly this name (navigation lookup)."""
        return next((c for c in self._cards if c.name == name), None)

    def rename(self, target: CardTarget, new_name: str) -> Card:
        if not new_name or not new_name.strip():
            raise CardValidationError(
                "Card name cannot be empty or whitespace", "name",
            )
        index = self._index_of(target)
        updated = self._cards[index].renamed(new_name)
        self._cards[index] = updated
        return updated

    def mark_used(self, target: CardTarget, when: datetime) -> Card:
        index = self._index_of(target)
        updated = self._cards[index].used_at(when)
        self._cards[index] = updated
        return updated

    def delete(self, target: CardTarget) -> Card:
        index = self._index_of(target)
        return self._cards.pop(index)

    def _index_of(self, target: CardTarget) -> int:
        if isinstance(target, Card):
            for i, card in enumerate(self._cards):
                if card.card_id == target.card_id:
                    return i
            raise CardNotFoundError(
                target.name, ErrorContext(card_id=str(target.card_id)),
            )
        for i, card in enumerate(self._cards):
            if card.name == target:
                return i
        raise CardNotFoundError(target)
