"""Card — immutable loyalty card value and its pure helpers.

Invariants:
    - Card is frozen: every mutation produces a new Card via dataclasses.replace
    - name is non-empty after stripping whitespace
    - card_id is assigned once at creation and survives renames
    - last_used_at >= created_at is expected but NOT enforced on construction

Design Decisions:
    - Stable CardId instead of name identity: equal names stay distinguishable
    - Timestamps passed in explicitly (now=...): keeps core deterministic in tests
"""

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from uuid import uuid4

from loyalty_wallet.core.domain_types import CardId, Symbology
from loyalty_wallet.core.errors import CardValidationError, ErrorContext


DISPLAY_DATE_FORMAT: str = "%d/%m/%Y"


@dataclass(frozen=True)
class Card:
    """One loyalty card. Pure value, no IO."""

    card_id: CardId
    name: str
    created_at: datetime
    last_used_at: datetime
    payload: str
    symbology: Symbology

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise CardValidationError(
                "Card name cannot be empty or whitespace", "name",
                ErrorContext(card_id=str(self.card_id)),
            )

    def renamed(self, new_name: str) -> "Card":
        return replace(self, name=new_name)

    def used_at(self, when: datetime) -> "Card":
        """Copy with last_used_at advanced to `when`. Never moves backwards."""
        return replace(self, last_used_at=max(self.last_used_at, when))


def new_card(
    name: str,
    payload: str,
    symbology: Symbology,
    now: datetime | None = None,
) -> Card:
    """Create a fresh card with a new CardId; created and last-used at `now`."""
    stamp = now or datetime.now(timezone.utc)
    return Card(
        card_id=CardId(uuid4()),
        name=name.strip(),
        created_at=stamp,
        last_used_at=stamp,
        payload=payload,
        symbology=symbology,
    )


def seed_cards(now: datetime | None = None) -> list[Card]:
    """Sample cards a fresh wallet starts with."""
    stamp = now or datetime.now(timezone.utc)
    return [
        new_card("Bookshop", "EncodedInfo1", Symbology.QR, stamp),
        # EAN-13 payload must be 13 digits with a valid check digit
        new_card("Cafeteria", "1234567890128", Symbology.EAN13, stamp),
    ]


def format_display_date(value: datetime, fmt: str = DISPLAY_DATE_FORMAT) -> str:
    """Render a timestamp as dd/MM/yyyy."""
    return value.strftime(fmt)
