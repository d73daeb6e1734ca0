"""Card Schemas — Pydantic models with field-level validation for the presentation boundary.

Invariants:
    - CardCreate.name / CardRename.name: 1-100 chars after stripping
    - CardView dates are pre-formatted strings (dd/MM/yyyy), never datetimes
    - Symbology fields use the core enum: only QR_CODE / EAN_13 accepted

Design Decisions:
    - Separate from core.card: schemas are view contracts, Card is the domain value
    - field_validator for side-effect-free transforms (strip)
"""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from loyalty_wallet.core.card import Card, DISPLAY_DATE_FORMAT, format_display_date
from loyalty_wallet.core.domain_types import Symbology


def _strip_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("name cannot be empty or whitespace")
    return v


class CardCreate(BaseModel):
    """Input of the create-card flow."""
    name: str = Field(min_length=1, max_length=100)
    payload: str = Field(min_length=1, max_length=2_000)
    symbology: Symbology

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return _strip_name(v)


class CardRename(BaseModel):
    """Rename input from the card details screen."""
    name: str = Field(min_length=1, max_length=100)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return _strip_name(v)


class CardView(BaseModel):
    """Card as shown on the grid and detail screens."""
    card_id: UUID
    name: str
    created_at: str
    last_used_at: str
    payload: str
    symbology: Symbology

    @classmethod
    def from_card(cls, card: Card, date_format: str = DISPLAY_DATE_FORMAT) -> "CardView":
        return cls(
            card_id=card.card_id,
            name=card.name,
            created_at=format_display_date(card.created_at, date_format),
            last_used_at=format_display_date(card.last_used_at, date_format),
            payload=card.payload,
            symbology=card.symbology,
        )
