"""Wallet Service — the application layer a presentation (grid + detail screen) drives.

Invariants:
    - Owns exactly one CardStore and one BarcodeEncoder, both injected
    - Store errors never escape rename/delete/add/mark_used: they come back as
      {"status": "error", "error": {...}} envelopes and are logged as warnings
    - open_card never mutates the store
    - Card ids arrive as UUIDs or strings; malformed ids are CARD_NOT_FOUND

Design Decisions:
    - No module-level wallet instance: build_wallet() composes one and the
      caller owns its lifetime (one app session)
    - Envelope dicts over exceptions at this layer: a stale card on screen must
      not crash the UI session
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

from loyalty_wallet.config import Settings, get_settings
from loyalty_wallet.core.card import Card, DISPLAY_DATE_FORMAT, new_card, seed_cards
from loyalty_wallet.core.card_store import CardStore
from loyalty_wallet.core.domain_types import CardId
from loyalty_wallet.core.errors import CardNotFoundError, ErrorContext, WalletError
from loyalty_wallet.infrastructure.observability import setup_logging
from loyalty_wallet.schemas.card import CardCreate, CardRename, CardView
from loyalty_wallet.services.barcode_encoder import BarcodeEncoder, EncodeResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CardDetails:
    """Everything the detail screen shows for one card."""
    card: CardView
    barcode: EncodeResult


class WalletService:
    """Card grid / detail operations over a CardStore and a BarcodeEncoder."""

    def __init__(
        self,
        store: CardStore,
        encoder: BarcodeEncoder,
        date_format: str = DISPLAY_DATE_FORMAT,
    ):
        self.store = store
        self.encoder = encoder
        self._date_format = date_format

    # ─── Reads ───────────────────────────────────────────────────

    def list_cards(self) -> list[CardView]:
        return [self._view(card) for card in self.store.list()]

    def open_card(self, name: str) -> CardDetails | None:
        """Look up a card by name for the detail screen. None if absent."""
        card = self.store.find_by_name(name)
        if card is None:
            return None
        return CardDetails(card=self._view(card), barcode=self.barcode_for(card))

    def barcode_for(self, card: Card) -> EncodeResult:
        return self.encoder.encode(card.payload, card.symbology)

    # ─── Mutations ───────────────────────────────────────────────

    def add_card(self, data: CardCreate, now: datetime | None = None) -> dict:
        try:
            card = self.store.add(
                new_card(data.name, data.payload, data.symbology, now),
            )
        except WalletError as e:
            return self._error("add", e)
        logger.info(
            f"Card added: {card.name}",
            extra={"card_id": str(card.card_id), "operation": "add"},
        )
        return {"status": "ok", "card": self._view(card).model_dump(mode="json")}

    def rename_card(self, card_id: UUID | str, data: CardRename) -> dict:
        try:
            card = self.store.rename(self._lookup(card_id), data.name)
        except WalletError as e:
            return self._error("rename", e)
        logger.info(
            f"Card renamed: {card.name}",
            extra={"card_id": str(card.card_id), "operation": "rename"},
        )
        return {"status": "ok", "card": self._view(card).model_dump(mode="json")}

    def delete_card(self, card_id: UUID | str) -> dict:
        try:
            card = self.store.delete(self._lookup(card_id))
        except WalletError as e:
            return self._error("delete", e)
        logger.info(
            f"Card deleted: {card.name}",
            extra={"card_id": str(card.card_id), "operation": "delete"},
        )
        return {"status": "ok", "card_id": str(card.card_id)}

    def mark_card_used(
        self, card_id: UUID | str, when: datetime | None = None,
    ) -> dict:
        try:
            card = self.store.mark_used(
                self._lookup(card_id), when or datetime.now(timezone.utc),
            )
        except WalletError as e:
            return self._error("mark_used", e)
        return {"status": "ok", "card": self._view(card).model_dump(mode="json")}

    # ─── Helpers ─────────────────────────────────────────────────

    def _lookup(self, card_id: UUID | str) -> Card:
        if isinstance(card_id, UUID):
            return self.store.get(CardId(card_id))
        try:
            parsed = UUID(card_id)
        except (AttributeError, TypeError, ValueError) as e:
            raise CardNotFoundError(
                str(card_id), ErrorContext(card_id=str(card_id)),
            ) from e
        return self.store.get(CardId(parsed))

    def _view(self, card: Card) -> CardView:
        return CardView.from_card(card, self._date_format)

    def _error(self, operation: str, error: WalletError) -> dict:
        logger.warning(
            f"Card {operation} failed: {error.message}",
            extra={
                "error_code": error.code,
                "card_id": error.context.card_id,
                "operation": operation,
            },
        )
        return {"status": "error", **error.to_response()}


def build_wallet(
    settings: Settings | None = None,
    now: datetime | None = None,
    configure_logging: bool = False,
) -> WalletService:
    """Compose a seeded wallet for one app session."""
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings.log_level, settings.log_format)
    wallet = WalletService(
        store=CardStore(seed_cards(now)),
        encoder=BarcodeEncoder.from_settings(settings),
        date_format=settings.display_date_format,
    )
    logger.info(f"Wallet ready with {len(wallet.store)} card(s)")
    return wallet
