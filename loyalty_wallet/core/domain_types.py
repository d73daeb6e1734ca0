"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CardId wraps UUID
    - Symbology values match the barcode type strings stored on cards ("QR_CODE", "EAN_13")
    - All valid states encoded as Enums; raw strings parsed only by parse_symbology

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

CardId = NewType("CardId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class Symbology(str, Enum):
    """Supported barcode encodings. Closed set."""
    QR = "QR_CODE"
    EAN13 = "EAN_13"

    @property
    def is_two_dimensional(self) -> bool:
        return self is Symbology.QR


class QRErrorCorrection(str, Enum):
    """QR error-correction levels (ISO/IEC 18004)."""
    L = "L"
    M = "M"
    Q = "Q"
    H = "H"


def parse_symbology(value: "Symbology | str") -> Symbology | None:
    """Map a Symbology or its string value to the enum. None if unrecognised."""
    if isinstance(value, Symbology):
        return value
    try:
        return Symbology(value)
    except ValueError:
        return None
