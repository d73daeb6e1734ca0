"""EAN-13 Payload Rules — pure check-digit arithmetic and payload validation.

Invariants:
    - A valid payload is exactly 13 ASCII digits
    - Weights alternate 1,3,1,3... from the leftmost digit over the first 12
    - check digit = (10 - weighted_sum % 10) % 10 and must equal digit 13
    - validate_ean13_payload is PURE: returns the error, never raises it
"""

from loyalty_wallet.core.domain_types import Symbology
from loyalty_wallet.core.errors import InvalidPayloadError


EAN13_LENGTH: int = 13


def _is_ascii_digits(value: str) -> bool:
    # str.isdigit() accepts superscripts and other Unicode digits
    return value.isascii() and value.isdigit()


def ean13_check_digit(first_twelve: str) -> int:
    """Compute the GS1 check digit for a 12-digit EAN-13 body."""
    if len(first_twelve) != EAN13_LENGTH - 1 or not _is_ascii_digits(first_twelve):
        raise ValueError(f"EAN-13 body must be 12 digits, got {first_twelve!r}")
    total = sum(
        int(digit) * (3 if i % 2 else 1)
        for i, digit in enumerate(first_twelve)
    )
    return (10 - total % 10) % 10


def validate_ean13_payload(payload: str) -> InvalidPayloadError | None:
    """Return InvalidPayloadError if payload is not a valid EAN-13, else None."""
    symbology = Symbology.EAN13.value
    if len(payload) != EAN13_LENGTH:
        return InvalidPayloadError(
            f"EAN-13 payload must be {EAN13_LENGTH} digits, got {len(payload)} characters",
            symbology,
        )
    if not _is_ascii_digits(payload):
        return InvalidPayloadError(
            "EAN-13 payload must contain only digits 0-9", symbology,
        )
    expected = ean13_check_digit(payload[:-1])
    if int(payload[-1]) != expected:
        return InvalidPayloadError(
            f"EAN-13 check digit mismatch: expected {expected}, got {payload[-1]}",
            symbology,
        )
    return None
