"""Error Hierarchy — codes, categories and response envelopes.

Tests cover:
    - Every concrete error is a WalletError with its own code
    - to_response() shape
    - EncodingFailure keeps the cause and hides it from the user message
    - Barcode errors record the symbology in their context
"""

from loyalty_wallet.core.errors import (
    CardNotFoundError,
    CardValidationError,
    EncodingFailure,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    InvalidPayloadError,
    UnsupportedSymbologyError,
    WalletError,
)


def test_error_codes_are_distinct():
    errors = [
        CardNotFoundError("Bookshop"),
        CardValidationError("bad", "name"),
        UnsupportedSymbologyError("CODE_128"),
        InvalidPayloadError("bad", "EAN_13"),
        EncodingFailure("QR_CODE", RuntimeError("boom")),
    ]
    assert all(isinstance(e, WalletError) for e in errors)
    assert len({e.code for e in errors}) == len(errors)


def test_card_not_found_is_recoverable():
    err = CardNotFoundError("Bookshop")
    assert err.code == "CARD_NOT_FOUND"
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND
    assert err.severity is ErrorSeverity.WARNING
    assert err.recoverable
    assert "Bookshop" in err.message


def test_to_response_envelope():
    err = CardNotFoundError("Bookshop", ErrorContext(card_id="abc"))
    body = err.to_response()["error"]
    assert body["code"] == "CARD_NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["severity"] == "warning"
    assert body["context"]["card_id"] == "abc"
    assert "timestamp" in body


def test_unsupported_symbology_records_value():
    err = UnsupportedSymbologyError("CODE_128")
    assert err.symbology == "CODE_128"
    assert err.context.symbology == "CODE_128"
    assert not err.recoverable


def test_encoding_failure_wraps_cause():
    cause = OverflowError("data too big")
    err = EncodingFailure("QR_CODE", cause)
    assert err.cause is cause
    assert "OverflowError" in err.message
    assert err.category is ErrorCategory.EXTERNAL_LIBRARY
    # user-facing message does not leak library details
    assert err.to_response()["error"]["message"] == "Barcode could not be generated"


def test_invalid_payload_records_symbology():
    err = InvalidPayloadError("wrong length", "EAN_13")
    assert err.code == "INVALID_PAYLOAD"
    assert err.to_response()["error"]["context"]["symbology"] == "EAN_13"
