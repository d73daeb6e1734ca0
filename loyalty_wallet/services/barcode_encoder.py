"""Barcode Encoder — (payload, symbology) -> fixed-size module matrix or tagged failure.

Invariants:
    - encode() never raises: every failure comes back as EncodeResult.failure
    - A failed result never carries a matrix, not even a partial one
    - A successful matrix is always size x size regardless of payload length
    - Unknown symbology -> UnsupportedSymbologyError; bad payload -> InvalidPayloadError;
      anything the library throws -> EncodingFailure (cause kept)
    - No mutable state after construction: safe to call from several threads

Design Decisions:
    - Writers injected (Protocol types): tests swap in fakes, core stays library-free
    - Explicit dict from Symbology to encode method: every mapping visible in one place
    - Library calls wrapped in try/except Exception: a bad payload must never
      crash the card detail screen
"""

import logging
from dataclasses import dataclass

from loyalty_wallet.config import Settings, get_settings
from loyalty_wallet.core.boundary_protocols import (
    LinearSymbolWriter, MatrixSymbolWriter,
)
from loyalty_wallet.core.domain_types import Symbology, parse_symbology
from loyalty_wallet.core.ean13 import validate_ean13_payload
from loyalty_wallet.core.errors import (
    EncodingFailure, InvalidPayloadError, UnsupportedSymbologyError, WalletError,
)
from loyalty_wallet.core.module_matrix import BarcodeMatrix, scale_1d, scale_2d
from loyalty_wallet.infrastructure.symbol_writers import EAN13Writer, QRCodeWriter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncodeResult:
    """Tagged result: exactly one of matrix / error is set."""

    matrix: BarcodeMatrix | None = None
    error: WalletError | None = None

    def __post_init__(self) -> None:
        if (self.matrix is None) == (self.error is None):
            raise ValueError("EncodeResult needs exactly one of matrix or error")

    @classmethod
    def success(cls, matrix: BarcodeMatrix) -> "EncodeResult":
        return cls(matrix=matrix)

    @classmethod
    def failure(cls, error: WalletError) -> "EncodeResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.matrix is not None

    def to_response(self) -> dict:
        if self.error is not None:
            return {"status": "error", **self.error.to_response()}
        return {"status": "ok", "size": self.matrix.size}


class BarcodeEncoder:
    """Pure encoder over injected symbol writers."""

    def __init__(
        self,
        size: int = 512,
        qr_writer: MatrixSymbolWriter | None = None,
        ean13_writer: LinearSymbolWriter | None = None,
        qr_quiet_zone: int = 4,
        ean_quiet_zone: int = 9,
    ):
        if size < 1:
            raise ValueError(f"size must be >= 1, got {size}")
        self.size = size
        self._qr_writer = qr_writer or QRCodeWriter()
        self._ean13_writer = ean13_writer or EAN13Writer()
        self._qr_quiet_zone = qr_quiet_zone
        self._ean_quiet_zone = ean_quiet_zone
        self._encoders = {
            Symbology.QR: self._encode_qr,
            Symbology.EAN13: self._encode_ean13,
        }

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "BarcodeEncoder":
        settings = settings or get_settings()
        return cls(
            size=settings.barcode_size,
            qr_writer=QRCodeWriter(settings.qr_error_correction),
            qr_quiet_zone=settings.qr_quiet_zone,
            ean_quiet_zone=settings.ean_quiet_zone,
        )

    def encode(self, payload: str, symbology: Symbology | str) -> EncodeResult:
        parsed = parse_symbology(symbology)
        if parsed is None:
            return self._fail(UnsupportedSymbologyError(str(symbology)))
        if not payload:
            return self._fail(InvalidPayloadError(
                "Barcode payload cannot be empty", parsed.value,
            ))

        if parsed is Symbology.EAN13:
            invalid = validate_ean13_payload(payload)
            if invalid is not None:
                return self._fail(invalid)

        try:
            matrix = self._encoders[parsed](payload)
        except Exception as e:
            return self._fail(EncodingFailure(parsed.value, e))
        return EncodeResult.success(matrix)

    def _encode_qr(self, payload: str) -> BarcodeMatrix:
        modules = self._qr_writer.modules(payload)
        return scale_2d(modules, self.size, self._qr_quiet_zone)

    def _encode_ean13(self, payload: str) -> BarcodeMatrix:
        bars = self._ean13_writer.bars(payload)
        return scale_1d(bars, self.size, self._ean_quiet_zone)

    def _fail(self, error: WalletError) -> EncodeResult:
        logger.warning(
            f"Barcode encoding failed: {error.message}",
            extra={
                "error_code": error.code,
                "symbology": error.context.symbology,
            },
        )
        return EncodeResult.failure(error)
