"""Symbol Writers — adapters from barcode libraries to raw module grids.

Invariants:
    - Output has NO quiet zone: border=0 for QR, bars only for EAN-13
    - Library exceptions propagate unchanged; BarcodeEncoder wraps them
    - Writers keep no per-call state: safe to share across threads

Design Decisions:
    - qrcode for QR (version fitting + Reed-Solomon), python-barcode for EAN-13
      module patterns; neither is re-implemented here
    - EAN-13 body (12 digits) handed to python-barcode, which appends the check
      digit itself; the payload's own check digit is verified upstream
"""

import qrcode
from qrcode.constants import (
    ERROR_CORRECT_H, ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q,
)
from barcode import EAN13

from loyalty_wallet.core.domain_types import QRErrorCorrection


_QR_LEVELS = {
    QRErrorCorrection.L: ERROR_CORRECT_L,
    QRErrorCorrection.M: ERROR_CORRECT_M,
    QRErrorCorrection.Q: ERROR_CORRECT_Q,
    QRErrorCorrection.H: ERROR_CORRECT_H,
}


class QRCodeWriter:
    """QR symbols via the qrcode package."""

    def __init__(self, error_correction: QRErrorCorrection = QRErrorCorrection.L):
        self.error_correction = error_correction

    def modules(self, payload: str) -> list[list[bool]]:
        qr = qrcode.QRCode(
            version=None,
            error_correction=_QR_LEVELS[self.error_correction],
            box_size=1,
            border=0,
        )
        qr.add_data(payload)
        qr.make(fit=True)
        return [[bool(cell) for cell in row] for row in qr.get_matrix()]


class EAN13Writer:
    """EAN-13 bars via python-barcode."""

    def bars(self, payload: str) -> list[bool]:
        # build() yields one pattern string: "1" bar, "0" space, "G" guard bar
        (pattern,) = EAN13(payload[:12]).build()
        return [char != "0" for char in pattern]
