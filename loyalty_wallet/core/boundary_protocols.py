"""Boundary Protocols — contracts between core and the barcode libraries.

Invariants:
    - Core NEVER imports a barcode library
    - Writers return raw, unscaled modules; sizing is done by core.module_matrix
    - Writers may raise anything; the encoder service wraps it as EncodingFailure

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
"""

from typing import Protocol, Sequence


class MatrixSymbolWriter(Protocol):
    """2D symbology: payload -> square grid of modules (no quiet zone)."""
    def modules(self, payload: str) -> Sequence[Sequence[bool]]: ...


class LinearSymbolWriter(Protocol):
    """1D symbology: payload -> single row of bars (no quiet zone)."""
    def bars(self, payload: str) -> Sequence[bool]: ...
