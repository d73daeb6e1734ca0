"""Infrastructure Layer — barcode/image library adapters and cross-cutting concerns.

Invariants:
    - Infrastructure holds every third-party rendering import (qrcode, python-barcode, Pillow)
    - Adapters return plain Python data; mapping to domain errors happens in services

Design Decisions:
    - Thin wrappers over raw libraries: swapping a library touches one module
"""
