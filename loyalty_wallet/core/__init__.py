"""Core Layer — pure domain logic, no IO, no barcode libraries, no logging.

Invariants:
    - No module in core/ imports from services/, schemas/ or infrastructure/
    - All functions are deterministic given their inputs (timestamps passed in)

Design Decisions:
    - Functional core separated from imperative shell
"""
