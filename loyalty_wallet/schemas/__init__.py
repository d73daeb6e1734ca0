"""Pydantic Schemas — input validation and view models for the presentation layer.

Invariants:
    - Schemas validate at the system boundary (user input, rendered views)
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from core: schemas are view contracts, core holds domain values
"""
