"""Services Layer — imperative shell around the core: library calls, logging, envelopes.

Invariants:
    - Services may import core/, schemas/ and infrastructure/; core never imports services
"""
