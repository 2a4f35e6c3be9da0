"""Services Layer — orchestrates the store around the pure core.

Invariants:
    - Services are the only callers of InternRepository mutations
    - Business rules live in core/; services sequence IO around them

Design Decisions:
    - Impureim sandwich: load (IO) -> validate/compute (pure) -> save (IO)
"""
