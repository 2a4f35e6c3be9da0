"""Infrastructure Layer — file persistence and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All IO failures mapped to StoreError (core/errors.py)
"""
