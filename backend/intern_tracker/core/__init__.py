"""Core Layer — pure domain logic, no IO, no async, no file access.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or web/
    - All functions are pure and deterministic (time is always passed in)

Design Decisions:
    - Functional core separated from imperative shell: the store and the
      services do IO, core only computes
"""
