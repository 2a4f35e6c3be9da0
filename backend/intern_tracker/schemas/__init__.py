"""Pydantic Schemas — persisted record shape.

Invariants:
    - JSON keys are camelCase (alias_generator), Python attributes snake_case
    - Field rules live in core/validate_intern.py; schemas only describe shape

Design Decisions:
    - Request bodies are plain dicts so the validator can report every violation
      at once instead of pydantic stopping at type errors
"""
