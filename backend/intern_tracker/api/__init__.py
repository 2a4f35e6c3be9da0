"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All /api endpoints return the {success, ...} JSON envelope

Design Decisions:
    - Thin routes delegate to services; errors travel as exceptions to the global handlers
"""
