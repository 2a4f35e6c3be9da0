"""Intern Tracker Application Package — intern records, dashboard metrics, HTML fragments.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
