"""Web Layer — server-rendered dashboard page and HTML fragments.

Invariants:
    - Owns no business logic: every fragment is built from the same payload the JSON API returns
    - View-models are built per request; nothing is cached at module level
"""
