"""Boundary Protocols — contracts between the services and the record store.

Invariants:
    - Services depend on InternRepository, never on the JSON file implementation
    - Mutations happen only inside transaction(); reads never block writers

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any object with these methods
    - transaction() yields the whole record list: the store is one small document,
      so load-mutate-save under one lock is the unit of consistency
"""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from intern_tracker.core.domain_types import InternId


class InternRepository(Protocol):
    """Contract for intern record persistence — implemented by infrastructure."""
    async def load_all(self) -> list[dict]: ...
    def transaction(self) -> AbstractAsyncContextManager[list[dict]]: ...
    def allocate_id(self, records: list[dict]) -> InternId: ...
    async def health_check(self) -> bool: ...
