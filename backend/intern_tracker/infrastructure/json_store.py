"""JSON Record Store — one JSON document holding every intern record.

Invariants:
    - Every mutation runs inside transaction(): one asyncio.Lock serializes writers
    - Writes are atomic: temp file in the same directory, then os.replace
    - A transaction that raises writes nothing (the file keeps its previous content)
    - Id allocation is a monotonic counter owned by the store; ids are never reused
      within a process, even after deletion
    - All OSError / JSON / schema failures surface as StoreError
    - File IO inside the async methods runs in a worker thread (asyncio.to_thread),
      never on the event loop

Design Decisions:
    - Load-mutate-save per transaction over an in-memory cache: the file stays the
      single source of truth and edits made while the server is down are picked up
    - Singleton intern_store initialized on startup: FastAPI lifespan manages lifecycle
      (no global import side effects)
"""

import asyncio
import json
import logging
import os
import tempfile
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from pydantic import TypeAdapter, ValidationError as SchemaError

from intern_tracker.core.domain_types import InternId
from intern_tracker.core.errors import StoreError
from intern_tracker.core.intern_ids import format_intern_id, highest_sequence
from intern_tracker.infrastructure.seed_data import build_seed_records
from intern_tracker.schemas.intern import InternRecord

logger = logging.getLogger(__name__)

_document_adapter = TypeAdapter(list[InternRecord])


class JsonInternStore:
    """File-backed intern records with serialized mutations."""

    def __init__(self, path: str | Path, seed: bool = True):
        self.path = Path(path)
        self.seed = seed
        self._lock = asyncio.Lock()
        self._last_sequence = 0

    def ensure_initialized(self) -> None:
        """Create the data file (with seed records when enabled) if missing."""
        if self.path.exists():
            self._last_sequence = max(self._last_sequence, highest_sequence(self._read()))
            return
        records = build_seed_records() if self.seed else []
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError(str(e), "initialize")
        self._write(records)
        self._last_sequence = highest_sequence(records)
        logger.info(f"Created data file {self.path} with {len(records)} record(s)")

    async def load_all(self) -> list[dict]:
        """Every record, in insertion order."""
        return await asyncio.to_thread(self._read)

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[list[dict], None]:
        """Yield the mutable record list; persist it only on clean exit."""
        async with self._lock:
            records = await asyncio.to_thread(self._read)
            self._last_sequence = max(self._last_sequence, highest_sequence(records))
            yield records
            await asyncio.to_thread(self._write, records)

    def allocate_id(self, records: list[dict]) -> InternId:
        """Next id. Call inside transaction() so allocation is serialized."""
        self._last_sequence = max(self._last_sequence, highest_sequence(records)) + 1
        return format_intern_id(self._last_sequence)

    async def health_check(self) -> bool:
        """Data file readable and well-formed (for readiness probes)."""
        try:
            await asyncio.to_thread(self._read)
            return True
        except StoreError as e:
            logger.error(f"Store health check failed: {e.message}")
            return False

    # --- file IO ---------------------------------------------------------------

    def _read(self) -> list[dict]:
        if not self.path.exists():
            return []
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Store read error: {e}")
            raise StoreError("Could not read data file", "read")
        if not raw.strip():
            return []
        try:
            parsed = _document_adapter.validate_json(raw)
        except SchemaError as e:
            logger.error(f"Store document invalid: {e}")
            raise StoreError("Data file is not a valid intern document", "read")
        return [record.to_document() for record in parsed]

    def _write(self, records: list[dict]) -> None:
        payload = json.dumps(records, indent=2, ensure_ascii=False)
        try:
            fd, tmp_path = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp",
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                    handle.write("\n")
                os.replace(tmp_path, self.path)
            except BaseException:
                Path(tmp_path).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error(f"Store write error: {e}")
            raise StoreError("Could not write data file", "write")


# Singleton (initialized on startup)
intern_store: JsonInternStore | None = None


def init_store(path: str | Path, seed: bool = True) -> JsonInternStore:
    global intern_store
    intern_store = JsonInternStore(path, seed=seed)
    intern_store.ensure_initialized()
    return intern_store


def get_store() -> JsonInternStore:
    """FastAPI dependency for the record store."""
    if not intern_store:
        raise RuntimeError("Store not initialized")
    return intern_store
