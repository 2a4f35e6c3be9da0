"""Web test fixtures — reuse the service-layer store and client fixtures."""

from tests.services.conftest import client, seeded_client, seeded_store, store  # noqa: F401
