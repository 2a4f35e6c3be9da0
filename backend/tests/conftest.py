"""Root conftest — shared test configuration."""

import os
from datetime import datetime

import pytest

from tests.factories import FIXED_NOW

# Ensure tests never touch a real data file or emit JSON logs
os.environ.setdefault("DATA_FILE", "test-data/interns.json")
os.environ.setdefault("SEED_DATA", "false")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW
