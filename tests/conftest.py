"""Shared fixtures for the test-suite."""

from __future__ import annotations

import copy
import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "signflow_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["APP_TIMEZONE"] = "Europe/Berlin"
os.environ["PUBLIC_BASE_URL"] = "https://sign.example.com/"

from signflow.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from signflow.infrastructure.repositories import SigningRepository  # noqa: E402


class MemoryCollectionStore:
    """Store double recording every whole-collection write."""

    def __init__(self, initial: dict[str, list[dict]] | None = None) -> None:
        self.collections = copy.deepcopy(initial or {})
        self.saves: list[tuple[str, list[dict]]] = []

    def load(self, key):
        return copy.deepcopy(self.collections.get(key, []))

    def save(self, key, records):
        snapshot = copy.deepcopy(list(records))
        self.collections[key] = snapshot
        self.saves.append((key, snapshot))


@pytest.fixture()
def store() -> MemoryCollectionStore:
    return MemoryCollectionStore()


@pytest.fixture()
def repository(store: MemoryCollectionStore) -> SigningRepository:
    repo = SigningRepository(store)
    repo.load()
    return repo
