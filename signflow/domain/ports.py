"""Boundary to the durable store holding the template and document collections."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

TEMPLATES_KEY = "e-signing-templates"
DOCUMENTS_KEY = "e-signing-documents"

Record = dict[str, Any]


class CollectionStore(Protocol):
    """Key/value store persisting whole collections as record lists.

    ``load`` is called once at startup; ``save`` replaces the complete
    collection stored under ``key``.
    """

    def load(self, key: str) -> list[Record]:
        ...

    def save(self, key: str, records: Sequence[Record]) -> None:
        ...


__all__ = ["CollectionStore", "DOCUMENTS_KEY", "Record", "TEMPLATES_KEY"]
