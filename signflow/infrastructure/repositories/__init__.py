"""Repository implementations for infrastructure layer."""

from .collection_store import SqlAlchemyCollectionStore
from .signing_repository import SigningRepository

__all__ = ["SigningRepository", "SqlAlchemyCollectionStore"]
