"""ORM models used by the application infrastructure."""

from .collection_snapshot import CollectionSnapshotModel

__all__ = ["CollectionSnapshotModel"]
