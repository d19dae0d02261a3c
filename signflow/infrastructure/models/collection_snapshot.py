"""SQLAlchemy model for whole-collection snapshots."""

from sqlalchemy import Column, DateTime, String, Text

from signflow.infrastructure.database import Base
from signflow.utils import now_in_app_timezone


class CollectionSnapshotModel(Base):
    """One serialized record list stored under a fixed logical key."""

    __tablename__ = "collection_snapshot"

    key = Column(String(64), primary_key=True)
    payload = Column(Text, nullable=False, default="[]")
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=now_in_app_timezone,
        onupdate=now_in_app_timezone,
    )


__all__ = ["CollectionSnapshotModel"]
