"""Persistence layer storing whole collections under fixed keys."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Sequence

from sqlalchemy.orm import Session

from signflow.domain.ports import Record
from signflow.infrastructure.models import CollectionSnapshotModel
from signflow.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


class SqlAlchemyCollectionStore:
    """Keep each collection as a single JSON payload row.

    Every ``save`` rewrites the complete payload for its key, so the cost of a
    write grows with the size of the collection rather than the change.
    """

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self.session_factory = session_factory

    def load(self, key: str) -> list[Record]:
        with self.session_factory() as session:
            model = session.get(CollectionSnapshotModel, key)
            if model is None:
                return []
            payload = model.payload
        try:
            records = json.loads(payload or "[]")
        except json.JSONDecodeError:
            logger.error("Stored collection %s is not valid JSON; starting empty", key)
            return []
        if not isinstance(records, list):
            logger.error("Stored collection %s is not a record list; starting empty", key)
            return []
        return [record for record in records if isinstance(record, dict)]

    def save(self, key: str, records: Sequence[Record]) -> None:
        payload = json.dumps(list(records), ensure_ascii=False)
        with self.session_factory() as session:
            model = session.get(CollectionSnapshotModel, key)
            if model is None:
                model = CollectionSnapshotModel(key=key)
            model.payload = payload
            model.updated_at = now_in_app_timezone()
            session.add(model)
            session.commit()
        logger.debug("Saved %d records under %s", len(records), key)


__all__ = ["SqlAlchemyCollectionStore"]
