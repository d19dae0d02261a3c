"""Repository owning the template and document collections."""

from __future__ import annotations

import copy
import logging
from collections.abc import Sequence
from datetime import datetime
from typing import Any

from signflow.domain.entities import (
    DOCUMENT_STATUS_PENDING,
    DOCUMENT_STATUSES,
    Document,
    Template,
)
from signflow.domain.ports import DOCUMENTS_KEY, TEMPLATES_KEY, CollectionStore, Record
from signflow.utils import ensure_app_timezone, now_in_app_timezone

logger = logging.getLogger(__name__)


class SigningRepository:
    """Hold both ordered collections in memory and write them back whole.

    ``load`` reads the store once; every mutation afterwards persists the full
    affected collection. Entities handed out are copies, so callers change
    state only through ``upsert_*`` and ``delete_*``. A mutation becomes
    visible only after the store accepted the new collection.
    """

    def __init__(self, store: CollectionStore) -> None:
        self.store = store
        self._templates: list[Template] = []
        self._documents: list[Document] = []

    def load(self) -> None:
        self._templates = [
            self._template_from_record(record)
            for record in self.store.load(TEMPLATES_KEY)
        ]
        self._documents = [
            self._document_from_record(record)
            for record in self.store.load(DOCUMENTS_KEY)
        ]
        logger.info(
            "Loaded %d templates and %d documents",
            len(self._templates),
            len(self._documents),
        )

    def list_templates(self) -> Sequence[Template]:
        return [copy.deepcopy(template) for template in self._templates]

    def get_template(self, template_id: str) -> Template | None:
        for template in self._templates:
            if template.id == template_id:
                return copy.deepcopy(template)
        return None

    def upsert_template(self, template: Template) -> Template:
        stored = copy.deepcopy(template)
        templates = _replace_or_append(self._templates, stored)
        self._save_templates(templates)
        self._templates = templates
        return copy.deepcopy(stored)

    def delete_template(self, template_id: str) -> None:
        remaining = [t for t in self._templates if t.id != template_id]
        if len(remaining) == len(self._templates):
            msg = f"Template with id {template_id} not found"
            raise ValueError(msg)
        self._save_templates(remaining)
        self._templates = remaining

    def list_documents(self) -> Sequence[Document]:
        return [copy.deepcopy(document) for document in self._documents]

    def get_document(self, document_id: str) -> Document | None:
        for document in self._documents:
            if document.id == document_id:
                return copy.deepcopy(document)
        return None

    def upsert_document(self, document: Document) -> Document:
        stored = copy.deepcopy(document)
        documents = _replace_or_append(self._documents, stored)
        self._save_documents(documents)
        self._documents = documents
        return copy.deepcopy(stored)

    def identifiers(self) -> set[str]:
        """Return every id currently used by a template or a document."""

        return {t.id for t in self._templates} | {d.id for d in self._documents}

    def _save_templates(self, templates: Sequence[Template]) -> None:
        self.store.save(TEMPLATES_KEY, [self._template_to_record(t) for t in templates])

    def _save_documents(self, documents: Sequence[Document]) -> None:
        self.store.save(DOCUMENTS_KEY, [self._document_to_record(d) for d in documents])

    @staticmethod
    def _template_to_record(template: Template) -> Record:
        return {
            "id": template.id,
            "name": template.name,
            "content": template.content,
            "fields": list(template.fields),
            "createdAt": _format_timestamp(template.created_at),
            "updatedAt": _format_timestamp(template.updated_at),
        }

    @staticmethod
    def _template_from_record(record: Record) -> Template:
        created_at = _parse_timestamp(record.get("createdAt")) or now_in_app_timezone()
        return Template(
            id=str(record["id"]),
            name=str(record.get("name", "")),
            content=str(record.get("content", "")),
            fields=[str(name) for name in record.get("fields") or []],
            created_at=created_at,
            updated_at=_parse_timestamp(record.get("updatedAt")) or created_at,
        )

    @staticmethod
    def _document_to_record(document: Document) -> Record:
        record: Record = {
            "id": document.id,
            "templateId": document.template_id,
            "templateName": document.template_name,
            "content": document.content,
            "fields": dict(document.fields),
            "recipientEmail": document.recipient_email,
            "status": document.status,
            "createdAt": _format_timestamp(document.created_at),
        }
        if document.signature is not None:
            record["signature"] = document.signature
        if document.signed_at is not None:
            record["signedAt"] = _format_timestamp(document.signed_at)
        return record

    @staticmethod
    def _document_from_record(record: Record) -> Document:
        fields = record.get("fields") or {}
        return Document(
            id=str(record["id"]),
            template_id=str(record.get("templateId", "")),
            template_name=str(record.get("templateName", "")),
            content=str(record.get("content", "")),
            fields={str(key): str(value) for key, value in fields.items()},
            recipient_email=str(record.get("recipientEmail", "")),
            status=_parse_status(record.get("status")),
            signature=record.get("signature") or None,
            signed_at=_parse_timestamp(record.get("signedAt")),
            created_at=_parse_timestamp(record.get("createdAt")) or now_in_app_timezone(),
        )


def _replace_or_append(items: list, item: Any) -> list:
    """Return a copy of ``items`` with ``item`` replacing the entry sharing its id."""

    updated = list(items)
    for index, existing in enumerate(updated):
        if existing.id == item.id:
            updated[index] = item
            return updated
    updated.append(item)
    return updated


def _format_timestamp(value: datetime | None) -> str | None:
    localized = ensure_app_timezone(value)
    return localized.isoformat() if localized else None


def _parse_status(value: Any) -> str:
    if value in DOCUMENT_STATUSES:
        return str(value)
    if value:
        logger.warning("Unknown document status %r; treating as pending", value)
    return DOCUMENT_STATUS_PENDING


def _parse_timestamp(value: Any) -> datetime | None:
    if not value:
        return None
    try:
        return ensure_app_timezone(datetime.fromisoformat(str(value)))
    except ValueError:
        logger.warning("Ignoring unreadable timestamp %r", value)
        return None


__all__ = ["SigningRepository"]
