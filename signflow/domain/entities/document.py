"""Domain entity representing a document instantiated from a template."""

from dataclasses import dataclass, field
from datetime import datetime

DOCUMENT_STATUS_PENDING = "pending"
DOCUMENT_STATUS_SIGNED = "signed"
# Declared for stored records; no transition produces it yet.
DOCUMENT_STATUS_COMPLETED = "completed"

DOCUMENT_STATUSES = (
    DOCUMENT_STATUS_PENDING,
    DOCUMENT_STATUS_SIGNED,
    DOCUMENT_STATUS_COMPLETED,
)


@dataclass
class Document:
    """A value-filled, recipient-bound copy of a template.

    ``content``, ``template_id`` and ``template_name`` are snapshots taken at
    creation time and stay untouched when the template changes.
    """

    id: str
    template_id: str
    template_name: str
    content: str
    recipient_email: str
    status: str
    created_at: datetime
    fields: dict[str, str] = field(default_factory=dict)
    signature: str | None = None
    signed_at: datetime | None = None


__all__ = [
    "Document",
    "DOCUMENT_STATUS_PENDING",
    "DOCUMENT_STATUS_SIGNED",
    "DOCUMENT_STATUS_COMPLETED",
    "DOCUMENT_STATUSES",
]
