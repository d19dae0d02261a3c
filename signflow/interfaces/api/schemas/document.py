"""Schemas for document endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DocumentStatus = Literal["pending", "signed", "completed"]


class DocumentCreate(BaseModel):
    """Payload required to instantiate a document from a template."""

    template_id: str
    values: dict[str, str] = Field(default_factory=dict)
    recipient_email: str = ""

    model_config = ConfigDict(extra="forbid")


class DocumentRead(BaseModel):
    id: str
    template_id: str
    template_name: str
    content: str
    fields: dict[str, str]
    recipient_email: str
    status: DocumentStatus
    signature: str | None
    signed_at: datetime | None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DocumentCreatedRead(BaseModel):
    document: DocumentRead
    link: str

    model_config = ConfigDict(from_attributes=True)


class RenderedDocumentRead(BaseModel):
    document_id: str
    template_name: str
    content: str
    status: DocumentStatus
    signature: str | None
    signed_at: datetime | None
    has_signature_field: bool

    model_config = ConfigDict(from_attributes=True)


class SignatureUpdate(BaseModel):
    """Signature reported by the capture surface; ``null`` after clearing."""

    signature: str | None


class EmailDraftRead(BaseModel):
    recipient: str
    subject: str
    body: str
    mailto: str


__all__ = [
    "DocumentCreate",
    "DocumentCreatedRead",
    "DocumentRead",
    "DocumentStatus",
    "EmailDraftRead",
    "RenderedDocumentRead",
    "SignatureUpdate",
]
