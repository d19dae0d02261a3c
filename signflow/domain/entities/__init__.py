"""Domain entities exposed by the application."""

from .document import (
    DOCUMENT_STATUS_COMPLETED,
    DOCUMENT_STATUS_PENDING,
    DOCUMENT_STATUS_SIGNED,
    DOCUMENT_STATUSES,
    Document,
)
from .template import Template

__all__ = [
    "Document",
    "DOCUMENT_STATUS_PENDING",
    "DOCUMENT_STATUS_SIGNED",
    "DOCUMENT_STATUS_COMPLETED",
    "DOCUMENT_STATUSES",
    "Template",
]
