"""Use case exporting a rendered document as a downloadable PDF."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date

from signflow.application.use_cases.documents.get_document import get_document
from signflow.application.use_cases.documents.render_document import render_document
from signflow.domain.entities import Document
from signflow.domain.exceptions import ExportError, ExportInProgressError
from signflow.infrastructure.pdf_export import PDF_MEDIA_TYPE, render_pdf
from signflow.infrastructure.repositories import SigningRepository
from signflow.utils import today_in_app_timezone

logger = logging.getLogger(__name__)

EXPORT_FAILED = "Fehler beim Erstellen der PDF-Datei"
EXPORT_BUSY = "Es wird bereits eine PDF-Datei erstellt"

PdfRenderer = Callable[..., bytes]


@dataclass(frozen=True)
class ExportedFile:
    filename: str
    content: bytes
    media_type: str = PDF_MEDIA_TYPE


class ExportGuard:
    """In-flight flag preventing a second export from starting.

    This does not cancel anything; an export that started always runs to
    completion.
    """

    def __init__(self) -> None:
        self.busy = False

    @contextmanager
    def hold(self) -> Iterator[None]:
        if self.busy:
            raise ExportInProgressError(EXPORT_BUSY)
        self.busy = True
        try:
            yield
        finally:
            self.busy = False


def export_filename(document: Document, *, today: date | None = None) -> str:
    """Return ``<template>_<recipient>_<YYYY-MM-DD>.pdf`` for ``document``."""

    day = today or today_in_app_timezone()
    return f"{document.template_name}_{document.recipient_email}_{day.isoformat()}.pdf"


def export_document(
    repository: SigningRepository,
    guard: ExportGuard,
    document_id: str,
    *,
    renderer: PdfRenderer = render_pdf,
    today: date | None = None,
) -> ExportedFile:
    """Render the document to PDF; the document itself is never modified."""

    document = get_document(repository, document_id)
    with guard.hold():
        rendered = render_document(document, today=today)
        try:
            content = renderer(
                rendered.content,
                title=rendered.template_name,
                signature=rendered.signature,
                signed_at=rendered.signed_at,
                today=today,
            )
        except Exception as exc:
            logger.warning("PDF export of document %s failed: %s", document_id, exc)
            raise ExportError(EXPORT_FAILED) from exc

    filename = export_filename(document, today=today)
    logger.info("Exported document %s as %s", document_id, filename)
    return ExportedFile(filename=filename, content=content)
