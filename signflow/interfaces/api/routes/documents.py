"""Routen für Dokumente, Signatur und Export."""

import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from fastapi.responses import HTMLResponse

from signflow.application.use_cases.documents import (
    ExportGuard,
    build_mailto_link,
    compose_signed_document_email,
    create_document as create_document_uc,
    export_document as export_document_uc,
    get_document as get_document_uc,
    list_documents as list_documents_uc,
    render_document as render_document_uc,
    render_document_html,
    update_signature as update_signature_uc,
)
from signflow.domain.entities import Document
from signflow.domain.exceptions import ExportError, ExportInProgressError, ValidationError
from signflow.infrastructure.repositories import SigningRepository
from signflow.interfaces.api.dependencies import get_export_guard, get_repository
from signflow.interfaces.api.routes_helpers import http_error_from_value_error
from signflow.interfaces.api.schemas import (
    DocumentCreate,
    DocumentCreatedRead,
    DocumentRead,
    DocumentStatus,
    EmailDraftRead,
    RenderedDocumentRead,
    SignatureUpdate,
)

router = APIRouter(prefix="/documents", tags=["documents"])

logger = logging.getLogger(__name__)


def _document_to_read_model(document: Document) -> DocumentRead:
    return DocumentRead.model_validate(document)


def _load_document(repository: SigningRepository, document_id: str) -> Document:
    try:
        return get_document_uc(repository, document_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.get("/", response_model=list[DocumentRead])
def list_documents(
    status_filter: DocumentStatus | None = Query(default=None, alias="status"),
    repository: SigningRepository = Depends(get_repository),
) -> list[DocumentRead]:
    documents = list_documents_uc(repository, status=status_filter)
    return [_document_to_read_model(document) for document in documents]


@router.post(
    "/", response_model=DocumentCreatedRead, status_code=status.HTTP_201_CREATED
)
def create_document(
    document_in: DocumentCreate,
    repository: SigningRepository = Depends(get_repository),
) -> DocumentCreatedRead:
    """Erstellt ein Dokument aus einer Vorlage und liefert den Link für den Empfänger."""

    try:
        created = create_document_uc(
            repository,
            template_id=document_in.template_id,
            values=document_in.values,
            recipient_email=document_in.recipient_email,
        )
    except ValidationError as exc:
        logger.warning("Document creation rejected: %s", exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc

    return DocumentCreatedRead(
        document=_document_to_read_model(created.document), link=created.link
    )


@router.get("/{document_id}", response_model=DocumentRead)
def read_document(
    document_id: str,
    repository: SigningRepository = Depends(get_repository),
) -> DocumentRead:
    return _document_to_read_model(_load_document(repository, document_id))


@router.get("/{document_id}/render", response_model=RenderedDocumentRead)
def read_rendered_document(
    document_id: str,
    repository: SigningRepository = Depends(get_repository),
) -> RenderedDocumentRead:
    """Liefert den Inhalt mit eingesetzten Feldern und aktuellem Datum."""

    document = _load_document(repository, document_id)
    return RenderedDocumentRead.model_validate(render_document_uc(document))


@router.get("/{document_id}/html", response_class=HTMLResponse)
def read_document_html(
    document_id: str,
    repository: SigningRepository = Depends(get_repository),
) -> HTMLResponse:
    """Liefert das fertige HTML inklusive Unterschriftsfeld."""

    document = _load_document(repository, document_id)
    return HTMLResponse(content=render_document_html(document))


@router.put("/{document_id}/signature", response_model=DocumentRead)
def update_signature(
    document_id: str,
    payload: SignatureUpdate,
    repository: SigningRepository = Depends(get_repository),
) -> DocumentRead:
    """Signiert das Dokument; ``null`` oder ``""`` (gelöschte Unterschrift) ändert nichts."""

    try:
        document = update_signature_uc(repository, document_id, payload.signature)
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc
    return _document_to_read_model(document)


@router.get("/{document_id}/export")
def export_document(
    document_id: str,
    repository: SigningRepository = Depends(get_repository),
    guard: ExportGuard = Depends(get_export_guard),
) -> Response:
    """Erstellt die PDF-Datei des Dokuments zum Herunterladen."""

    try:
        exported = export_document_uc(repository, guard, document_id)
    except ExportInProgressError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except ExportError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
        ) from exc
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc

    disposition = f"attachment; filename*=UTF-8''{quote(exported.filename)}"
    return Response(
        content=exported.content,
        media_type=exported.media_type,
        headers={"Content-Disposition": disposition},
    )


@router.get("/{document_id}/email", response_model=EmailDraftRead)
def read_email_draft(
    document_id: str,
    repository: SigningRepository = Depends(get_repository),
) -> EmailDraftRead:
    """Liefert Betreff, Text und ``mailto:``-Link für den Versand an den Empfänger."""

    document = _load_document(repository, document_id)
    draft = compose_signed_document_email(document)
    return EmailDraftRead(
        recipient=draft.recipient,
        subject=draft.subject,
        body=draft.body,
        mailto=build_mailto_link(draft),
    )
