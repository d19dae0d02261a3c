"""Routen zur Verwaltung von Vorlagen."""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from signflow.application.use_cases.templates import (
    delete_template as delete_template_uc,
    describe_document_form as describe_document_form_uc,
    get_template as get_template_uc,
    list_templates as list_templates_uc,
    save_template as save_template_uc,
)
from signflow.domain.entities import Template
from signflow.domain.fields import QUICK_FIELDS, extract_fields
from signflow.infrastructure.repositories import SigningRepository
from signflow.interfaces.api.dependencies import get_repository
from signflow.interfaces.api.routes_helpers import http_error_from_value_error
from signflow.interfaces.api.schemas import (
    DocumentFormRead,
    FieldExtractionRead,
    FieldExtractionRequest,
    TemplateRead,
    TemplateSave,
)

router = APIRouter(prefix="/templates", tags=["templates"])


def _template_to_read_model(template: Template) -> TemplateRead:
    return TemplateRead.model_validate(template)


@router.get("/", response_model=list[TemplateRead])
def list_templates(
    repository: SigningRepository = Depends(get_repository),
) -> list[TemplateRead]:
    """Liefert alle Vorlagen in Erstellungsreihenfolge."""

    return [_template_to_read_model(t) for t in list_templates_uc(repository)]


@router.post("/", response_model=TemplateRead, status_code=status.HTTP_201_CREATED)
def create_template(
    template_in: TemplateSave,
    repository: SigningRepository = Depends(get_repository),
) -> TemplateRead:
    """Legt eine neue Vorlage an und ermittelt ihre Felder."""

    try:
        template = save_template_uc(
            repository, name=template_in.name, content=template_in.content
        )
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc
    return _template_to_read_model(template)


@router.post("/extract-fields", response_model=FieldExtractionRead)
def preview_fields(payload: FieldExtractionRequest) -> FieldExtractionRead:
    """Zeigt die Felder, die beim Speichern erkannt würden."""

    return FieldExtractionRead(fields=extract_fields(payload.content))


@router.get("/quick-fields", response_model=FieldExtractionRead)
def quick_fields() -> FieldExtractionRead:
    return FieldExtractionRead(fields=list(QUICK_FIELDS))


@router.get("/{template_id}", response_model=TemplateRead)
def read_template(
    template_id: str,
    repository: SigningRepository = Depends(get_repository),
) -> TemplateRead:
    try:
        template = get_template_uc(repository, template_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _template_to_read_model(template)


@router.get("/{template_id}/form", response_model=DocumentFormRead)
def read_document_form(
    template_id: str,
    repository: SigningRepository = Depends(get_repository),
) -> DocumentFormRead:
    """Beschreibt die Eingaben zum Erstellen eines Dokuments aus der Vorlage."""

    try:
        template = get_template_uc(repository, template_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return DocumentFormRead.model_validate(describe_document_form_uc(template))


@router.put("/{template_id}", response_model=TemplateRead)
def replace_template(
    template_id: str,
    template_in: TemplateSave,
    repository: SigningRepository = Depends(get_repository),
) -> TemplateRead:
    """Ersetzt eine bestehende Vorlage vollständig."""

    try:
        template = save_template_uc(
            repository,
            name=template_in.name,
            content=template_in.content,
            template_id=template_id,
        )
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc
    return _template_to_read_model(template)


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_template(
    template_id: str,
    repository: SigningRepository = Depends(get_repository),
) -> Response:
    """Löscht die Vorlage; bereits erstellte Dokumente bleiben erhalten."""

    try:
        delete_template_uc(repository, template_id)
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
