"""Use case for instantiating a document from a template."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from signflow.application.use_cases.documents.validators import ensure_document_input
from signflow.application.use_cases.identifiers import next_identifier
from signflow.config import get_settings
from signflow.domain.entities import DOCUMENT_STATUS_PENDING, Document
from signflow.domain.exceptions import TEMPLATE_NOT_FOUND
from signflow.infrastructure.repositories import SigningRepository
from signflow.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreatedDocument:
    """A freshly created document and the link to share with its recipient."""

    document: Document
    link: str


def build_document_link(document_id: str) -> str:
    """Return the deep link that opens ``document_id`` for signing."""

    return f"{get_settings().public_base_url}/?doc={document_id}"


def create_document(
    repository: SigningRepository,
    *,
    template_id: str,
    values: Mapping[str, str],
    recipient_email: str,
) -> CreatedDocument:
    """Create a pending document holding a snapshot of the template content."""

    template = repository.get_template(template_id)
    if template is None:
        raise ValueError(TEMPLATE_NOT_FOUND)

    ensure_document_input(template, values, recipient_email)

    now = now_in_app_timezone()
    document = Document(
        id=next_identifier(repository, now),
        template_id=template.id,
        template_name=template.name,
        content=template.content,
        fields=dict(values),
        recipient_email=recipient_email,
        status=DOCUMENT_STATUS_PENDING,
        created_at=now,
    )
    saved = repository.upsert_document(document)
    link = build_document_link(saved.id)
    logger.info(
        "Created document %s from template %s for %s",
        saved.id,
        template.id,
        recipient_email,
    )
    return CreatedDocument(document=saved, link=link)
