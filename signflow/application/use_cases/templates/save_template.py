"""Use case for creating or replacing templates."""

import logging

from signflow.application.use_cases.identifiers import next_identifier
from signflow.domain.entities import Template
from signflow.domain.exceptions import TEMPLATE_NOT_FOUND, ValidationError
from signflow.domain.fields import extract_fields
from signflow.infrastructure.repositories import SigningRepository
from signflow.utils import now_in_app_timezone

logger = logging.getLogger(__name__)

MISSING_TEMPLATE_DATA = "Bitte füllen Sie alle Felder aus"


def save_template(
    repository: SigningRepository,
    *,
    name: str,
    content: str,
    template_id: str | None = None,
) -> Template:
    """Store a template, deriving its ``fields`` from ``content``.

    Without ``template_id`` a new template is appended. Otherwise the stored
    record is fully replaced, keeping only its id and creation timestamp.
    """

    normalized_name = name.strip()
    normalized_content = content.strip()
    if not normalized_name or not normalized_content:
        raise ValidationError(MISSING_TEMPLATE_DATA)

    fields = extract_fields(normalized_content)
    now = now_in_app_timezone()

    if template_id is None:
        template = Template(
            id=next_identifier(repository, now),
            name=normalized_name,
            content=normalized_content,
            fields=fields,
            created_at=now,
            updated_at=now,
        )
        logger.info("Creating template %s with %d fields", template.id, len(fields))
        return repository.upsert_template(template)

    existing = repository.get_template(template_id)
    if existing is None:
        raise ValueError(TEMPLATE_NOT_FOUND)

    template = Template(
        id=existing.id,
        name=normalized_name,
        content=normalized_content,
        fields=fields,
        created_at=existing.created_at,
        updated_at=now,
    )
    logger.info("Replacing template %s with %d fields", template.id, len(fields))
    return repository.upsert_template(template)
