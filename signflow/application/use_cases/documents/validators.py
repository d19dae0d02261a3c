"""Validation helpers for document creation."""

from collections.abc import Mapping

from signflow.domain.entities import Template
from signflow.domain.exceptions import ValidationError
from signflow.domain.fields import required_fields

MISSING_FIELDS_PREFIX = "Bitte füllen Sie alle Felder aus"
MISSING_RECIPIENT = "Bitte geben Sie eine E-Mail-Adresse ein"


def missing_fields(template: Template, values: Mapping[str, str]) -> list[str]:
    """Return the required fields of ``template`` that are absent or blank."""

    return [
        name
        for name in required_fields(template.fields)
        if not (values.get(name) or "").strip()
    ]


def ensure_document_input(
    template: Template, values: Mapping[str, str], recipient_email: str
) -> None:
    """Raise ``ValidationError`` unless every required value is present."""

    missing = missing_fields(template, values)
    if missing:
        raise ValidationError(f"{MISSING_FIELDS_PREFIX}: {', '.join(missing)}")

    if not recipient_email.strip():
        raise ValidationError(MISSING_RECIPIENT)
