"""Describe the form a user fills in to create a document from a template."""

from dataclasses import dataclass

from signflow.domain.entities import Template
from signflow.domain.fields import input_type_for, required_fields


@dataclass(frozen=True)
class FormField:
    """One input the user has to provide."""

    name: str
    input_type: str
    required: bool = True


@dataclass(frozen=True)
class DocumentForm:
    template_id: str
    template_name: str
    fields: tuple[FormField, ...]


def describe_document_form(template: Template) -> DocumentForm:
    """Return the user-fillable fields of ``template`` in template order."""

    return DocumentForm(
        template_id=template.id,
        template_name=template.name,
        fields=tuple(
            FormField(name=name, input_type=input_type_for(name))
            for name in required_fields(template.fields)
        ),
    )
