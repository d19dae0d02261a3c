"""Schemas for template endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TemplateSave(BaseModel):
    """Payload creating a template or fully replacing an existing one."""

    name: str = Field(..., max_length=200)
    content: str

    model_config = ConfigDict(extra="forbid")


class TemplateRead(BaseModel):
    id: str
    name: str
    content: str
    fields: list[str]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class FieldExtractionRequest(BaseModel):
    content: str


class FieldExtractionRead(BaseModel):
    fields: list[str]


class FormFieldRead(BaseModel):
    name: str
    input_type: str
    required: bool

    model_config = ConfigDict(from_attributes=True)


class DocumentFormRead(BaseModel):
    template_id: str
    template_name: str
    fields: list[FormFieldRead]

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "DocumentFormRead",
    "FieldExtractionRead",
    "FieldExtractionRequest",
    "FormFieldRead",
    "TemplateRead",
    "TemplateSave",
]
