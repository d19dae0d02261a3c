"""Schemas describing the application view a client should open."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from .document import DocumentRead
from .template import TemplateRead


class ListViewRead(BaseModel):
    type: Literal["list"] = "list"
    title: str


class EditTemplateViewRead(BaseModel):
    type: Literal["edit-template"] = "edit-template"
    title: str
    template: TemplateRead | None = None


class CreateDocumentViewRead(BaseModel):
    type: Literal["create-document"] = "create-document"
    title: str
    template: TemplateRead


class ViewDocumentViewRead(BaseModel):
    type: Literal["view-document"] = "view-document"
    title: str
    document: DocumentRead


AppViewRead = Annotated[
    Union[ListViewRead, EditTemplateViewRead, CreateDocumentViewRead, ViewDocumentViewRead],
    Field(discriminator="type"),
]


__all__ = [
    "AppViewRead",
    "CreateDocumentViewRead",
    "EditTemplateViewRead",
    "ListViewRead",
    "ViewDocumentViewRead",
]
