"""Application views and deep-link resolution.

A view is one of four variants; nothing but navigation depends on them, so
they share no base class and are dispatched by type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

from signflow.domain.entities import Document, Template
from signflow.infrastructure.repositories import SigningRepository


@dataclass(frozen=True)
class ListView:
    type: Literal["list"] = "list"


@dataclass(frozen=True)
class EditTemplateView:
    template: Template | None = None
    type: Literal["edit-template"] = "edit-template"


@dataclass(frozen=True)
class CreateDocumentView:
    template: Template
    type: Literal["create-document"] = "create-document"


@dataclass(frozen=True)
class ViewDocumentView:
    document: Document
    type: Literal["view-document"] = "view-document"


AppView = Union[ListView, EditTemplateView, CreateDocumentView, ViewDocumentView]


def resolve_entry_view(
    repository: SigningRepository, document_id: str | None
) -> AppView:
    """Return the view opened by a ``?doc=<id>`` link, or the list."""

    if document_id:
        document = repository.get_document(document_id)
        if document is not None:
            return ViewDocumentView(document=document)
    return ListView()


def describe_view(view: AppView) -> str:
    """Return the heading shown for ``view``."""

    if isinstance(view, ListView):
        return "Vorlagen"
    if isinstance(view, EditTemplateView):
        if view.template is None:
            return "Neue Vorlage erstellen"
        return "Vorlage bearbeiten"
    if isinstance(view, CreateDocumentView):
        return f"Dokument erstellen: {view.template.name}"
    if isinstance(view, ViewDocumentView):
        return view.document.template_name
    raise TypeError(f"Unsupported view: {view!r}")


__all__ = [
    "AppView",
    "CreateDocumentView",
    "EditTemplateView",
    "ListView",
    "ViewDocumentView",
    "describe_view",
    "resolve_entry_view",
]
