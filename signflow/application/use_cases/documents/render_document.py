"""Use cases producing the displayable content of a document."""

from dataclasses import dataclass
from datetime import date, datetime

from signflow.domain.entities import Document
from signflow.domain.fields import SIGNATURE_TOKEN, render_fields
from signflow.infrastructure.presentation import resolve_signature_block


@dataclass(frozen=True)
class RenderedDocument:
    """Substituted content plus the state the presentation layer needs."""

    document_id: str
    template_name: str
    content: str
    status: str
    signature: str | None
    signed_at: datetime | None
    has_signature_field: bool


def render_document(document: Document, *, today: date | None = None) -> RenderedDocument:
    """Substitute the stored values and the render date into ``document``.

    ``{UNTERSCHRIFT}`` is left in ``content`` for the presentation layer.
    """

    return RenderedDocument(
        document_id=document.id,
        template_name=document.template_name,
        content=render_fields(document.content, document.fields, today=today),
        status=document.status,
        signature=document.signature,
        signed_at=document.signed_at,
        has_signature_field=SIGNATURE_TOKEN in document.content,
    )


def render_document_html(document: Document, *, today: date | None = None) -> str:
    """Return the final HTML of ``document`` including its signature block."""

    rendered = render_document(document, today=today)
    content = rendered.content
    if rendered.has_signature_field:
        content = resolve_signature_block(
            content, rendered.signature, rendered.signed_at, today=today
        )
    return content.replace("\n", "<br>")
