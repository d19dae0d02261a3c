"""Document-related use cases."""

from .create_document import CreatedDocument, build_document_link, create_document
from .email_draft import EmailDraft, build_mailto_link, compose_signed_document_email
from .export_document import (
    EXPORT_BUSY,
    EXPORT_FAILED,
    ExportedFile,
    ExportGuard,
    export_document,
    export_filename,
)
from .get_document import get_document, list_documents
from .render_document import RenderedDocument, render_document, render_document_html
from .sign_document import apply_signature, sign_document, update_signature
from .validators import (
    MISSING_FIELDS_PREFIX,
    MISSING_RECIPIENT,
    ensure_document_input,
    missing_fields,
)

__all__ = [
    "CreatedDocument",
    "EXPORT_BUSY",
    "EXPORT_FAILED",
    "EmailDraft",
    "ExportGuard",
    "ExportedFile",
    "MISSING_FIELDS_PREFIX",
    "MISSING_RECIPIENT",
    "RenderedDocument",
    "apply_signature",
    "build_document_link",
    "build_mailto_link",
    "compose_signed_document_email",
    "create_document",
    "ensure_document_input",
    "export_document",
    "export_filename",
    "get_document",
    "list_documents",
    "missing_fields",
    "render_document",
    "render_document_html",
    "sign_document",
    "update_signature",
]
