from .document import (
    DocumentCreate,
    DocumentCreatedRead,
    DocumentRead,
    DocumentStatus,
    EmailDraftRead,
    RenderedDocumentRead,
    SignatureUpdate,
)
from .signature import SignatureCaptureRead, SignatureCaptureRequest
from .template import (
    DocumentFormRead,
    FieldExtractionRead,
    FieldExtractionRequest,
    FormFieldRead,
    TemplateRead,
    TemplateSave,
)
from .view import (
    AppViewRead,
    CreateDocumentViewRead,
    EditTemplateViewRead,
    ListViewRead,
    ViewDocumentViewRead,
)

__all__ = [
    "AppViewRead",
    "CreateDocumentViewRead",
    "DocumentCreate",
    "DocumentCreatedRead",
    "DocumentFormRead",
    "DocumentRead",
    "DocumentStatus",
    "EditTemplateViewRead",
    "EmailDraftRead",
    "FieldExtractionRead",
    "FieldExtractionRequest",
    "FormFieldRead",
    "ListViewRead",
    "RenderedDocumentRead",
    "SignatureCaptureRead",
    "SignatureCaptureRequest",
    "SignatureUpdate",
    "TemplateRead",
    "TemplateSave",
    "ViewDocumentViewRead",
]
