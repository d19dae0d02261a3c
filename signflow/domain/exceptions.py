"""Errors raised by the signing use cases."""

TEMPLATE_NOT_FOUND = "Vorlage nicht gefunden"
DOCUMENT_NOT_FOUND = "Dokument nicht gefunden"


class ValidationError(ValueError):
    """Raised when user supplied data is incomplete; nothing was mutated."""


class ExportError(RuntimeError):
    """Raised when the export collaborator could not produce the artifact."""


class ExportInProgressError(ExportError):
    """Raised when an export is requested while another one is still running."""


__all__ = [
    "DOCUMENT_NOT_FOUND",
    "TEMPLATE_NOT_FOUND",
    "ExportError",
    "ExportInProgressError",
    "ValidationError",
]
