"""Signing transitions of the document lifecycle.

``pending`` is the initial status. Supplying signature data moves a document
to ``signed``; signing again only overwrites the signature and its timestamp.
Clearing a signature is not a transition: the stored status and ``signed_at``
stay as they were last committed.
"""

import logging
from dataclasses import replace
from datetime import datetime

from signflow.domain.entities import DOCUMENT_STATUS_SIGNED, Document
from signflow.domain.exceptions import DOCUMENT_NOT_FOUND, ValidationError
from signflow.infrastructure.repositories import SigningRepository
from signflow.utils import now_in_app_timezone

logger = logging.getLogger(__name__)

EMPTY_SIGNATURE = "Die Unterschrift darf nicht leer sein"


def apply_signature(document: Document, signature: str, signed_at: datetime) -> Document:
    """Return ``document`` moved to ``signed`` and carrying ``signature``."""

    return replace(
        document,
        signature=signature,
        signed_at=signed_at,
        status=DOCUMENT_STATUS_SIGNED,
    )


def sign_document(
    repository: SigningRepository, document_id: str, signature: str
) -> Document:
    """Attach ``signature`` to the document and persist the signed state."""

    if not signature or not signature.strip():
        raise ValidationError(EMPTY_SIGNATURE)

    document = repository.get_document(document_id)
    if document is None:
        raise ValueError(DOCUMENT_NOT_FOUND)

    resigned = document.status == DOCUMENT_STATUS_SIGNED
    signed = apply_signature(document, signature, now_in_app_timezone())
    saved = repository.upsert_document(signed)
    if resigned:
        logger.info("Replaced signature of document %s", document_id)
    else:
        logger.info("Document %s signed", document_id)
    return saved


def update_signature(
    repository: SigningRepository, document_id: str, signature: str | None
) -> Document:
    """Handle a signature change reported by the capture surface.

    A payload signs the document. ``None`` or an empty payload (the surface
    was cleared) leaves the stored document untouched and returns it as is.
    """

    if not signature:
        document = repository.get_document(document_id)
        if document is None:
            raise ValueError(DOCUMENT_NOT_FOUND)
        logger.debug("Signature cleared for document %s; status kept", document_id)
        return document
    return sign_document(repository, document_id, signature)
