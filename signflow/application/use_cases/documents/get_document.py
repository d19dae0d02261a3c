"""Use cases for reading documents."""

from collections.abc import Sequence

from signflow.domain.entities import Document
from signflow.domain.exceptions import DOCUMENT_NOT_FOUND
from signflow.infrastructure.repositories import SigningRepository


def get_document(repository: SigningRepository, document_id: str) -> Document:
    """Return the document identified by ``document_id`` or raise an error."""

    document = repository.get_document(document_id)
    if document is None:
        raise ValueError(DOCUMENT_NOT_FOUND)
    return document


def list_documents(
    repository: SigningRepository, *, status: str | None = None
) -> Sequence[Document]:
    """Return documents in creation order, optionally filtered by status."""

    documents = repository.list_documents()
    if status is None:
        return documents
    return [document for document in documents if document.status == status]
