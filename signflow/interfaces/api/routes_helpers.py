"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from signflow.domain.exceptions import DOCUMENT_NOT_FOUND, TEMPLATE_NOT_FOUND

NOT_FOUND_MESSAGES = frozenset({DOCUMENT_NOT_FOUND, TEMPLATE_NOT_FOUND})


def http_error_from_value_error(exc: ValueError) -> HTTPException:
    """Translate a use case ``ValueError`` into the matching HTTP error."""

    detail = str(exc)
    status_code = status.HTTP_400_BAD_REQUEST
    if detail in NOT_FOUND_MESSAGES:
        status_code = status.HTTP_404_NOT_FOUND
    return HTTPException(status_code=status_code, detail=detail)
