"""FastAPI dependency utilities."""

from fastapi import HTTPException, Request, status

from signflow.application.use_cases.documents import ExportGuard
from signflow.infrastructure.repositories import SigningRepository


def get_repository(request: Request) -> SigningRepository:
    """Return the repository created for this application instance."""

    repository = getattr(request.app.state, "repository", None)
    if repository is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Der Speicher ist noch nicht geladen",
        )
    return repository


def get_export_guard(request: Request) -> ExportGuard:
    guard = getattr(request.app.state, "export_guard", None)
    if guard is None:
        guard = ExportGuard()
        request.app.state.export_guard = guard
    return guard
