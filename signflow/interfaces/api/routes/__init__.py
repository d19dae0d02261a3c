from fastapi import FastAPI

from .documents import router as documents_router
from .signatures import router as signatures_router
from .templates import router as templates_router
from .views import router as views_router


def register_routes(app: FastAPI) -> None:
    """Registriert alle Router der API in der FastAPI-Anwendung."""

    app.include_router(templates_router)
    app.include_router(documents_router)
    app.include_router(signatures_router)
    app.include_router(views_router)
