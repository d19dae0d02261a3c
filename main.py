import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from signflow.application.use_cases.documents import ExportGuard
from signflow.config import get_settings
from signflow.domain.ports import CollectionStore
from signflow.infrastructure.database import SessionLocal, engine, initialize_database
from signflow.infrastructure.repositories import (
    SigningRepository,
    SqlAlchemyCollectionStore,
)
from signflow.interfaces.api.routes import register_routes


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(store: CollectionStore | None = None) -> FastAPI:
    """Erstellt und konfiguriert die FastAPI-Anwendung.

    Ohne ``store`` werden die Sammlungen in der konfigurierten Datenbank gehalten.
    """

    settings = get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lädt beide Sammlungen beim Start und gibt Ressourcen beim Beenden frei."""

        collection_store = store
        if collection_store is None:
            initialize_database()
            collection_store = SqlAlchemyCollectionStore(SessionLocal)
        repository = SigningRepository(collection_store)
        repository.load()
        app.state.repository = repository
        app.state.export_guard = ExportGuard()
        yield
        if store is None:
            engine.dispose()

    app = FastAPI(title="signflow", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
