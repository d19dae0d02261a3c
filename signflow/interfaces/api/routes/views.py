"""Route resolving which view a deep link opens."""

from fastapi import APIRouter, Depends, Query

from signflow.application.navigation import (
    AppView,
    CreateDocumentView,
    EditTemplateView,
    ListView,
    ViewDocumentView,
    describe_view,
    resolve_entry_view,
)
from signflow.infrastructure.repositories import SigningRepository
from signflow.interfaces.api.dependencies import get_repository
from signflow.interfaces.api.schemas import (
    AppViewRead,
    CreateDocumentViewRead,
    DocumentRead,
    EditTemplateViewRead,
    ListViewRead,
    TemplateRead,
    ViewDocumentViewRead,
)

router = APIRouter(prefix="/views", tags=["views"])


def _view_to_read_model(view: AppView) -> AppViewRead:
    title = describe_view(view)
    if isinstance(view, ListView):
        return ListViewRead(title=title)
    if isinstance(view, EditTemplateView):
        template = TemplateRead.model_validate(view.template) if view.template else None
        return EditTemplateViewRead(title=title, template=template)
    if isinstance(view, CreateDocumentView):
        return CreateDocumentViewRead(
            title=title, template=TemplateRead.model_validate(view.template)
        )
    if isinstance(view, ViewDocumentView):
        return ViewDocumentViewRead(
            title=title, document=DocumentRead.model_validate(view.document)
        )
    raise TypeError(f"Unsupported view: {view!r}")


@router.get("/entry", response_model=AppViewRead)
def entry_view(
    doc: str | None = Query(default=None),
    repository: SigningRepository = Depends(get_repository),
) -> AppViewRead:
    """Öffnet das Dokument aus ``?doc=<id>`` oder andernfalls die Vorlagenliste."""

    return _view_to_read_model(resolve_entry_view(repository, doc))
