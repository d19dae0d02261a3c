from datetime import date

import pytest

from signflow.application.use_cases import capture_signature
from signflow.application.use_cases.documents import (
    EXPORT_BUSY,
    EXPORT_FAILED,
    MISSING_RECIPIENT,
    ExportGuard,
    build_mailto_link,
    compose_signed_document_email,
    create_document,
    export_document,
    export_filename,
    get_document,
    list_documents,
    render_document,
    render_document_html,
    sign_document,
    update_signature,
)
from signflow.application.use_cases.templates import (
    delete_template,
    save_template,
)
from signflow.domain.entities import DOCUMENT_STATUS_PENDING, DOCUMENT_STATUS_SIGNED
from signflow.domain.exceptions import (
    DOCUMENT_NOT_FOUND,
    TEMPLATE_NOT_FOUND,
    ExportError,
    ExportInProgressError,
    ValidationError,
)
from signflow.infrastructure.presentation import SIGN_HERE_TEXT

SIGNATURE = "data:image/png;base64,iVBORw0KGgo="
OTHER_SIGNATURE = "data:image/png;base64,R0lGODlh"

CONTRACT = "<p>Name: {Vorname} {Nachname}</p><p>Datum: {DATUM}</p>{UNTERSCHRIFT}"


@pytest.fixture()
def template(repository):
    return save_template(repository, name="Vertrag", content=CONTRACT)


@pytest.fixture()
def document(repository, template):
    created = create_document(
        repository,
        template_id=template.id,
        values={"Vorname": "Max", "Nachname": "Muster"},
        recipient_email="max@example.com",
    )
    return created.document


def test_create_document_snapshots_template(repository, template):
    created = create_document(
        repository,
        template_id=template.id,
        values={"Vorname": "Max", "Nachname": "Muster"},
        recipient_email="max@example.com",
    )

    document = created.document
    assert document.status == DOCUMENT_STATUS_PENDING
    assert document.template_name == "Vertrag"
    assert document.content == CONTRACT
    assert document.signature is None
    assert document.signed_at is None
    assert created.link == f"https://sign.example.com/?doc={document.id}"
    assert get_document(repository, document.id) == document


def test_create_document_lists_missing_fields(repository, template, store):
    saves_before = len(store.saves)

    with pytest.raises(ValidationError) as exc_info:
        create_document(
            repository,
            template_id=template.id,
            values={"Vorname": "Max", "Nachname": "  "},
            recipient_email="max@example.com",
        )

    assert str(exc_info.value) == "Bitte füllen Sie alle Felder aus: Nachname"
    assert len(store.saves) == saves_before
    assert list_documents(repository) == []


def test_create_document_requires_recipient(repository, template):
    with pytest.raises(ValidationError) as exc_info:
        create_document(
            repository,
            template_id=template.id,
            values={"Vorname": "Max", "Nachname": "Muster"},
            recipient_email=" ",
        )

    assert str(exc_info.value) == MISSING_RECIPIENT


def test_template_without_fields_needs_only_recipient(repository):
    template = save_template(repository, name="Hinweis", content="<p>Bitte lesen.</p>")

    created = create_document(
        repository, template_id=template.id, values={}, recipient_email="a@b.de"
    )

    assert created.document.fields == {}


def test_create_document_for_unknown_template(repository):
    with pytest.raises(ValueError) as exc_info:
        create_document(
            repository, template_id="nope", values={}, recipient_email="a@b.de"
        )

    assert str(exc_info.value) == TEMPLATE_NOT_FOUND


def test_document_survives_template_edit_and_delete(repository, template, document):
    save_template(
        repository, name="Neu", content="<p>{Anders}</p>", template_id=template.id
    )
    stored = get_document(repository, document.id)
    assert stored.content == CONTRACT
    assert stored.template_name == "Vertrag"

    delete_template(repository, template.id)
    stored = get_document(repository, document.id)
    assert stored.content == CONTRACT
    assert stored.template_id == template.id


def test_list_documents_filters_by_status(repository, document):
    assert [d.id for d in list_documents(repository, status="pending")] == [document.id]
    assert list_documents(repository, status="signed") == []


def test_get_unknown_document(repository):
    with pytest.raises(ValueError) as exc_info:
        get_document(repository, "missing")

    assert str(exc_info.value) == DOCUMENT_NOT_FOUND


def test_sign_document_moves_to_signed(repository, document):
    signed = sign_document(repository, document.id, SIGNATURE)

    assert signed.status == DOCUMENT_STATUS_SIGNED
    assert signed.signature == SIGNATURE
    assert signed.signed_at is not None
    assert get_document(repository, document.id) == signed


def test_signing_again_overwrites_signature(repository, document):
    first = sign_document(repository, document.id, SIGNATURE)
    second = sign_document(repository, document.id, OTHER_SIGNATURE)

    assert second.status == DOCUMENT_STATUS_SIGNED
    assert second.signature == OTHER_SIGNATURE
    assert second.signed_at >= first.signed_at


def test_empty_signature_is_rejected(repository, document):
    with pytest.raises(ValidationError):
        sign_document(repository, document.id, "   ")


def test_clearing_signature_keeps_signed_state(repository, document):
    signed = sign_document(repository, document.id, SIGNATURE)

    result = update_signature(repository, document.id, None)

    assert result == signed
    assert get_document(repository, document.id).status == DOCUMENT_STATUS_SIGNED


def test_clearing_pending_document_changes_nothing(repository, document):
    result = update_signature(repository, document.id, None)

    assert result.status == DOCUMENT_STATUS_PENDING
    assert result.signature is None


def test_update_signature_signs(repository, document):
    result = update_signature(repository, document.id, SIGNATURE)

    assert result.status == DOCUMENT_STATUS_SIGNED


def test_render_document_substitutes_values_and_date(document):
    rendered = render_document(document, today=date(2024, 3, 5))

    assert rendered.content == (
        "<p>Name: Max Muster</p><p>Datum: 05.03.2024</p>{UNTERSCHRIFT}"
    )
    assert rendered.has_signature_field is True


def test_render_html_shows_placeholder_until_signed(repository, document):
    html = render_document_html(document, today=date(2024, 3, 5))

    assert SIGN_HERE_TEXT in html
    assert "{UNTERSCHRIFT}" not in html

    signed = sign_document(repository, document.id, SIGNATURE)
    html = render_document_html(signed, today=date(2024, 3, 5))
    assert f'src="{SIGNATURE}"' in html
    assert "Elektronisch signiert am" in html


def test_render_html_resolves_only_first_signature_token(repository):
    template = save_template(
        repository, name="Doppelt", content="{UNTERSCHRIFT}\n{UNTERSCHRIFT}"
    )
    document = create_document(
        repository, template_id=template.id, values={}, recipient_email="a@b.de"
    ).document

    html = render_document_html(document)

    assert html.count(SIGN_HERE_TEXT) == 1
    assert html.endswith("<br>{UNTERSCHRIFT}")


def test_export_filename(document):
    assert (
        export_filename(document, today=date(2024, 3, 5))
        == "Vertrag_max@example.com_2024-03-05.pdf"
    )


def test_export_document_renders_pdf(repository, document):
    calls = []

    def renderer(content, **kwargs):
        calls.append((content, kwargs))
        return b"%PDF-fake"

    guard = ExportGuard()
    exported = export_document(
        repository, guard, document.id, renderer=renderer, today=date(2024, 3, 5)
    )

    assert exported.content == b"%PDF-fake"
    assert exported.filename == "Vertrag_max@example.com_2024-03-05.pdf"
    assert exported.media_type == "application/pdf"
    content, kwargs = calls[0]
    assert "Max Muster" in content
    assert kwargs["title"] == "Vertrag"
    assert guard.busy is False


def test_export_refuses_while_busy(repository, document):
    guard = ExportGuard()
    guard.busy = True

    with pytest.raises(ExportInProgressError) as exc_info:
        export_document(repository, guard, document.id, renderer=lambda *a, **k: b"")

    assert str(exc_info.value) == EXPORT_BUSY
    assert guard.busy is True


def test_export_failure_is_reported_and_releases_guard(repository, document):
    def failing_renderer(content, **kwargs):
        raise RuntimeError("layout exploded")

    guard = ExportGuard()
    with pytest.raises(ExportError) as exc_info:
        export_document(repository, guard, document.id, renderer=failing_renderer)

    assert str(exc_info.value) == EXPORT_FAILED
    assert guard.busy is False
    assert get_document(repository, document.id) == document


def test_signed_document_email_draft(repository, document):
    signed = sign_document(repository, document.id, SIGNATURE)

    draft = compose_signed_document_email(signed)
    link = build_mailto_link(draft)

    assert draft.recipient == "max@example.com"
    assert draft.subject == "Ihr signiertes Dokument: Vertrag"
    assert '"Vertrag"' in draft.body
    assert link.startswith("mailto:max@example.com?subject=Ihr%20signiertes%20Dokument")
    assert "%0A" in link


def test_signed_document_exports_with_embedded_signature(repository, document):
    signature = capture_signature([[(10, 10), (200, 60)]], width=300, height=80)
    sign_document(repository, document.id, signature)

    exported = export_document(
        repository, ExportGuard(), document.id, today=date(2024, 3, 5)
    )

    assert exported.content.startswith(b"%PDF")
    assert b"/Image" in exported.content
    assert exported.filename == "Vertrag_max@example.com_2024-03-05.pdf"


def test_cleared_empty_payload_keeps_document(repository, document):
    signed = sign_document(repository, document.id, SIGNATURE)

    assert update_signature(repository, document.id, "") == signed
    assert get_document(repository, document.id).signature == SIGNATURE
