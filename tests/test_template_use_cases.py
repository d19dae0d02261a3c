import pytest

from signflow.application.use_cases.templates import (
    MISSING_TEMPLATE_DATA,
    delete_template,
    describe_document_form,
    get_template,
    list_templates,
    save_template,
)
from signflow.domain.exceptions import TEMPLATE_NOT_FOUND, ValidationError


def test_save_template_derives_fields_and_trims_input(repository):
    template = save_template(
        repository,
        name="  Mietvertrag ",
        content="  <p>{Vorname} {Nachname}</p><p>{DATUM}</p>{UNTERSCHRIFT}  ",
    )

    assert template.name == "Mietvertrag"
    assert template.content.startswith("<p>")
    assert template.fields == ["Vorname", "Nachname", "DATUM", "UNTERSCHRIFT"]
    assert template.created_at == template.updated_at
    assert list_templates(repository) == [template]


@pytest.mark.parametrize(
    ("name", "content"),
    [("", "<p>{A}</p>"), ("Vertrag", "   "), ("  ", "")],
)
def test_save_template_rejects_blank_input_without_writing(repository, store, name, content):
    with pytest.raises(ValidationError) as exc_info:
        save_template(repository, name=name, content=content)

    assert str(exc_info.value) == MISSING_TEMPLATE_DATA
    assert store.saves == []


def test_replacing_template_keeps_id_and_creation_time(repository):
    original = save_template(repository, name="Vertrag", content="{A}")

    updated = save_template(
        repository, name="Vertrag v2", content="{B} {C}", template_id=original.id
    )

    assert updated.id == original.id
    assert updated.created_at == original.created_at
    assert updated.updated_at >= original.updated_at
    assert updated.fields == ["B", "C"]
    assert [t.name for t in list_templates(repository)] == ["Vertrag v2"]


def test_replacing_unknown_template_raises(repository):
    with pytest.raises(ValueError) as exc_info:
        save_template(repository, name="X", content="{A}", template_id="nope")

    assert str(exc_info.value) == TEMPLATE_NOT_FOUND


def test_new_templates_get_distinct_identifiers(repository):
    first = save_template(repository, name="A", content="a")
    second = save_template(repository, name="B", content="b")

    assert first.id != second.id
    assert [t.id for t in list_templates(repository)] == [first.id, second.id]


def test_delete_template(repository):
    template = save_template(repository, name="A", content="a")

    delete_template(repository, template.id)

    assert list_templates(repository) == []
    with pytest.raises(ValueError) as exc_info:
        get_template(repository, template.id)
    assert str(exc_info.value) == TEMPLATE_NOT_FOUND


def test_delete_unknown_template_raises(repository):
    with pytest.raises(ValueError):
        delete_template(repository, "missing")


def test_document_form_lists_user_fillable_fields(repository):
    template = save_template(
        repository,
        name="Anmeldung",
        content="{Vorname} {Email} {Telefon} {DATUM} {UNTERSCHRIFT}",
    )

    form = describe_document_form(template)

    assert form.template_name == "Anmeldung"
    assert [(f.name, f.input_type) for f in form.fields] == [
        ("Vorname", "text"),
        ("Email", "email"),
        ("Telefon", "tel"),
    ]
