"""Tests for placeholder extraction and substitution."""

from datetime import date

import pytest

from signflow.domain.fields import (
    extract_fields,
    input_type_for,
    render_fields,
    required_fields,
)
from signflow.utils import format_german_date, today_in_app_timezone


def test_extract_fields_returns_unique_names_from_markup():
    html = "<p>Hello {NAME}, id {ID}. <span>{NAME}</span> {DATUM}</p>"
    assert extract_fields(html) == ["NAME", "ID", "DATUM"]


def test_extract_fields_is_repeatable():
    html = "<p>{B} {A} {B} {C}</p>"
    assert extract_fields(html) == extract_fields(html) == ["B", "A", "C"]


def test_extract_fields_ignores_tokens_inside_tag_attributes():
    html = '<span title="{HIDDEN}">{Vorname}</span>'
    assert extract_fields(html) == ["Vorname"]


def test_extract_fields_trims_and_accepts_arbitrary_text():
    assert extract_fields("{ Vorname }, {Straße und Nr.} {Vorname}") == [
        "Vorname",
        "Straße und Nr.",
    ]


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("", []),
        ("no tokens here", []),
        ("{unclosed and more", []),
        ("{} {A}", ["A"]),
        ("{A}{unclosed", ["A"]),
        ("{a{b}c}", ["a{b"]),
    ],
)
def test_extract_fields_edge_cases(content, expected):
    assert extract_fields(content) == expected


def test_render_fields_substitutes_values_and_date():
    template = "Hello {NAME}, today is {DATUM}. Id: {ID}."
    result = render_fields(template, {"NAME": "Alice", "ID": "42"})
    today = format_german_date(today_in_app_timezone())
    assert result == f"Hello Alice, today is {today}. Id: 42."


def test_render_fields_formats_date_with_zero_padding():
    result = render_fields("{DATUM}", {}, today=date(2024, 3, 5))
    assert result == "05.03.2024"


def test_render_fields_never_uses_caller_date():
    result = render_fields(
        "Datum: {DATUM}", {"DATUM": "01.01.1999"}, today=date(2024, 12, 24)
    )
    assert result == "Datum: 24.12.2024"


def test_render_fields_keeps_signature_and_unknown_tokens():
    result = render_fields(
        "{Vorname} {Nachname} {UNTERSCHRIFT}", {"Vorname": "Max"}, today=date(2024, 1, 1)
    )
    assert result == "Max {Nachname} {UNTERSCHRIFT}"


def test_render_fields_replaces_every_occurrence():
    assert render_fields("{A}-{A}", {"A": "x"}) == "x-x"


def test_render_fields_inserts_values_literally():
    assert render_fields("{A}", {"A": r"C:\temp \1 $&"}) == r"C:\temp \1 $&"


def test_render_fields_uses_names_as_patterns():
    # "." matches any character, so {A.C} also replaces {ABC}.
    assert render_fields("{ABC} {A.C}", {"A.C": "x"}) == "x x"


def test_render_fields_skips_names_that_are_not_patterns():
    assert render_fields("{a(} {b}", {"a(": "x", "b": "y"}) == "{a(} y"


def test_required_fields_drop_reserved_names():
    assert required_fields(["DATUM", "Vorname", "UNTERSCHRIFT", "Email"]) == [
        "Vorname",
        "Email",
    ]


@pytest.mark.parametrize(
    ("name", "expected"),
    [("Email", "email"), ("Telefon", "tel"), ("Vorname", "text")],
)
def test_input_type_for(name, expected):
    assert input_type_for(name) == expected
