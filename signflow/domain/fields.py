"""Placeholder field engine for template markup.

A field token is ``{`` followed by one or more characters other than ``}``
followed by ``}``. The identity of the field is the enclosed text with
surrounding whitespace trimmed. Two names are reserved:

``DATUM``
    Replaced with the render date (``DD.MM.YYYY``) on every render.
``UNTERSCHRIFT``
    The signature block. Left untouched here and resolved by the
    presentation layer.

Extraction and substitution never raise on malformed tokens: an unclosed
brace is not a match and an unknown field stays in the output verbatim.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Final

from signflow.utils import format_german_date, today_in_app_timezone

logger = logging.getLogger(__name__)

DATE_FIELD: Final[str] = "DATUM"
SIGNATURE_FIELD: Final[str] = "UNTERSCHRIFT"
RESERVED_FIELDS: Final[frozenset[str]] = frozenset({DATE_FIELD, SIGNATURE_FIELD})

DATE_TOKEN: Final[str] = "{%s}" % DATE_FIELD
SIGNATURE_TOKEN: Final[str] = "{%s}" % SIGNATURE_FIELD

# Offered by the template editor as one-click insertions.
QUICK_FIELDS: Final[tuple[str, ...]] = (
    "Vorname",
    "Nachname",
    "Email",
    DATE_FIELD,
    SIGNATURE_FIELD,
)

_INPUT_TYPES: Final[dict[str, str]] = {"Email": "email", "Telefon": "tel"}
_TAG_PATTERN: Final[re.Pattern[str]] = re.compile(r"<[^>]*>")


def strip_markup(content: str) -> str:
    """Replace every markup tag in ``content`` with a single space."""

    return _TAG_PATTERN.sub(" ", content)


def iter_field_tokens(text: str) -> Iterable[str]:
    """Yield the trimmed name of every field token in ``text``, left to right.

    The first ``}`` after an opening brace closes the token. An opening brace
    directly followed by ``}`` encloses nothing and is skipped.
    """

    position = 0
    length = len(text)
    while position < length:
        start = text.find("{", position)
        if start == -1:
            return
        end = text.find("}", start + 1)
        if end == -1:
            return
        if end == start + 1:
            position = start + 1
            continue
        yield text[start + 1 : end].strip()
        position = end + 1


def extract_fields(content: str) -> list[str]:
    """Return the distinct field names of ``content`` in first-seen order.

    Tokens inside markup attributes are ignored because tags are blanked out
    before scanning.
    """

    if not content:
        return []

    fields: list[str] = []
    for name in iter_field_tokens(strip_markup(content)):
        if name not in fields:
            fields.append(name)
    return fields


def render_fields(
    content: str,
    values: Mapping[str, str],
    *,
    today: date | None = None,
) -> str:
    """Substitute ``values`` into ``content`` and stamp the render date.

    Every ``{name}`` occurrence is replaced by its value. Names are used as
    regular expression source without escaping, so a name containing pattern
    characters may match more or less than the literal token; names that are
    not valid patterns are ignored. Afterwards ``{DATUM}`` is replaced by
    ``today`` (the current date when omitted). A ``DATUM`` entry in
    ``values`` never reaches the output. ``{UNTERSCHRIFT}`` and fields without
    a value are kept as literal tokens.
    """

    result = content
    for name, value in values.items():
        if name == DATE_FIELD:
            continue
        try:
            pattern = re.compile(r"\{" + name + r"\}")
        except re.error:
            logger.debug("Skipping field %r: not a usable pattern", name)
            continue
        replacement = "" if value is None else str(value)
        result = pattern.sub(lambda _match: replacement, result)

    rendered_date = format_german_date(today or today_in_app_timezone())
    return result.replace(DATE_TOKEN, rendered_date)


def is_reserved_field(name: str) -> bool:
    return name in RESERVED_FIELDS


def required_fields(fields: Iterable[str]) -> list[str]:
    """Return the fields a user has to fill in, keeping their order."""

    return [name for name in fields if not is_reserved_field(name)]


def input_type_for(name: str) -> str:
    """Return the HTML input type suggested for the field ``name``."""

    return _INPUT_TYPES.get(name, "text")


__all__ = [
    "DATE_FIELD",
    "DATE_TOKEN",
    "QUICK_FIELDS",
    "RESERVED_FIELDS",
    "SIGNATURE_FIELD",
    "SIGNATURE_TOKEN",
    "extract_fields",
    "input_type_for",
    "is_reserved_field",
    "iter_field_tokens",
    "render_fields",
    "required_fields",
    "strip_markup",
]
