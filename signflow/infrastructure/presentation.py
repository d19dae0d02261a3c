"""HTML presentation of the signature block."""

from __future__ import annotations

from datetime import date, datetime
from html import escape

from signflow.domain.fields import SIGNATURE_TOKEN
from signflow.utils import format_german_date, today_in_app_timezone

SIGNED_CAPTION = "Elektronisch signiert am {date}"
SIGN_HERE_TEXT = "Unterschriftsfeld - Bitte signieren"

_SIGNED_BLOCK = (
    '<div style="margin: 20px 0; padding: 10px; border: 1px solid #ccc; border-radius: 4px;">'
    '<img src="{src}" alt="Unterschrift" style="max-width: 200px; height: auto;" />'
    '<div style="font-size: 12px; color: #666; margin-top: 5px;">{caption}</div>'
    "</div>"
)
_PLACEHOLDER_BLOCK = (
    '<div style="margin: 20px 0; padding: 20px; border: 2px dashed #ccc; '
    'border-radius: 4px; text-align: center; color: #666;">{text}</div>'
)


def signature_caption(signed_at: datetime | None, *, today: date | None = None) -> str:
    """Return the caption shown under an embedded signature."""

    moment = signed_at or today or today_in_app_timezone()
    return SIGNED_CAPTION.format(date=format_german_date(moment))


def signature_block(
    signature: str | None,
    signed_at: datetime | None,
    *,
    today: date | None = None,
) -> str:
    """Return the HTML replacing ``{UNTERSCHRIFT}``."""

    if signature:
        return _SIGNED_BLOCK.format(
            src=escape(signature, quote=True),
            caption=escape(signature_caption(signed_at, today=today)),
        )
    return _PLACEHOLDER_BLOCK.format(text=SIGN_HERE_TEXT)


def resolve_signature_block(
    content: str,
    signature: str | None,
    signed_at: datetime | None,
    *,
    today: date | None = None,
) -> str:
    """Replace the first ``{UNTERSCHRIFT}`` token of ``content``.

    Further occurrences stay literal; a document carries one signature block.
    """

    return content.replace(
        SIGNATURE_TOKEN, signature_block(signature, signed_at, today=today), 1
    )


__all__ = [
    "SIGNED_CAPTION",
    "SIGN_HERE_TEXT",
    "resolve_signature_block",
    "signature_block",
    "signature_caption",
]
