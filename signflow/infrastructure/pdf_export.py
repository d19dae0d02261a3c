"""PDF rendering of documents using reportlab."""

from __future__ import annotations

import html
import io
import re
from datetime import date, datetime
from typing import Final

from PIL import Image as PILImage
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Image, Paragraph, SimpleDocTemplate, Spacer

from signflow.domain.fields import SIGNATURE_TOKEN
from signflow.infrastructure.presentation import SIGN_HERE_TEXT, signature_caption
from signflow.infrastructure.signature_canvas import open_signature_image

PDF_MEDIA_TYPE: Final[str] = "application/pdf"
SIGNATURE_MAX_WIDTH: Final[float] = 200.0

_BLOCK_BREAK: Final[re.Pattern[str]] = re.compile(
    r"(?i)<br\s*/?>|</(?:p|div|h[1-6]|li|tr|blockquote)>|\n"
)
_TAG: Final[re.Pattern[str]] = re.compile(r"<[^>]*>")


def html_to_lines(content: str) -> list[str]:
    """Flatten markup into plain text lines, one per block element."""

    text = _TAG.sub("", _BLOCK_BREAK.sub("\n", content))
    return [html.unescape(line).strip() for line in text.split("\n")]


def _signature_flowable(signature: str) -> Image:
    image = open_signature_image(signature)
    # reportlab ignores the alpha channel of inline images; flatten on white.
    background = PILImage.new("RGB", image.size, (255, 255, 255))
    background.paste(image, mask=image.getchannel("A"))
    buffer = io.BytesIO()
    background.save(buffer, format="PNG")
    buffer.seek(0)

    pixel_width, pixel_height = image.size
    width = min(SIGNATURE_MAX_WIDTH, float(pixel_width))
    height = width * pixel_height / pixel_width
    flowable = Image(buffer, width=width, height=height)
    flowable.hAlign = "LEFT"
    return flowable


def render_pdf(
    content: str,
    *,
    title: str,
    signature: str | None = None,
    signed_at: datetime | None = None,
    today: date | None = None,
) -> bytes:
    """Lay out ``content`` on A4 pages and return the PDF bytes.

    ``content`` is the substituted document; its first ``{UNTERSCHRIFT}``
    becomes the signature image with its caption, or the sign-here notice.
    """

    styles = getSampleStyleSheet()
    body = styles["BodyText"]
    story: list = [Paragraph(html.escape(title), styles["Title"]), Spacer(1, 6 * mm)]
    signature_placed = False

    for line in html_to_lines(content):
        if not signature_placed and SIGNATURE_TOKEN in line:
            before, _, after = line.partition(SIGNATURE_TOKEN)
            if before.strip():
                story.append(Paragraph(html.escape(before), body))
            if signature:
                story.append(_signature_flowable(signature))
                story.append(
                    Paragraph(
                        html.escape(signature_caption(signed_at, today=today)), body
                    )
                )
            else:
                story.append(Paragraph(html.escape(SIGN_HERE_TEXT), body))
            if after.strip():
                story.append(Paragraph(html.escape(after), body))
            signature_placed = True
            continue
        if line:
            story.append(Paragraph(html.escape(line), body))
        else:
            story.append(Spacer(1, 3 * mm))

    buffer = io.BytesIO()
    pdf = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        title=title,
        leftMargin=20 * mm,
        rightMargin=20 * mm,
        topMargin=20 * mm,
        bottomMargin=20 * mm,
    )
    pdf.build(story)
    return buffer.getvalue()


__all__ = ["PDF_MEDIA_TYPE", "html_to_lines", "render_pdf"]
