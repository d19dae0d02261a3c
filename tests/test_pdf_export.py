from datetime import date

import pytest

from signflow.application.use_cases import capture_signature
from signflow.infrastructure.pdf_export import html_to_lines, render_pdf


def test_html_to_lines_splits_block_elements():
    lines = html_to_lines("<p>Erste &amp; Zeile</p><p>Zweite<br/>Dritte</p>")

    assert [line for line in lines if line] == ["Erste & Zeile", "Zweite", "Dritte"]


def test_render_pdf_without_signature():
    content = render_pdf(
        "<p>Hallo Max</p>{UNTERSCHRIFT}", title="Vertrag", today=date(2024, 3, 5)
    )

    assert content.startswith(b"%PDF")


def test_render_pdf_embeds_signature_image():
    signature = capture_signature([[(10, 10), (200, 60)]], width=300, height=80)

    content = render_pdf(
        "<p>Hallo Max</p><p>{UNTERSCHRIFT}</p><p>{UNTERSCHRIFT}</p>",
        title="Vertrag <Entwurf>",
        signature=signature,
    )

    assert content.startswith(b"%PDF")
    assert b"/Image" in content


def test_render_pdf_rejects_unreadable_signature():
    with pytest.raises(ValueError):
        render_pdf("{UNTERSCHRIFT}", title="Vertrag", signature="data:image/png;base64,@@")
