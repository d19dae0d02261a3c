import io

import pytest
from PIL import Image

from signflow.application.use_cases import capture_signature
from signflow.infrastructure.signature_canvas import (
    DATA_URL_PREFIX,
    SignatureCanvas,
    decode_data_url,
    open_signature_image,
)


def _image(payload: str) -> Image.Image:
    return Image.open(io.BytesIO(decode_data_url(payload))).convert("RGBA")


def _alpha_bbox(image: Image.Image):
    return image.getchannel("A").getbbox()


def test_surface_renders_at_double_density():
    canvas = SignatureCanvas(300, 80)

    assert canvas.pixel_size == (600, 160)


def test_completed_stroke_reports_png_payload():
    reported = []
    canvas = SignatureCanvas(10, 10, on_change=reported.append)

    canvas.begin(1, 1)
    canvas.extend(8, 8)
    payload = canvas.end()

    assert payload.startswith(DATA_URL_PREFIX)
    assert reported == [payload]
    assert canvas.has_content is True
    image = _image(payload)
    assert image.size == (20, 20)
    assert image.getpixel((9, 9)) == (0, 0, 0, 255)
    assert image.getpixel((18, 2))[3] == 0


def test_movement_without_active_stroke_draws_nothing():
    reported = []
    canvas = SignatureCanvas(10, 10, on_change=reported.append)

    canvas.extend(5, 5)

    assert canvas.end() is None
    assert reported == []
    assert _alpha_bbox(_image(canvas.to_data_url())) is None


def test_clear_reports_absent_signature():
    reported = []
    canvas = SignatureCanvas(10, 10, on_change=reported.append)
    canvas.begin(1, 1)
    canvas.extend(5, 5)
    canvas.end()

    canvas.clear()

    assert reported[-1] is None
    assert canvas.has_content is False
    assert _alpha_bbox(_image(canvas.to_data_url())) is None


def test_strokes_accumulate_until_cleared():
    canvas = SignatureCanvas(20, 20)
    canvas.begin(1, 1)
    canvas.extend(4, 1)
    canvas.end()
    canvas.begin(1, 15)
    canvas.extend(4, 15)
    payload = canvas.end()

    image = _image(payload)
    assert image.getpixel((5, 2))[3] == 255
    assert image.getpixel((5, 30))[3] == 255


def test_load_scales_payload_and_new_strokes_draw_on_top():
    source = SignatureCanvas(10, 10)
    source.begin(0, 5)
    source.extend(10, 5)
    existing = source.end()

    canvas = SignatureCanvas(20, 20)
    canvas.load(existing)
    assert canvas.has_content is True
    loaded = _image(canvas.to_data_url())
    assert loaded.size == (40, 40)
    assert loaded.getpixel((20, 20))[3] > 0

    canvas.begin(10, 2)
    canvas.extend(10, 6)
    payload = canvas.end()
    combined = _image(payload)
    assert combined.getpixel((20, 20))[3] > 0
    assert combined.getpixel((20, 8))[3] == 255


def test_pointer_positions_are_translated_by_origin():
    assert SignatureCanvas.pointer_to_local(120.5, 60, (100, 50)) == (20.5, 10)


@pytest.mark.parametrize("payload", ["data:image/png;base64,@@@", "not an image"])
def test_unreadable_payload_is_rejected(payload):
    with pytest.raises(ValueError):
        open_signature_image(payload)


def test_invalid_dimensions_are_rejected():
    with pytest.raises(ValueError):
        SignatureCanvas(0, 10)


def test_capture_signature_replays_strokes():
    payload = capture_signature(
        [[(101, 51), (108, 58)]], width=10, height=10, origin=(100, 50)
    )

    image = _image(payload)
    assert image.getpixel((9, 9)) == (0, 0, 0, 255)


def test_capture_without_strokes_returns_nothing():
    assert capture_signature([], width=10, height=10) is None
    assert capture_signature([[]], width=10, height=10) is None


def test_capture_keeps_existing_signature_without_new_strokes():
    existing = capture_signature([[(0, 5), (10, 5)]], width=10, height=10)

    payload = capture_signature([], width=10, height=10, existing=existing)

    assert _alpha_bbox(_image(payload)) is not None
