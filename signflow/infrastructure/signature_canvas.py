"""Raster surface turning freehand pointer input into a PNG signature payload."""

from __future__ import annotations

import base64
import binascii
import io
import logging
from collections.abc import Callable

from PIL import Image, ImageDraw, UnidentifiedImageError

logger = logging.getLogger(__name__)

DATA_URL_PREFIX = "data:image/png;base64,"
STROKE_COLOR = (0, 0, 0, 255)
STROKE_WIDTH = 2
DEFAULT_SCALE = 2

SignatureListener = Callable[[str | None], None]


def encode_data_url(png_bytes: bytes) -> str:
    """Return ``png_bytes`` as a ``data:image/png;base64`` URL."""

    return DATA_URL_PREFIX + base64.b64encode(png_bytes).decode("ascii")


def decode_data_url(payload: str) -> bytes:
    """Return the image bytes of a data URL or a bare base64 string."""

    data = payload.strip()
    if data.startswith("data:"):
        header, _, data = data.partition(",")
        if not header.endswith(";base64"):
            raise ValueError("Signature payload must be base64 encoded")
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("Signature payload is not valid base64") from exc


def open_signature_image(payload: str) -> Image.Image:
    """Decode ``payload`` into an RGBA image."""

    try:
        image = Image.open(io.BytesIO(decode_data_url(payload)))
        image.load()
    except (UnidentifiedImageError, OSError) as exc:
        raise ValueError("Signature payload is not a readable image") from exc
    return image.convert("RGBA")


class SignatureCanvas:
    """Drawing surface sized to a display box and rendered at ``scale`` density.

    Coordinates passed to ``begin``/``extend`` are surface-local display units.
    Strokes accumulate on one surface; only ``clear`` removes content. Every
    payload produced by ``end`` or ``clear`` is also reported to
    ``on_change``.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        scale: int = DEFAULT_SCALE,
        on_change: SignatureListener | None = None,
    ) -> None:
        if width <= 0 or height <= 0 or scale <= 0:
            raise ValueError("Signature surface dimensions must be positive")
        self.width = width
        self.height = height
        self.scale = scale
        self.on_change = on_change
        self.has_content = False
        self._drawing = False
        self._last_point: tuple[float, float] | None = None
        self._image = self._blank_surface()

    @property
    def is_drawing(self) -> bool:
        return self._drawing

    @property
    def pixel_size(self) -> tuple[int, int]:
        return self._image.size

    @staticmethod
    def pointer_to_local(
        pointer_x: float, pointer_y: float, origin: tuple[float, float]
    ) -> tuple[float, float]:
        """Translate an absolute pointer or touch position into surface units."""

        return pointer_x - origin[0], pointer_y - origin[1]

    def begin(self, x: float, y: float) -> None:
        self._drawing = True
        self._last_point = (x, y)

    def extend(self, x: float, y: float) -> None:
        if not self._drawing or self._last_point is None:
            return
        self._draw_segment(self._last_point, (x, y))
        self._last_point = (x, y)

    def end(self) -> str | None:
        """Finish the active stroke and report the surface as a PNG payload."""

        if not self._drawing:
            return None
        self._drawing = False
        self._last_point = None
        self.has_content = True
        payload = self.to_data_url()
        self._notify(payload)
        return payload

    def clear(self) -> None:
        self._image = self._blank_surface()
        self._drawing = False
        self._last_point = None
        self.has_content = False
        self._notify(None)

    def load(self, payload: str) -> None:
        """Draw a stored payload scaled to fill the surface.

        The surface is wiped first; strokes drawn afterwards land on top of
        the loaded image.
        """

        image = open_signature_image(payload)
        if image.size != self._image.size:
            image = image.resize(self._image.size, Image.Resampling.LANCZOS)
        self._image = self._blank_surface()
        self._image.alpha_composite(image)
        self.has_content = True

    def to_png_bytes(self) -> bytes:
        buffer = io.BytesIO()
        self._image.save(buffer, format="PNG")
        return buffer.getvalue()

    def to_data_url(self) -> str:
        return encode_data_url(self.to_png_bytes())

    def _blank_surface(self) -> Image.Image:
        return Image.new(
            "RGBA", (self.width * self.scale, self.height * self.scale), (0, 0, 0, 0)
        )

    def _draw_segment(
        self, start: tuple[float, float], end: tuple[float, float]
    ) -> None:
        draw = ImageDraw.Draw(self._image)
        width = STROKE_WIDTH * self.scale
        scaled_start = (start[0] * self.scale, start[1] * self.scale)
        scaled_end = (end[0] * self.scale, end[1] * self.scale)
        draw.line([scaled_start, scaled_end], fill=STROKE_COLOR, width=width, joint="curve")
        # Round caps: Pillow only draws butt ends.
        radius = width / 2
        for cx, cy in (scaled_start, scaled_end):
            draw.ellipse(
                [cx - radius, cy - radius, cx + radius, cy + radius], fill=STROKE_COLOR
            )

    def _notify(self, payload: str | None) -> None:
        if self.on_change is not None:
            self.on_change(payload)


__all__ = [
    "DATA_URL_PREFIX",
    "SignatureCanvas",
    "SignatureListener",
    "decode_data_url",
    "encode_data_url",
    "open_signature_image",
]
