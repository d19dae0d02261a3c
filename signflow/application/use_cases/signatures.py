"""Use case replaying captured pointer strokes into a signature payload."""

from collections.abc import Sequence

from signflow.infrastructure.signature_canvas import SignatureCanvas

Point = tuple[float, float]


def capture_signature(
    strokes: Sequence[Sequence[Point]],
    *,
    width: int,
    height: int,
    origin: Point = (0.0, 0.0),
    existing: str | None = None,
) -> str | None:
    """Draw ``strokes`` on a fresh surface and return the resulting payload.

    Points are absolute pointer positions translated by ``origin``. An
    ``existing`` payload is drawn first so new strokes are added on top of
    it. Without any content the surface is cleared and ``None`` returned.
    """

    reported: list[str | None] = []
    canvas = SignatureCanvas(width, height, on_change=reported.append)
    if existing:
        canvas.load(existing)

    for stroke in strokes:
        if not stroke:
            continue
        canvas.begin(*canvas.pointer_to_local(*stroke[0], origin))
        for point in stroke[1:]:
            canvas.extend(*canvas.pointer_to_local(*point, origin))
        canvas.end()

    if reported:
        return reported[-1]
    if canvas.has_content:
        return canvas.to_data_url()
    canvas.clear()
    return None
