"""Schemas for the signature capture endpoint."""

from pydantic import BaseModel, Field

MAX_BOX_SIZE = 4000


class SignatureCaptureRequest(BaseModel):
    """Pointer strokes to replay, each a list of ``[x, y]`` positions."""

    strokes: list[list[tuple[float, float]]] = Field(default_factory=list)
    origin: tuple[float, float] = (0.0, 0.0)
    width: int | None = Field(default=None, gt=0, le=MAX_BOX_SIZE)
    height: int | None = Field(default=None, gt=0, le=MAX_BOX_SIZE)
    existing: str | None = None


class SignatureCaptureRead(BaseModel):
    signature: str | None


__all__ = ["SignatureCaptureRead", "SignatureCaptureRequest"]
