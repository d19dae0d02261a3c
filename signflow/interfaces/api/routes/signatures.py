"""Route zum Erfassen handschriftlicher Unterschriften."""

from fastapi import APIRouter, HTTPException, status

from signflow.application.use_cases import capture_signature
from signflow.config import get_settings
from signflow.interfaces.api.schemas import SignatureCaptureRead, SignatureCaptureRequest

router = APIRouter(prefix="/signatures", tags=["signatures"])


@router.post("/capture", response_model=SignatureCaptureRead)
def capture(payload: SignatureCaptureRequest) -> SignatureCaptureRead:
    """Zeichnet die übermittelten Striche und liefert das PNG als Data-URL."""

    settings = get_settings()
    try:
        signature = capture_signature(
            payload.strokes,
            width=payload.width or settings.signature_box_width,
            height=payload.height or settings.signature_box_height,
            origin=payload.origin,
            existing=payload.existing,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return SignatureCaptureRead(signature=signature)
