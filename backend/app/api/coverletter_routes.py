from typing import Optional

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.models.generation_models import CoverLetterRequest, ErrorResponse
from app.services.cover_letter_service import generate_cover_letter

router = APIRouter()


@router.post(
    "",
    response_class=PlainTextResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def generate_cover_letter_endpoint(req: Optional[CoverLetterRequest] = None):
    """
    Generate a cover letter from jobRole, companyName and resumeSummary.
    Returns the letter as text/plain.
    """
    body = req.model_dump() if req else {}
    text = await generate_cover_letter(body)
    return PlainTextResponse(text, status_code=200)
