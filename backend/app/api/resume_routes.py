from typing import Optional

from fastapi import APIRouter

from app.models.generation_models import ErrorResponse, ResumeRequest, ResumeResponse
from app.services.resume_service import generate_resume

router = APIRouter()


@router.post(
    "",
    response_model=ResumeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def generate_resume_endpoint(req: Optional[ResumeRequest] = None):
    """Generate resume content for fullName/jobRole from experience and skills."""
    text = await generate_resume(req.model_dump() if req else {})
    return ResumeResponse(resume=text)
