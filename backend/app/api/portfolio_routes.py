from typing import Optional

from fastapi import APIRouter

from app.models.generation_models import ErrorResponse, PortfolioRequest, PortfolioResponse
from app.services.portfolio_service import generate_portfolio

router = APIRouter()


@router.post(
    "",
    response_model=PortfolioResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def generate_portfolio_endpoint(req: Optional[PortfolioRequest] = None):
    """Generate portfolio page copy from projects and skills."""
    text = await generate_portfolio(req.model_dump() if req else {})
    return PortfolioResponse(portfolio=text)
