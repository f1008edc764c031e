from app.api import (
    health_routes,
    resume_routes,
    portfolio_routes,
    coverletter_routes,
)

__all__ = [
    "health_routes",
    "resume_routes",
    "portfolio_routes",
    "coverletter_routes",
]
