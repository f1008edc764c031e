import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from app.config import APP_VERSION, settings
from app.api import (
    health_routes,
    resume_routes,
    portfolio_routes,
    coverletter_routes,
)
from app.models.health_models import RootResponse
from app.utils.body_limit import BodySizeLimitMiddleware
from app.utils.errors import AppError, CorsRejectedError, error_payload, status_for
from app.utils.logging_config import configure_logging

configure_logging(settings.log_level)
logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Server running in {settings.environment} mode on port {settings.port}")
    yield
    logger.info("Server shutting down")


app = FastAPI(
    title=settings.app_name,
    version=APP_VERSION,
    description="Generate resumes, portfolio copy and cover letters with Gemini",
    lifespan=lifespan,
)

# ── Unexpected Errors ───────────────────────────────────────────────────────
# Registered first so it sits inside CORSMiddleware: 500 bodies still carry
# CORS headers, and the exception stops here instead of reaching the server.


@app.middleware("http")
async def catch_unhandled_errors(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content=error_payload(exc, include_debug=not settings.is_production),
        )


app.add_middleware(
    BodySizeLimitMiddleware,
    max_body_bytes=lambda: settings.max_body_bytes,
    include_debug=lambda: not settings.is_production,
)

# ── CORS ────────────────────────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins or ["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.middleware("http")
async def reject_disallowed_origins(request: Request, call_next):
    """403 for browsers calling from an origin outside a non-empty allow-list."""
    origin = request.headers.get("origin")
    allowed = settings.allowed_origins
    if origin and allowed and origin not in allowed:
        logger.warning(f"Blocked CORS request from origin {origin}")
        exc = CorsRejectedError("Not allowed by CORS")
        return JSONResponse(
            status_code=exc.status_code,
            content=error_payload(exc, include_debug=not settings.is_production),
        )
    return await call_next(request)


# ── Request Logging ─────────────────────────────────────────────────────────


@app.middleware("http")
async def log_requests(request: Request, call_next):
    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"
    logger.info(f"{request.method} {path}")
    return await call_next(request)


def configure_proxy_headers(app: FastAPI) -> bool:
    """Honour X-Forwarded-* from the configured proxies when proxy trust is on."""
    if not settings.should_trust_proxy:
        return False
    app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=settings.trusted_proxy_hosts)
    return True


configure_proxy_headers(app)

# ── Routers ─────────────────────────────────────────────────────────────────

app.include_router(health_routes.router, prefix="/api/health", tags=["Health"])
app.include_router(resume_routes.router, prefix="/api/resume", tags=["Resume"])
app.include_router(portfolio_routes.router, prefix="/api/portfolio", tags=["Portfolio"])
app.include_router(coverletter_routes.router, prefix="/api/coverletter", tags=["Cover Letter"])


@app.get("/", response_model=RootResponse)
async def root():
    return RootResponse(
        name=settings.app_name,
        status="running",
        environment=settings.environment,
    )


# ── Error Handling ──────────────────────────────────────────────────────────


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    status = status_for(exc)
    if status >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc!r}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(
        status_code=status,
        content=error_payload(exc, include_debug=not settings.is_production),
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        message = f"Not Found - {request.url.path}"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": message},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
        for err in exc.errors()
    )
    return JSONResponse(status_code=400, content={"message": f"Invalid request: {problems}"})


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        proxy_headers=False,
    )


if __name__ == "__main__":
    run()
