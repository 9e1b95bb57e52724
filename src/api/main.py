"""FastAPI application entry point."""
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from api.routers import categories, export, generate, health, prompts, settings, usage_history
from core.config import get_settings
from schemas.errors import ValidationErrorResponse
from services.exceptions import ConfigurationError, UpstreamError
from services.memory_storage import MemoryStorage

logger = logging.getLogger(__name__)

# Message for 400 responses caused by schema validation, keyed by the first
# path segment after /api
VALIDATION_MESSAGES = {
    "prompts": "Invalid prompt data",
    "categories": "Invalid category data",
    "usage-history": "Invalid usage data",
    "settings": "Invalid settings data",
    "generate-prompt": "userInput is required and must be a non-empty string",
    "export": "Invalid export request",
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan - create the store at startup."""
    app_settings = get_settings()
    logging.basicConfig(
        level=app_settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app.state.storage = MemoryStorage(seed_defaults=app_settings.seed_default_categories)
    logger.info("In-memory store initialized")
    if not app_settings.ai_configured:
        logger.warning("AI provider not configured; /api/generate-prompt will return 503")

    yield

    app.state.storage = None


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process request and add security headers to response."""
        response = await call_next(request)
        # Prevent MIME type sniffing
        response.headers["X-Content-Type-Options"] = "nosniff"
        # Prevent clickjacking - API shouldn't be framed
        response.headers["X-Frame-Options"] = "DENY"
        return response


def _validation_message(request: Request) -> str:
    segments = [s for s in request.url.path.split("/") if s]
    if len(segments) >= 2 and segments[0] == "api":
        return VALIDATION_MESSAGES.get(segments[1], "Invalid request data")
    return "Invalid request data"


def _format_field_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors to [{field, message}], dropping the body/query prefix."""
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        message = str(err.get("msg", "Invalid value"))
        message = message.removeprefix("Value error, ")
        errors.append({"field": ".".join(loc) or "body", "message": message})
    return errors


app_settings = get_settings()

app = FastAPI(
    title="Spellbook API",
    description="A prompt management system with categories, tags, usage tracking, "
    "and AI prompt generation.",
    version="0.1.0",
    lifespan=lifespan,
    responses={400: {"model": ValidationErrorResponse}},
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    """Return 400 with a message and per-field errors."""
    return JSONResponse(
        status_code=400,
        content={"message": _validation_message(request), "errors": _format_field_errors(exc)},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    _request: Request, exc: StarletteHTTPException,
) -> JSONResponse:
    """Render HTTP errors as {"message": ...}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=exc.headers,
    )


@app.exception_handler(ConfigurationError)
async def configuration_exception_handler(
    _request: Request, exc: ConfigurationError,
) -> JSONResponse:
    """A required external service is not configured."""
    return JSONResponse(status_code=503, content={"message": str(exc)})


@app.exception_handler(UpstreamError)
async def upstream_exception_handler(
    _request: Request, exc: UpstreamError,
) -> JSONResponse:
    """The external AI provider failed."""
    content: dict[str, str] = {"message": exc.message}
    if exc.detail is not None:
        content["error"] = exc.detail
    return JSONResponse(status_code=500, content=content)


@app.exception_handler(Exception)
async def unhandled_exception_handler(
    request: Request, exc: Exception,
) -> JSONResponse:
    """Log unexpected errors and return a generic 500 without internals."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


# Security headers middleware (runs after CORS, adds headers to responses)
app.add_middleware(SecurityHeadersMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(prompts.router)
app.include_router(categories.router)
app.include_router(usage_history.router)
app.include_router(settings.router)
app.include_router(generate.router)
app.include_router(export.router)
