import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from github_impact.core.config import settings
from github_impact.core.errors import GitHubImpactError

logger = structlog.get_logger()

REQUEST_LOCATIONS = {"body", "path", "query", "header", "cookie"}


def _field_name(loc: tuple) -> str:
    parts = list(loc)
    if parts and parts[0] in REQUEST_LOCATIONS and len(parts) > 1:
        parts = parts[1:]
    return ".".join(str(part) for part in parts)


async def github_impact_error_handler(request: Request, exc: GitHubImpactError) -> JSONResponse:
    logger.info(
        "Request failed",
        path=request.url.path,
        status=exc.status_code,
        error=exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {"field": _field_name(error.get("loc", ())), "message": error.get("msg", "")}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Validation failed", "details": details},
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        content = {"error": "Route not found", "path": request.url.path}
    else:
        content = {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error", path=request.url.path)
    content: dict = {"error": "Internal server error"}
    if settings.is_development:
        content["details"] = str(exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"error": ..., "details"?: ...}``."""
    app.add_exception_handler(GitHubImpactError, github_impact_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
