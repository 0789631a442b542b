"""FastAPI HTTP API for the operator's preview/publish page."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from praia_news import __version__
from praia_news.errors import (
    ArtifactWriteError,
    ConfigurationError,
    DraftError,
    MalformedResponseError,
    NewsPipelineError,
    UpstreamError,
    ValidationError,
)
from praia_news.models import NewsDocument
from praia_news.service import NewsService

logger = logging.getLogger(__name__)

_STATIC_DIR = Path(__file__).parent / "static"

_STATUS_BY_ERROR: tuple[tuple[type[NewsPipelineError], int], ...] = (
    (ValidationError, 400),
    (UpstreamError, 502),
    (MalformedResponseError, 502),
    (ConfigurationError, 500),
    (ArtifactWriteError, 500),
    (DraftError, 500),
)


def status_for(exc: NewsPipelineError) -> int:
    """HTTP status for a pipeline failure."""
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 500


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def create_app(service: NewsService) -> Any:
    """Create and return the FastAPI application.

    Args:
        service: The preview/publish service the routes delegate to.

    Returns:
        A FastAPI application instance.
    """
    from fastapi import Body, FastAPI  # noqa: PLC0415
    from fastapi.responses import FileResponse, JSONResponse  # noqa: PLC0415

    app = FastAPI(title="Praia Grande News", version=__version__)

    def _failure(exc: NewsPipelineError) -> JSONResponse:
        return JSONResponse(
            {"success": False, "error": str(exc), "timestamp": _timestamp()},
            status_code=status_for(exc),
        )

    def _bad_request(message: str) -> JSONResponse:
        return JSONResponse({"success": False, "error": message, "timestamp": _timestamp()}, status_code=400)

    def _parse_document(payload: dict[str, Any]) -> NewsDocument | str:
        raw = payload.get("newsData")
        if not isinstance(raw, dict):
            return "Missing 'newsData' in request body"
        try:
            return NewsDocument.from_dict(raw)
        except PydanticValidationError as exc:
            return f"Invalid 'newsData': {exc.error_count()} validation error(s)"

    @app.get("/api/health")
    def api_health() -> JSONResponse:
        return JSONResponse({"status": "ok", "version": __version__})

    @app.get("/api/news/preview")
    def api_preview() -> JSONResponse:
        try:
            document = service.preview()
        except NewsPipelineError as exc:
            logger.warning("Preview failed: %s", exc)
            return _failure(exc)
        return JSONResponse({"success": True, "data": document.to_dict(), "timestamp": _timestamp()})

    @app.post("/api/news/preview")
    def api_save_draft(payload: dict[str, Any] = Body(...)) -> JSONResponse:
        document = _parse_document(payload)
        if isinstance(document, str):
            return _bad_request(document)
        try:
            path = service.save_draft(document)
        except NewsPipelineError as exc:
            logger.warning("Saving draft failed: %s", exc)
            return _failure(exc)
        return JSONResponse(
            {
                "success": True,
                "message": "Preview salvo temporariamente",
                "path": str(path),
                "timestamp": _timestamp(),
            }
        )

    @app.get("/api/news/draft")
    def api_load_draft() -> JSONResponse:
        try:
            draft = service.load_draft()
        except NewsPipelineError as exc:
            logger.warning("Loading draft failed: %s", exc)
            return _failure(exc)
        if draft is None:
            return JSONResponse(
                {"success": False, "error": "No saved draft", "timestamp": _timestamp()}, status_code=404
            )
        return JSONResponse({"success": True, "data": draft.to_dict(), "timestamp": _timestamp()})

    @app.post("/api/news/publish")
    def api_publish(payload: dict[str, Any] = Body(...)) -> JSONResponse:
        document = _parse_document(payload)
        if isinstance(document, str):
            return _bad_request(document)
        try:
            result = service.publish(document)
        except NewsPipelineError as exc:
            logger.warning("Publish failed: %s", exc)
            return _failure(exc)
        return JSONResponse(
            {
                "success": True,
                "message": result.message,
                "files": result.files,
                "totalNoticias": result.total,
                "timestamp": _timestamp(),
            }
        )

    @app.get("/")
    def editor_page() -> FileResponse:
        return FileResponse(_STATIC_DIR / "editor.html", media_type="text/html")

    return app
