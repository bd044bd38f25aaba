"""FastAPI app entrypoint for Resume Scorer web APIs."""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import ScorerConfig, has_errors, load_config, load_raw_config, validate_config
from ..observability import ScoringObserver, configure_logging
from .api.v1.router import api_v1_router
from .errors import APIError, api_error_handler, validation_error_handler

logger = logging.getLogger("resume_scorer.web.api")


def create_app(config: Optional[ScorerConfig] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or load_config()
    configure_logging(config.log_level)

    app = FastAPI(title="Resume Scorer API", version=__version__)
    app.state.config = config
    app.state.observer = ScoringObserver(source="web.scoring")
    app.include_router(api_v1_router)

    if config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        start = perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (perf_counter() - start) * 1000
            logger.info(
                "api_request method=%s path=%s status=%s duration_ms=%.2f",
                request.method,
                request.url.path,
                500,
                duration_ms,
            )
            raise

        duration_ms = (perf_counter() - start) * 1000
        logger.info(
            "api_request method=%s path=%s status=%s duration_ms=%.2f",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response

    @app.get("/healthz", tags=["system"])
    async def healthz() -> dict:
        return {"status": "ok"}

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    return app


def main() -> None:
    """Run development API server."""
    import uvicorn

    configure_logging()
    issues = validate_config(load_raw_config())
    for issue in issues:
        logger.warning("config %s %s: %s", issue.severity.value, issue.field, issue.message)
    if has_errors(issues):
        raise SystemExit(1)

    config = load_config()
    uvicorn.run(create_app(config), host=config.host, port=config.port)
