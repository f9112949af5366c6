"""FastAPI application for the knowledge RAG service."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .... import __version__
from ....composition.container import ServiceContainer, build_container
from ....config.logging import setup_logging
from ....config.settings import Settings
from ....core.domain.exceptions import RAGPipelineError
from ...common.exception_handler import (
    format_exception_json,
    get_http_status_code,
    log_exception,
)
from .routers import agents, health, rag

logger = logging.getLogger(__name__)

# Shows full stack traces in error responses
DEBUG_MODE = os.getenv("DEBUG", "false").lower() == "true"


def create_app(
    settings: Settings | None = None,
    container: ServiceContainer | None = None,
) -> FastAPI:
    """Create the API application.

    Args:
        settings: Settings to build the services from (loaded from the
            environment when omitted).
        container: Prebuilt services; skips building in the lifespan handler.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.container is None:
            app.state.container = build_container(settings or Settings())
        logger.info(
            "Knowledge RAG API starting up (demo_mode=%s)", app.state.container.demo_mode
        )
        yield
        logger.info("Knowledge RAG API shutting down...")

    app = FastAPI(
        title="Knowledge RAG API",
        description="Retrieval-augmented question answering over an in-memory knowledge base.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.container = container

    app.include_router(health.router)
    app.include_router(rag.router)
    app.include_router(agents.router)

    @app.exception_handler(RAGPipelineError)
    async def pipeline_error_handler(request: Request, exc: RAGPipelineError) -> JSONResponse:
        status_code = get_http_status_code(exc)
        log_exception(
            exc,
            log=logger,
            level=logging.WARNING if status_code < 500 else logging.ERROR,
            extra_context={"path": str(request.url.path), "method": request.method},
        )
        return JSONResponse(status_code=status_code, content=exc.to_dict(include_trace=DEBUG_MODE))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": {
                    "type": "RequestValidationError",
                    "code": "RAG_REQ_001",
                    "message": "Invalid request",
                },
                "context": {"errors": jsonable_errors(exc)},
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        log_exception(exc, log=logger, extra_context={"path": str(request.url.path), "method": request.method})
        return JSONResponse(
            status_code=get_http_status_code(exc),
            content=format_exception_json(exc, include_trace=DEBUG_MODE),
        )

    return app


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": [str(part) for part in error.get("loc", ())], "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


def build_default_app() -> FastAPI:
    """Entry point for ``uvicorn --factory``."""
    settings = Settings()
    setup_logging(settings.log_level, json_format=settings.log_json)
    return create_app(settings)


__all__ = ["build_default_app", "create_app"]
