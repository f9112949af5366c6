"""Error rendering shared by the HTTP and CLI boundaries.

Pipeline errors serialize themselves; anything else is described from its
traceback in the same shape, with code ``PYTHON_ERR``.
"""

import json
import logging
import traceback
from typing import Any

from ...core.domain.exceptions import (
    ConfigurationError,
    EmbeddingError,
    EmptyIndexError,
    GenerationError,
    NotConfiguredError,
    RAGPipelineError,
)

logger = logging.getLogger(__name__)

FOREIGN_ERROR_CODE = "PYTHON_ERR"

# First match wins.
_STATUS_TABLE: tuple[tuple[type[BaseException] | tuple[type[BaseException], ...], int], ...] = (
    (ConfigurationError, 400),
    (EmptyIndexError, 409),
    ((NotConfiguredError, EmbeddingError, GenerationError), 503),
    (RAGPipelineError, 500),
    (ValueError, 400),
    ((ConnectionError, TimeoutError), 503),
)


def _describe_foreign(exc: Exception, include_trace: bool) -> dict[str, Any]:
    frames = traceback.extract_tb(exc.__traceback__)
    last = frames[-1] if frames else None
    payload: dict[str, Any] = {
        "error": {"type": type(exc).__name__, "code": FOREIGN_ERROR_CODE, "message": str(exc)},
        "location": {
            "class": "<unknown>",
            "method": last.name if last else "<unknown>",
            "file": last.filename.replace("\\", "/").rsplit("/", 1)[-1] if last else "<unknown>",
            "line": last.lineno if last else 0,
        },
    }
    if include_trace:
        payload["stack_trace"] = [
            line.rstrip() for line in traceback.format_exception(exc) if line.strip()
        ]
    return payload


def format_exception_json(
    exc: Exception,
    include_trace: bool = False,
    extra_context: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Describe any exception as ``{error, location, context?, ...}``.

    Args:
        exc: Exception to describe.
        include_trace: Add the formatted stack trace.
        extra_context: Merged into ``context`` (request path, command, ...).
    """
    if isinstance(exc, RAGPipelineError):
        payload = exc.to_dict(include_trace=include_trace)
    else:
        payload = _describe_foreign(exc, include_trace)

    if extra_context:
        payload["context"] = {**payload.get("context", {}), **extra_context}
    return payload


def log_exception(
    exc: Exception,
    log: logging.Logger | None = None,
    level: int = logging.ERROR,
    extra_context: dict[str, Any] | None = None,
) -> None:
    """Log the structured description of ``exc`` as one JSON document."""
    payload = format_exception_json(exc, include_trace=True, extra_context=extra_context)
    (log or logger).log(level, json.dumps(payload, default=str))


def get_error_code(exc: Exception) -> str:
    return exc.error_code if isinstance(exc, RAGPipelineError) else FOREIGN_ERROR_CODE


def get_http_status_code(exc: Exception) -> int:
    """HTTP status for an exception reaching the API boundary.

    Caller mistakes are 400, reads against an empty index 409, an unavailable
    or unconfigured model provider 503, and everything else 500.
    """
    for types, status in _STATUS_TABLE:
        if isinstance(exc, types):
            return status
    return 500
