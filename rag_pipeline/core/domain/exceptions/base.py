"""Root of the pipeline's exception hierarchy.

Every pipeline error carries a stable ``error_code``, the place it was
raised, an optional underlying cause and free-form context. ``to_dict``
renders all of it as a JSON-ready payload for API responses and structured
logs.
"""

import inspect
import traceback
from dataclasses import dataclass, field
from datetime import UTC, datetime
from types import FrameType
from typing import Any


def _utc_now() -> str:
    return datetime.now(UTC).isoformat()


def _basename(path: str) -> str:
    return path.replace("\\", "/").rsplit("/", 1)[-1]


@dataclass(frozen=True)
class RaiseSite:
    """Class, function, file and line where a pipeline error was created."""

    class_name: str
    method_name: str
    file_name: str
    line_number: int
    timestamp: str = field(default_factory=_utc_now)

    @classmethod
    def from_frame(cls, frame: FrameType | None) -> "RaiseSite":
        if frame is None:
            return cls("<unknown>", "<unknown>", "<unknown>", 0)
        owner = frame.f_locals.get("self")
        return cls(
            class_name="<module>" if owner is None else type(owner).__name__,
            method_name=frame.f_code.co_name,
            file_name=_basename(frame.f_code.co_filename),
            line_number=frame.f_lineno,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "class": self.class_name,
            "method": self.method_name,
            "file": self.file_name,
            "line": self.line_number,
            "timestamp": self.timestamp,
        }


class RAGPipelineError(Exception):
    """Base class for every error the pipeline raises on purpose.

    Subclasses only override ``error_code``. Wrap provider failures with
    ``cause`` so the original type and message survive serialization::

        except httpx.TimeoutException as e:
            raise GenerationTimeoutError("Gemini request timed out", cause=e) from e
    """

    error_code: str = "RAG_ERR_001"

    def __init__(
        self,
        message: str,
        *,
        cause: Exception | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.extra_context: dict[str, Any] = dict(context or {})

        frame = inspect.currentframe()
        try:
            self.location = RaiseSite.from_frame(frame.f_back if frame else None)
        finally:
            del frame

        self.stack_trace: str | None = (
            "".join(traceback.format_exception(cause)) if cause is not None else None
        )

    def to_dict(self, include_trace: bool = False) -> dict[str, Any]:
        """Render the error as ``{error, location, context?, cause?, stack_trace?}``.

        ``stack_trace`` is only present when ``include_trace`` is set and the
        error wraps a cause.
        """
        payload: dict[str, Any] = {
            "error": {
                "type": type(self).__name__,
                "code": self.error_code,
                "message": self.message,
            },
            "location": self.location.to_dict(),
        }
        if self.extra_context:
            payload["context"] = dict(self.extra_context)
        if self.cause is not None:
            payload["cause"] = {"type": type(self.cause).__name__, "message": str(self.cause)}
        if include_trace and self.stack_trace:
            payload["stack_trace"] = [line for line in self.stack_trace.splitlines() if line.strip()]
        return payload
