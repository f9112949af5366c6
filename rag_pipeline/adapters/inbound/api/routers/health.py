"""Health check endpoints."""

from fastapi import APIRouter, Depends

from ..... import __version__
from .....composition.container import ServiceContainer
from ..deps import get_container
from ..models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check(container: ServiceContainer = Depends(get_container)) -> HealthResponse:
    """Basic liveness check."""
    return HealthResponse(status="healthy", version=__version__, demo_mode=container.demo_mode)


@router.get("/ready", response_model=HealthResponse)
def readiness_check(container: ServiceContainer = Depends(get_container)) -> HealthResponse:
    """Readiness probe reporting the knowledge index state."""
    stats = container.rag.get_stats()
    index_status = (
        f"ready ({stats.chunk_count} chunks from {stats.source_document_count} documents)"
        if stats.has_store
        else "empty"
    )
    return HealthResponse(
        status="ready",
        version=__version__,
        demo_mode=stats.demo_mode,
        index=index_status,
    )
