"""FastAPI dependency injection.

Services live on ``app.state.container``, built once by the lifespan handler.
"""

from fastapi import Depends, Request

from ....composition.container import ServiceContainer
from ....core.services import AgentService, RAGService


def get_container(request: Request) -> ServiceContainer:
    return request.app.state.container


def get_rag_service(container: ServiceContainer = Depends(get_container)) -> RAGService:
    return container.rag


def get_agent_service(container: ServiceContainer = Depends(get_container)) -> AgentService:
    return container.agents
