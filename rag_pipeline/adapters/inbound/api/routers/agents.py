"""Agent chat endpoints."""

from fastapi import APIRouter, Depends, Query

from .....core.domain import AgentPreset
from .....core.services import AgentService
from ..deps import get_agent_service
from ..models import (
    AgentChatRequest,
    AgentChatResponse,
    AgentMemoryResponse,
    ErrorResponse,
    MessageResponse,
)

router = APIRouter(
    prefix="/api/v1/agents",
    tags=["agents"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        503: {"model": ErrorResponse, "description": "Model provider unavailable"},
    },
)


@router.post("/chat", response_model=AgentChatResponse)
def chat(
    request: AgentChatRequest, service: AgentService = Depends(get_agent_service)
) -> AgentChatResponse:
    reply = service.chat(
        request.message,
        request.session_id,
        preset=request.preset,
        clear_memory=request.clear_memory,
    )
    return AgentChatResponse(response=reply, session_id=request.session_id, preset=request.preset)


@router.get("/memory", response_model=AgentMemoryResponse)
def get_memory(
    session_id: str = Query(..., min_length=1),
    preset: AgentPreset = AgentPreset.GENERAL,
    service: AgentService = Depends(get_agent_service),
) -> AgentMemoryResponse:
    return AgentMemoryResponse(
        memory=service.memory(session_id, preset),
        session_id=session_id,
        preset=preset,
    )


@router.delete("/session", response_model=MessageResponse)
def clear_session(
    session_id: str = Query(..., min_length=1),
    preset: AgentPreset = AgentPreset.GENERAL,
    service: AgentService = Depends(get_agent_service),
) -> MessageResponse:
    service.clear(session_id, preset)
    return MessageResponse(message="Agent session cleared")
