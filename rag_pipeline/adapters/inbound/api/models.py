"""Pydantic models for API requests and responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ....core.domain import AgentPreset, SearchResult


class AddDocumentRequest(BaseModel):
    """Request model for adding one document."""

    content: str = Field(..., min_length=1, description="Full text of the document")
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Caller-supplied metadata stored with every chunk",
        json_schema_extra={"example": {"source": "handbook", "title": "Onboarding"}},
    )


class AddDocumentsRequest(BaseModel):
    """Request model for adding documents as one batch."""

    documents: list[AddDocumentRequest] = Field(..., min_length=1)


class AddDocumentsResponse(BaseModel):
    message: str
    document_ids: list[str]
    success: bool = True


class SearchRequest(BaseModel):
    query: str = Field(..., min_length=1)
    k: int = Field(5, ge=1, description="Number of results, capped at the index size")


class SearchResultModel(BaseModel):
    """One retrieved chunk."""

    content: str
    metadata: dict[str, Any]
    score: float

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResultModel":
        return cls(content=result.content, metadata=result.metadata, score=result.score)


class SearchResponse(BaseModel):
    results: list[SearchResultModel]
    count: int
    success: bool = True


class AnswerRequest(BaseModel):
    question: str = Field(..., min_length=1)
    context: str | None = Field(None, description="Context to use instead of retrieval")
    use_retrieval: bool = Field(True, description="Retrieve context when none is supplied")


class AnswerResponse(BaseModel):
    answer: str
    question: str
    success: bool = True


class ExchangeModel(BaseModel):
    """One earlier (question, answer) pair."""

    human: str
    ai: str


class ConversationRequest(BaseModel):
    """Request model for a conversational RAG turn.

    With ``session_id`` the server keeps the history and ``chat_history`` is
    ignored; without it the caller supplies the history.
    """

    question: str = Field(..., min_length=1)
    chat_history: list[ExchangeModel] = Field(default_factory=list)
    session_id: str | None = None


class ConversationResponse(BaseModel):
    answer: str
    sources: list[SearchResultModel]
    question: str
    contextual_query: str
    success: bool = True


class SummarizeRequest(BaseModel):
    query: str | None = Field(None, description="Focus the summary on this query")


class SummarizeResponse(BaseModel):
    summary: str
    query: str | None
    success: bool = True


class StatsResponse(BaseModel):
    document_count: int = Field(..., description="Number of indexed chunks")
    chunk_count: int
    source_document_count: int
    has_store: bool
    demo_mode: bool
    success: bool = True


class MessageResponse(BaseModel):
    message: str
    success: bool = True


class AgentChatRequest(BaseModel):
    message: str = Field(..., min_length=1)
    session_id: str = Field(..., min_length=1)
    preset: AgentPreset = AgentPreset.GENERAL
    clear_memory: bool = False


class AgentChatResponse(BaseModel):
    response: str
    session_id: str
    preset: AgentPreset


class AgentMemoryResponse(BaseModel):
    memory: str
    session_id: str
    preset: AgentPreset


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    demo_mode: bool = Field(False, description="Whether fixture responses are served")
    index: str = Field("not_checked", description="Knowledge index status")


class ErrorDetail(BaseModel):
    """Structured error detail information."""

    type: str = Field(..., description="Exception type name")
    code: str = Field(..., description="Error code (e.g., RAG_IDX_002)")
    message: str = Field(..., description="Human-readable error message")


class ErrorLocation(BaseModel):
    """Source location where error occurred."""

    model_config = ConfigDict(populate_by_name=True)

    class_name: str = Field(..., alias="class", description="Class name or <module>")
    method: str = Field(..., description="Method/function name")
    file: str = Field(..., description="Source file name")
    line: int = Field(..., description="Line number")
    timestamp: str | None = Field(None, description="When the error occurred")


class ErrorResponse(BaseModel):
    """Response model for structured errors.

    Example:
        {
            "error": {"type": "EmptyIndexError", "code": "RAG_IDX_002", "message": "..."},
            "location": {"class": "InMemoryVectorIndex", "method": "search", ...},
            "context": {"k": 5}
        }
    """

    error: ErrorDetail
    location: ErrorLocation | None = None
    context: dict | None = None
    cause: dict | None = None
    stack_trace: list[str] | None = Field(None, description="Stack trace (debug mode only)")
