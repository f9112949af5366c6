"""RAG endpoints: ingestion, search, answers, conversation, summaries, stats."""

import logging

from fastapi import APIRouter, Depends

from .....core.domain import ConversationExchange
from .....core.services import RAGService
from ..deps import get_rag_service
from ..models import (
    AddDocumentRequest,
    AddDocumentsRequest,
    AddDocumentsResponse,
    AnswerRequest,
    AnswerResponse,
    ConversationRequest,
    ConversationResponse,
    ErrorResponse,
    MessageResponse,
    SearchRequest,
    SearchResponse,
    SearchResultModel,
    StatsResponse,
    SummarizeRequest,
    SummarizeResponse,
)

logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request"},
    409: {"model": ErrorResponse, "description": "Knowledge index is empty"},
    503: {"model": ErrorResponse, "description": "Model provider unavailable"},
}

router = APIRouter(prefix="/api/v1/rag", tags=["rag"], responses=ERROR_RESPONSES)


@router.post("/documents", response_model=AddDocumentsResponse)
def add_document(
    request: AddDocumentRequest, service: RAGService = Depends(get_rag_service)
) -> AddDocumentsResponse:
    document = service.add_document(request.content, request.metadata)
    return AddDocumentsResponse(
        message="Document added successfully",
        document_ids=[document.doc_id],
    )


@router.post("/documents/batch", response_model=AddDocumentsResponse)
def add_documents(
    request: AddDocumentsRequest, service: RAGService = Depends(get_rag_service)
) -> AddDocumentsResponse:
    """Add several documents; either all are indexed or none are."""
    documents = service.add_documents(
        [doc.content for doc in request.documents],
        [doc.metadata for doc in request.documents],
    )
    return AddDocumentsResponse(
        message=f"{len(documents)} documents added successfully",
        document_ids=[doc.doc_id for doc in documents],
    )


@router.post("/search", response_model=SearchResponse)
def search(request: SearchRequest, service: RAGService = Depends(get_rag_service)) -> SearchResponse:
    results = service.search(request.query, request.k)
    return SearchResponse(
        results=[SearchResultModel.from_result(r) for r in results],
        count=len(results),
    )


@router.post("/answer", response_model=AnswerResponse)
def generate_answer(
    request: AnswerRequest, service: RAGService = Depends(get_rag_service)
) -> AnswerResponse:
    answer = service.generate_answer(request.question, request.context, request.use_retrieval)
    return AnswerResponse(answer=answer, question=request.question)


@router.post("/conversation", response_model=ConversationResponse)
def conversational_rag(
    request: ConversationRequest, service: RAGService = Depends(get_rag_service)
) -> ConversationResponse:
    history = [ConversationExchange(human=ex.human, ai=ex.ai) for ex in request.chat_history]
    result = service.conversational_rag(request.question, history, session_id=request.session_id)
    return ConversationResponse(
        answer=result.answer,
        sources=[SearchResultModel.from_result(r) for r in result.sources],
        question=request.question,
        contextual_query=result.contextual_query,
    )


@router.post("/summarize", response_model=SummarizeResponse)
def summarize(
    request: SummarizeRequest, service: RAGService = Depends(get_rag_service)
) -> SummarizeResponse:
    return SummarizeResponse(summary=service.summarize(request.query), query=request.query)


@router.get("/stats", response_model=StatsResponse)
def get_stats(service: RAGService = Depends(get_rag_service)) -> StatsResponse:
    return StatsResponse(**service.get_stats().to_dict())


@router.delete("", response_model=MessageResponse)
def clear_index(service: RAGService = Depends(get_rag_service)) -> MessageResponse:
    service.reset()
    return MessageResponse(message="Vector store cleared successfully")
