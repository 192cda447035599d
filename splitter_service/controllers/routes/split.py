"""POST /split: split inline documents with a named profile and optional overrides."""

from fastapi import APIRouter, HTTPException

from splitter_service.config.settings import get_settings
from splitter_service.config.splitting.static import get_active_profile_name
from splitter_service.controllers.schema.split import ChunkOut, SplitRequest, SplitResponse
from splitter_service.services.splitting.base import Document, SplitterConfigError
from splitter_service.services.splitting.pipeline import split_documents

router = APIRouter(prefix="/split", tags=["splitting"])


@router.post("", response_model=SplitResponse)
def split(body: SplitRequest) -> SplitResponse:
    """
    Split the given documents. Chunks come back as one flat list in document order.
    Unknown profiles and invalid configurations are rejected with 422.
    """
    limit = get_settings().max_documents_per_request
    if len(body.documents) > limit:
        raise HTTPException(status_code=422, detail=f"At most {limit} documents per request")

    profile_name = body.profile or get_active_profile_name()
    documents = [Document(id=d.id, content=d.content, metadata=d.metadata) for d in body.documents]
    try:
        chunks = split_documents(documents, profile_name=profile_name, inline_config=body.overrides())
    except SplitterConfigError:
        # Handled by the app-level handler, which reports the offending field
        raise
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    return SplitResponse(
        profile=profile_name,
        documents_split=len(documents),
        total_chunks=len(chunks),
        chunks=[ChunkOut(id=c.id, content=c.content, metadata=c.metadata) for c in chunks],
    )
