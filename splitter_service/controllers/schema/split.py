"""Request/response schemas for POST /split and GET /profiles."""

from typing import Any

from pydantic import BaseModel, Field

from splitter_service.services.splitting.base import KeepType


class DocumentIn(BaseModel):
    """A document to split."""

    id: str = Field(default="", description="Document id; chunks inherit or derive it")
    content: str = Field(..., description="Text to split")
    metadata: dict[str, Any] = Field(default_factory=dict)


class ChunkOut(BaseModel):
    """One chunk of a split document."""

    id: str
    content: str
    metadata: dict[str, Any] = Field(default_factory=dict)


class SplitRequest(BaseModel):
    """POST /split request body. Profile from static.json; individual fields can be overridden."""

    documents: list[DocumentIn] = Field(..., min_length=1, description="Documents to split, in order")
    profile: str | None = Field(default=None, description="Profile name; active profile when omitted")
    chunk_size: int | None = Field(default=None, ge=1, le=100000, description="Optional override for chunk size")
    overlap_size: int | None = Field(default=None, ge=0, le=50000, description="Optional override for overlap size")
    separators: list[str] | None = Field(default=None, description="Optional override for separators")
    keep_type: KeepType | None = Field(default=None, description="Optional override: none|start|end")

    def overrides(self) -> dict[str, Any]:
        """Profile fields explicitly set on the request."""
        return self.model_dump(
            include={"chunk_size", "overlap_size", "separators", "keep_type"},
            exclude_none=True,
        )


class SplitResponse(BaseModel):
    """POST /split response body."""

    profile: str = Field(..., description="Profile the request was resolved against")
    documents_split: int = Field(..., ge=0)
    total_chunks: int = Field(..., ge=0)
    chunks: list[ChunkOut] = Field(default_factory=list)


class ProfilesResponse(BaseModel):
    """GET /profiles response body."""

    active: str
    profiles: list[str]
