"""Splitter profile models. Read-only; no business logic."""

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from splitter_service.services.splitting.base import KeepType, check_overlap_size


class SplitterProfile(BaseModel):
    """A named recursive splitter configuration, as stored in static.json."""

    chunk_size: int = Field(default=512, ge=1, description="Max chunk length in length_function units")
    overlap_size: int = Field(default=0, ge=0, description="Max overlap between consecutive chunks")
    separators: list[str] = Field(default_factory=list, description="Literal separators, coarsest first")
    keep_type: KeepType = Field(default=KeepType.NONE, description="none|start|end")
    length_function: str = Field(default="chars", description="chars|tiktoken")
    id_strategy: str = Field(default="inherit", description="inherit|indexed|hashed")

    @field_validator("overlap_size")
    @classmethod
    def _overlap_below_chunk_size(cls, v: int, info: ValidationInfo) -> int:
        return check_overlap_size(v, info.data.get("chunk_size"))
