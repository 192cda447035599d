"""
Splitting pipeline: resolve profile → build splitter → split documents.
Deterministic for the same documents and profile.
"""

from typing import Any

from pydantic import ValidationError

from splitter_service.config.logging import get_logger
from splitter_service.config.splitting.models import SplitterProfile
from splitter_service.config.splitting.static import resolve_splitter_profile
from splitter_service.services.splitting.base import Document, config_error_from_validation
from splitter_service.services.splitting.length import get_length_fn
from splitter_service.services.splitting.recursive import RecursiveSplitter, new_splitter
from splitter_service.utils.ids import get_id_generator

logger = get_logger(__name__)


def build_splitter(profile: SplitterProfile) -> RecursiveSplitter:
    """Turn a profile into a splitter, resolving its length function and id strategy by name."""
    return new_splitter(
        chunk_size=profile.chunk_size,
        overlap_size=profile.overlap_size,
        separators=profile.separators,
        keep_type=profile.keep_type,
        len_func=get_length_fn(profile.length_function),
        id_generator=get_id_generator(profile.id_strategy),
    )


def split_documents(
    documents: list[Document],
    profile_name: str = "active",
    inline_config: dict[str, Any] | None = None,
) -> list[Document]:
    """
    Split documents with the named profile, optionally overridden by inline fields.
    Returns all chunks in document order.
    Raises ValueError if the profile, length function or id strategy is unknown, and
    SplitterConfigError if the resulting configuration is invalid.
    """
    try:
        profile = resolve_splitter_profile(profile_name, inline_config)
    except ValidationError as e:
        raise config_error_from_validation(e) from e
    splitter = build_splitter(profile)
    chunks = splitter.transform(documents)
    logger.info(
        "Split %d documents into %d chunks",
        len(documents),
        len(chunks),
        extra={
            "profile": profile_name,
            "documents": len(documents),
            "chunks": len(chunks),
            "chunk_size": profile.chunk_size,
            "overlap_size": profile.overlap_size,
        },
    )
    return chunks
