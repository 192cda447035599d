"""
Recursive splitter: splits document content on an ordered list of literal separators,
coarsest first, merging the pieces back into chunks of at most chunk_size with overlap.
Pieces that are still too large are split again with the finer separators.
"""

import copy
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator

from splitter_service.config.logging import get_logger
from splitter_service.services.splitting.base import (
    Document,
    KeepType,
    check_overlap_size,
    config_error_from_validation,
)
from splitter_service.services.splitting.length import count_chars
from splitter_service.utils.ids import IdGenerator, inherit_id

logger = get_logger(__name__)


class SplitterConfig(BaseModel):
    """Recursive splitter parameters. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    chunk_size: int = Field(..., description="Max chunk length as measured by len_func")
    overlap_size: int = Field(default=0, description="Max length carried over from the previous chunk")
    separators: tuple[str, ...] = Field(default=(), description="Literal separators, coarsest first")
    keep_type: KeepType = Field(default=KeepType.NONE)
    len_func: Callable[[str], int] | None = Field(default=None, description="Defaults to code point count")
    id_generator: Callable[[str, int], str] | None = Field(default=None, description="Defaults to inheriting the id")

    @field_validator("chunk_size")
    @classmethod
    def _chunk_size_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("chunk size must be greater than 0")
        return v

    @field_validator("overlap_size")
    @classmethod
    def _overlap_below_chunk_size(cls, v: int, info: ValidationInfo) -> int:
        return check_overlap_size(v, info.data.get("chunk_size"))


class RecursiveSplitter:
    """
    Splits documents into chunks. Stateless between calls; safe to reuse and to share
    across threads as long as len_func and id_generator are.
    """

    def __init__(self, config: SplitterConfig):
        self._chunk_size = config.chunk_size
        self._overlap_size = config.overlap_size
        # No separators means character-level splitting.
        self._separators: list[str] = list(config.separators) or [""]
        self._keep_type = config.keep_type
        self._len: Callable[[str], int] = config.len_func or count_chars
        self._id_generator: IdGenerator = config.id_generator or inherit_id

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @property
    def overlap_size(self) -> int:
        return self._overlap_size

    def transform(self, documents: list[Document]) -> list[Document]:
        """
        Split each document in order and return all chunks as one flat list.
        Chunk ids come from id_generator(original_id, index), index restarting at 0 per document.
        """
        out: list[Document] = []
        for doc in documents:
            for i, chunk in enumerate(self.split_text(doc.content)):
                out.append(
                    Document(
                        id=self._id_generator(doc.id, i),
                        content=chunk,
                        metadata=copy.deepcopy(doc.metadata),
                    )
                )
        return out

    def split_text(self, text: str) -> list[str]:
        """Split a single text into chunks."""
        return self._split(text, self._separators)

    def _split(self, text: str, separators: list[str]) -> list[str]:
        separator = separators[-1]
        remaining: list[str] = []
        for i, sep in enumerate(separators):
            if sep == "" or sep in text:
                separator = sep
                remaining = separators[i + 1 :]
                break

        parts = self._split_on(text, separator)
        merge_sep = separator if self._keep_type is KeepType.NONE else ""

        chunks: list[str] = []
        good: list[str] = []
        for part in parts:
            if self._len(part) < self._chunk_size:
                good.append(part)
                continue
            if good:
                chunks.extend(self._merge(good, merge_sep))
                good = []
            if remaining:
                chunks.extend(self._split(part, remaining))
            else:
                if self._len(part) > self._chunk_size:
                    logger.debug(
                        "Emitting oversized chunk, no finer separator left",
                        extra={"chunk_len": self._len(part), "chunk_size": self._chunk_size},
                    )
                chunks.append(part)
        if good:
            chunks.extend(self._merge(good, merge_sep))
        return chunks

    def _split_on(self, text: str, separator: str) -> list[str]:
        """Literal split with the separator re-attached per keep_type. Empty parts are dropped."""
        if separator == "":
            return list(text)
        pieces = text.split(separator)
        if self._keep_type is KeepType.START:
            parts = pieces[:1] + [separator + p for p in pieces[1:]]
        elif self._keep_type is KeepType.END:
            parts = [p + separator for p in pieces[:-1]] + pieces[-1:]
        else:
            parts = pieces
        return [p for p in parts if p != ""]

    def _merge(self, parts: list[str], separator: str) -> list[str]:
        """
        Greedily join parts into chunks no longer than chunk_size. When a chunk is emitted,
        its trailing parts totalling at most overlap_size start the next chunk.
        """
        sep_len = self._len(separator)
        chunks: list[str] = []
        current: list[str] = []
        total = 0
        for part in parts:
            part_len = self._len(part)
            if current and total + part_len + sep_len > self._chunk_size:
                chunk = separator.join(current)
                if chunk:
                    chunks.append(chunk)
                while current and (
                    total > self._overlap_size
                    or total + part_len + sep_len > self._chunk_size
                ):
                    total -= self._len(current[0]) + (sep_len if len(current) > 1 else 0)
                    del current[0]
                if not current:
                    total = 0
            current.append(part)
            total += part_len + (sep_len if len(current) > 1 else 0)
        chunk = separator.join(current)
        if chunk:
            chunks.append(chunk)
        return chunks


def new_splitter(config: SplitterConfig | dict[str, Any] | None = None, **kwargs: Any) -> RecursiveSplitter:
    """
    Validate the configuration and build a RecursiveSplitter.
    Accepts a SplitterConfig, a dict of its fields, or the fields as keyword arguments.
    Raises SplitterConfigError naming the offending field.
    """
    if isinstance(config, SplitterConfig):
        if kwargs:
            config = config.model_dump() | kwargs
        else:
            return RecursiveSplitter(config)
    fields = {**(config or {}), **kwargs}
    try:
        validated = SplitterConfig.model_validate(fields)
    except ValidationError as e:
        raise config_error_from_validation(e) from e
    return RecursiveSplitter(validated)
