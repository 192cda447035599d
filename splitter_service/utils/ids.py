"""Id generators for chunks split from a document. All deterministic."""

import hashlib
from typing import Callable

IdGenerator = Callable[[str, int], str]


def inherit_id(original_id: str, split_index: int) -> str:
    """Every chunk keeps the source document id."""
    return original_id


def indexed_id(original_id: str, split_index: int) -> str:
    """Chunk id is the source id suffixed with the split index, e.g. doc_part0."""
    return f"{original_id}_part{split_index}"


def generate_chunk_id(document_id: str, chunk_index: int) -> str:
    """Generate a deterministic chunk_id from document id and index. Stable across runs."""
    payload = f"{document_id}:{chunk_index}"
    digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()[:24]
    return f"chunk_{digest}"


ID_STRATEGIES: dict[str, IdGenerator] = {
    "inherit": inherit_id,
    "indexed": indexed_id,
    "hashed": generate_chunk_id,
}


def get_id_generator(name: str) -> IdGenerator:
    """Return the id generator registered under name. Raises ValueError for unknown names."""
    fn = ID_STRATEGIES.get(name)
    if fn is None:
        raise ValueError(f"Unknown id strategy: {name!r}")
    return fn
