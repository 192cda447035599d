"""Length functions used for chunk size comparisons. Characters by default; tiktoken tokens optional."""

from typing import Callable

from splitter_service.config.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ENCODING = "cl100k_base"

_tiktoken_encodings: dict[str, object] = {}
_tiktoken_failed: set[str] = set()


def _get_tiktoken_encoding(encoding_name: str = DEFAULT_ENCODING):
    """Lazy-load and cache a tiktoken encoding. Returns None, and remembers the failure, if it cannot load."""
    if encoding_name in _tiktoken_encodings:
        return _tiktoken_encodings[encoding_name]
    if encoding_name in _tiktoken_failed:
        return None
    try:
        import tiktoken
        enc = tiktoken.get_encoding(encoding_name)
    except Exception as e:
        logger.warning(
            "tiktoken not available, token length will use character estimate",
            extra={"encoding": encoding_name, "error": str(e)},
        )
        _tiktoken_failed.add(encoding_name)
        return None
    _tiktoken_encodings[encoding_name] = enc
    return enc


def count_chars(text: str) -> int:
    """Number of Unicode code points in text."""
    return len(text)


def count_tokens(text: str, encoding_name: str = DEFAULT_ENCODING) -> int:
    """Return token count for text using tiktoken; ~4 chars per token when tiktoken is unavailable."""
    if not text:
        return 0
    enc = _get_tiktoken_encoding(encoding_name)
    if enc is not None:
        return len(enc.encode(text))
    return max(1, len(text) // 4)


LENGTH_FUNCTIONS: dict[str, Callable[[str], int]] = {
    "chars": count_chars,
    "tiktoken": count_tokens,
}


def get_length_fn(name: str) -> Callable[[str], int]:
    """Return the length function registered under name. Raises ValueError for unknown names."""
    fn = LENGTH_FUNCTIONS.get(name)
    if fn is None:
        raise ValueError(f"Unknown length function: {name!r}")
    return fn
