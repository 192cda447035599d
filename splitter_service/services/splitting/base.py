"""Document model, separator keep policy and splitter configuration errors."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ValidationError


class KeepType(str, Enum):
    """Where a separator goes after the text is split on it."""

    NONE = "none"
    START = "start"
    END = "end"


class Document(BaseModel):
    """A text payload with an id and free-form metadata. Input and output unit of splitters."""

    id: str = Field(default="", description="Document id; chunks inherit or derive it")
    content: str = Field(default="", description="Text to split")
    metadata: dict[str, Any] = Field(default_factory=dict)


class SplitterConfigError(ValueError):
    """Raised when a splitter is constructed with an invalid configuration."""

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


def config_error_from_validation(e: ValidationError) -> SplitterConfigError:
    """Report the first offending field of a pydantic ValidationError as a SplitterConfigError."""
    errors = e.errors()
    if not errors:
        return SplitterConfigError(str(e))
    first = errors[0]
    loc = first.get("loc") or ()
    field = ".".join(str(p) for p in loc) or None
    value = first.get("input")
    msg = first.get("msg", "invalid value").removeprefix("Value error, ")
    if field:
        message = f"invalid {field}={value!r}: {msg}"
    else:
        message = f"invalid splitter config: {msg}"
    return SplitterConfigError(message, field=field, value=value)


def check_overlap_size(overlap_size: int, chunk_size: int | None) -> int:
    """Shared overlap rule for splitter configs and profiles: 0 <= overlap_size < chunk_size."""
    if overlap_size < 0:
        raise ValueError("overlap_size must not be negative")
    if overlap_size > 0 and chunk_size is not None and overlap_size >= chunk_size:
        raise ValueError(f"overlap_size must be less than chunk_size ({chunk_size})")
    return overlap_size
