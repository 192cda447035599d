"""Recursive text splitting."""

from splitter_service.services.splitting.base import Document, KeepType, SplitterConfigError
from splitter_service.services.splitting.recursive import RecursiveSplitter, SplitterConfig, new_splitter

__all__ = [
    "Document",
    "KeepType",
    "RecursiveSplitter",
    "SplitterConfig",
    "SplitterConfigError",
    "new_splitter",
]
