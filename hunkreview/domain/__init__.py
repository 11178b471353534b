"""Domain models for hunkreview."""

from hunkreview.domain.diff import (
    Chunk,
    FileDiff,
    ParseError,
    ParseErrorKind,
    Snippet,
)
from hunkreview.domain.diff_scope import DiffScope
from hunkreview.domain.selection import Decision, SelectionState
from hunkreview.domain.status import Status

__all__ = [
    "Chunk",
    "Decision",
    "DiffScope",
    "FileDiff",
    "ParseError",
    "ParseErrorKind",
    "SelectionState",
    "Snippet",
    "Status",
]
