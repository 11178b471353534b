"""Review session service.

Holds the multi-file review state driven by the interactive command: a cursor
over the staged and unstaged file lists, one SelectionState per opened file,
and the set of files whose review was finished. Every public method takes the
session lock, so a background refresh replacing the Status is never observed
half-applied.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass

from hunkreview.domain.diff import FileDiff
from hunkreview.domain.diff_scope import DiffScope
from hunkreview.domain.selection import SelectionState
from hunkreview.domain.status import Status


# ============================================================
# Domain Models
# ============================================================


@dataclass(frozen=True)
class FileEntry:
    """A visible row of the file list."""

    scope: DiffScope
    diff: FileDiff

    @property
    def filename(self) -> str:
        return self.diff.filename


@dataclass(frozen=True)
class FileReviewSummary:
    """Outcome of reviewing one file."""

    filename: str
    committed: int
    skipped: int
    remaining: int

    @classmethod
    def from_selection(cls, selection: SelectionState) -> FileReviewSummary:
        return cls(
            filename=selection.diff.filename,
            committed=len(selection.committed_indices()),
            skipped=len(selection.skipped_indices()),
            remaining=selection.remaining_count,
        )

    def to_dict(self) -> dict:
        return {
            "filename": self.filename,
            "committed": self.committed,
            "skipped": self.skipped,
            "remaining": self.remaining,
        }


# ============================================================
# Service
# ============================================================


class ReviewSession:
    """Multi-file review over a Status.

    A single-file review is the degenerate case of a Status holding one diff.
    """

    def __init__(self, status: Status):
        self._lock = threading.RLock()
        self._status = status
        self._file_cursor = 0
        self._selections: dict[str, SelectionState] = {}
        self._reviewed: dict[str, SelectionState] = {}
        self._active: str | None = None

    # --------------------------------------------------------
    # File List
    # --------------------------------------------------------

    @property
    def status(self) -> Status:
        with self._lock:
            return self._status

    @property
    def file_cursor(self) -> int:
        with self._lock:
            return self._file_cursor

    def entries(self) -> list[FileEntry]:
        """Visible files: staged first, then unstaged, minus reviewed files."""
        with self._lock:
            return self._entries()

    def file_list(self) -> tuple[list[FileEntry], int]:
        """Visible files and the file cursor, read together."""
        with self._lock:
            return self._entries(), self._file_cursor

    def selected_entry(self) -> FileEntry | None:
        with self._lock:
            entries = self._entries()
            if not entries:
                return None
            return entries[self._file_cursor]

    def move_file_cursor_down(self) -> None:
        with self._lock:
            if self._file_cursor < len(self._entries()) - 1:
                self._file_cursor += 1

    def move_file_cursor_up(self) -> None:
        with self._lock:
            if self._file_cursor > 0:
                self._file_cursor -= 1

    def toggle_selected(self) -> bool:
        """Move the selected file between staged and unstaged.

        The file's selection progress is discarded and the file cursor follows
        the file to its new position.

        Returns:
            True if a file was moved
        """
        with self._lock:
            entry = self.selected_entry()
            if entry is None:
                return False

            moved = self._status.toggle_staged(entry.filename)
            if not moved:
                return False

            self._selections.pop(entry.filename, None)
            if self._active == entry.filename:
                self._active = None
            self._focus_file(entry.filename)
            return True

    # --------------------------------------------------------
    # Chunk Review
    # --------------------------------------------------------

    @property
    def active_selection(self) -> SelectionState | None:
        with self._lock:
            if self._active is None:
                return None
            return self._selections.get(self._active)

    def open_selected(self) -> SelectionState | None:
        """Start (or resume) reviewing the selected file.

        Deleted files have no hunks to review and cannot be opened.
        """
        with self._lock:
            entry = self.selected_entry()
            if entry is None or entry.diff.deleted:
                return None

            selection = self._selections.get(entry.filename)
            if selection is None:
                selection = SelectionState.for_diff(entry.diff)
                self._selections[entry.filename] = selection
            self._active = entry.filename
            return selection

    def close_active(self) -> FileReviewSummary | None:
        """Return to the file list.

        A file whose review is complete is removed from the visible list and
        its final state is kept for the session summary.

        Returns:
            The file's summary if it was complete, otherwise None
        """
        with self._lock:
            if self._active is None:
                return None

            filename = self._active
            self._active = None
            selection = self._selections.get(filename)
            if selection is None or not selection.complete:
                return None

            del self._selections[filename]
            self._reviewed[filename] = selection
            self._clamp_file_cursor()
            return FileReviewSummary.from_selection(selection)

    def commit(self) -> None:
        self._apply(SelectionState.commit)

    def skip(self) -> None:
        self._apply(SelectionState.skip)

    def undo(self) -> None:
        self._apply(SelectionState.undo)

    def move_chunk_forward(self) -> None:
        self._apply(SelectionState.move_cursor_forward)

    def move_chunk_backward(self) -> None:
        self._apply(SelectionState.move_cursor_backward)

    # --------------------------------------------------------
    # Refresh
    # --------------------------------------------------------

    def replace_status(self, status: Status) -> bool:
        """Swap in a freshly fetched Status.

        Selection progress survives only for files whose diff is unchanged.
        Reviewed files whose diff changed become visible again.

        Returns:
            True if the status differed and was replaced
        """
        with self._lock:
            if status == self._status:
                return False

            current = self._entries()
            focused = current[self._file_cursor].filename if current else None

            self._status = status
            self._selections = {
                name: selection
                for name, selection in self._selections.items()
                if status.find(name) == selection.diff
            }
            self._reviewed = {
                name: selection
                for name, selection in self._reviewed.items()
                if status.find(name) == selection.diff
            }
            if self._active is not None and self._active not in self._selections:
                self._active = None

            if focused is not None:
                self._focus_file(focused)
            self._clamp_file_cursor()
            return True

    # --------------------------------------------------------
    # Summary
    # --------------------------------------------------------

    def summary(self) -> list[FileReviewSummary]:
        """Summaries for every reviewed or in-progress file, by filename."""
        with self._lock:
            selections = {**self._selections, **self._reviewed}
            return [
                FileReviewSummary.from_selection(selections[name])
                for name in sorted(selections)
                if selections[name].history
            ]

    @property
    def is_finished(self) -> bool:
        """True when no visible files remain."""
        with self._lock:
            return not self._entries()

    # --------------------------------------------------------
    # Private Helpers
    # --------------------------------------------------------

    def _entries(self) -> list[FileEntry]:
        return [
            FileEntry(scope, diff)
            for scope in (DiffScope.STAGED, DiffScope.UNSTAGED)
            for diff in self._status.diffs_for(scope)
            if diff.filename not in self._reviewed
        ]

    def _focus_file(self, filename: str) -> None:
        for index, entry in enumerate(self._entries()):
            if entry.filename == filename:
                self._file_cursor = index
                return

    def _clamp_file_cursor(self) -> None:
        last = len(self._entries()) - 1
        self._file_cursor = max(0, min(self._file_cursor, last))

    def _apply(self, operation) -> None:
        with self._lock:
            selection = self.active_selection
            if selection is not None:
                operation(selection)
