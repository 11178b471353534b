"""Per-file hunk selection state.

A SelectionState walks the chunks of one FileDiff, records a commit/skip
decision per chunk, and supports undoing decisions in reverse order. Decisions
are keyed by chunk index within ``FileDiff.chunks``, which never changes after
parsing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from hunkreview.domain.diff import Chunk, FileDiff


class Decision(Enum):
    """Outcome recorded for a reviewed chunk."""

    COMMITTED = "committed"
    SKIPPED = "skipped"


@dataclass
class SelectionState:
    """Cursor plus decision history over a single file's chunks.

    Attributes:
        diff: The file being reviewed (never mutated)
        cursor: Index of the focused chunk, or -1 when the file has no chunks
        decided: Decision for each decided chunk index
        history: Decided chunk indices in the order they were decided
    """

    diff: FileDiff
    cursor: int = -1
    decided: dict[int, Decision] = field(default_factory=dict)
    history: list[int] = field(default_factory=list)

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def for_diff(cls, diff: FileDiff) -> SelectionState:
        """Create a fresh state focused on the first chunk, if any."""
        return cls(diff=diff, cursor=0 if diff.chunks else -1)

    # --------------------------------------------------------
    # Cursor Movement
    # --------------------------------------------------------

    def move_cursor_forward(self) -> None:
        if self.cursor < len(self.diff.chunks) - 1:
            self.cursor += 1

    def move_cursor_backward(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    # --------------------------------------------------------
    # Decisions
    # --------------------------------------------------------

    def commit(self) -> None:
        """Mark the focused chunk as committed and move to a neighbour."""
        self._decide(Decision.COMMITTED)

    def skip(self) -> None:
        """Mark the focused chunk as skipped and move to a neighbour."""
        self._decide(Decision.SKIPPED)

    def undo(self) -> None:
        """Revert the most recent decision.

        Decision state is restored exactly. The cursor steps back one chunk, or
        forward when already at the start, so it lands near the undone chunk
        but not necessarily on it.
        """
        if not self.history:
            return

        index = self.history.pop()
        del self.decided[index]

        original = self.cursor
        self.move_cursor_backward()
        if original == self.cursor:
            self.move_cursor_forward()

    def _decide(self, decision: Decision) -> None:
        if self.complete or self.cursor < 0 or self.cursor in self.decided:
            return

        self.decided[self.cursor] = decision
        self.history.append(self.cursor)

        original = self.cursor
        self.move_cursor_forward()
        if original == self.cursor:
            self.move_cursor_backward()

    # --------------------------------------------------------
    # Queries
    # --------------------------------------------------------

    @property
    def complete(self) -> bool:
        """True when every chunk has a decision or the file was deleted."""
        return self.diff.deleted or len(self.history) == len(self.diff.chunks)

    @property
    def remaining_count(self) -> int:
        return len(self.diff.chunks) - len(self.history)

    def current_chunk(self) -> Chunk | None:
        """Return the focused chunk, or None if it is already decided."""
        if self.cursor < 0 or self.cursor in self.decided:
            return None
        return self.diff.chunks[self.cursor]

    def decision_for(self, index: int) -> Decision | None:
        return self.decided.get(index)

    def committed_indices(self) -> list[int]:
        return [i for i in self.history if self.decided[i] is Decision.COMMITTED]

    def skipped_indices(self) -> list[int]:
        return [i for i in self.history if self.decided[i] is Decision.SKIPPED]

    def progress_label(self) -> str:
        """Position among undecided chunks, e.g. ``2/5``."""
        position = self.cursor + 1 - len(self.history)
        return f"{max(position, 1)}/{self.remaining_count}"

    def to_dict(self) -> dict:
        return {
            "filename": self.diff.filename,
            "cursor": self.cursor,
            "decided": {str(i): d.value for i, d in sorted(self.decided.items())},
            "history": list(self.history),
            "complete": self.complete,
        }
