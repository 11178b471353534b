"""Review status: staged and unstaged file diffs.

Status owns the two filename-sorted collections of FileDiff and moves files
between them when the user toggles a file's staged membership. It never touches
git; toggling only changes which list a diff is shown in.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from hunkreview.domain.diff import FileDiff, sort_file_diffs
from hunkreview.domain.diff_scope import DiffScope


@dataclass
class Status:
    """Staged and unstaged diffs for the working tree.

    A filename appears in at most one of the two lists, and both lists are kept
    sorted by filename.
    """

    staged: list[FileDiff] = field(default_factory=list)
    unstaged: list[FileDiff] = field(default_factory=list)

    def __post_init__(self) -> None:
        sort_file_diffs(self.staged)
        sort_file_diffs(self.unstaged)

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def toggle_staged(self, filename: str) -> bool:
        """Move a file's diff to the other list and re-sort the destination.

        Unknown filenames are ignored.

        Args:
            filename: File to move

        Returns:
            True if the file was moved, False if it was not found
        """
        for source, destination in (
            (self.staged, self.unstaged),
            (self.unstaged, self.staged),
        ):
            for index, diff in enumerate(source):
                if diff.filename == filename:
                    del source[index]
                    destination.append(diff)
                    sort_file_diffs(destination)
                    return True
        return False

    def all_diffs(self) -> list[FileDiff]:
        """Staged diffs followed by unstaged diffs."""
        return self.staged + self.unstaged

    def diffs_for(self, scope: DiffScope) -> list[FileDiff]:
        return self.staged if scope.is_staged else self.unstaged

    def find(self, filename: str) -> FileDiff | None:
        for diff in self.all_diffs():
            if diff.filename == filename:
                return diff
        return None

    def scope_of(self, filename: str) -> DiffScope | None:
        if any(d.filename == filename for d in self.staged):
            return DiffScope.STAGED
        if any(d.filename == filename for d in self.unstaged):
            return DiffScope.UNSTAGED
        return None

    def is_staged(self, filename: str) -> bool:
        return self.scope_of(filename) is DiffScope.STAGED

    def copy(self) -> Status:
        """Shallow copy with independent lists (FileDiffs are immutable)."""
        return Status(staged=list(self.staged), unstaged=list(self.unstaged))

    def to_dict(self) -> dict:
        return {
            "staged": [diff.to_dict() for diff in self.staged],
            "unstaged": [diff.to_dict() for diff in self.unstaged],
        }
