"""Domain enum for the staged/unstaged side of the working tree.

Selects which git zone a fetch or a listing operates on.
"""

from __future__ import annotations

from enum import Enum


class DiffScope(Enum):
    """Which set of pending changes to read.

    Attributes:
        STAGED: Changes in the index (``git diff --staged``)
        UNSTAGED: Working tree changes not yet staged (``git diff``)
    """

    STAGED = "staged"
    UNSTAGED = "unstaged"

    @classmethod
    def from_staged(cls, staged: bool) -> DiffScope:
        return cls.STAGED if staged else cls.UNSTAGED

    @property
    def is_staged(self) -> bool:
        return self is DiffScope.STAGED

    def git_flags(self) -> list[str]:
        """Extra ``git diff`` flags selecting this scope."""
        return ["--staged"] if self.is_staged else []
