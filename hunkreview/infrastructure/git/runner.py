"""Git CLI command runner.

Infrastructure component that wraps subprocess calls to the git CLI.
This abstraction allows services to be tested without actually calling git.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from hunkreview.domain.diff import split_output_lines


class GitRunner(Protocol):
    """Protocol for running git commands."""

    def run(self, args: list[str]) -> tuple[list[str], str | None]:
        """Run git with the given arguments and return (lines, error)."""
        ...


@dataclass
class GitCommandRunner:
    """Runs git CLI commands via subprocess.

    This is the production implementation of GitRunner.
    For testing, mock this class or use a fake implementation.
    """

    repo_path: Path = field(default_factory=lambda: Path("."))
    git_executable: str = "git"

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def run(self, args: list[str]) -> tuple[list[str], str | None]:
        """Run a git command in the repository directory.

        Output that is not valid UTF-8 (e.g. Latin-1 file contents) is decoded
        with replacement characters instead of failing.

        Args:
            args: Git arguments without the executable (e.g., ["diff", "--name-only"])

        Returns:
            Tuple of (output_lines, error). ``error`` is None on success;
            otherwise output_lines is empty and error describes the failure.
        """
        cmd = self.command_for(args)
        try:
            result = subprocess.run(
                cmd,
                cwd=self.repo_path,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                check=True,
            )
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            return [], f"git command failed ({e.returncode}): {' '.join(cmd)}\n{stderr}"
        except OSError as e:
            return [], f"unable to run {' '.join(cmd)}: {e}"

        return split_output_lines(result.stdout), None

    def command_for(self, args: list[str]) -> list[str]:
        # Unquoted paths so non-ASCII names match files on disk
        return [self.git_executable, "--no-pager", "-c", "core.quotePath=false", *args]

    def file_exists(self, filename: str) -> bool:
        """Check whether a repository-relative path exists on disk."""
        return (self.repo_path / filename).exists()
