"""Change fetcher service.

Core service that lists changed files, retrieves each file's zero-context diff
in parallel, and parses the results into FileDiff models. All git access goes
through an injected GitRunner; the service never prints.
"""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path

from hunkreview.domain.diff import FileDiff, ParseError, sort_file_diffs
from hunkreview.domain.diff_scope import DiffScope
from hunkreview.domain.status import Status
from hunkreview.infrastructure.git.runner import GitRunner


# ============================================================
# Constants
# ============================================================

DEFAULT_MAX_WORKERS = 8

# Names containing this marker are tooling artifacts, not reviewable files
_IGNORED_NAME_MARKER = ".diff"


# ============================================================
# Errors
# ============================================================


class FetchError(Exception):
    """Raised when changed files or a file's diff cannot be retrieved."""

    def __init__(self, message: str, filename: str | None = None):
        self.filename = filename
        super().__init__(message)


# ============================================================
# Service
# ============================================================


class ChangeFetcher:
    """Builds FileDiff lists and Status snapshots from git.

    Receives its collaborators via constructor injection:
    a GitRunner for ``git diff`` calls and a file-existence check used to
    detect files that were deleted from disk.
    """

    def __init__(
        self,
        runner: GitRunner,
        file_exists: Callable[[str], bool] | None = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ):
        """Initialize with dependencies.

        Args:
            runner: Runs git commands and returns (lines, error)
            file_exists: Checks whether a changed path still exists on disk
                (default: relative to the current directory)
            max_workers: Upper bound on concurrent per-file diff calls
        """
        self.runner = runner
        self.file_exists = file_exists or (lambda name: Path(name).exists())
        self.max_workers = max(1, max_workers)

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def list_changed_files(self, staged: bool) -> list[str]:
        """List changed filenames, skipping blanks and ``.diff`` artifacts.

        Raises:
            FetchError: If the git listing call fails
        """
        scope = DiffScope.from_staged(staged)
        lines, error = self.runner.run(["diff", "--name-only", *scope.git_flags()])
        if error is not None:
            raise FetchError(f"failed to list {scope.value} files: {error}")
        return [name for name in lines if name and _IGNORED_NAME_MARKER not in name]

    def fetch_file_diff(self, filename: str, staged: bool) -> FileDiff:
        """Retrieve and parse one file's diff.

        A file that no longer exists on disk is returned as a deleted FileDiff
        without calling git.

        Raises:
            FetchError: If the git call fails or its output cannot be parsed
        """
        if not self.file_exists(filename):
            return FileDiff(filename=filename)

        scope = DiffScope.from_staged(staged)
        lines, error = self.runner.run(
            ["diff", "--unified=0", *scope.git_flags(), filename]
        )
        if error is not None:
            raise FetchError(
                f"failed to get diff for file ({filename}): {error}", filename
            )

        try:
            return FileDiff.from_diff_lines(filename, lines)
        except ParseError as e:
            raise FetchError(
                f"failed to parse diff for file ({filename}): {e}", filename
            ) from e

    def fetch_changes(self, staged: bool) -> list[FileDiff]:
        """Fetch every changed file's diff in parallel.

        Each file is diffed in its own worker. All workers are joined before
        returning; if any failed, the first failure seen is raised and no
        partial result is returned.

        Args:
            staged: Read the index (True) or the working tree (False)

        Returns:
            FileDiffs sorted by filename

        Raises:
            FetchError: If listing fails or any per-file fetch fails
        """
        filenames = self.list_changed_files(staged)
        if not filenames:
            return []

        diffs: list[FileDiff] = []
        first_error: FetchError | None = None

        workers = min(len(filenames), self.max_workers)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(self.fetch_file_diff, name, staged)
                for name in filenames
            ]
            for future in as_completed(futures):
                try:
                    diffs.append(future.result())
                except FetchError as e:
                    if first_error is None:
                        first_error = e

        if first_error is not None:
            raise first_error

        return sort_file_diffs(diffs)

    def fetch_status(
        self,
        strict: bool = False,
        on_warning: Callable[[str], None] | None = None,
    ) -> Status:
        """Fetch staged and unstaged diffs concurrently.

        A staged failure always raises. An unstaged failure raises only when
        ``strict`` is set; otherwise the unstaged set is left empty and the
        failure is reported through ``on_warning``.

        A file with both staged and unstaged changes is listed once, under
        unstaged.

        Args:
            strict: Treat an unstaged failure as fatal
            on_warning: Optional callback for tolerated failures. Service does
                NOT print - caller handles display via this callback.

        Returns:
            Status with both lists sorted by filename

        Raises:
            FetchError: If the staged fetch (or, when strict, either fetch) fails
        """
        with ThreadPoolExecutor(max_workers=2) as executor:
            staged_future = executor.submit(self.fetch_changes, True)
            unstaged_future = executor.submit(self.fetch_changes, False)

        staged = _result_or_raise(staged_future, DiffScope.STAGED)

        try:
            unstaged = _result_or_raise(unstaged_future, DiffScope.UNSTAGED)
        except FetchError as e:
            if strict:
                raise
            if on_warning:
                on_warning(str(e))
            unstaged = []

        unstaged_names = {diff.filename for diff in unstaged}
        staged = [diff for diff in staged if diff.filename not in unstaged_names]

        return Status(staged=staged, unstaged=unstaged)


def _result_or_raise(future: Future, scope: DiffScope) -> list[FileDiff]:
    try:
        return future.result()
    except FetchError as e:
        raise FetchError(f"failed to load {scope.value} diffs: {e}", e.filename) from e
