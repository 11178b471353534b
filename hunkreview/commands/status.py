"""Status command for listing staged and unstaged changes.

Fetches every changed file's hunks and prints the two lists, either as a
``git status`` style listing or as structured JSON/YAML.
"""

from __future__ import annotations

import sys

from hunkreview.domain.config import ReviewConfig
from hunkreview.domain.diff_scope import DiffScope
from hunkreview.domain.status import Status
from hunkreview.infrastructure.git.diff_io import (
    format_status_as_json,
    format_status_as_text,
    format_status_as_yaml,
)
from hunkreview.infrastructure.git.runner import GitCommandRunner
from hunkreview.services.change_fetcher import ChangeFetcher, FetchError


def cmd_status(
    config: ReviewConfig,
    scope: DiffScope | None = None,
    output_format: str = "text",
) -> int:
    """Show staged and unstaged file diffs.

    Args:
        config: Repository path and strictness settings
        scope: Restrict output to one side, or None for both
        output_format: 'text' (default), 'json', or 'yaml'

    Returns:
        Exit code (0 for success, 1 for error)
    """
    runner = GitCommandRunner(repo_path=config.repo_path)
    fetcher = ChangeFetcher(runner, file_exists=runner.file_exists)

    def warn(message: str) -> None:
        print(f"Warning: {message}", file=sys.stderr)

    try:
        if scope is None:
            status = fetcher.fetch_status(strict=config.strict, on_warning=warn)
        else:
            diffs = fetcher.fetch_changes(staged=scope.is_staged)
            status = Status(staged=diffs) if scope.is_staged else Status(unstaged=diffs)
    except FetchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if output_format == "json":
        print(format_status_as_json(status))
    elif output_format == "yaml":
        print(format_status_as_yaml(status), end="")
    else:
        print(format_status_as_text(status))
    return 0
