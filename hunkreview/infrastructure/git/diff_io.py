"""Infrastructure for reading diffs and formatting parsed results.

Handles reading diff content from stdin or files and converting parsed diffs
and statuses to JSON, YAML, or human-readable text.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import yaml

from hunkreview.domain.diff import FileDiff
from hunkreview.domain.status import Status


# ============================================================
# Input Functions
# ============================================================


def read_diff_from_stdin() -> str:
    """Read diff content from stdin.

    Returns:
        Raw diff content as a string
    """
    return sys.stdin.read()


def read_diff_from_file(path: str | Path) -> str:
    """Read diff content from a file.

    Args:
        path: Path to the diff file

    Returns:
        Raw diff content as a string

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    with open(path) as f:
        return f.read()


def read_diff(input_file: str | None = None) -> str:
    """Read diff content from stdin or a file.

    Args:
        input_file: Optional path to read from. If None, reads from stdin.

    Returns:
        Raw diff content as a string
    """
    if input_file is None:
        return read_diff_from_stdin()
    return read_diff_from_file(input_file)


# ============================================================
# FileDiff Output
# ============================================================


def format_diff_as_json(diff: FileDiff) -> str:
    return json.dumps(diff.to_dict(), indent=2)


def format_diff_as_yaml(diff: FileDiff) -> str:
    return yaml.safe_dump(diff.to_dict(), sort_keys=False)


def format_diff_as_text(diff: FileDiff) -> str:
    """Format a FileDiff as human-readable text for debugging.

    Args:
        diff: Parsed FileDiff instance

    Returns:
        Text representation showing chunks and their line ranges
    """
    if diff.deleted:
        return f"{diff.filename}: deleted (no hunks)"
    if not diff.chunks:
        return "Empty diff (no hunks found)"

    lines = [
        f"File: {diff.filename}",
        f"Total hunks: {len(diff.chunks)}",
        f"Lines: +{diff.added_line_count} -{diff.removed_line_count}",
        "",
    ]

    for i, chunk in enumerate(diff.chunks, 1):
        lines.append(f"Hunk {i}: {chunk.header}")
        lines.append(f"  Old: lines {chunk.old.start}-{chunk.old.end} ({chunk.old.length} lines)")
        lines.append(f"  New: lines {chunk.new.start}-{chunk.new.end} ({chunk.new.length} lines)")
        lines.append("")

    return "\n".join(lines)


# ============================================================
# Status Output
# ============================================================


def format_status_as_json(status: Status) -> str:
    return json.dumps(status.to_dict(), indent=2)


def format_status_as_yaml(status: Status) -> str:
    return yaml.safe_dump(status.to_dict(), sort_keys=False)


def format_status_as_text(status: Status) -> str:
    """Format a Status as a ``git status`` style listing.

    Args:
        status: Staged and unstaged diffs

    Returns:
        Text with a section per zone and one ``modified:``/``deleted:`` line per file
    """
    lines = ["Staged:"]
    lines.extend(_describe_files(status.staged))
    lines.append("")
    lines.append("Unstaged:")
    lines.extend(_describe_files(status.unstaged))
    return "\n".join(lines)


def describe_file(diff: FileDiff) -> str:
    """One-line summary of a file diff, e.g. ``modified: src/app.py (3 hunks)``."""
    if diff.deleted:
        return f"deleted: {diff.filename}"
    count = len(diff.chunks)
    noun = "hunk" if count == 1 else "hunks"
    return f"modified: {diff.filename} ({count} {noun})"


def _describe_files(diffs: list[FileDiff]) -> list[str]:
    if not diffs:
        return ["  (none)"]
    return [f"  {describe_file(diff)}" for diff in diffs]
