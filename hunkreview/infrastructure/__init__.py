"""Infrastructure components for hunkreview.

This layer handles external system interactions:
- git CLI via subprocess
- Diff input from stdin/files and formatted output

Organized into subdirectories:
- git/ - Git command runner and diff input/output
"""

from .git import (
    GitCommandRunner,
    GitRunner,
    format_diff_as_json,
    format_diff_as_text,
    format_diff_as_yaml,
    format_status_as_json,
    format_status_as_text,
    format_status_as_yaml,
    read_diff,
    read_diff_from_file,
    read_diff_from_stdin,
)

__all__ = [
    "GitCommandRunner",
    "GitRunner",
    "format_diff_as_json",
    "format_diff_as_text",
    "format_diff_as_yaml",
    "format_status_as_json",
    "format_status_as_text",
    "format_status_as_yaml",
    "read_diff",
    "read_diff_from_file",
    "read_diff_from_stdin",
]
