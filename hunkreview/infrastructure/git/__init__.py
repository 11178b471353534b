"""Git primitives - command runner and diff input/output."""

from .diff_io import (
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
from .runner import GitCommandRunner, GitRunner

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
