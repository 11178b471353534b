"""Parse diff command.

Thin command that orchestrates diff parsing infrastructure.
Reads one file's ``git diff --unified=0`` output from stdin or a file and
outputs its hunks as JSON, YAML, or text.
"""

from __future__ import annotations

import sys

from hunkreview.domain.diff import FileDiff, ParseError
from hunkreview.infrastructure.git.diff_io import (
    format_diff_as_json,
    format_diff_as_text,
    format_diff_as_yaml,
    read_diff,
)


def cmd_parse_diff(
    input_file: str | None = None,
    filename: str | None = None,
    output_format: str = "json",
) -> int:
    """Parse a single-file diff and output structured hunk information.

    Thin command that:
    1. Reads diff from stdin or file
    2. Parses into the FileDiff domain model
    3. Outputs JSON, YAML, or text

    Args:
        input_file: Optional path to read diff from. If None, reads from stdin.
        filename: Name to record for the diffed file (default: input file path or "-")
        output_format: 'json' (default), 'yaml', or 'text'

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    # --------------------------------------------------------
    # 1. Read diff input
    # --------------------------------------------------------
    try:
        diff_content = read_diff(input_file)
    except FileNotFoundError:
        print(f"Input file not found: {input_file}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Failed to read diff: {e}", file=sys.stderr)
        return 1

    # --------------------------------------------------------
    # 2. Parse into domain model
    # --------------------------------------------------------
    name = filename or input_file or "-"
    try:
        diff = FileDiff.from_diff_text(name, diff_content)
    except ParseError as e:
        print(f"Failed to parse diff ({e.kind.value}): {e}", file=sys.stderr)
        return 1

    # --------------------------------------------------------
    # 3. Output in requested format
    # --------------------------------------------------------
    if output_format == "text":
        print(format_diff_as_text(diff))
    elif output_format == "yaml":
        print(format_diff_as_yaml(diff), end="")
    else:
        print(format_diff_as_json(diff))

    return 0
