"""Domain models for per-file git diff parsing.

Parse-once pattern: the output of ``git diff --unified=0 <file>`` is parsed into
immutable Snippet/Chunk/FileDiff models at the boundary. Review progress is kept
elsewhere (see ``selection.py``); nothing here is mutated after parsing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum


# Number of preamble lines (diff --git, index, ---, +++) skipped before hunks
DIFF_PREAMBLE_LENGTH = 4

HUNK_HEADER_PREFIX = "@@"

_INTEGER_RE = re.compile(r"[+-]?\d+")


# ============================================================
# Errors
# ============================================================


class ParseErrorKind(Enum):
    """Reason a diff could not be parsed."""

    TOO_SHORT = "too_short"
    BAD_HEADER = "bad_header"
    BAD_RANGE = "bad_range"


class ParseError(Exception):
    """Raised when diff text is structurally invalid."""

    def __init__(self, kind: ParseErrorKind, message: str, filename: str = ""):
        self.kind = kind
        self.filename = filename
        prefix = f"{filename}: " if filename else ""
        super().__init__(f"{prefix}{message}")


# ============================================================
# Domain Models
# ============================================================


@dataclass(frozen=True)
class Snippet:
    """One side (old or new) of a hunk.

    Attributes:
        start: 1-based line number where this side begins
        length: Declared line count from the hunk header (0 for pure insert/delete)
        lines: Raw diff lines assigned to this side, in file order
    """

    start: int
    length: int
    lines: tuple[str, ...] = ()

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_range_spec(cls, spec: str, filename: str = "") -> Snippet:
        """Parse a hunk header range such as ``-12,3`` or ``+7``.

        The leading sign character is discarded without checking which side it
        names. A missing length defaults to 1.

        Args:
            spec: Range text from the hunk header
            filename: File being parsed (for error messages)

        Returns:
            Snippet with start and length set and no lines

        Raises:
            ParseError: BAD_RANGE if the prefix is too short or a number is invalid
        """
        parts = spec.split(",", 1)

        if len(parts[0]) < 2:
            raise ParseError(
                ParseErrorKind.BAD_RANGE,
                f"range prefix has invalid length: {parts[0]!r}",
                filename,
            )

        start = _parse_int(parts[0][1:], "start", spec, filename)
        if len(parts) == 1:
            return cls(start=start, length=1)

        length = _parse_int(parts[1], "length", spec, filename)
        return cls(start=start, length=length)

    def with_lines(self, lines: list[str]) -> Snippet:
        """Return a copy of this snippet carrying the given lines."""
        return Snippet(start=self.start, length=self.length, lines=tuple(lines))

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    @property
    def end(self) -> int:
        """Last line number covered by this snippet."""
        if self.length == 0:
            return self.start
        return self.start + self.length - 1

    def to_dict(self) -> dict:
        return {
            "start": self.start,
            "length": self.length,
            "lines": list(self.lines),
        }


@dataclass(frozen=True)
class Chunk:
    """A single ``@@ ... @@`` hunk with its old and new sides.

    Equality is structural over both snippets; the raw header text is kept for
    display but does not take part in comparisons.
    """

    old: Snippet
    new: Snippet
    header: str = field(default="", compare=False)

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_partition(cls, partition: list[str], filename: str = "") -> Chunk:
        """Parse one hunk partition (header line followed by its body).

        Body lines ``1..old.length`` belong to the old side and the remainder to
        the new side. Ownership is positional; ``+``/``-`` markers are not
        inspected.

        Args:
            partition: The ``@@`` header line followed by the hunk body lines
            filename: File being parsed (for error messages)

        Returns:
            Parsed Chunk

        Raises:
            ParseError: BAD_HEADER or BAD_RANGE for malformed headers
        """
        if not partition:
            raise ParseError(ParseErrorKind.BAD_HEADER, "empty hunk", filename)

        header = partition[0]
        header_parts = header.split(" ")
        if len(header_parts) < 4:
            raise ParseError(
                ParseErrorKind.BAD_HEADER,
                f"invalid hunk header: {header!r}",
                filename,
            )

        old = Snippet.from_range_spec(header_parts[1], filename)
        new = Snippet.from_range_spec(header_parts[2], filename)

        body = partition[1:]
        split_at = max(old.length, 0)
        return cls(
            old=old.with_lines(body[:split_at]),
            new=new.with_lines(body[split_at:]),
            header=header,
        )

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    @property
    def lines(self) -> list[str]:
        """Old side lines followed by new side lines."""
        return list(self.old.lines) + list(self.new.lines)

    def to_dict(self) -> dict:
        return {
            "header": self.header,
            "old": self.old.to_dict(),
            "new": self.new.to_dict(),
        }


@dataclass(frozen=True)
class FileDiff:
    """All hunks for one file, as reported by a single ``git diff`` call.

    A FileDiff with a filename but no chunks represents a file git lists as
    changed that no longer exists on disk (see ``deleted``).
    """

    filename: str
    chunks: tuple[Chunk, ...] = ()

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_diff_lines(cls, filename: str, lines: list[str]) -> FileDiff:
        """Parse ``git diff --unified=0`` output for one file.

        The four preamble lines are skipped unread. Every line starting with
        ``@@`` opens a new hunk partition that collects the lines after it.

        Args:
            filename: File the diff belongs to (echoed into the result)
            lines: Raw diff output, one entry per line

        Returns:
            FileDiff with chunks in input order

        Raises:
            ParseError: TOO_SHORT for fewer than 5 lines, or any hunk error
        """
        if len(lines) < DIFF_PREAMBLE_LENGTH + 1:
            raise ParseError(
                ParseErrorKind.TOO_SHORT,
                f"diff has too few lines to parse ({len(lines)})",
                filename,
            )

        partitions: list[list[str]] = []
        for line in lines[DIFF_PREAMBLE_LENGTH:]:
            if line.startswith(HUNK_HEADER_PREFIX):
                partitions.append([line])
            elif partitions:
                partitions[-1].append(line)

        chunks = tuple(Chunk.from_partition(p, filename) for p in partitions)
        return cls(filename=filename, chunks=chunks)

    @classmethod
    def from_diff_text(cls, filename: str, diff_text: str) -> FileDiff:
        """Parse diff output given as a single string."""
        return cls.from_diff_lines(filename, split_output_lines(diff_text))

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    @property
    def deleted(self) -> bool:
        """True when git reported the file changed but it has no hunks."""
        return self.filename != "" and len(self.chunks) == 0

    @property
    def added_line_count(self) -> int:
        return sum(
            1 for chunk in self.chunks for line in chunk.lines if line.startswith("+")
        )

    @property
    def removed_line_count(self) -> int:
        return sum(
            1 for chunk in self.chunks for line in chunk.lines if line.startswith("-")
        )

    def to_dict(self) -> dict:
        return {
            "filename": self.filename,
            "deleted": self.deleted,
            "chunks": [chunk.to_dict() for chunk in self.chunks],
        }


# ============================================================
# Helpers
# ============================================================


def sort_file_diffs(diffs: list[FileDiff]) -> list[FileDiff]:
    """Sort diffs by filename in place and return the same list."""
    diffs.sort(key=lambda diff: diff.filename)
    return diffs


def split_output_lines(output: str) -> list[str]:
    """Split command output into lines, dropping the newline-terminated tail."""
    lines = output.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _parse_int(text: str, label: str, spec: str, filename: str) -> int:
    if not _INTEGER_RE.fullmatch(text):
        raise ParseError(
            ParseErrorKind.BAD_RANGE,
            f"failed to parse {label} in range {spec!r}",
            filename,
        )
    return int(text)
