"""Run configuration for hunkreview commands.

Both objects are immutable and built once from CLI arguments, then passed
explicitly to the code that needs them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


DEFAULT_SCREEN_WIDTH = 80

# Columns reserved around the hunk body when rendering
DEFAULT_SCREEN_MARGIN = 20

MIN_CONTENT_WIDTH = 20


@dataclass(frozen=True)
class DisplayConfig:
    """Layout settings for the text renderer.

    Attributes:
        width: Terminal width in columns
        margin: Columns subtracted from width for hunk content
        separator_char: Character used for horizontal rules
    """

    width: int = DEFAULT_SCREEN_WIDTH
    margin: int = DEFAULT_SCREEN_MARGIN
    separator_char: str = "─"

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError(f"Screen width must be positive: {self.width}")

    @property
    def content_width(self) -> int:
        return max(self.width - self.margin, MIN_CONTENT_WIDTH)

    def truncate(self, line: str) -> str:
        """Clip a line to the content width, marking clipped lines with ``…``."""
        if len(line) <= self.content_width:
            return line
        return line[: self.content_width - 1] + "…"


@dataclass(frozen=True)
class ReviewConfig:
    """Settings for a review or status run.

    Attributes:
        repo_path: Repository root git runs in
        display: Layout settings for interactive output
        refresh_interval: Seconds between background refreshes, or None to disable
        strict: Fail when the unstaged fetch fails instead of showing it empty
    """

    repo_path: Path = field(default_factory=lambda: Path("."))
    display: DisplayConfig = field(default_factory=DisplayConfig)
    refresh_interval: float | None = None
    strict: bool = False

    def __post_init__(self) -> None:
        if self.refresh_interval is not None and self.refresh_interval <= 0:
            raise ValueError(
                f"Refresh interval must be positive: {self.refresh_interval}"
            )
