"""Review command - walk uncommitted changes hunk by hunk.

Interactive, line-based loop over a ReviewSession:

File list mode:
    j / k      move down / up
    o, enter   open the selected file
    t          toggle the file between staged and unstaged
    q          quit

Hunk mode:
    c / s      commit / skip the focused hunk
    u          undo the last decision
    j / k      next / previous hunk
    b          back to the file list (a fully reviewed file leaves the list)
    q          quit

Nothing is written to the working tree or the index; the session summary is
printed on exit.
"""

from __future__ import annotations

import sys

from hunkreview.domain.config import DisplayConfig, ReviewConfig
from hunkreview.domain.selection import SelectionState
from hunkreview.infrastructure.git.diff_io import describe_file
from hunkreview.infrastructure.git.runner import GitCommandRunner
from hunkreview.services.change_fetcher import ChangeFetcher, FetchError
from hunkreview.services.review_session import FileReviewSummary, ReviewSession
from hunkreview.services.status_refresher import StatusRefresher
from hunkreview.utils.interactive import PromptChoice, prompt_choice, separator


# ============================================================
# Menus
# ============================================================

FILE_LIST_CHOICES = [
    PromptChoice("o", "Open"),
    PromptChoice("j", "Down"),
    PromptChoice("k", "Up"),
    PromptChoice("t", "Toggle"),
    PromptChoice("q", "Quit"),
]

NEXT_CHOICE = PromptChoice("j", "Next")
PREVIOUS_CHOICE = PromptChoice("k", "Previous")
COMMIT_CHOICE = PromptChoice("c", "Commit")
SKIP_CHOICE = PromptChoice("s", "Skip")
UNDO_CHOICE = PromptChoice("u", "Undo")
BACK_CHOICE = PromptChoice("b", "Back")
QUIT_CHOICE = PromptChoice("q", "Quit")


def hunk_choices(selection: SelectionState) -> list[PromptChoice]:
    """Menu for the focused file; decision keys are hidden once every hunk is decided."""
    choices = []
    if not selection.complete:
        choices.extend([COMMIT_CHOICE, SKIP_CHOICE])
    if selection.history:
        choices.append(UNDO_CHOICE)
    choices.extend([NEXT_CHOICE, PREVIOUS_CHOICE, BACK_CHOICE, QUIT_CHOICE])
    return choices


# ============================================================
# Rendering
# ============================================================


class ReviewView:
    """Renders session state as plain text.

    All layout settings come from the DisplayConfig given at construction.
    """

    def __init__(self, display: DisplayConfig):
        self.display = display

    def rule(self) -> str:
        return separator(self.display.separator_char, self.display.width)

    def render_file_list(self, session: ReviewSession) -> str:
        entries, cursor = session.file_list()
        if not entries:
            return "No remaining changes."

        lines = [self.rule()]
        current_scope = None
        for index, entry in enumerate(entries):
            if entry.scope != current_scope:
                current_scope = entry.scope
                title = "Staged:" if entry.scope.is_staged else "Unstaged:"
                lines.append(title)
            marker = ">" if index == cursor else " "
            lines.append(self.display.truncate(f"{marker} {describe_file(entry.diff)}"))
        lines.append(self.rule())
        return "\n".join(lines)

    def render_selection(self, selection: SelectionState) -> str:
        diff = selection.diff
        lines = [self.rule()]

        if selection.complete:
            lines.append(f"{diff.filename}  (reviewed)")
            lines.append(self.rule())
            lines.append("No remaining changes.")
            return "\n".join(lines)

        lines.append(f"{diff.filename}  {selection.progress_label()}")
        lines.append(self.rule())

        chunk = selection.current_chunk()
        if chunk is None:
            decision = selection.decision_for(selection.cursor)
            label = decision.value if decision else "decided"
            lines.append(f"Hunk {selection.cursor + 1} already {label}. Use j/k to move.")
            return "\n".join(lines)

        if chunk.header:
            lines.append(self.display.truncate(chunk.header))
        lines.extend(self.display.truncate(line) for line in chunk.lines)
        return "\n".join(lines)

    def render_summary(self, summaries: list[FileReviewSummary]) -> str:
        if not summaries:
            return "No hunks reviewed."
        lines = ["Review summary:"]
        for summary in summaries:
            lines.append(
                f"  {summary.filename}: {summary.committed} committed, "
                f"{summary.skipped} skipped, {summary.remaining} remaining"
            )
        return "\n".join(lines)


# ============================================================
# Interactive Loop
# ============================================================


def run_review_loop(session: ReviewSession, view: ReviewView) -> None:
    """Drive the session from user input until quit, EOF, or nothing is left."""
    while True:
        selection = session.active_selection

        if selection is None:
            if session.is_finished:
                print(view.render_file_list(session))
                return

            print(view.render_file_list(session))
            choice = prompt_choice("Files", FILE_LIST_CHOICES, default="o")
            if choice in (None, "q"):
                return
            if choice == "j":
                session.move_file_cursor_down()
            elif choice == "k":
                session.move_file_cursor_up()
            elif choice == "t":
                session.toggle_selected()
            elif choice == "o" and session.open_selected() is None:
                print("Deleted files have no hunks to review.")
            continue

        print(view.render_selection(selection))
        choice = prompt_choice("Hunk", hunk_choices(selection))
        if choice in (None, "q"):
            return
        if choice == "c":
            session.commit()
        elif choice == "s":
            session.skip()
        elif choice == "u":
            session.undo()
        elif choice == "j":
            session.move_chunk_forward()
        elif choice == "k":
            session.move_chunk_backward()
        elif choice == "b":
            summary = session.close_active()
            if summary is not None:
                print(f"Finished {summary.filename}.")


# ============================================================
# Command
# ============================================================


def cmd_review(config: ReviewConfig) -> int:
    """Execute the review command.

    Args:
        config: Repository, display, refresh, and strictness settings

    Returns:
        Exit code (0 for success, 1 if the initial fetch fails)
    """
    runner = GitCommandRunner(repo_path=config.repo_path)
    fetcher = ChangeFetcher(runner, file_exists=runner.file_exists)

    def warn(message: str) -> None:
        print(f"Warning: {message}", file=sys.stderr)

    try:
        status = fetcher.fetch_status(strict=config.strict, on_warning=warn)
    except FetchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    session = ReviewSession(status)
    view = ReviewView(config.display)

    refresher = None
    if config.refresh_interval is not None:
        refresher = StatusRefresher(
            fetcher,
            session.replace_status,
            config.refresh_interval,
            initial_status=status.copy(),
            strict=config.strict,
            on_error=lambda e: warn(f"refresh failed: {e}"),
        )
        refresher.start()

    try:
        run_review_loop(session, view)
    finally:
        if refresher is not None:
            refresher.stop()

    print(view.render_summary(session.summary()))
    return 0
