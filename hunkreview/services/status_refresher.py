"""Periodic status refresh.

Re-runs the change fetch on a fixed interval in one background thread and
hands a new Status to the review session whenever git's view of the working
tree changed since the previous fetch. Ticks are sequential: the next wait
starts only after the current fetch finishes.
"""

from __future__ import annotations

import threading
from collections.abc import Callable

from hunkreview.domain.status import Status
from hunkreview.services.change_fetcher import ChangeFetcher, FetchError


class StatusRefresher:
    """Background refresher feeding ``ReviewSession.replace_status``."""

    def __init__(
        self,
        fetcher: ChangeFetcher,
        replace_status: Callable[[Status], bool],
        interval_seconds: float,
        initial_status: Status | None = None,
        strict: bool = False,
        on_error: Callable[[FetchError], None] | None = None,
        on_replaced: Callable[[Status], None] | None = None,
    ):
        """Initialize with dependencies.

        Args:
            fetcher: Produces fresh Status snapshots
            replace_status: The single operation allowed to change visible state
            interval_seconds: Delay between the end of one fetch and the next
            initial_status: Status already shown (baseline for change detection)
            strict: Passed through to ``ChangeFetcher.fetch_status``
            on_error: Called when a tick's fetch fails; the previous status is kept
            on_replaced: Called after a changed status was handed over
        """
        if interval_seconds <= 0:
            raise ValueError(f"Refresh interval must be positive: {interval_seconds}")

        self.fetcher = fetcher
        self.replace_status = replace_status
        self.interval_seconds = interval_seconds
        self.strict = strict
        self.on_error = on_error
        self.on_replaced = on_replaced

        self._last_fetched = initial_status
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def start(self) -> None:
        if self._thread is not None:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run, name="hunkreview-refresh", daemon=True
        )
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def refresh_once(self) -> bool:
        """Fetch once and hand over the status if it changed.

        Returns:
            True if the session's status was replaced
        """
        try:
            status = self.fetcher.fetch_status(strict=self.strict)
        except FetchError as e:
            if self.on_error:
                self.on_error(e)
            return False

        if status == self._last_fetched:
            return False
        # The session may toggle files in the status it receives
        self._last_fetched = status.copy()

        replaced = self.replace_status(status)
        if replaced and self.on_replaced:
            self.on_replaced(status)
        return replaced

    # --------------------------------------------------------
    # Private Helpers
    # --------------------------------------------------------

    def _run(self) -> None:
        while not self._stop_event.wait(self.interval_seconds):
            self.refresh_once()
