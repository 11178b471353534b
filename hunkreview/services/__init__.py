"""Services for hunkreview.

Services encapsulate business logic and orchestrate domain models.
They receive dependencies via constructor injection.
"""

from hunkreview.services.change_fetcher import ChangeFetcher, FetchError
from hunkreview.services.review_session import (
    FileEntry,
    FileReviewSummary,
    ReviewSession,
)
from hunkreview.services.status_refresher import StatusRefresher

__all__ = [
    "ChangeFetcher",
    "FetchError",
    "FileEntry",
    "FileReviewSummary",
    "ReviewSession",
    "StatusRefresher",
]
