"""
Review synchronization for the movie content page.

Keeps a local, displayable review list equal to the reviews backend's
canonical list for the current film, and persists any seed reviews handed
to the page (e.g. reviews imported from TMDB) before refreshing.

Failures never propagate out of the synchronizer: they are logged, recorded
as SyncError values and forwarded to an optional observer, and the loading
flag always settles to False.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence

import httpx

from db.reviews_client import ReviewsClient
from movie_content.classes.schemas import FilmId, Review
from movie_content.identity import Viewer

logger = logging.getLogger(__name__)

SeedBatch = Optional[Sequence[Review]]


class SyncErrorKind(Enum):
    FETCH = "fetch"
    INSERT = "insert"


@dataclass(frozen=True, slots=True)
class SyncError:
    kind: SyncErrorKind
    film_id: Optional[FilmId]
    message: str


def _same_batch(left: SeedBatch, right: SeedBatch) -> bool:
    """Seed batches are unchanged when reference-equal or deep-equal."""
    if left is right:
        return True
    if left is None or right is None:
        return False
    return list(left) == list(right)


class ReviewSynchronizer:
    """
    Local review list kept in step with the reviews backend.

    State:
        reviews: last accepted review list (replaced wholesale, never edited).
        loading: True until the first fetch operation settles.
        errors: SyncError records in the order they occurred.

    Every fetch takes a ticket. A response is applied only if its film is
    still current and no newer-ticketed response has been applied yet, so
    a slow response never overwrites fresher data.
    """

    def __init__(
        self,
        client: ReviewsClient,
        on_error: Optional[Callable[[SyncError], None]] = None,
    ) -> None:
        self._client = client
        self._on_error = on_error
        self.reviews: list[Review] = []
        self.loading = True
        self.errors: list[SyncError] = []

        self._triggered = False
        self._film_id: Optional[FilmId] = None
        self._seed_reviews: SeedBatch = None
        self._last_ticket = 0
        self._applied_ticket = 0

    @property
    def film_id(self) -> Optional[FilmId]:
        return self._film_id

    # ===============================
    #            TRIGGER
    # ===============================

    async def update(self, film_id: Optional[FilmId], seed_reviews: SeedBatch = None) -> bool:
        """
        Run a synchronization cycle if the film or the seed batch changed.

        The first call always runs. A cycle fetches the film's reviews and,
        when the seed batch is non-empty, concurrently inserts it and then
        refreshes.

        Returns:
            True if a cycle ran, False if the inputs were unchanged.
        """
        if (
            self._triggered
            and film_id == self._film_id
            and _same_batch(seed_reviews, self._seed_reviews)
        ):
            return False

        self._triggered = True
        self._film_id = film_id
        self._seed_reviews = seed_reviews

        operations = [self.fetch(film_id)]
        if seed_reviews:
            operations.append(self.insert_then_refresh(film_id, seed_reviews))
        await asyncio.gather(*operations)
        return True

    # ===============================
    #           OPERATIONS
    # ===============================

    async def fetch(self, film_id: Optional[FilmId]) -> None:
        """Replace the local list with the backend's reviews for film_id."""
        if not film_id:
            self.loading = False
            return

        self._last_ticket += 1
        ticket = self._last_ticket
        try:
            reviews = await self._client.fetch_reviews(film_id)
        except (httpx.HTTPError, ValueError) as exc:
            self._report(SyncErrorKind.FETCH, film_id, exc)
        else:
            if self._is_current(ticket, film_id):
                self._applied_ticket = ticket
                self.reviews = reviews
            else:
                logger.debug("Discarding stale review response for film %s (ticket %d)", film_id, ticket)
        finally:
            self.loading = False

    async def insert_then_refresh(self, film_id: Optional[FilmId], seed_reviews: SeedBatch) -> None:
        """Submit the seed batch, then refresh whether or not the write succeeded."""
        if not seed_reviews:
            return
        # Absent ids (None, "", 0) go out as null, matching fetch().
        target_film_id = film_id if film_id else None
        try:
            await self._client.insert_reviews(target_film_id, list(seed_reviews))
            logger.info("Inserted %d seed reviews for film %s", len(seed_reviews), film_id)
        except (httpx.HTTPError, ValueError) as exc:
            self._report(SyncErrorKind.INSERT, film_id, exc)
        finally:
            await self.fetch(film_id)

    async def submit_review(
        self,
        viewer: Optional[Viewer],
        content: str,
        rating: Optional[float] = None,
    ) -> bool:
        """
        Submit the viewer's own review for the current film, then refresh.

        Raises:
            ValueError: if the viewer is unresolved, no film is loaded, or the
                viewer already has a review in the local list.

        Returns:
            True if the write succeeded. Write failures are reported, not raised.
        """
        if viewer is None or not viewer.handle:
            raise ValueError("Cannot submit a review without a resolved viewer")
        film_id = self._film_id
        if not film_id:
            raise ValueError("Cannot submit a review before a film is loaded")
        if any(review.author_identifier == viewer.handle for review in self.reviews):
            raise ValueError(f"Viewer {viewer.handle} has already reviewed film {film_id}")

        review = Review(author=viewer.handle, content=content, rating=rating)
        succeeded = False
        try:
            await self._client.insert_reviews(film_id, [review])
            succeeded = True
            logger.info("Submitted review by %s for film %s", viewer.handle, film_id)
        except (httpx.HTTPError, ValueError) as exc:
            self._report(SyncErrorKind.INSERT, film_id, exc)
        finally:
            await self.fetch(film_id)
        return succeeded

    # ===============================
    #            INTERNALS
    # ===============================

    def _is_current(self, ticket: int, film_id: FilmId) -> bool:
        if self._triggered and film_id != self._film_id:
            return False
        return ticket > self._applied_ticket

    def _report(self, kind: SyncErrorKind, film_id: Optional[FilmId], exc: Exception) -> None:
        logger.error("Review %s failed for film %s: %s", kind.value, film_id, exc)
        error = SyncError(kind=kind, film_id=film_id, message=str(exc))
        self.errors.append(error)
        if self._on_error is not None:
            self._on_error(error)
