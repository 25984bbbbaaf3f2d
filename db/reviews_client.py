"""
Reviews backend API client.

Uses httpx.AsyncClient against the first-party reviews service (see api/main.py).
Errors are not swallowed here: non-2xx responses raise httpx.HTTPStatusError and
malformed payloads raise pydantic.ValidationError, leaving the policy to callers.
"""

import logging
import os
from typing import Optional, Sequence

import httpx
from dotenv import find_dotenv, load_dotenv

from movie_content.classes.schemas import FilmId, Review, ReviewsPayload

load_dotenv(find_dotenv(usecwd=True))

logger = logging.getLogger(__name__)

_DEFAULT_BASE_URL = "http://localhost:8000"
_DEFAULT_TIMEOUT = 10.0
_REVIEWS_PATH = "/reviews"
_INSERT_REVIEWS_PATH = "/reviews/insert"


def _base_url() -> str:
    return os.getenv("REVIEWS_API_URL", _DEFAULT_BASE_URL)


def _timeout() -> float:
    return float(os.getenv("REVIEWS_API_TIMEOUT", str(_DEFAULT_TIMEOUT)))


def _auth_headers() -> dict[str, str]:
    token = os.getenv("REVIEWS_API_TOKEN")
    if not token:
        return {}
    return {"Authorization": f"Bearer {token}"}


class ReviewsClient:
    """
    Thin async client for the reviews endpoints.

    Owns its httpx.AsyncClient; use as an async context manager or call
    aclose() when done. A custom transport can be passed for testing.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url or _base_url(),
            headers=_auth_headers(),
            timeout=timeout if timeout is not None else _timeout(),
            transport=transport,
        )

    async def __aenter__(self) -> "ReviewsClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch_reviews(self, film_id: FilmId) -> list[Review]:
        """
        Fetch the canonical review list for a film.

        Args:
            film_id: Film identifier the reviews are scoped to.

        Returns:
            Reviews in server order; empty when the payload's data field is null or missing.
        """
        response = await self._client.get(_REVIEWS_PATH, params={"filmId": str(film_id)})
        response.raise_for_status()
        payload = ReviewsPayload.model_validate(response.json())
        reviews = payload.data or []
        logger.debug("Fetched %d reviews for film %s", len(reviews), film_id)
        return reviews

    async def insert_reviews(self, film_id: Optional[FilmId], reviews: Sequence[Review]) -> None:
        """
        Submit a batch of reviews for a film.

        The response body is not interpreted; only success or failure matters.
        """
        body = {
            "filmId": str(film_id) if film_id is not None else None,
            "reviews": [review.model_dump(mode="json", exclude_none=True) for review in reviews],
        }
        response = await self._client.post(_INSERT_REVIEWS_PATH, json=body)
        response.raise_for_status()
