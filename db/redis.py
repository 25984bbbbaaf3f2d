"""
Redis async connection pool and review store for the reviews backend.

Reviews for a film live in one Hash keyed by film id, with one field per
author identifier. HSET therefore upserts: each author has at most one
review per film.
"""

import logging
import os
from datetime import datetime, timezone
from typing import Sequence
from uuid import uuid4

import redis.asyncio as aioredis
from dotenv import find_dotenv, load_dotenv
from redis.asyncio.connection import ConnectionPool

from movie_content.classes.schemas import FilmId, Review

load_dotenv(find_dotenv(usecwd=True))

logger = logging.getLogger(__name__)

_redis_pool: ConnectionPool | None = None
_redis_client: aioredis.Redis | None = None

ENV_PREFIX: str = os.getenv("REDIS_ENV", "unknown_env")


def get_redis_client() -> aioredis.Redis:
    """Return the shared async Redis client backed by a connection pool."""
    if _redis_client is None:
        raise RuntimeError("Redis not initialized. Call init_redis() at startup.")
    return _redis_client


def redis_key(*parts: str) -> str:
    """Build an environment-prefixed Redis key from one or more parts."""
    return f"{ENV_PREFIX}:{':'.join(parts)}"


async def init_redis(
    host: str = os.getenv("REDIS_HOST", "redis"),
    port: int = int(os.getenv("REDIS_PORT", "6379")),
    max_connections: int = 10,
) -> None:
    """Call once at application startup (e.g. FastAPI lifespan)."""
    global _redis_pool, _redis_client
    _redis_pool = ConnectionPool(
        host=host,
        port=port,
        max_connections=max_connections,
        decode_responses=True,  # Reviews are stored as JSON text
    )
    _redis_client = aioredis.Redis(connection_pool=_redis_pool)
    await _redis_client.ping()  # Fail fast if Redis is unreachable at startup


async def close_redis() -> None:
    """Call at application shutdown."""
    global _redis_pool, _redis_client
    if _redis_client:
        await _redis_client.aclose()
    if _redis_pool:
        await _redis_pool.aclose()
    _redis_client = None
    _redis_pool = None


async def check_redis() -> str:
    """Ping Redis and return 'ok' or an error message string."""
    try:
        client = get_redis_client()
        await client.ping()
        return "ok"
    except Exception as e:
        return str(e)


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------

_REVIEWS_KEY = "reviews"

_EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


def reviews_key(film_id: FilmId) -> str:
    return redis_key(_REVIEWS_KEY, str(film_id))


def _stamp(review: Review, now: datetime) -> Review:
    """Fill in server-assigned fields (id, timestamps) that the caller left out."""
    return review.model_copy(
        update={
            "id": review.id or uuid4().hex,
            "created_at": review.created_at or now,
            "updated_at": review.updated_at or now,
        }
    )


def _sort_key(review: Review) -> tuple[float, str]:
    created_at = review.created_at or _EPOCH
    return (created_at.timestamp(), review.author_identifier)


async def upsert_reviews(film_id: FilmId, reviews: Sequence[Review]) -> int:
    """
    Store reviews for a film, replacing any existing review by the same author.

    Within one batch the last review per author wins.

    Args:
        film_id: Film the reviews belong to.
        reviews: Reviews to store.

    Returns:
        Number of distinct authors written.
    """
    if not reviews:
        return 0

    client = get_redis_client()
    now = datetime.now(timezone.utc)
    mapping: dict[str, str] = {}
    for review in reviews:
        stamped = _stamp(review, now)
        mapping[stamped.author_identifier] = stamped.model_dump_json()

    await client.hset(reviews_key(film_id), mapping=mapping)
    logger.info("Upserted %d reviews for film %s", len(mapping), film_id)
    return len(mapping)


async def read_reviews(film_id: FilmId) -> list[Review]:
    """
    Load all reviews for a film, oldest first.

    Returns an empty list (with a WARNING log) if the film has no reviews.
    """
    client = get_redis_client()
    key = reviews_key(film_id)
    raw: dict[str, str] = await client.hgetall(key)

    if not raw:
        logger.warning("Redis key '%s' is absent or empty; no reviews for film %s", key, film_id)
        return []

    reviews = [Review.model_validate_json(value) for value in raw.values()]
    return sorted(reviews, key=_sort_key)
