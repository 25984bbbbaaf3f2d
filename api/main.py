import logging
import os
from contextlib import asynccontextmanager

from dotenv import find_dotenv, load_dotenv
from fastapi import FastAPI, Query

from db.redis import check_redis, close_redis, init_redis, read_reviews, upsert_reviews
from movie_content.classes.schemas import InsertReviewsRequest, ReviewsPayload

load_dotenv(find_dotenv(usecwd=True))

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan handler for the Redis connection pool.

    Opens the pool on startup (failing fast if Redis is unreachable) and
    closes it on shutdown.
    """
    await init_redis()
    yield
    await close_redis()


app = FastAPI(lifespan=lifespan)


@app.get("/health")
async def health_check():
    """
    Health check endpoint that validates connectivity to the review store.

    Returns a dictionary with 'ok' or an error message per service.
    """
    return {"redis": await check_redis()}


@app.get("/reviews", response_model=ReviewsPayload)
async def get_reviews(film_id: str = Query(..., alias="filmId")) -> ReviewsPayload:
    """Return the canonical review list for a film, oldest first."""
    return ReviewsPayload(data=await read_reviews(film_id))


@app.post("/reviews/insert")
async def insert_reviews(request: InsertReviewsRequest) -> dict[str, int]:
    """
    Upsert a batch of reviews for a film.

    One review per author per film: a review by an author who already
    reviewed the film replaces the earlier one.
    """
    inserted = await upsert_reviews(request.film_id, request.reviews)
    logger.debug("Insert request for film %s stored %d reviews", request.film_id, inserted)
    return {"inserted": inserted}
