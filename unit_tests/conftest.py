"""Shared pytest fixtures for unit tests."""

from typing import Any, Callable
from pathlib import Path
import sys

import pytest

# Ensure project root is importable when tests run from repository root.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from movie_content.classes.schemas import ContentProps, Review


@pytest.fixture
def review_factory() -> Callable[..., Review]:
    """Return a factory that builds a valid Review with optional overrides."""

    def _factory(**overrides: Any) -> Review:
        """Construct a TMDB-shaped Review while allowing targeted field overrides."""
        review_data: dict[str, Any] = {
            "id": "5d2b8d3e2f8d0b0010c1f2a4",
            "author": "a@x.com",
            "author_details": {
                "name": "Ada",
                "username": "a@x.com",
                "avatar_path": None,
                "rating": 8.0,
            },
            "content": "great",
            "created_at": "2024-05-01T12:00:00Z",
            "updated_at": "2024-05-01T12:00:00Z",
        }
        review_data.update(overrides)
        return Review.model_validate(review_data)

    return _factory


@pytest.fixture
def content_props_factory() -> Callable[..., ContentProps]:
    """Return a factory that builds complete ContentProps with optional overrides."""

    def _factory(**overrides: Any) -> ContentProps:
        """Construct ContentProps for film 42 with 12 cast members and 20 backdrops."""
        props_data: dict[str, Any] = {
            "credits": {
                "id": "42",
                "cast": [
                    {"id": i, "name": f"Actor {i}", "character": f"Role {i}", "order": i}
                    for i in range(12)
                ],
            },
            "images": {"backdrops": [{"file_path": f"/backdrop_{i}.jpg"} for i in range(20)]},
            "reviews": None,
            "recommendations": [
                {"id": 100 + i, "title": f"Recommended {i}"} for i in range(25)
            ],
            "links": {
                "facebook": "https://facebook.com/film",
                "twitter": "https://x.com/film",
                "instagram": "https://instagram.com/film",
                "homepage": "https://film.example",
            },
            "details": {
                "status": "Released",
                "original_language": "en",
                "budget": 1_000_000,
                "revenue": 0,
            },
            "keywords": [{"id": 9715, "name": "superhero"}, {"id": 180547, "name": "marvel cinematic universe"}],
        }
        props_data.update(overrides)
        return ContentProps.model_validate(props_data)

    return _factory
