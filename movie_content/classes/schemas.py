"""
Pydantic schemas for reviews, page props and the rendered content view.

Review shapes follow the TMDB review payload (author, author_details, content)
so reviews imported from TMDB can be stored by the reviews backend unchanged.
"""

from datetime import datetime
from typing import Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

FilmId = Union[int, str]


# -----------------------------
#           REVIEWS
# -----------------------------

class AuthorDetails(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    username: Optional[str] = None
    avatar_path: Optional[str] = None
    rating: Optional[float] = None


class Review(BaseModel):
    """
    A single review of a film.

    The author identifier (username, falling back to author) is the review's
    identity within a film: the backend keeps at most one review per author.
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: Optional[str] = None
    author: str
    author_details: Optional[AuthorDetails] = None
    content: str = Field(validation_alias=AliasChoices("content", "body"))
    rating: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    url: Optional[str] = None

    @field_validator("rating")
    @classmethod
    def _rating_in_range(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and not (0 <= value <= 10):
            raise ValueError(f"Invalid rating: {value}. Must be 0-10")
        return value

    @property
    def author_identifier(self) -> str:
        if self.author_details and self.author_details.username:
            return self.author_details.username
        return self.author


class ReviewsPayload(BaseModel):
    """Response body of GET /reviews. A null data field means no reviews."""
    data: Optional[list[Review]] = None


class InsertReviewsRequest(BaseModel):
    """Request body of POST /reviews/insert."""
    model_config = ConfigDict(populate_by_name=True)

    film_id: str = Field(alias="filmId")
    reviews: list[Review] = []

    @field_validator("film_id", mode="before")
    @classmethod
    def _coerce_film_id(cls, value: object) -> object:
        # TMDB ids arrive as ints; the store keys on strings
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


# -----------------------------
#          PAGE PROPS
# -----------------------------

class CastMember(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    character: Optional[str] = None
    profile_path: Optional[str] = None
    order: Optional[int] = None


class MovieCredits(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[FilmId] = None
    cast: list[CastMember] = []


class MovieImage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    file_path: str
    width: Optional[int] = None
    height: Optional[int] = None


class MovieImages(BaseModel):
    model_config = ConfigDict(extra="ignore")

    backdrops: list[MovieImage] = []


class RecommendedMovie(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    title: str
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    release_date: Optional[str] = None
    vote_average: Optional[float] = None


class SocialLinks(BaseModel):
    facebook: str = ""
    twitter: str = ""
    instagram: str = ""
    homepage: str = ""


class MovieDetails(BaseModel):
    status: str
    original_language: str
    budget: float = 0
    revenue: float = 0


class Keyword(BaseModel):
    id: int
    name: str


class ContentProps(BaseModel):
    """Caller-owned inputs of the movie content page. Read-only to the page."""
    credits: Optional[MovieCredits] = None
    images: Optional[MovieImages] = None
    reviews: Optional[list[Review]] = None
    recommendations: Optional[list[RecommendedMovie]] = None
    links: SocialLinks = SocialLinks()
    details: MovieDetails
    keywords: Optional[list[Keyword]] = None

    @property
    def film_id(self) -> Optional[FilmId]:
        return self.credits.id if self.credits else None


# -----------------------------
#         CONTENT VIEW
# -----------------------------

class ContentView(BaseModel):
    """Render-ready view model of the movie content page."""
    cast: list[CastMember]
    images: list[str]
    reviews: list[Review]
    show_add_review: bool
    recommendations: list[RecommendedMovie]
    links: SocialLinks
    status: str
    original_language: str
    budget: str
    revenue: str
    keywords: list[Keyword]
