"""
Movie content page: props in, render-ready view model out.

MovieContent wires the review synchronizer and the identity provider to the
caller-owned props. Rendering is a pure function of props, the synchronized
review list and the current viewer.
"""

from typing import Callable, Optional, Sequence

from db.reviews_client import ReviewsClient
from movie_content.classes.schemas import ContentProps, ContentView, Review
from movie_content.identity import IdentityProvider, Viewer
from movie_content.misc.helpers import format_currency, language_display_name, take
from movie_content.review_sync import ReviewSynchronizer, SyncError


CAST_LIMIT = 9
IMAGE_LIMIT = 15


def should_show_add_review(reviews: Sequence[Review], viewer: Optional[Viewer]) -> bool:
    """Hide the add-review affordance when the viewer already authored a review in the list."""
    handle = viewer.handle if viewer else None
    if not handle:
        return True
    return not any(review.author_identifier == handle for review in reviews)


def build_content_view(
    props: ContentProps,
    reviews: Sequence[Review],
    viewer: Optional[Viewer],
) -> ContentView:
    """
    Assemble the content view from props and the synchronized reviews.

    Cast and images are bounded to the first CAST_LIMIT / IMAGE_LIMIT entries;
    recommendations and keywords pass through whole.
    """
    cast = props.credits.cast if props.credits else []
    backdrops = props.images.backdrops if props.images else []
    details = props.details

    return ContentView(
        cast=take(cast, CAST_LIMIT),
        images=[image.file_path for image in take(backdrops, IMAGE_LIMIT)],
        reviews=list(reviews),
        show_add_review=should_show_add_review(reviews, viewer),
        recommendations=list(props.recommendations or []),
        links=props.links,
        status=details.status,
        original_language=language_display_name(details.original_language),
        budget=format_currency(details.budget),
        revenue=format_currency(details.revenue),
        keywords=list(props.keywords or []),
    )


class MovieContent:
    """
    The movie content page.

    Call mount() once, set_props() whenever the caller's props change, and
    render() to obtain the view (None while the first review fetch is pending).
    """

    def __init__(
        self,
        props: ContentProps,
        client: ReviewsClient,
        identity: IdentityProvider,
        on_error: Optional[Callable[[SyncError], None]] = None,
    ) -> None:
        self.props = props
        self.identity = identity
        self.synchronizer = ReviewSynchronizer(client, on_error=on_error)

    async def mount(self) -> None:
        await self.synchronizer.update(self.props.film_id, self.props.reviews)

    async def set_props(self, props: ContentProps) -> None:
        self.props = props
        await self.synchronizer.update(props.film_id, props.reviews)

    def render(self) -> Optional[ContentView]:
        if self.synchronizer.loading:
            return None
        return build_content_view(
            self.props,
            self.synchronizer.reviews,
            self.identity.current_viewer(),
        )

    async def submit_review(self, content: str, rating: Optional[float] = None) -> bool:
        """Submit a review as the current viewer. See ReviewSynchronizer.submit_review."""
        return await self.synchronizer.submit_review(self.identity.current_viewer(), content, rating)
