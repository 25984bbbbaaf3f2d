"""Unit tests for movie_content.content (view assembly and the page component)."""

from unittest.mock import AsyncMock

import pytest

from db.reviews_client import ReviewsClient
from movie_content.content import (
    CAST_LIMIT,
    IMAGE_LIMIT,
    MovieContent,
    build_content_view,
    should_show_add_review,
)
from movie_content.identity import DeferredIdentityProvider, StaticIdentityProvider, Viewer


# ================================
#  should_show_add_review
# ================================


def test_add_review_hidden_when_viewer_already_reviewed(review_factory) -> None:
    """The affordance should be hidden when a review's author identifier equals the viewer handle."""
    reviews = [review_factory(author="Someone", author_details={"username": "b@x.com"}), review_factory()]
    assert should_show_add_review(reviews, Viewer(user_id="u1", primary_email="a@x.com")) is False


def test_add_review_shown_when_viewer_has_no_review(review_factory) -> None:
    """The affordance should be shown when no review matches the viewer handle."""
    reviews = [review_factory()]
    assert should_show_add_review(reviews, Viewer(user_id="u2", primary_email="c@x.com")) is True


def test_add_review_matches_author_when_username_missing(review_factory) -> None:
    """Reviews without author_details.username should be matched on author."""
    reviews = [review_factory(author="c@x.com", author_details=None)]
    assert should_show_add_review(reviews, Viewer(user_id="u2", primary_email="c@x.com")) is False


@pytest.mark.parametrize("viewer", [None, Viewer(user_id="u3")], ids=["unresolved", "no-handle"])
def test_add_review_shown_for_unresolved_viewer(review_factory, viewer) -> None:
    """Without a resolved handle nothing can match, so the affordance stays visible."""
    assert should_show_add_review([review_factory()], viewer) is True


def test_add_review_shown_for_empty_list() -> None:
    assert should_show_add_review([], Viewer(user_id="u1", primary_email="a@x.com")) is True


# ================================
#  build_content_view
# ================================


def test_build_content_view_bounds_cast_and_images(content_props_factory) -> None:
    """Cast and images should be limited to the first 9 and 15 entries, in order."""
    view = build_content_view(content_props_factory(), [], None)

    assert len(view.cast) == CAST_LIMIT == 9
    assert [member.id for member in view.cast] == list(range(9))
    assert len(view.images) == IMAGE_LIMIT == 15
    assert view.images[0] == "/backdrop_0.jpg"
    assert view.images[-1] == "/backdrop_14.jpg"


def test_build_content_view_passes_unbounded_collections_through(content_props_factory) -> None:
    """Recommendations and keywords should not be sliced."""
    props = content_props_factory()
    view = build_content_view(props, [], None)

    assert view.recommendations == props.recommendations
    assert len(view.recommendations) == 25
    assert view.keywords == props.keywords


def test_build_content_view_handles_absent_collections(content_props_factory) -> None:
    """Absent credits, images, recommendations and keywords should render as empty lists."""
    props = content_props_factory(credits=None, images=None, recommendations=None, keywords=None)
    view = build_content_view(props, [], None)

    assert view.cast == []
    assert view.images == []
    assert view.recommendations == []
    assert view.keywords == []


def test_build_content_view_formats_money_and_language(content_props_factory) -> None:
    """Scenario E plus the language lookup: zero renders '-', known codes render display names."""
    view = build_content_view(content_props_factory(), [], None)

    assert view.budget == "$1,000,000.00"
    assert view.revenue == "-"
    assert view.original_language == "English"
    assert view.status == "Released"


def test_build_content_view_falls_back_to_raw_language_code(content_props_factory) -> None:
    """Unknown language codes should be shown as-is."""
    props = content_props_factory(
        details={"status": "Rumored", "original_language": "qq", "budget": 0, "revenue": 0}
    )
    assert build_content_view(props, [], None).original_language == "qq"


def test_build_content_view_includes_reviews_and_suppression(content_props_factory, review_factory) -> None:
    """The synchronized reviews and the suppression flag should flow into the view."""
    reviews = [review_factory()]
    view = build_content_view(content_props_factory(), reviews, Viewer(user_id="u1", primary_email="a@x.com"))

    assert view.reviews == reviews
    assert view.show_add_review is False


# ================================
#  MovieContent
# ================================


def _mock_client(fetch_result=None) -> AsyncMock:
    client = AsyncMock(spec=ReviewsClient)
    client.fetch_reviews.return_value = fetch_result or []
    return client


@pytest.mark.asyncio
async def test_render_is_none_until_mounted(content_props_factory) -> None:
    """render() should return None while the first review fetch has not settled."""
    page = MovieContent(content_props_factory(), _mock_client(), StaticIdentityProvider())
    assert page.render() is None

    await page.mount()

    assert page.render() is not None


@pytest.mark.asyncio
async def test_mount_uses_credits_id_and_seed_reviews(content_props_factory, review_factory) -> None:
    """mount() should fetch for credits.id and insert the props' seed reviews."""
    seed = [review_factory()]
    client = _mock_client(fetch_result=seed)
    page = MovieContent(content_props_factory(reviews=[r.model_dump() for r in seed]), client, StaticIdentityProvider())

    await page.mount()

    client.insert_reviews.assert_awaited_once_with("42", seed)
    assert page.render().reviews == seed


@pytest.mark.asyncio
async def test_mount_without_credits_renders_without_fetching(content_props_factory) -> None:
    """No film id means no request, yet the page still renders."""
    client = _mock_client()
    page = MovieContent(content_props_factory(credits=None), client, StaticIdentityProvider())

    await page.mount()

    client.fetch_reviews.assert_not_awaited()
    assert page.render().reviews == []


@pytest.mark.asyncio
async def test_set_props_refetches_only_on_change(content_props_factory) -> None:
    """set_props() should re-sync for a new film and be a no-op for identical inputs."""
    client = _mock_client()
    page = MovieContent(content_props_factory(), client, StaticIdentityProvider())
    await page.mount()

    await page.set_props(content_props_factory())
    assert client.fetch_reviews.await_count == 1

    await page.set_props(content_props_factory(credits={"id": "43", "cast": []}))
    assert client.fetch_reviews.await_count == 2
    client.fetch_reviews.assert_awaited_with("43")


@pytest.mark.asyncio
async def test_render_reflects_identity_resolved_later(content_props_factory, review_factory) -> None:
    """The add-review affordance should hide once the viewer resolves to an existing author."""
    identity = DeferredIdentityProvider()
    page = MovieContent(content_props_factory(), _mock_client([review_factory()]), identity)
    await page.mount()
    assert page.render().show_add_review is True

    identity.resolve(Viewer(user_id="u1", primary_email="a@x.com"))

    assert page.render().show_add_review is False


@pytest.mark.asyncio
async def test_submit_review_uses_current_viewer(content_props_factory) -> None:
    """submit_review() should submit as the identity provider's current viewer."""
    client = _mock_client()
    identity = StaticIdentityProvider(Viewer(user_id="u9", primary_email="new@x.com"))
    page = MovieContent(content_props_factory(), client, identity)
    await page.mount()

    assert await page.submit_review("solid", rating=7) is True

    _, submitted = client.insert_reviews.await_args.args
    assert submitted[0].author == "new@x.com"
