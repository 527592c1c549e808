"""Tests for the blog post store."""

from datetime import datetime, timedelta

import pytest

from page_builder.models.errors import PostNotFoundError, PostValidationError
from page_builder.models.post_models import PostCreate, PostUpdate
from page_builder.services.post_store import PostStore, slugify


@pytest.fixture
def store():
    return PostStore()


def _publish(store, title, **fields):
    return store.create(PostCreate(title=title, published=True, **fields))


def test_slugify():
    assert slugify("Hello, World!  Again") == "hello-world-again"
    assert slugify("!!!") == "post"


def test_create_derives_slug_and_ids(store):
    first = store.create(PostCreate(title="First Post"))
    second = store.create(PostCreate(title="Second", slug="custom-slug"))

    assert (first.id, first.slug) == (1, "first-post")
    assert (second.id, second.slug) == (2, "custom-slug")
    assert first.views == 0


def test_duplicate_slug_rejected(store):
    store.create(PostCreate(title="Same"))
    with pytest.raises(PostValidationError):
        store.create(PostCreate(title="Same"))


def test_listing_filters_and_paginates(store):
    base = datetime(2024, 1, 1)
    for index in range(5):
        post = _publish(store, f"Post {index}", tags=["python"] if index % 2 else ["js"],
                        category="dev" if index < 3 else "life")
        post.created_at = base + timedelta(days=index)
    store.create(PostCreate(title="Draft", tags=["python"]))

    posts, total, pages = store.list_published(limit=2)
    assert total == 5
    assert pages == 3
    assert [post.title for post in posts] == ["Post 4", "Post 3"]

    posts, total, _ = store.list_published(tag="python")
    assert total == 2
    assert all("python" in post.tags for post in posts)

    _, total, _ = store.list_published(category="life")
    assert total == 2

    posts, total, _ = store.list_published(search="POST 2")
    assert [post.title for post in posts] == ["Post 2"]

    posts, _, _ = store.list_published(page=3, limit=2)
    assert [post.title for post in posts] == ["Post 0"]


def test_view_by_slug_counts_published_only(store):
    _publish(store, "Visible")
    store.create(PostCreate(title="Hidden"))

    assert store.view_by_slug("visible").views == 1
    assert store.view_by_slug("visible").views == 2
    with pytest.raises(PostNotFoundError):
        store.view_by_slug("hidden")


def test_update_applies_only_set_fields(store):
    post = store.create(PostCreate(title="Original", excerpt="keep me"))
    updated = store.update(post.id, PostUpdate(title="Renamed", published=True))

    assert updated.title == "Renamed"
    assert updated.excerpt == "keep me"
    assert updated.slug == "original"
    assert updated.published is True
    assert updated.updated_at is not None


def test_update_and_delete_missing(store):
    with pytest.raises(PostNotFoundError):
        store.update(42, PostUpdate(title="x"))
    with pytest.raises(PostNotFoundError):
        store.delete(42)


def test_list_all_includes_drafts(store):
    _publish(store, "Live")
    store.create(PostCreate(title="Draft"))
    assert {post.title for post in store.list_all()} == {"Live", "Draft"}


def test_file_persistence(tmp_path):
    path = tmp_path / "posts.json"
    store = PostStore(path=path)
    post = _publish(store, "Saved")
    store.view_by_slug("saved")

    reloaded = PostStore(path=path)
    assert reloaded.get(post.id).views == 1
    assert reloaded.create(PostCreate(title="Next")).id == post.id + 1
