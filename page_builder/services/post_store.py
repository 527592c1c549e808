"""
Blog Post Store
===============

In-memory store for blog posts with optional JSON file persistence.
"""

import json
import logging
import math
import re
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ..models.errors import PostNotFoundError, PostValidationError
from ..models.post_models import Post, PostCreate, PostUpdate

logger = logging.getLogger(__name__)


def slugify(text: str) -> str:
    """Lowercase, hyphen-separated slug from a title."""
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")
    return slug or "post"


class PostStore:
    """CRUD over blog posts, newest first."""

    def __init__(self, path: Optional[Path] = None):
        self.path = path
        self._posts: Dict[int, Post] = {}
        self._next_id = 1
        if self.path and self.path.exists():
            self._load()
        logger.info(f"[POSTS] Initialized with {len(self._posts)} posts (path={self.path})")

    def _load(self):
        with open(self.path) as f:
            data = json.load(f)
        for item in data.get("posts", []):
            post = Post.model_validate(item)
            self._posts[post.id] = post
        self._next_id = data.get("next_id", max(self._posts, default=0) + 1)

    def _save(self):
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump({
                "next_id": self._next_id,
                "posts": [post.model_dump(mode="json") for post in self._posts.values()],
            }, f, indent=2)

    def _newest_first(self, posts) -> List[Post]:
        return sorted(posts, key=lambda post: (post.created_at, post.id), reverse=True)

    def _check_slug(self, slug: str, post_id: Optional[int] = None):
        for post in self._posts.values():
            if post.slug == slug and post.id != post_id:
                raise PostValidationError(f"Slug already in use: {slug}")

    @staticmethod
    def _matches(post: Post, search: str) -> bool:
        needle = search.lower()
        haystack = [post.title, post.excerpt, post.content, *post.tags]
        return any(needle in text.lower() for text in haystack)

    def list_published(
        self,
        tag: Optional[str] = None,
        category: Optional[str] = None,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 10
    ) -> Tuple[List[Post], int, int]:
        """
        Published posts matching the filters, one page at a time.

        Returns:
            (posts on the requested page, total matches, page count)
        """
        posts = [post for post in self._posts.values() if post.published]
        if tag:
            posts = [post for post in posts if tag in post.tags]
        if category:
            posts = [post for post in posts if post.category == category]
        if search:
            posts = [post for post in posts if self._matches(post, search)]

        posts = self._newest_first(posts)
        total = len(posts)
        start = (page - 1) * limit
        return posts[start:start + limit], total, math.ceil(total / limit)

    def list_all(self) -> List[Post]:
        """Every post including drafts."""
        return self._newest_first(self._posts.values())

    def get(self, post_id: int) -> Post:
        post = self._posts.get(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    def view_by_slug(self, slug: str) -> Post:
        """Fetch a published post by slug and count the view."""
        for post in self._posts.values():
            if post.slug == slug and post.published:
                post.views += 1
                self._save()
                return post
        raise PostNotFoundError(slug)

    def create(self, data: PostCreate) -> Post:
        slug = data.slug or slugify(data.title)
        self._check_slug(slug)
        post = Post(**data.model_dump(exclude={"slug"}), id=self._next_id, slug=slug)
        self._posts[post.id] = post
        self._next_id += 1
        self._save()
        logger.info(f"[POSTS] Created post {post.id} ({post.slug})")
        return post

    def update(self, post_id: int, data: PostUpdate) -> Post:
        post = self.get(post_id)
        changes = {
            key: value
            for key, value in data.model_dump(exclude_unset=True).items()
            if value is not None
        }
        if changes.get("slug"):
            self._check_slug(changes["slug"], post_id)
        else:
            changes.pop("slug", None)
        updated = post.model_copy(update={**changes, "updated_at": datetime.now()})
        self._posts[post_id] = updated
        self._save()
        logger.info(f"[POSTS] Updated post {post_id}")
        return updated

    def delete(self, post_id: int) -> None:
        if self._posts.pop(post_id, None) is None:
            raise PostNotFoundError(post_id)
        self._save()
        logger.info(f"[POSTS] Deleted post {post_id}")
