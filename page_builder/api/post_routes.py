"""
Post Routes
===========

API routes for the portfolio blog. Listing and reading are public;
writes and the drafts listing need the admin token.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..models.errors import PostNotFoundError, PostValidationError
from ..models.post_models import Post, PostCreate, PostListResponse, PostSummary, PostUpdate
from ..services.post_store import PostStore
from .dependencies import get_post_store, require_admin

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get("/")
async def list_posts(
    tag: Optional[str] = None,
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    store: PostStore = Depends(get_post_store)
) -> PostListResponse:
    """Published posts, newest first, without their content."""
    posts, total, pages = store.list_published(
        tag=tag, category=category, search=search, page=page, limit=limit
    )
    return PostListResponse(
        posts=[PostSummary.from_post(post) for post in posts],
        total=total,
        page=page,
        pages=pages
    )


# Declared before /{slug} so "admin" is not read as a slug
@router.get("/admin/all", dependencies=[Depends(require_admin)])
async def list_all_posts(store: PostStore = Depends(get_post_store)) -> List[PostSummary]:
    """All posts including drafts."""
    return [PostSummary.from_post(post) for post in store.list_all()]


@router.get("/{slug}")
async def get_post(slug: str, store: PostStore = Depends(get_post_store)) -> Post:
    """A published post; counts a view."""
    try:
        return store.view_by_slug(slug)
    except PostNotFoundError:
        raise HTTPException(status_code=404, detail="Post not found")


@router.post("/", status_code=201, dependencies=[Depends(require_admin)])
async def create_post(data: PostCreate, store: PostStore = Depends(get_post_store)) -> Post:
    try:
        return store.create(data)
    except PostValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{post_id}", dependencies=[Depends(require_admin)])
async def update_post(
    post_id: int,
    data: PostUpdate,
    store: PostStore = Depends(get_post_store)
) -> Post:
    try:
        return store.update(post_id, data)
    except PostNotFoundError:
        raise HTTPException(status_code=404, detail="Post not found")
    except PostValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{post_id}", dependencies=[Depends(require_admin)])
async def delete_post(post_id: int, store: PostStore = Depends(get_post_store)):
    try:
        store.delete(post_id)
    except PostNotFoundError:
        raise HTTPException(status_code=404, detail="Post not found")
    return {"message": "Post deleted successfully"}
