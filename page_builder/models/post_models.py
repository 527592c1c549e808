"""
Blog Post Models
================

Models for the portfolio blog's post resource.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class PostBase(BaseModel):
    """Fields shared by stored posts and create requests."""
    title: str = Field(min_length=1, max_length=200)
    slug: Optional[str] = None
    excerpt: str = ""
    content: str = ""
    tags: List[str] = Field(default_factory=list)
    category: str = "general"
    published: bool = False


class PostCreate(PostBase):
    """Request to create a post. The slug is derived from the title when absent."""


class PostUpdate(BaseModel):
    """Partial update; only fields that are set are applied."""
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    slug: Optional[str] = None
    excerpt: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[List[str]] = None
    category: Optional[str] = None
    published: Optional[bool] = None


class Post(PostBase):
    """A stored blog post."""
    id: int
    slug: str
    views: int = 0
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: Optional[datetime] = None


class PostSummary(BaseModel):
    """Listing view of a post (no content body)."""
    id: int
    title: str
    slug: str
    excerpt: str
    tags: List[str]
    category: str
    published: bool
    views: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_post(cls, post: Post) -> "PostSummary":
        return cls(**post.model_dump(exclude={"content"}))


class PostListResponse(BaseModel):
    """Paginated listing of published posts."""
    posts: List[PostSummary]
    total: int
    page: int
    pages: int
