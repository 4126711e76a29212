from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title: Optional[str] = None
    date: Optional[str] = None
    excerpt: Optional[str] = None
    content: str  # markdown in listings, HTML for a single post
    imageUrl: str


class PaginatedPosts(BaseModel):
    model_config = ConfigDict(frozen=True)

    posts: List[Post]
    totalPages: int
    currentPage: int
