import html
import logging
import math
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from mdblog import dependencies as deps
from mdblog.schemas.blog import PaginatedPosts, Post
from mdblog.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/posts", response_model=PaginatedPosts)
async def list_posts(
    page: Optional[str] = None,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get one page of post summaries."""
    try:
        return await service.paginate(_coerce_page(page))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/api/posts/{slug}", response_model=Post)
async def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug."""
    try:
        post = await service.get_by_slug(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/posts/{slug}", response_class=HTMLResponse)
async def post_page(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        post = await service.get_by_slug(slug)
    except Exception as e:
        logger.error(f"Unexpected error rendering post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")

    if not post:
        return HTMLResponse(_render_not_found(), status_code=404)
    return HTMLResponse(_render_post(post))


def _coerce_page(raw: Optional[str]) -> int:
    """Absent, non-numeric and zero pages all mean the first page."""
    try:
        value = float(raw) if raw is not None else 0.0
    except ValueError:
        return 1
    if not math.isfinite(value) or value == 0:
        return 1
    return int(value)


def _render_post(post: Post) -> str:
    # content is already sanitized HTML
    title = html.escape(post.title or "")
    return (
        "<!DOCTYPE html>"
        f"<html><head><title>{title}</title></head><body><main><article>"
        '<a href="/">&larr; Back to home</a>'
        f'<img src="{html.escape(post.imageUrl)}" alt="{title}">'
        f"<h1>{title}</h1>"
        f"<time>{html.escape(post.date or '')}</time>"
        f"<div>{post.content}</div>"
        "</article></main></body></html>"
    )


def _render_not_found() -> str:
    return (
        "<!DOCTYPE html>"
        "<html><head><title>Post not found</title></head><body><main>"
        "<h1>Post not found</h1>"
        '<a href="/">&larr; Back to home</a>'
        "</main></body></html>"
    )
