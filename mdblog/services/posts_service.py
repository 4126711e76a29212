import asyncio
import datetime
import logging
from typing import Callable, List, Optional, Sequence

import frontmatter

from mdblog.errors import PostReadCancelled, PostReadError, PostValidationError
from mdblog.schemas.blog import PaginatedPosts, Post
from mdblog.services.cancellation import CancellationToken
from mdblog.services.image_service import resolve_fallback_image
from mdblog.services.markdown_renderer import render_markdown
from mdblog.services.pagination import paginate_posts
from mdblog.services.post_cache import PostCache

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "date", "excerpt")
ALL_POSTS_KEY = ("all",)


class PostsService:
    def __init__(
        self,
        repo,
        *,
        cache: Optional[PostCache] = None,
        render: Callable[[str], str] = render_markdown,
        image_mode: str = "local",
        image_palette: Optional[Sequence[str]] = None,
        read_timeout: Optional[float] = None,
        strict: bool = False,
    ):
        self.repo = repo
        self.cache = cache if cache is not None else PostCache()
        self.render = render
        self.image_mode = image_mode
        self.image_palette = list(image_palette or [])
        self.read_timeout = read_timeout
        self.strict = strict

    async def list_all(self, token: Optional[CancellationToken] = None) -> List[Post]:
        if ALL_POSTS_KEY in self.cache:
            return self.cache.get(ALL_POSTS_KEY)

        generation = self.cache.generation
        token = token or CancellationToken(self.read_timeout)
        filenames = await self.repo.list_post_files()
        results = await asyncio.gather(
            *(self._load_summary(name, token) for name in filenames)
        )
        posts = [post for post in results if post is not None]

        # list.sort is stable, so equal dates keep filename order
        posts.sort(key=lambda p: p.date, reverse=True)
        logger.info(f"Loaded {len(posts)} of {len(filenames)} posts")
        return self.cache.set_if_current(ALL_POSTS_KEY, posts, generation)

    async def paginate(
        self, page: int = 1, token: Optional[CancellationToken] = None
    ) -> PaginatedPosts:
        key = ("page", page)
        if key in self.cache:
            return self.cache.get(key)
        generation = self.cache.generation
        posts = await self.list_all(token)
        result = paginate_posts(posts, page)
        if not 1 <= page <= result.totalPages:
            # out-of-range pages are empty and not worth keeping
            return result
        return self.cache.set_if_current(key, result, generation)

    async def get_by_slug(
        self, slug: str, token: Optional[CancellationToken] = None
    ) -> Optional[Post]:
        key = ("post", slug)
        if key in self.cache:
            return self.cache.get(key)

        generation = self.cache.generation
        token = token or CancellationToken(self.read_timeout)
        try:
            raw = await self.repo.read_post(slug, token)
            parsed = frontmatter.loads(raw)
            post = self._build_post(
                slug, parsed.metadata or {}, self.render(parsed.content)
            )
        except PostReadCancelled:
            raise
        except Exception as e:
            logger.warning(f"Error reading post {slug}: {e}")
            return None

        return self.cache.set_if_current(key, post, generation)

    def invalidate(self) -> None:
        self.cache.invalidate()
        logger.info("Post cache invalidated")

    async def _load_summary(
        self, filename: str, token: CancellationToken
    ) -> Optional[Post]:
        slug = self.repo.slug_for(filename)
        try:
            raw = await self.repo.read_post_file(filename, token)
        except PostReadError as e:
            logger.error(f"Error reading file {filename}: {e}")
            raw = ""

        if not raw:
            logger.debug(f"Skipping empty post file {filename}")
            return None

        try:
            parsed = frontmatter.loads(raw)
        except Exception as e:
            logger.warning(f"Failed to parse front matter in {filename}: {e}")
            return None

        metadata = parsed.metadata or {}
        missing = [field for field in REQUIRED_FIELDS if not metadata.get(field)]
        if missing:
            if self.strict:
                raise PostValidationError(filename, missing)
            logger.warning(f"Missing required fields in {filename}: {missing}")
            return None

        return self._build_post(slug, metadata, parsed.content)

    def _build_post(self, slug: str, metadata: dict, content: str) -> Post:
        image_url = _as_text(metadata.get("imageUrl")) or resolve_fallback_image(
            slug, self.image_mode, self.image_palette
        )
        return Post(
            slug=slug,
            title=_as_text(metadata.get("title")),
            date=_as_text(metadata.get("date")),
            excerpt=_as_text(metadata.get("excerpt")),
            content=content,
            imageUrl=image_url,
        )


def _as_text(value) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return str(value)
