import math
from typing import Sequence

from mdblog.schemas.blog import PaginatedPosts, Post

POSTS_PER_PAGE = 10


def total_pages(total: int, page_size: int = POSTS_PER_PAGE) -> int:
    return math.ceil(total / page_size)


def paginate_posts(
    posts: Sequence[Post], page: int = 1, page_size: int = POSTS_PER_PAGE
) -> PaginatedPosts:
    """
    Slice one page out of an already sorted post list.

    `page` is echoed back as-is; pages before the first or past the last come
    back with no posts rather than an error.
    """
    start = (page - 1) * page_size
    end = start + page_size
    # a negative start would index from the end of the list
    page_posts = list(posts[max(start, 0) : max(end, 0)])
    return PaginatedPosts(
        posts=page_posts,
        totalPages=total_pages(len(posts), page_size),
        currentPage=page,
    )
