import textwrap
from pathlib import Path

import pytest

from mdblog.schemas.blog import PaginatedPosts


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, paginate_return=None, get_by_slug_return=None):
        self._paginate_return = paginate_return
        self._get_by_slug_return = get_by_slug_return
        self.pages = []
        self.slugs = []

    async def list_all(self):
        return list(self._paginate_return.posts) if self._paginate_return else []

    async def paginate(self, page: int = 1):
        self.pages.append(page)
        if self._paginate_return is not None:
            return self._paginate_return
        return PaginatedPosts(posts=[], totalPages=0, currentPage=page)

    async def get_by_slug(self, slug: str):
        self.slugs.append(slug)
        return self._get_by_slug_return

    def invalidate(self):
        pass


class FakeRepo:
    """
    In-memory repo stand-in keyed by filename.
    Values that are exceptions are raised on read.
    """

    def __init__(self, files: dict):
        self.files = files
        self.reads = []

    async def list_post_files(self):
        return sorted(name for name in self.files if name.endswith(".md"))

    async def read_post_file(self, filename, token=None):
        self.reads.append(filename)
        value = self.files[filename]
        if isinstance(value, Exception):
            raise value
        return textwrap.dedent(value).lstrip()

    async def read_post(self, slug, token=None):
        return await self.read_post_file(f"{slug}.md", token)

    @staticmethod
    def slug_for(filename):
        return filename[: -len(".md")]


def make_post_text(title=None, date=None, excerpt=None, body="Body text", **extra):
    lines = ["---"]
    for key, value in (("title", title), ("date", date), ("excerpt", excerpt)):
        if value is not None:
            lines.append(f"{key}: {value}")
    for key, value in extra.items():
        lines.append(f"{key}: {value}")
    lines.append("---")
    lines.append(body)
    return "\n".join(lines) + "\n"


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    path = tmp_path / "content"
    path.mkdir()
    return path


@pytest.fixture
def write_post(content_dir: Path):
    def _write(slug: str, **fields) -> Path:
        path = content_dir / f"{slug}.md"
        path.write_text(make_post_text(**fields), encoding="utf-8")
        return path

    return _write
