import asyncio
import logging
import os
from pathlib import Path
from typing import List, Optional

from mdblog.errors import PostReadError
from mdblog.services.cancellation import CancellationToken

logger = logging.getLogger(__name__)

POST_EXTENSION = ".md"


class FilePostsRepo:
    def __init__(self, content_dir: Path):
        self.content_dir = Path(content_dir)

    async def list_post_files(self) -> List[str]:
        try:
            names = await asyncio.to_thread(os.listdir, self.content_dir)
        except OSError as e:
            logger.error(f"Error reading directory {self.content_dir}: {e}")
            return []
        return sorted(name for name in names if self._is_post_file(name))

    async def read_post_file(
        self, filename: str, token: Optional[CancellationToken] = None
    ) -> str:
        return await self._read(self.content_dir / filename, token)

    async def read_post(
        self, slug: str, token: Optional[CancellationToken] = None
    ) -> str:
        return await self._read(self.path_for_slug(slug), token)

    def path_for_slug(self, slug: str) -> Path:
        path = self.content_dir / f"{slug}{POST_EXTENSION}"
        root = os.path.realpath(self.content_dir)
        resolved = os.path.realpath(path)
        if not resolved.startswith(root + os.sep):
            raise PostReadError(f"Slug {slug!r} resolves outside {self.content_dir}")
        return path

    async def _read(self, path: Path, token: Optional[CancellationToken]) -> str:
        token = token or CancellationToken()
        try:
            return await token.run(asyncio.to_thread(path.read_text, encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise PostReadError(f"Error reading file {path}: {e}") from e

    @staticmethod
    def slug_for(filename: str) -> str:
        return filename[: -len(POST_EXTENSION)]

    @staticmethod
    def _is_post_file(name: str) -> bool:
        return name.endswith(POST_EXTENSION)
