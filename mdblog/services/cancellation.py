import asyncio
import logging
from typing import Awaitable, Optional, TypeVar

from mdblog.errors import PostReadCancelled, PostReadTimeout

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CancellationToken:
    """
    Boundary around a single awaited read.

    A token is cancelled explicitly with cancel() or implicitly when `timeout`
    seconds elapse. Both stop the caller from waiting; the underlying thread
    read, if any, is left to finish on its own.
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout
        self._event = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    def raise_if_cancelled(self) -> None:
        if self.cancelled:
            raise PostReadCancelled("Read cancelled")

    async def run(self, aw: Awaitable[T]) -> T:
        if self.cancelled:
            # Close the unawaited coroutine so it doesn't warn
            if asyncio.iscoroutine(aw):
                aw.close()
            raise PostReadCancelled("Read cancelled")

        task = asyncio.ensure_future(aw)
        waiter = asyncio.ensure_future(self._event.wait())
        try:
            done, _pending = await asyncio.wait(
                {task, waiter},
                timeout=self.timeout,
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            waiter.cancel()
            if not task.done():
                task.cancel()

        if task in done:
            return task.result()

        if waiter in done:
            raise PostReadCancelled("Read cancelled")
        logger.debug(f"Read exceeded {self.timeout}s")
        raise PostReadTimeout(f"Read timed out after {self.timeout}s")
