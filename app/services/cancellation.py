# app/services/cancellation.py
"""
Cancellable handles for async operations.

A caller that goes away mid-operation calls discard(). The underlying
write is NOT rolled back or cancelled (it may already be committed); its
result is simply dropped: callbacks do not fire and awaiting the handle
raises OperationDiscarded.
"""

import asyncio
from typing import Any, Awaitable, Callable, Optional

from app.exceptions import OperationDiscarded
from app.utils.logger import get_logger

logger = get_logger(__name__)


class CancellableOperation:
    def __init__(
        self,
        coro: Awaitable,
        on_result: Optional[Callable[[Any], None]] = None,
        on_error: Optional[Callable[[BaseException], None]] = None,
        name: str = "operation",
    ):
        self.name = name
        self._on_result = on_result
        self._on_error = on_error
        self._discarded = False
        self._task = asyncio.create_task(coro)
        self._task.add_done_callback(self._finished)

    @property
    def discarded(self) -> bool:
        return self._discarded

    def done(self) -> bool:
        return self._task.done()

    def add_done_callback(self, fn: Callable[["CancellableOperation"], None]):
        self._task.add_done_callback(lambda _t: fn(self))

    def discard(self):
        """Stop caring about the result. Does not interrupt the operation."""
        if not self._discarded:
            self._discarded = True
            logger.debug(f"{self.name} discarded (in flight={not self._task.done()})")

    def _finished(self, task: asyncio.Task):
        if task.cancelled():
            return
        exc = task.exception()   # always retrieved, even when discarded
        if self._discarded:
            if exc is not None:
                logger.info(f"{self.name} failed after discard: {exc}")
            return
        if exc is not None:
            if self._on_error:
                self._on_error(exc)
        elif self._on_result:
            self._on_result(task.result())

    async def wait(self):
        try:
            result = await asyncio.shield(self._task)
        except Exception:
            if self._discarded:
                raise OperationDiscarded(f"{self.name} was discarded")
            raise
        if self._discarded:
            raise OperationDiscarded(f"{self.name} was discarded")
        return result

    def __await__(self):
        return self.wait().__await__()


def issue(coro: Awaitable, **kwargs) -> CancellableOperation:
    """Start coro and return its cancellable handle."""
    return CancellableOperation(coro, **kwargs)
