"""Trailing-edge debounce on top of the asyncio event loop.

Each trigger() cancels the pending timer and arms a new one, so the
effect runs once per quiet period with the arguments of the latest
trigger. Coroutine effects are started as tasks and are never cancelled
once running.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)


class Debouncer:
    """Run an effect after its triggers have been quiet for a delay.

    Attributes:
        delay_ms: Quiet period in milliseconds. Changing it affects the
            next trigger, not a timer that is already armed.
    """

    def __init__(
        self,
        delay_ms: int,
        effect: Callable[..., Awaitable[Any] | Any],
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        """Initialize the debouncer.

        Args:
            delay_ms: Quiet period in milliseconds.
            effect: Sync or async callable run when the period elapses.
            loop: Event loop to schedule on. Defaults to the running loop
                at trigger time.
        """
        self.delay_ms = delay_ms
        self._effect = effect
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None
        self._pending_args: tuple[Any, ...] = ()
        self._tasks: set[asyncio.Task[Any]] = set()
        self._closed = False

    @property
    def pending(self) -> bool:
        """Whether a timer is armed and has not fired yet."""
        return self._handle is not None

    @property
    def running(self) -> int:
        """Number of effect runs still in flight."""
        return len(self._tasks)

    @property
    def closed(self) -> bool:
        return self._closed

    def _resolve_loop(self) -> asyncio.AbstractEventLoop | None:
        if self._loop is not None:
            return self._loop
        try:
            return asyncio.get_running_loop()
        except RuntimeError:
            return None

    def trigger(self, *args: Any) -> bool:
        """Re-arm the timer with new arguments.

        Returns:
            True if a timer was armed, False if the debouncer is closed or
            there is no event loop to schedule on.
        """
        if self._closed:
            return False

        loop = self._resolve_loop()
        if loop is None:
            logger.debug("No running event loop; effect not scheduled")
            return False

        self.cancel()
        self._pending_args = args
        self._handle = loop.call_later(self.delay_ms / 1000, self._fire)
        logger.debug("Armed debounce timer for %d ms", self.delay_ms)
        return True

    def cancel(self) -> None:
        """Cancel the pending timer, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            logger.debug("Cancelled pending debounce timer")

    def flush(self) -> None:
        """Run the pending effect now instead of waiting for the timer."""
        if self._handle is None:
            return
        self._handle.cancel()
        self._fire()

    def close(self) -> None:
        """Cancel the pending timer and ignore further triggers."""
        self.cancel()
        self._closed = True

    async def wait_idle(self) -> None:
        """Wait until every started effect run has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def _fire(self) -> None:
        self._handle = None
        args = self._pending_args
        self._pending_args = ()

        try:
            result = self._effect(*args)
        except Exception as e:
            self._report(e)
            return

        if inspect.isawaitable(result):
            loop = self._resolve_loop()
            if loop is None:
                if inspect.iscoroutine(result):
                    result.close()
                raise RuntimeError("Debounced coroutine effect needs a running event loop")
            task = loop.create_task(result)
            self._tasks.add(task)
            task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self._report(exc)

    def _report(self, exc: BaseException) -> None:
        loop = self._resolve_loop()
        if loop is None:
            logger.error("Debounced effect failed", exc_info=exc)
            return
        loop.call_exception_handler(
            {
                "message": "Debounced effect failed",
                "exception": exc,
            }
        )
