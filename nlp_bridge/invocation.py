"""
Dual-mode invocation

Every bridge operation can be called two ways:

- blocking: no callback, the backend's `*_sync` form runs on the calling
  thread and the materialized value is returned (errors are raised);
- callback: the backend's coroutine form runs on a worker thread of the
  owning context and the callback receives exactly one CallbackResult once
  it completes.

The callback never runs on the calling thread. Inside a running event
loop the call returns an awaitable wrapper around the worker future; the
worker does not depend on that loop staying alive.
"""
import asyncio
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, List, Optional

from nlp_backends.exceptions import ValidationError
from logger import get_logger

logger = get_logger(__name__)


@dataclass
class CallbackResult:
    """Payload delivered to a completion callback"""
    error: Optional[BaseException] = None
    result: List[Any] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


def as_sequence(value: Any) -> List[Any]:
    """Shape a materialized value for callback delivery"""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def require_text(value: Any, what: str = "text") -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{what} must be a string, got {type(value).__name__}")
    return value


class DualModeInvoker:
    """Runs an operation in blocking or callback mode"""

    def __init__(self, max_workers: int = 4):
        self.max_workers = max_workers
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="koala-callback"
        )
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def call(
        self,
        blocking: Callable[[], Any],
        asynchronous: Callable[[], Awaitable[Any]],
        callback: Optional[Callable[[CallbackResult], Any]] = None
    ):
        """
        Invoke in the mode selected by the presence of a callback.

        Args:
            blocking: runs the `*_sync` backend form and materializes
            asynchronous: coroutine factory running the non-blocking form
            callback: receives a CallbackResult when given

        Returns:
            The materialized value in blocking mode; in callback mode a
            handle that completes with None after the callback ran.
        """
        if self._closed:
            raise RuntimeError("Analysis context is closed")
        if callback is None:
            return blocking()
        if not callable(callback):
            raise ValidationError(f"callback must be callable, got {type(callback).__name__}")
        return self.dispatch(asynchronous, callback)

    def dispatch(self, asynchronous: Callable[[], Awaitable[Any]], callback: Callable[[CallbackResult], Any]):
        """
        Run the coroutine on a worker thread and deliver its outcome.

        The caller's event loop, if any, only receives an awaitable view of
        the worker future, so the callback fires even if that loop ends
        before the backend finishes.
        """
        if self._closed:
            raise RuntimeError("Analysis context is closed")

        async def deliver():
            try:
                value = await asynchronous()
            except (Exception, asyncio.CancelledError) as e:
                logger.warning(f"Backend call failed, reporting through callback: {e!r}")
                payload = CallbackResult(error=e, result=[])
            else:
                payload = CallbackResult(error=None, result=as_sequence(value))

            try:
                callback(payload)
            except Exception:
                logger.exception("Completion callback raised")
                raise

        future = self._executor.submit(asyncio.run, deliver())

        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return future
        return asyncio.wrap_future(future)

    def shutdown(self, wait: bool = True):
        """Stop the worker pool; pending callbacks still complete when wait is set"""
        if self._closed:
            return
        self._closed = True
        self._executor.shutdown(wait=wait)
