from __future__ import annotations
import inspect
from typing import Any, Awaitable, Callable, Optional, TypeVar, Union

from anyio import CapacityLimiter, to_thread

from .either import Either, Left, Right
from .logger import get_logger

L = TypeVar("L"); R = TypeVar("R")


def _captured(adapter: str, ex: Exception) -> None:
    get_logger().debug("fault captured", adapter=adapter, fault=type(ex).__name__)


async def _settle(x: Any) -> Any:
    return await x if inspect.isawaitable(x) else x


def try_catch(fn: Callable[[], R], on_error: Callable[[Exception], L]) -> Either[L, R]:
    """Run ``fn`` and turn a raised exception into a Left.

    Args:
        fn: Zero-argument callable that may raise.
        on_error: Maps the caught exception to the error payload.

    Returns:
        ``Right(fn())`` on normal return, ``Left(on_error(ex))`` otherwise.

    Only ``Exception`` is captured; ``KeyboardInterrupt``, ``SystemExit`` and
    other ``BaseException`` subclasses propagate. An exception raised by
    ``on_error`` itself also propagates.
    """
    try:
        result = fn()
    except Exception as ex:
        _captured("try_catch", ex)
        return Left(on_error(ex))
    return Right(result)


async def _capture_async(fn: Callable[[], Any], on_error: Callable[[Exception], L], adapter: str) -> Either[L, Any]:
    # the one async fault boundary; adapter only names the log record
    try:
        result = await _settle(fn())
    except Exception as ex:
        _captured(adapter, ex)
        return Left(on_error(ex))
    return Right(result)


async def try_catch_async(fn: Callable[[], Union[Awaitable[R], R]], on_error: Callable[[Exception], L]) -> Either[L, R]:
    """Await ``fn()`` and settle with an Either instead of raising.

    ``fn`` may return any awaitable: a coroutine, an ``asyncio.Task`` or a
    future. A plain return value is taken as already settled. A raise from
    ``fn`` before it hands back the awaitable is captured the same way as a
    failed await. ``asyncio.CancelledError`` is not a fault and propagates so
    that host cancellation keeps working.

    Example:
        ```python
        user = await try_catch_async(lambda: fetch_user(42), lambda ex: f"fetch failed: {ex}")
        ```
    """
    return await _capture_async(fn, on_error, "try_catch_async")


async def try_catch_thread(fn: Callable[[], R], on_error: Callable[[Exception], L], *, limiter: Optional[CapacityLimiter] = None) -> Either[L, R]:
    """Run a blocking ``fn`` on an anyio worker thread, then settle like ``try_catch_async``."""
    return await _capture_async(lambda: to_thread.run_sync(fn, limiter=limiter), on_error, "try_catch_thread")
