"""
Подъем буферизованных ошибок в Result.

Helpers for passing BufferedFailure values through kungfu Result and
LazyCoroResult instead of raising them.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Never, assert_never

from kungfu import Error, LazyCoroResult, Ok, Result

from ._types import Describable, FailureFactory
from .failure import BufferedFailure

logger = logging.getLogger(__name__)


def fail[F: Describable](failure: F) -> Result[Never, F]:
    """
    Wrap failure into Error.

    Example:
        from printbuf import lift as L

        def load(path: str) -> Result[bytes, LoadFail]:
            if not os.path.exists(path):
                return L.fail(LoadFail("Load failed: ").sprintf("file %s", path))
            ...
    """
    return Error(failure)


def fail_async[F: Describable](failure: F) -> LazyCoroResult[Never, F]:
    """Always-failing LazyCoroResult. Async twin of fail()."""
    return Error(failure).to_async()


def _record[F: BufferedFailure](exc: Exception, failure: FailureFactory[F]) -> F:
    err = failure().sprintln(f"{type(exc).__name__}: {exc}")
    logger.debug("Converted %s into %s", type(exc).__name__, type(err).__name__)
    return err


def catching[T, F: BufferedFailure](
    thunk: Callable[[], T],
    *,
    failure: FailureFactory[F],
) -> Result[T, F]:
    """
    Run sync thunk, turn exceptions into Error(failure).

    The failure factory is called only when thunk raises; the exception
    is appended to the fresh failure as one "ExcType: message" line.

    Example:
        from printbuf import lift as L

        result = L.catching(
            lambda: json.loads(raw),
            failure=lambda: ParseFail("Bad payload: "),
        )
        # Error(ParseFail('Bad payload: JSONDecodeError: ...\\n'))

    NOTE: Catches all Exception subclasses.
    """
    try:
        return Ok(thunk())
    except Exception as exc:
        return Error(_record(exc, failure))


def catching_async[T, F: BufferedFailure](
    thunk: Callable[[], Awaitable[T]],
    *,
    failure: FailureFactory[F],
) -> LazyCoroResult[T, F]:
    """Async version of catching(). Nothing runs until awaited."""

    async def run() -> Result[T, F]:
        try:
            return Ok(await thunk())
        except Exception as exc:
            return Error(_record(exc, failure))

    return LazyCoroResult(run)


def describe[T, F: Describable](result: Result[T, F]) -> str:
    """Failure text of an Error, empty string for Ok."""
    match result:
        case Ok(_):
            return ""
        case Error(err):
            return err.text()
        case _ as unreachable:
            assert_never(unreachable)


__all__ = (
    "fail",
    "fail_async",
    "catching",
    "catching_async",
    "describe",
)
