from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Generic, NamedTuple, Sequence, TypeVar

log = logging.getLogger(__name__)

R = TypeVar("R")
T = TypeVar("T")


def identity(value: Any) -> Any:
    return value


class Outcome(NamedTuple, Generic[T]):
    """Result pair of an awaited call: exactly one field is not ``None``.

    Unpacks like a tuple::

        value, error = await settle_one(call)
    """

    value: T | None
    error: Exception | None

    @property
    def ok(self) -> bool:
        return self.error is None


async def settle_one(
    call: Awaitable[R],
    transform: Callable[[R], T] = identity,
    *,
    label: str = "call",
) -> Outcome[T]:
    """Await a single call and apply ``transform`` to its bare result.

    Failures of the call or of the transform are logged and returned,
    never raised.
    """
    try:
        return Outcome(transform(await call), None)
    except Exception as exc:
        log.debug("%s failed: %r", label, exc)
        return Outcome(None, exc)


async def settle_many(
    calls: Sequence[Awaitable[R]],
    transform: Callable[[list[R]], T] = identity,
    *,
    label: str = "calls",
) -> Outcome[T]:
    """Await every call, then apply ``transform`` to the ordered results.

    All calls are allowed to settle before anything is decided.  If any
    one of them failed the whole batch is reported as failed with the
    first failure (in input order); successful legs are discarded.
    """
    results = await asyncio.gather(*calls, return_exceptions=True)
    for result in results:
        if isinstance(result, asyncio.CancelledError):
            raise result
        if isinstance(result, Exception):
            failed = sum(isinstance(r, Exception) for r in results)
            log.debug(
                "%s failed (%d of %d): %r", label, failed, len(results), result
            )
            return Outcome(None, result)

    try:
        return Outcome(transform(list(results)), None)
    except Exception as exc:
        log.debug("%s failed: %r", label, exc)
        return Outcome(None, exc)
