"""Test helpers (small, reusable doubles).

Hand-written awaitables that are neither coroutines nor futures, so the
adapter's duck-typed awaitable check is exercised on its own.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any


@dataclass
class FakeAwaitable:
    """Awaitable that resolves to ``value`` or raises ``error``.

    Counts awaits so tests can assert single evaluation.
    """

    value: Any = None
    error: BaseException | None = None
    awaited: int = 0

    def __await__(self):
        self.awaited += 1
        yield from asyncio.sleep(0).__await__()
        if self.error is not None:
            raise self.error
        return self.value


@dataclass
class CallableAwaitable(FakeAwaitable):
    """Awaitable that is also callable; the adapter must not call it."""

    calls: int = 0

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        del args, kwargs
        self.calls += 1


@dataclass
class CountingProducer:
    """Async producer that records every invocation's arguments."""

    result: Any = None
    error: BaseException | None = None
    calls: int = 0
    last_args: tuple[Any, ...] = ()
    last_kwargs: dict[str, Any] | None = None

    async def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self.calls += 1
        self.last_args = args
        self.last_kwargs = kwargs
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return self.result
