"""The outcome adapter: awaitables in, ``(error, value)`` pairs out.

Kind of like errbacks, but with ``await``. Ordinary failures land in the
error slot; defects (see :mod:`gowait.defects`) and misuse are raised.

Example:
    err, user = await gowait(client.get_user, user_id)
    if err:
        return render_error(err)
    return render(user)
"""

from __future__ import annotations

import functools
import inspect
import logging
from typing import TYPE_CHECKING, Any, overload

from gowait._dev_flags import dev_validate_enabled
from gowait.defects import DefectPolicy, default_policy
from gowait.errors import NotAwaitableError
from gowait.outcome import failure, success, validate_outcome

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from gowait.outcome import Outcome

__all__ = ["gowait", "gowait_with", "settled"]

log = logging.getLogger(__name__)


@overload
async def gowait[T](operation: Awaitable[T], /) -> Outcome[T, Exception]: ...


@overload
async def gowait[T, **P](
    operation: Callable[P, Awaitable[T]], /, *args: P.args, **kwargs: P.kwargs
) -> Outcome[T, Exception]: ...


async def gowait(operation: Any, /, *args: Any, **kwargs: Any) -> Outcome[Any, Exception]:
    """Await *operation* and return ``(None, value)`` or ``(error, None)``.

    Args:
        operation: An awaitable already in flight, or a callable returning
            one. Callables are invoked once with ``*args``/``**kwargs``;
            arguments are ignored when *operation* is already awaitable.

    Returns:
        ``(None, value)`` on success, ``(error, None)`` for a capturable
        ``Exception``.

    Raises:
        NotAwaitableError: *operation* neither is nor produces an awaitable.
        Exception: Any defect, re-raised unchanged.
        BaseException: Cancellation and interpreter exits pass straight
            through; they are never captured.
    """
    return await _settle(operation, args, kwargs, default_policy())


async def gowait_with(
    policy: DefectPolicy, operation: Any, /, *args: Any, **kwargs: Any
) -> Outcome[Any, Exception]:
    """Like :func:`gowait`, classifying failures with an explicit *policy*."""
    return await _settle(operation, args, kwargs, policy)


def settled[T, **P](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Outcome[T, Exception]]]:
    """Decorate an async function so calling it resolves to an outcome.

    ``settled(f)(*args)`` behaves exactly like ``gowait(f, *args)``.
    """

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Outcome[T, Exception]:
        return await _settle(func, args, kwargs, default_policy())

    return wrapper


async def _settle(
    operation: Any,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    policy: DefectPolicy,
) -> Outcome[Any, Exception]:
    pending = operation
    if not inspect.isawaitable(operation) and callable(operation):
        try:
            pending = operation(*args, **kwargs)
        except Exception as exc:
            # Raised before producing an awaitable; the await below never runs.
            return _finish(_capture(exc, policy))

    if not inspect.isawaitable(pending):
        log.debug("Rejecting non-awaitable operation of type %s", type(pending).__name__)
        raise NotAwaitableError(
            pending,
            hint="Pass a coroutine, task or future, or a function returning one",
        )

    try:
        value = await pending
    except Exception as exc:
        return _finish(_capture(exc, policy))
    return _finish(success(value))


def _capture(exc: Exception, policy: DefectPolicy) -> tuple[Exception, None]:
    """Return a failure outcome for *exc*, or re-raise it when it is a defect.

    Must be called from inside the ``except`` block handling *exc*.
    """
    category = policy.match(exc)
    if category is not None:
        log.debug("Re-raising %s defect: %s", category.name, type(exc).__name__)
        raise exc
    log.debug("Captured %s into outcome", type(exc).__name__)
    return failure(exc)


def _finish[O](outcome: O) -> O:
    """Shape-check *outcome* when dev validation is on.

    Outcomes here come from ``success()``/``failure()``; the check guards
    against regressions in those constructors.
    """
    if dev_validate_enabled():
        validate_outcome(outcome)
    return outcome
