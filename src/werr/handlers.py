from __future__ import annotations

import asyncio
import functools
import inspect
from collections.abc import Callable
from typing import Any, Concatenate, ParamSpec, TypeVar

from werr.render import render
from werr.sink import ResponseSink

P = ParamSpec("P")
S = TypeVar("S", bound=ResponseSink)


def _outcome(result: object) -> BaseException | None:
    return result if isinstance(result, BaseException) else None


def render_errors(
    func: Callable[Concatenate[S, P], Any],
) -> Callable[Concatenate[S, P], Any]:
    """Decorator rendering whatever error a handler raises or returns.

    The handler takes the response sink as its first argument. Returned
    exception instances are treated like raised ones; any other return
    value means success. The wrapper returns the sink write error, if any.
    """

    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(
            sink: S, *args: P.args, **kwargs: P.kwargs
        ) -> Exception | None:
            try:
                result = await func(sink, *args, **kwargs)
            except asyncio.CancelledError:
                raise
            except Exception as exc:
                return render(sink, exc)
            return render(sink, _outcome(result))

        return async_wrapper

    @functools.wraps(func)
    def sync_wrapper(sink: S, *args: P.args, **kwargs: P.kwargs) -> Exception | None:
        try:
            result = func(sink, *args, **kwargs)
        except Exception as exc:
            return render(sink, exc)
        return render(sink, _outcome(result))

    return sync_wrapper
