"""Constructors that annotate errors with location, ID, status and show text.

All of them return the new error rather than raising it. Location is the
``file:line`` of whoever called the constructor; pass ``stacklevel=2`` from
a helper to attribute it to the helper's caller instead.
"""

from __future__ import annotations

import sys
from typing import overload

from werr.container import get_container
from werr.errors import AnnotatedError, LocatedError
from werr.formatting import errorf, sprintf
from werr.ids import IdProvider

UNKNOWN_LOCATION = "unknown:0"


def _caller_location(stacklevel: int) -> str:
    # 0 is this helper, 1 the constructor, 2 its caller
    try:
        frame = sys._getframe(stacklevel + 1)
    except ValueError:
        return UNKNOWN_LOCATION
    return f"{frame.f_code.co_filename}:{frame.f_lineno}"


def _new_id(ids: IdProvider | None) -> str:
    if ids is None:
        ids = get_container().id_provider()
    return ids.new_id()


@overload
def wrap_location(err: None, *, stacklevel: int = ...) -> None: ...
@overload
def wrap_location(err: BaseException, *, stacklevel: int = ...) -> LocatedError: ...


def wrap_location(
    err: BaseException | None, *, stacklevel: int = 1
) -> LocatedError | None:
    """Prefix the text of *err* with the caller's ``file:line``.

    The result still unwraps to *err* but exposes no capabilities.
    """
    if err is None:
        return None
    return LocatedError(_caller_location(stacklevel), err)


@overload
def wrap(cause: None, *, stacklevel: int = ..., ids: IdProvider | None = ...) -> None: ...
@overload
def wrap(
    cause: BaseException, *, stacklevel: int = ..., ids: IdProvider | None = ...
) -> AnnotatedError: ...


def wrap(
    cause: BaseException | None,
    *,
    stacklevel: int = 1,
    ids: IdProvider | None = None,
) -> AnnotatedError | None:
    """Annotate *cause* with the caller's location and a fresh ID.

    An :class:`AnnotatedError` is returned as-is, so wrapping twice is a no-op.
    """
    if cause is None:
        return None
    if isinstance(cause, AnnotatedError):
        return cause
    return AnnotatedError(
        cause=cause,
        loc=_caller_location(stacklevel),
        id=_new_id(ids),
    )


def wrapf(
    fmt: str, *args: object, stacklevel: int = 1, ids: IdProvider | None = None
) -> AnnotatedError:
    """Like :func:`werr.formatting.errorf` but annotated; ``%w`` wraps a cause."""
    return AnnotatedError(
        cause=errorf(fmt, *args),
        loc=_caller_location(stacklevel),
        id=_new_id(ids),
    )


def wrap_codef(
    code: int,
    fmt: str,
    *args: object,
    stacklevel: int = 1,
    ids: IdProvider | None = None,
) -> AnnotatedError:
    """Like :func:`wrapf` but also records an HTTP status code."""
    return AnnotatedError(
        cause=errorf(fmt, *args),
        loc=_caller_location(stacklevel),
        id=_new_id(ids),
        code=code,
    )


def wrap_showf(
    cause: BaseException | None,
    fmt: str,
    *args: object,
    stacklevel: int = 1,
    ids: IdProvider | None = None,
) -> AnnotatedError:
    """Annotate *cause* with a formatted message the renderer will show.

    Without a cause, the shown text itself becomes the cause. Always creates
    a new layer, even around an :class:`AnnotatedError`.
    """
    show = sprintf(fmt, *args)
    if cause is None:
        cause = errorf("%s", show)
    return AnnotatedError(
        cause=cause,
        loc=_caller_location(stacklevel),
        id=_new_id(ids),
        show=show,
    )


def wrap_code_showf(
    code: int,
    cause: BaseException | None,
    fmt: str,
    *args: object,
    stacklevel: int = 1,
    ids: IdProvider | None = None,
) -> AnnotatedError:
    """Like :func:`wrap_showf` but with an HTTP status code."""
    show = sprintf(fmt, *args)
    if cause is None:
        cause = errorf("%s", show)
    return AnnotatedError(
        cause=cause,
        loc=_caller_location(stacklevel),
        id=_new_id(ids),
        code=code,
        show=show,
    )
