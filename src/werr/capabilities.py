"""Optional capabilities an error may expose, and how to find them in a chain.

Any exception type can opt in by defining the matching method; nothing here
requires subclassing :class:`werr.errors.AnnotatedError`.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, TypeVar, runtime_checkable

from werr.errors import AnnotatedError

C = TypeVar("C")


@runtime_checkable
class ErrorCoder(Protocol):
    """Error that knows its HTTP status code."""

    def error_code(self) -> int: ...  # pragma: no cover


@runtime_checkable
class ErrorShower(Protocol):
    """Error that carries a message safe to show to the HTTP caller."""

    def error_show(self) -> str: ...  # pragma: no cover


@runtime_checkable
class ErrorIDer(Protocol):
    """Error that carries a correlation ID for matching reports to logs."""

    def error_id(self) -> str: ...  # pragma: no cover


@runtime_checkable
class ErrorLocer(Protocol):
    """Error that knows the ``file:line`` it was annotated at."""

    def error_loc(self) -> str: ...  # pragma: no cover


def unwrap(err: BaseException) -> tuple[BaseException, ...]:
    """Return the direct causes of *err*.

    An ``unwrap()`` method takes precedence and may return ``None``, one
    error or a sequence of errors. Exception groups yield their members.
    Otherwise the explicit ``__cause__`` is used, then the implicit
    ``__context__`` unless it was suppressed.
    """
    method = getattr(err, "unwrap", None)
    if callable(method):
        inner = method()
        if inner is None:
            return ()
        if isinstance(inner, BaseException):
            return (inner,)
        return tuple(e for e in inner if isinstance(e, BaseException))
    if isinstance(err, BaseExceptionGroup):
        return tuple(err.exceptions)
    if err.__cause__ is not None:
        return (err.__cause__,)
    if err.__context__ is not None and not err.__suppress_context__:
        return (err.__context__,)
    return ()


def iter_chain(err: BaseException | None) -> Iterator[BaseException]:
    """Walk *err* and everything it wraps, depth first, each error once."""
    if err is None:
        return
    seen: set[int] = set()
    stack = [err]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))
        yield node
        stack.extend(reversed(unwrap(node)))


_METHODS: dict[type, str] = {
    ErrorCoder: "error_code",
    ErrorShower: "error_show",
    ErrorIDer: "error_id",
    ErrorLocer: "error_loc",
}


def _provides(node: BaseException, capability: type) -> bool:
    if not isinstance(node, capability):
        return False
    # runtime_checkable only checks that the attribute exists
    method = _METHODS.get(capability)
    return method is None or callable(getattr(node, method, None))


def find(err: BaseException | None, capability: type[C]) -> C | None:
    """Return the first error in the chain of *err* providing *capability*.

    For the capability protocols, an attribute that merely shares the method
    name (e.g. an ``error_code`` field) does not count.
    """
    for node in iter_chain(err):
        if _provides(node, capability):
            return node  # type: ignore[return-value]
    return None


def is_annotated(err: BaseException | None) -> bool:
    return find(err, AnnotatedError) is not None
