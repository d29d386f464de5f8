from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(slots=True, eq=False)
class WerrError(Exception):
    """Base error for misuse of the package itself.

    Attributes:
        message: Human-readable message describing the error.
        code: Optional machine-readable code for monitoring/alerts.
        context: Optional structured context for diagnostics.
    """

    message: str
    code: str | None = None
    context: Mapping[str, Any] | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(slots=True, eq=False)
class InvalidStatusCode(WerrError):
    status: int
    message: str = field(init=False)
    code: str = field(init=False, default="WERR_INVALID_STATUS")
    context: dict[str, int] = field(init=False)

    def __post_init__(self) -> None:
        self.message = f"HTTP status must be in 100..999, got {self.status}"
        self.context = {"status": self.status}


class AnnotatedError(Exception):
    """Error carrying call-site location, correlation ID, status and show text.

    ``code`` of 0 means unset; ``error_code`` reports 500 in that case.
    An empty ``show`` means the renderer uses its generic message.
    """

    def __init__(
        self,
        cause: BaseException,
        loc: str,
        id: str,
        code: int = 0,
        show: str = "",
    ) -> None:
        super().__init__(cause)
        self._cause = cause
        self._loc = loc
        self._id = id
        self._code = code
        self._show = show
        self.__cause__ = cause

    @property
    def cause(self) -> BaseException:
        return self._cause

    @property
    def loc(self) -> str:
        return self._loc

    @property
    def id(self) -> str:
        return self._id

    @property
    def code(self) -> int:
        return self._code

    @property
    def show(self) -> str:
        return self._show

    def __str__(self) -> str:
        return (
            f"AnnotatedError: id={self.id!r}, code={self.code}, "
            f"show={self.show!r}, loc={self.loc!r}, err: {self.cause}"
        )

    def unwrap(self) -> BaseException:
        return self.cause

    def error_code(self) -> int:
        return self.code or 500

    def error_show(self) -> str:
        return self.show

    def error_id(self) -> str:
        return self.id

    def error_loc(self) -> str:
        return self.loc


class LocatedError(Exception):
    """Plain error whose text is prefixed with ``file:line``."""

    def __init__(self, loc: str, err: BaseException) -> None:
        super().__init__(f"{loc} :: {err}")
        self.loc = loc
        self.err = err
        self.__cause__ = err

    def unwrap(self) -> BaseException:
        return self.err


class FormattedError(Exception):
    """Error built from a format string; ``%w`` arguments become its causes."""

    def __init__(self, message: str, wrapped: tuple[BaseException, ...] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.wrapped = wrapped
        if wrapped:
            self.__cause__ = wrapped[0]

    def __str__(self) -> str:
        return self.message

    def unwrap(self) -> BaseException | tuple[BaseException, ...] | None:
        if not self.wrapped:
            return None
        if len(self.wrapped) == 1:
            return self.wrapped[0]
        return self.wrapped
