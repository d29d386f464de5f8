from __future__ import annotations

from typing import Protocol

import httpx

from werr.errors import InvalidStatusCode


class ResponseSink(Protocol):
    """Minimal HTTP response writer the renderer talks to."""

    def set_header(self, name: str, value: str) -> None:
        """Set a header; only effective before the status is written."""
        ...  # pragma: no cover

    def write_status(self, code: int) -> None:
        """Write the status line. Called at most once per response."""
        ...  # pragma: no cover

    def write(self, data: bytes) -> int:
        """Append *data* to the body and return the number of bytes written."""
        ...  # pragma: no cover


class ResponseRecorder(ResponseSink):
    """In-memory sink that records what a handler wrote."""

    def __init__(self) -> None:
        self.headers: dict[str, str] = {}
        self.status: int | None = None
        self.body = bytearray()

    def set_header(self, name: str, value: str) -> None:
        if self.status is None:
            self.headers[name] = value

    def write_status(self, code: int) -> None:
        if not 100 <= code <= 999:
            raise InvalidStatusCode(status=code)
        if self.status is None:
            self.status = code

    def write(self, data: bytes) -> int:
        if self.status is None:
            self.status = 200
        self.body.extend(data)
        return len(data)

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")

    def to_httpx(self, request: httpx.Request | None = None) -> httpx.Response:
        """Convert the recording into an :class:`httpx.Response`."""
        return httpx.Response(
            status_code=self.status if self.status is not None else 200,
            headers=self.headers,
            content=bytes(self.body),
            request=request,
        )
