from __future__ import annotations

import httpx

from werr.container import get_container
from werr.sink import ResponseRecorder, ResponseSink


def render(sink: ResponseSink, err: BaseException | None) -> Exception | None:
    """Log *err* and write it to *sink* using the process-wide renderer.

    ``None`` is a no-op, so a handler's result can be passed through
    unconditionally. Returns the sink's write error, if any.
    """
    return get_container().renderer().render(sink, err)


def render_response(
    err: BaseException | None, request: httpx.Request | None = None
) -> httpx.Response | None:
    """Render *err* into a new :class:`httpx.Response`; ``None`` for no error."""
    if err is None:
        return None
    recorder = ResponseRecorder()
    render(recorder, err)
    return recorder.to_httpx(request)
