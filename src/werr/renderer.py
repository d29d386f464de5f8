from __future__ import annotations

from loguru import logger

from werr.capabilities import ErrorCoder, ErrorIDer, ErrorShower, find
from werr.sink import ResponseSink

DEFAULT_STATUS = 500
DEFAULT_FALLBACK_MESSAGE = "internal error"
DEFAULT_CONTENT_TYPE = "text/plain"


class Renderer:
    """Turn an error chain into one log line and a plain-text HTTP response."""

    def __init__(
        self,
        fallback_message: str = DEFAULT_FALLBACK_MESSAGE,
        content_type: str = DEFAULT_CONTENT_TYPE,
    ) -> None:
        self.fallback_message = fallback_message
        self.content_type = content_type

    def render(self, sink: ResponseSink, err: BaseException | None) -> Exception | None:
        """Write *err* to *sink*.

        Does nothing for ``None``. Returns the exception raised by the sink,
        if any; it is neither logged nor retried and no further writes are
        attempted after it.
        """
        if err is None:
            return None

        logger.error("Error: {}", str(err))

        coder = find(err, ErrorCoder)
        status = coder.error_code() if coder is not None else DEFAULT_STATUS

        shower = find(err, ErrorShower)
        show = shower.error_show() if shower is not None else ""
        if not show:
            show = self.fallback_message

        ider = find(err, ErrorIDer)
        suffix = f" [ID:{ider.error_id()}]" if ider is not None else ""

        try:
            sink.set_header("Content-Type", self.content_type)
            sink.write_status(status)
            sink.write(show.encode("utf-8"))
            if suffix:
                sink.write(suffix.encode("utf-8"))
        except Exception as exc:
            return exc
        return None
