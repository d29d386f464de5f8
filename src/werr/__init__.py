"""Error annotation for HTTP handlers.

Handlers return (or raise) errors annotated with :func:`wrap` and friends;
:func:`render` turns whatever arrives at the boundary into one log line and
a plain-text response that only reveals the text meant for the caller.
"""

from werr.annotate import (
    wrap,
    wrap_code_showf,
    wrap_codef,
    wrap_location,
    wrap_showf,
    wrapf,
)
from werr.capabilities import (
    ErrorCoder,
    ErrorIDer,
    ErrorLocer,
    ErrorShower,
    find,
    is_annotated,
    iter_chain,
    unwrap,
)
from werr.errors import (
    AnnotatedError,
    FormattedError,
    InvalidStatusCode,
    LocatedError,
    WerrError,
)
from werr.formatting import errorf, sprintf
from werr.handlers import render_errors
from werr.ids import IdProvider, RandomIdProvider
from werr.render import render, render_response
from werr.renderer import Renderer
from werr.sink import ResponseRecorder, ResponseSink

__all__ = [
    "AnnotatedError",
    "ErrorCoder",
    "ErrorIDer",
    "ErrorLocer",
    "ErrorShower",
    "FormattedError",
    "IdProvider",
    "InvalidStatusCode",
    "LocatedError",
    "RandomIdProvider",
    "Renderer",
    "ResponseRecorder",
    "ResponseSink",
    "WerrError",
    "errorf",
    "find",
    "is_annotated",
    "iter_chain",
    "render",
    "render_errors",
    "render_response",
    "sprintf",
    "unwrap",
    "wrap",
    "wrap_code_showf",
    "wrap_codef",
    "wrap_location",
    "wrap_showf",
    "wrapf",
]
