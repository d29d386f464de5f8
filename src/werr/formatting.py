"""printf-style formatting with a ``%w`` verb for wrapping causes.

Formatting never raises on bad input; problems are rendered inline, e.g.
``%!d(MISSING)`` for a missing argument or ``%!d(str=x)`` for a value of
the wrong type.
"""

from __future__ import annotations

import json
import re
from collections.abc import Sequence

from werr.errors import FormattedError

_VERB_RE = re.compile(
    r"%(?P<flags>[-+ #0]*)(?P<width>\d+)?(?:\.(?P<prec>\d+))?(?P<verb>[a-zA-Z%])?"
)
_NUMERIC_VERBS = frozenset("dioxXeEfFgGc")


def _bad(verb: str, arg: object) -> str:
    return f"%!{verb}({type(arg).__name__}={arg})"


def _apply(spec: str, verb: str, arg: object) -> str:
    if verb in _NUMERIC_VERBS:
        if isinstance(arg, bool):
            return _bad(verb, arg)
        try:
            return (spec + verb) % (arg,)
        except (TypeError, ValueError, OverflowError):
            return _bad(verb, arg)
    if verb in ("v", "s", "w"):
        return (spec + "s") % (str(arg),)
    if verb == "r":
        return (spec + "r") % (arg,)
    if verb == "q":
        return (spec + "s") % (json.dumps(str(arg), ensure_ascii=False),)
    if verb == "t":
        if not isinstance(arg, bool):
            return _bad(verb, arg)
        return (spec + "s") % ("true" if arg else "false",)
    if verb == "T":
        return (spec + "s") % (type(arg).__name__,)
    return f"%!{verb}(BADVERB)"


def _format(fmt: str, args: Sequence[object]) -> tuple[str, tuple[BaseException, ...]]:
    out: list[str] = []
    wrapped: list[BaseException] = []
    pos = 0
    argi = 0
    for m in _VERB_RE.finditer(fmt):
        out.append(fmt[pos : m.start()])
        pos = m.end()
        verb = m.group("verb")
        if verb is None:
            out.append("%!(NOVERB)")
            continue
        if verb == "%":
            out.append("%")
            continue
        if argi >= len(args):
            out.append(f"%!{verb}(MISSING)")
            continue
        arg = args[argi]
        argi += 1
        spec = "%" + m.group("flags") + (m.group("width") or "")
        if m.group("prec") is not None:
            spec += "." + m.group("prec")
        if verb == "w":
            if not isinstance(arg, BaseException):
                out.append(_bad(verb, arg))
                continue
            wrapped.append(arg)
        out.append(_apply(spec, verb, arg))
    out.append(fmt[pos:])
    if argi < len(args):
        extra = ", ".join(f"{type(a).__name__}={a}" for a in args[argi:])
        out.append(f"%!(EXTRA {extra})")
    return "".join(out), tuple(wrapped)


def sprintf(fmt: str, *args: object) -> str:
    """Format *args* according to *fmt*; ``%w`` behaves like ``%v``."""
    text, _ = _format(fmt, args)
    return text


def errorf(fmt: str, *args: object) -> FormattedError:
    """Return a new error with the formatted text.

    Every argument consumed by a ``%w`` verb is recorded as a cause of the
    returned error.
    """
    text, wrapped = _format(fmt, args)
    return FormattedError(text, wrapped)
