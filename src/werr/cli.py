from __future__ import annotations

import typer

from werr.annotate import wrap_code_showf, wrap_codef, wrap_showf, wrapf
from werr.container import get_container
from werr.errors import FormattedError, WerrError
from werr.logs import configure_logging
from werr.render import render
from werr.sink import ResponseRecorder

app = typer.Typer(
    name="werr",
    help="Annotate errors and preview how they render as HTTP responses",
)


def _build_error(
    message: str, code: int, show: str | None, plain: bool
) -> BaseException:
    if plain:
        return FormattedError(message)
    if show is not None:
        if code:
            return wrap_code_showf(code, FormattedError(message), "%s", show)
        return wrap_showf(FormattedError(message), "%s", show)
    if code:
        return wrap_codef(code, "%s", message)
    return wrapf("%s", message)


@app.command("render", help="Render MESSAGE as an HTTP error response")
def render_cmd(
    message: str = typer.Argument(..., help="Error text that goes to the log"),
    code: int = typer.Option(0, "--code", "-c", help="HTTP status, 0 for unset"),
    show: str | None = typer.Option(
        None, "--show", "-s", help="Text revealed to the HTTP caller"
    ),
    plain: bool = typer.Option(
        False, "--plain", help="Render a plain error without annotation"
    ),
    headers: bool = typer.Option(False, "--headers", help="Also print headers"),
) -> None:
    configure_logging(get_container().settings().log_level)
    err = _build_error(message, code, show, plain)

    recorder = ResponseRecorder()
    write_err = render(recorder, err)
    if write_err is not None:
        typer.echo(f"write failed: {write_err}", err=True)
        raise typer.Exit(2 if isinstance(write_err, WerrError) else 1)

    typer.echo(f"status: {recorder.status}")
    if headers:
        for name, value in recorder.headers.items():
            typer.echo(f"{name}: {value}")
    typer.echo(recorder.text)


@app.command("new-id", help="Print freshly generated correlation IDs")
def new_id(
    count: int = typer.Option(1, "--count", "-n", min=1, help="How many IDs"),
) -> None:
    ids = get_container().id_provider()
    for _ in range(count):
        typer.echo(ids.new_id())


@app.callback()
def root() -> None:
    """Root command for werr."""


def main() -> None:  # pragma: no cover - CLI entry point
    """Entrypoint for the CLI."""
    app()


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
