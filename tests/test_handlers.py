import asyncio

import pytest

from werr.annotate import wrap_code_showf, wrap_codef
from werr.handlers import render_errors
from werr.sink import ResponseRecorder


@render_errors
def get_user(sink: ResponseRecorder, user_id: int) -> BaseException | None:
    if user_id < 0:
        return wrap_code_showf(400, None, "bad id %d", user_id)
    if user_id == 0:
        raise wrap_codef(404, "user %d missing", user_id)
    if user_id == 13:
        raise KeyError("cache")
    sink.write_status(200)
    sink.write(b"user")
    return None


@render_errors
async def get_user_async(sink: ResponseRecorder, user_id: int) -> None:
    await asyncio.sleep(0)
    if user_id < 0:
        raise wrap_code_showf(422, None, "negative id")
    sink.write_status(200)
    sink.write(b"user")


def test_success_writes_nothing_extra(recorder: ResponseRecorder) -> None:
    assert get_user(recorder, 1) is None
    assert recorder.status == 200
    assert recorder.text == "user"


def test_returned_error_is_rendered(recorder: ResponseRecorder) -> None:
    assert get_user(recorder, -5) is None
    assert recorder.status == 400
    assert recorder.text.startswith("bad id -5 [ID:")


def test_raised_annotated_error_is_rendered(recorder: ResponseRecorder) -> None:
    get_user(recorder, 0)
    assert recorder.status == 404
    assert recorder.text.startswith("internal error [ID:")


def test_raised_plain_error_is_rendered(
    recorder: ResponseRecorder, logs: pytest.LogCaptureFixture
) -> None:
    get_user(recorder, 13)
    assert recorder.status == 500
    assert recorder.text == "internal error"
    assert "cache" in logs.text


def test_wrapper_keeps_metadata() -> None:
    assert get_user.__name__ == "get_user"
    assert get_user_async.__name__ == "get_user_async"


def test_returned_write_error_is_propagated() -> None:
    class BrokenSink(ResponseRecorder):
        def write(self, data: bytes) -> int:
            raise BrokenPipeError("client went away")

    result = get_user(BrokenSink(), -1)
    assert isinstance(result, BrokenPipeError)


def test_base_exceptions_are_not_rendered(recorder: ResponseRecorder) -> None:
    @render_errors
    def interrupted(sink: ResponseRecorder) -> None:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        interrupted(recorder)
    assert recorder.status is None


@pytest.mark.asyncio
async def test_async_handler_success(recorder: ResponseRecorder) -> None:
    assert await get_user_async(recorder, 1) is None
    assert recorder.text == "user"


@pytest.mark.asyncio
async def test_async_handler_error(recorder: ResponseRecorder) -> None:
    assert await get_user_async(recorder, -1) is None
    assert recorder.status == 422
    assert recorder.text.startswith("negative id [ID:")


@pytest.mark.asyncio
async def test_async_handler_cancellation_propagates(recorder: ResponseRecorder) -> None:
    @render_errors
    async def slow(sink: ResponseRecorder) -> None:
        await asyncio.sleep(10)

    task = asyncio.create_task(slow(recorder))
    await asyncio.sleep(0)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert recorder.status is None
