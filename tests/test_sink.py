from typing import Callable

import httpx
import pytest

from werr.annotate import wrap_code_showf
from werr.errors import InvalidStatusCode
from werr.render import render_response
from werr.sink import ResponseRecorder


def test_recorder_first_status_wins() -> None:
    rec = ResponseRecorder()
    rec.write_status(404)
    rec.write_status(200)
    assert rec.status == 404


def test_recorder_write_implies_200() -> None:
    rec = ResponseRecorder()
    assert rec.write(b"ok") == 2
    assert rec.status == 200
    assert rec.text == "ok"


def test_recorder_ignores_headers_after_status() -> None:
    rec = ResponseRecorder()
    rec.set_header("X-Before", "1")
    rec.write_status(204)
    rec.set_header("X-After", "1")
    assert rec.headers == {"X-Before": "1"}


def test_recorder_to_httpx() -> None:
    rec = ResponseRecorder()
    rec.set_header("Content-Type", "text/plain")
    rec.write_status(418)
    rec.write(b"teapot")
    response = rec.to_httpx()
    assert isinstance(response, httpx.Response)
    assert response.status_code == 418
    assert response.headers["content-type"] == "text/plain"
    assert response.text == "teapot"


def test_render_response_none() -> None:
    assert render_response(None) is None


def test_render_response_serves_through_mock_transport(
    httpx_transport: Callable[[Callable[[httpx.Request], httpx.Response]], httpx.Client],
) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        err = wrap_code_showf(403, None, "no access to %s", request.url.path)
        response = render_response(err, request)
        assert response is not None
        return response

    with httpx_transport(handler) as client:
        response = client.get("https://api.test/secret")

    assert response.status_code == 403
    assert response.headers["content-type"] == "text/plain"
    assert response.text.startswith("no access to /secret [ID:")


def test_recorder_rejects_status_outside_three_digits() -> None:
    rec = ResponseRecorder()
    with pytest.raises(InvalidStatusCode):
        rec.write_status(99)
    with pytest.raises(InvalidStatusCode):
        rec.write_status(1000)
    rec.write_status(999)
    assert rec.status == 999
