"""Tests for stuffsite.server.sender — Response to ASGI messages."""

from typing import Any

from stuffsite.http.response import Response
from stuffsite.server.sender import send_response


async def _capture(response: Response, *, head: bool = False) -> list[dict[str, Any]]:
    messages: list[dict[str, Any]] = []

    async def send(message: dict[str, Any]) -> None:
        messages.append(message)

    await send_response(response, send, head=head)
    return messages


class TestSendResponse:
    async def test_start_and_body(self) -> None:
        messages = await _capture(Response("<h1>Hi</h1>").with_header("X-Thing", "1"))

        start, body = messages
        assert start["type"] == "http.response.start"
        assert start["status"] == 200
        headers = dict(start["headers"])
        assert headers[b"content-type"] == b"text/html; charset=utf-8"
        assert headers[b"x-thing"] == b"1"
        assert headers[b"content-length"] == b"11"
        assert body == {"type": "http.response.body", "body": b"<h1>Hi</h1>"}

    async def test_head_keeps_length_drops_body(self) -> None:
        start, body = await _capture(Response("<h1>Hi</h1>"), head=True)

        assert dict(start["headers"])[b"content-length"] == b"11"
        assert body["body"] == b""

    async def test_no_body_for_204(self) -> None:
        start, body = await _capture(Response("ignored", status=204))

        assert dict(start["headers"])[b"content-length"] == b"0"
        assert body["body"] == b""
