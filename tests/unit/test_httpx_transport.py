# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json

import httpx
import pytest

from axioslike.adapter.facade import AxiosStyleClient
from axioslike.config import ClientSettings
from axioslike.errors import ErrorCategory, UpstreamError
from axioslike.http.httpx_client import HttpxTransport
from axioslike.http.models import TransportRequest


def make_transport(handler, **settings):
    cfg = ClientSettings(base_url="https://api.test", user_agent="UA/1.0", **settings)
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=cfg.base_url)
    return HttpxTransport(cfg, client=client)


@pytest.mark.asyncio
async def test_json_response_is_decoded():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["request"] = request
        return httpx.Response(200, json={"id": 1})

    transport = make_transport(handler)
    result = await transport.get("/posts/1", headers={"X-A": "1"})
    assert result.ok is True
    assert result.status == 200
    assert result.content == {"id": 1}
    assert result.headers["content-type"] == "application/json"
    sent = captured["request"]
    assert str(sent.url) == "https://api.test/posts/1"
    assert sent.headers["x-a"] == "1"
    assert sent.headers["user-agent"] == "UA/1.0"
    await transport.aclose()


@pytest.mark.asyncio
async def test_bodies_are_sent_as_json_or_raw():
    bodies = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append((request.method, request.headers.get("content-type"), request.content))
        return httpx.Response(204)

    transport = make_transport(handler)
    result = await transport.post("/items", {"a": 1})
    assert result.content is None
    await transport.put("/items", "plain")
    await transport.patch("/items", b"\x00\x01")
    await transport.delete("/items")
    assert bodies[0][0] == "POST"
    assert bodies[0][1] == "application/json"
    assert json.loads(bodies[0][2]) == {"a": 1}
    assert bodies[1][0:3:2] == ("PUT", b"plain")
    assert bodies[2][0:3:2] == ("PATCH", b"\x00\x01")
    assert bodies[3] == ("DELETE", None, b"")


@pytest.mark.asyncio
async def test_text_response_is_returned_as_text():
    transport = make_transport(lambda request: httpx.Response(200, text="hello"))
    result = await transport.get("/")
    assert result.content == "hello"


@pytest.mark.asyncio
async def test_error_status_sets_error_alongside_content():
    transport = make_transport(lambda request: httpx.Response(404, json={"detail": "missing"}))
    result = await transport.get("/missing")
    assert result.ok is False
    assert result.status == 404
    assert result.content == {"detail": "missing"}
    assert result.error.message == "Request failed with status code 404"
    assert result.error.category == ErrorCategory.HTTP_ERROR.value


@pytest.mark.asyncio
async def test_network_failure_becomes_envelope():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    transport = make_transport(handler)
    result = await transport.get("/")
    assert result.status == 0
    assert result.content is None
    assert result.error.message == "connection refused"
    assert result.error.category == ErrorCategory.CONNECTION_ERROR.value
    assert result.error.type == "ConnectError"


@pytest.mark.asyncio
async def test_transport_interceptors_fold_before_send():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((str(request.url), request.headers.get("x-step")))
        return httpx.Response(200, json=True)

    async def second(request: TransportRequest) -> TransportRequest:
        request.headers["X-Step"] += "2"
        return request

    def first(request: TransportRequest) -> TransportRequest:
        request.headers["X-Step"] = "1"
        request.url = request.url + "?v=1"
        return request

    transport = make_transport(handler)
    transport.add_request_interceptor(first)
    transport.add_request_interceptor(second)
    await transport.get("/x")
    assert seen == [("https://api.test/x?v=1", "12")]


@pytest.mark.asyncio
async def test_facade_over_httpx_transport_end_to_end():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/fail":
            return httpx.Response(500, json={"detail": "server"})
        return httpx.Response(
            200,
            json={"auth": request.headers.get("authorization"), "query": request.url.query.decode()},
        )

    client = AxiosStyleClient(make_transport(handler), ClientSettings())
    client.defaults.headers.common["Authorization"] = "Bearer t"
    response = await client.get("/posts", params={"userId": 1})
    assert response.data == {"auth": "Bearer t", "query": "userId=1"}

    with pytest.raises(UpstreamError, match="status code 500"):
        await client.get("/fail")
    await client.aclose()
