# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport adapters that do not touch the network."""

from __future__ import annotations

from typing import Any

from ..utils import maybe_await
from .client import TransportInterceptor
from .headers import stringify_headers
from .models import Headers, TransportError, TransportRequest, TransportResult


class StubTransportClient:
    """
    Deterministic, programmable TransportClient for tests.

    Results are looked up by `(METHOD, url)` first, then by `url` alone. Every request
    is recorded after transport-level interceptors have run.
    """

    def __init__(self, results: dict[Any, TransportResult[Any]] | None = None):
        self._results: dict[Any, TransportResult[Any]] = dict(results or {})
        self._interceptors: list[TransportInterceptor] = []
        self.requests: list[TransportRequest] = []
        self.closed = False

    def add(self, url: str, result: TransportResult[Any], *, method: str | None = None) -> None:
        key: Any = (method.upper(), url) if method else url
        self._results[key] = result

    def add_request_interceptor(self, fn: TransportInterceptor) -> None:
        self._interceptors.append(fn)

    async def get(self, url: str, *, headers: Headers | None = None) -> TransportResult[Any]:
        return await self._send("GET", url, headers)

    async def post(self, url: str, body: Any = None, *, headers: Headers | None = None) -> TransportResult[Any]:
        return await self._send("POST", url, headers, body)

    async def put(self, url: str, body: Any = None, *, headers: Headers | None = None) -> TransportResult[Any]:
        return await self._send("PUT", url, headers, body)

    async def delete(self, url: str, *, headers: Headers | None = None) -> TransportResult[Any]:
        return await self._send("DELETE", url, headers)

    async def patch(self, url: str, body: Any = None, *, headers: Headers | None = None) -> TransportResult[Any]:
        return await self._send("PATCH", url, headers, body)

    async def _send(self, method: str, url: str, headers: Headers | None, body: Any = None) -> TransportResult[Any]:
        request = TransportRequest(method=method, url=url, headers=stringify_headers(headers), body=body)
        for interceptor in list(self._interceptors):
            request = await maybe_await(interceptor(request))
        self.requests.append(request)

        for key in ((request.method, request.url), request.url):
            if key in self._results:
                return self._results[key]
        return TransportResult(status=0, error=TransportError(message="No stubbed result configured"))

    async def aclose(self) -> None:
        self.closed = True


__all__ = ["StubTransportClient"]
