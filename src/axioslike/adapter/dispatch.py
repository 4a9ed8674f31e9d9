# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Per-call request pipeline.

Encode -> request interceptors -> transport -> normalize -> success handlers, with
failures from the transport call onwards routed to the first registered error
handler. Failures raised by request interceptors never reach the error handlers.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ..errors import UnsupportedMethodError
from ..http.client import TransportClient
from ..http.headers import stringify_headers
from ..http.models import Headers, TransportResult
from ..http.url import encode_url
from ..utils import maybe_await
from .interceptors import Interceptors
from .models import InterceptedRequest, Method, Response
from .normalize import normalize_result

logger = logging.getLogger(__name__)


class Dispatcher:
    """Runs one call through the interceptor pipeline; holds no per-call state."""

    def __init__(self, transport: TransportClient, interceptors: Interceptors):
        self.transport = transport
        self.interceptors = interceptors

    async def preprocess(self, url: str, headers: Mapping[str, Any] | None = None) -> InterceptedRequest:
        return await self.interceptors.request.run(InterceptedRequest(url=url, headers=stringify_headers(headers)))

    async def dispatch(
        self,
        method: Method,
        url: str,
        *,
        headers: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> Response[Any]:
        prepared = await self.preprocess(encode_url(url, params), headers)
        return await self.send(method, prepared, body)

    async def send(self, method: Method, prepared: InterceptedRequest, body: Any = None) -> Response[Any]:
        try:
            result = await self._invoke(method, prepared.url, stringify_headers(prepared.headers), body)
            response = normalize_result(result)
            return await self.interceptors.response.run_success(response)
        except Exception as exc:
            handler = self.interceptors.response.first_error_handler()
            if handler is None:
                raise
            logger.debug("%s %s failed, handing %s to error interceptor", method.value, prepared.url, type(exc).__name__)
            return await maybe_await(handler(exc))

    async def _invoke(self, method: Method, url: str, headers: Headers, body: Any) -> TransportResult[Any]:
        logger.debug("%s %s", method.value, url)
        if method is Method.GET:
            return await self.transport.get(url, headers=headers)
        if method is Method.DELETE:
            return await self.transport.delete(url, headers=headers)
        if method is Method.POST:
            return await self.transport.post(url, body, headers=headers)
        if method is Method.PUT:
            return await self.transport.put(url, body, headers=headers)
        if method is Method.PATCH:
            return await self.transport.patch(url, body, headers=headers)
        raise UnsupportedMethodError(method.value.lower())


__all__ = ["Dispatcher"]
