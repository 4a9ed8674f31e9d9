# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""axios-style facade over an envelope-returning transport client."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from ..config import ClientSettings, load_settings
from ..errors import UnsupportedMethodError
from ..http.client import TransportClient, create_default_transport
from ..http.headers import merge_headers
from ..http.models import TransportRequest
from ..http.url import encode_url
from .dispatch import Dispatcher
from .interceptors import Interceptors, RequestInterceptorManager, ResponseInterceptorManager
from .models import InterceptedRequest, Method, RequestConfig, Response


@dataclass
class HeaderDefaults:
    common: dict[str, str] = field(default_factory=dict)


@dataclass
class ClientDefaults:
    headers: HeaderDefaults = field(default_factory=HeaderDefaults)


class AxiosStyleClient:
    """
    Client exposing `get/post/put/delete/patch/request`, `defaults.headers.common`
    and `interceptors.request/response`.

    Default headers are merged under per-call headers twice: by the built-in first
    request interceptor (so user interceptors see them) and, when the client creates
    its own transport, by a transport-level hook on that transport.
    """

    def __init__(self, transport: TransportClient | None = None, settings: ClientSettings | None = None):
        self.settings = settings or load_settings()
        self.defaults = ClientDefaults()
        self.interceptors = Interceptors(request=RequestInterceptorManager(), response=ResponseInterceptorManager())
        self.interceptors.request.use(self._merge_default_headers)
        if transport is None:
            # Injected transports may be shared; only an owned transport gets the defaults hook.
            transport = create_default_transport(self.settings)
            transport.add_request_interceptor(self._merge_transport_headers)
        self.transport = transport
        self._dispatcher = Dispatcher(self.transport, self.interceptors)

    def _merge_default_headers(self, request: InterceptedRequest) -> InterceptedRequest:
        return replace(request, headers=merge_headers(self.defaults.headers.common, request.headers))

    def _merge_transport_headers(self, request: TransportRequest) -> TransportRequest:
        request.headers = merge_headers(self.defaults.headers.common, request.headers)
        return request

    async def get(
        self, url: str, *, headers: Mapping[str, str] | None = None, params: Mapping[str, Any] | None = None
    ) -> Response[Any]:
        return await self._dispatcher.dispatch(Method.GET, url, headers=headers, params=params)

    async def post(
        self,
        url: str,
        body: Any = None,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> Response[Any]:
        return await self._dispatcher.dispatch(Method.POST, url, headers=headers, params=params, body=body)

    async def put(
        self,
        url: str,
        body: Any = None,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> Response[Any]:
        return await self._dispatcher.dispatch(Method.PUT, url, headers=headers, params=params, body=body)

    async def delete(
        self, url: str, *, headers: Mapping[str, str] | None = None, params: Mapping[str, Any] | None = None
    ) -> Response[Any]:
        return await self._dispatcher.dispatch(Method.DELETE, url, headers=headers, params=params)

    async def patch(
        self,
        url: str,
        body: Any = None,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> Response[Any]:
        return await self._dispatcher.dispatch(Method.PATCH, url, headers=headers, params=params, body=body)

    async def request(self, config: RequestConfig | Mapping[str, Any]) -> Response[Any]:
        """
        Generic entry point: resolve the method (default GET, case-insensitive) and
        delegate to the matching verb.

        Request interceptors run here and again inside the verb, so each `request()`
        call folds headers twice. Only the folded headers are carried over; the verb
        receives the encoded original URL and rewrites it once.
        """
        if not isinstance(config, RequestConfig):
            config = RequestConfig.from_mapping(config)
        method = config.method_name
        url = encode_url(config.url, config.params)
        prepared = await self._dispatcher.preprocess(url, config.headers)

        if method == "get":
            return await self.get(url, headers=prepared.headers)
        if method == "post":
            return await self.post(url, config.data, headers=prepared.headers)
        if method == "put":
            return await self.put(url, config.data, headers=prepared.headers)
        if method == "delete":
            return await self.delete(url, headers=prepared.headers)
        if method == "patch":
            return await self.patch(url, config.data, headers=prepared.headers)
        raise UnsupportedMethodError(method)

    async def aclose(self) -> None:
        close = getattr(self.transport, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> AxiosStyleClient:
        return self

    async def __aexit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        await self.aclose()


__all__ = ["AxiosStyleClient", "ClientDefaults", "HeaderDefaults"]
