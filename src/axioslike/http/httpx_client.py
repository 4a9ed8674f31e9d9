# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed TransportClient implementation."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..config import ClientSettings, load_settings
from ..errors import ErrorCategory, categorize_exception
from ..utils import maybe_await
from .client import TransportInterceptor
from .headers import header_value, merge_headers, stringify_headers
from .models import Headers, TransportError, TransportRequest, TransportResult

logger = logging.getLogger(__name__)


def _decode_content(resp: httpx.Response) -> Any:
    if not resp.content:
        return None
    content_type = header_value(resp.headers, "content-type").lower()
    if "json" in content_type:
        try:
            return resp.json()
        except ValueError:
            return resp.text
    return resp.text


def _body_kwargs(body: Any) -> dict[str, Any]:
    if body is None:
        return {}
    if isinstance(body, (bytes, bytearray, str)):
        return {"content": body}
    return {"json": body}


class HttpxTransport:
    """Asynchronous httpx client wrapper that reports failures as envelopes."""

    def __init__(self, settings: ClientSettings | None = None, client: httpx.AsyncClient | None = None):
        self.settings = settings or load_settings()
        self._client = client or httpx.AsyncClient(
            base_url=self.settings.base_url,
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )
        self._interceptors: list[TransportInterceptor] = []

    def add_request_interceptor(self, fn: TransportInterceptor) -> None:
        self._interceptors.append(fn)

    async def get(self, url: str, *, headers: Headers | None = None) -> TransportResult[Any]:
        return await self._send("GET", url, headers=headers)

    async def post(self, url: str, body: Any = None, *, headers: Headers | None = None) -> TransportResult[Any]:
        return await self._send("POST", url, headers=headers, body=body)

    async def put(self, url: str, body: Any = None, *, headers: Headers | None = None) -> TransportResult[Any]:
        return await self._send("PUT", url, headers=headers, body=body)

    async def delete(self, url: str, *, headers: Headers | None = None) -> TransportResult[Any]:
        return await self._send("DELETE", url, headers=headers)

    async def patch(self, url: str, body: Any = None, *, headers: Headers | None = None) -> TransportResult[Any]:
        return await self._send("PATCH", url, headers=headers, body=body)

    async def _send(self, method: str, url: str, *, headers: Headers | None, body: Any = None) -> TransportResult[Any]:
        request = TransportRequest(method=method, url=url, headers=stringify_headers(headers), body=body)
        for interceptor in list(self._interceptors):
            request = await maybe_await(interceptor(request))

        request_headers = merge_headers(
            {"User-Agent": self.settings.user_agent},
            self.settings.headers,
            request.headers,
        )

        try:
            resp = await self._client.request(
                request.method,
                request.url,
                headers=request_headers,
                **_body_kwargs(request.body),
            )
        except Exception as exc:  # noqa: BLE001
            category = categorize_exception(exc)
            logger.debug("%s %s failed (%s): %s", request.method, request.url, category.value, exc)
            return TransportResult(
                status=0,
                error=TransportError(
                    message=str(exc) or type(exc).__name__,
                    category=category.value,
                    type=type(exc).__name__,
                ),
            )

        result: TransportResult[Any] = TransportResult(
            status=resp.status_code,
            headers=dict(resp.headers),
            content=_decode_content(resp),
        )
        if resp.is_error:
            result.error = TransportError(
                message=f"Request failed with status code {resp.status_code}",
                category=ErrorCategory.HTTP_ERROR.value,
                type="HTTPStatusError",
                status=resp.status_code,
            )
        logger.debug("%s %s -> %s", request.method, request.url, resp.status_code)
        return result

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> HttpxTransport:
        return self

    async def __aexit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        await self.aclose()


__all__ = ["HttpxTransport"]
