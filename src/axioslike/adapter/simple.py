# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Verb-only facade with a construction-time throw-vs-return error policy."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..config import ClientSettings, load_settings
from ..http.client import TransportClient, create_default_transport
from ..http.models import TransportResult
from ..http.url import encode_url
from .normalize import raise_for_error

logger = logging.getLogger(__name__)


class SimpleClient:
    """
    Returns transport `content` directly, without interceptors.

    With `throw_on_error=False` a failed call still returns `content`, which is usually
    None. That lossy behaviour is kept for compatibility; the dropped error is logged.
    """

    def __init__(
        self,
        transport: TransportClient | None = None,
        settings: ClientSettings | None = None,
        *,
        throw_on_error: bool | None = None,
    ):
        self.settings = settings or load_settings()
        self.throw_on_error = self.settings.throw_on_error if throw_on_error is None else throw_on_error
        self.transport = transport or create_default_transport(self.settings)

    def _unwrap(self, result: TransportResult[Any]) -> Any:
        if not result.ok:
            if self.throw_on_error:
                raise_for_error(result)
            logger.warning("Transport error ignored (throw_on_error disabled): %s", result.error.message)
        return result.content

    async def get(self, url: str, *, headers: Mapping[str, str] | None = None, params: Mapping[str, Any] | None = None) -> Any:
        return self._unwrap(await self.transport.get(encode_url(url, params), headers=dict(headers or {})))

    async def post(
        self,
        url: str,
        body: Any = None,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        return self._unwrap(await self.transport.post(encode_url(url, params), body, headers=dict(headers or {})))

    async def put(
        self,
        url: str,
        body: Any = None,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        return self._unwrap(await self.transport.put(encode_url(url, params), body, headers=dict(headers or {})))

    async def delete(
        self, url: str, *, headers: Mapping[str, str] | None = None, params: Mapping[str, Any] | None = None
    ) -> Any:
        return self._unwrap(await self.transport.delete(encode_url(url, params), headers=dict(headers or {})))

    async def patch(
        self,
        url: str,
        body: Any = None,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        return self._unwrap(await self.transport.patch(encode_url(url, params), body, headers=dict(headers or {})))

    async def aclose(self) -> None:
        close = getattr(self.transport, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> SimpleClient:
        return self

    async def __aexit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        await self.aclose()


__all__ = ["SimpleClient"]
