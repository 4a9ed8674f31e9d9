# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport client abstraction and factory."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Protocol, Union

from ..config import ClientSettings, load_settings
from .models import Headers, TransportRequest, TransportResult

TransportInterceptor = Callable[[TransportRequest], Union[TransportRequest, Awaitable[TransportRequest]]]


class TransportClient(Protocol):
    """
    Minimal protocol for the envelope-returning client the adapter wraps.

    Implementations report failures through `TransportResult.error` instead of raising.
    """

    async def get(self, url: str, *, headers: Headers | None = None) -> TransportResult[Any]: ...

    async def post(self, url: str, body: Any = None, *, headers: Headers | None = None) -> TransportResult[Any]: ...

    async def put(self, url: str, body: Any = None, *, headers: Headers | None = None) -> TransportResult[Any]: ...

    async def delete(self, url: str, *, headers: Headers | None = None) -> TransportResult[Any]: ...

    async def patch(self, url: str, body: Any = None, *, headers: Headers | None = None) -> TransportResult[Any]: ...

    def add_request_interceptor(self, fn: TransportInterceptor) -> None: ...

    async def aclose(self) -> None:  # pragma: no cover - optional for adapters
        ...


def create_default_transport(settings: ClientSettings | None = None) -> TransportClient:
    """Factory for the default httpx-backed transport."""
    from .httpx_client import HttpxTransport

    return HttpxTransport(settings or load_settings())


__all__ = ["TransportClient", "TransportInterceptor", "create_default_transport"]
