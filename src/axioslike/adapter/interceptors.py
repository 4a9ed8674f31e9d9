# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Ordered, append-only interceptor registries.

Request interceptors and response success handlers are applied as a left fold in
registration order. Response error handlers are not folded: the first entry that
defines one handles the failure and the rest are skipped.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

from ..utils import maybe_await
from .models import ErrorHandler, InterceptedRequest, RequestInterceptor, Response, SuccessHandler


@dataclass(frozen=True)
class ResponseInterceptor:
    on_success: SuccessHandler
    on_error: Optional[ErrorHandler] = None


class RequestInterceptorManager:
    """Registry behind `interceptors.request`."""

    def __init__(self) -> None:
        self._handlers: list[RequestInterceptor] = []

    def use(self, fn: RequestInterceptor) -> None:
        self._handlers.append(fn)

    def __iter__(self) -> Iterator[RequestInterceptor]:
        return iter(list(self._handlers))

    def __len__(self) -> int:
        return len(self._handlers)

    async def run(self, request: InterceptedRequest) -> InterceptedRequest:
        """Fold `request` through every interceptor, awaiting each step before the next."""
        for handler in self:
            request = await maybe_await(handler(request))
            if not isinstance(request, InterceptedRequest):
                raise TypeError(f"Request interceptor {handler!r} returned {type(request).__name__}, not a request")
        return request


class ResponseInterceptorManager:
    """Registry behind `interceptors.response`."""

    def __init__(self) -> None:
        self._entries: list[ResponseInterceptor] = []

    def use(self, on_success: SuccessHandler, on_error: Optional[ErrorHandler] = None) -> None:
        self._entries.append(ResponseInterceptor(on_success=on_success, on_error=on_error))

    def __iter__(self) -> Iterator[ResponseInterceptor]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    async def run_success(self, response: Response[Any]) -> Response[Any]:
        for entry in self:
            response = await maybe_await(entry.on_success(response))
        return response

    def first_error_handler(self) -> Optional[ErrorHandler]:
        for entry in self:
            if entry.on_error is not None:
                return entry.on_error
        return None


@dataclass(frozen=True)
class Interceptors:
    """`client.interceptors`: the request and response registries."""

    request: RequestInterceptorManager
    response: ResponseInterceptorManager


__all__ = [
    "Interceptors",
    "RequestInterceptorManager",
    "ResponseInterceptor",
    "ResponseInterceptorManager",
]
