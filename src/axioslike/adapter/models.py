# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request/response models seen by adapter callers and interceptors."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar, Union

from ..http.models import Headers

T = TypeVar("T")


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


@dataclass(frozen=True)
class RequestConfig:
    """Configuration for the generic `request()` operation."""

    url: str
    method: Union[Method, str, None] = None
    headers: Optional[Headers] = None
    params: Optional[Mapping[str, Any]] = None
    data: Any = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RequestConfig":
        """Accept axios-style dicts; `body` is an alias of `data`."""
        payload = data.get("data")
        if payload is None:
            payload = data.get("body")
        return cls(
            url=str(data.get("url") or ""),
            method=data.get("method"),
            headers=dict(data["headers"]) if data.get("headers") is not None else None,
            params=data.get("params"),
            data=payload,
        )

    @property
    def method_name(self) -> str:
        """Lower-cased method, defaulting to `get`."""
        if self.method is None:
            return "get"
        if isinstance(self.method, Method):
            return self.method.value.lower()
        return str(self.method).lower()


@dataclass
class InterceptedRequest:
    """The slice of a request that request interceptors may rewrite."""

    url: str
    headers: Headers = field(default_factory=dict)


@dataclass
class Response(Generic[T]):
    """Uniform response shape produced by the normalizer."""

    data: T
    status: int
    headers: Headers = field(default_factory=dict)


RequestInterceptor = Callable[[InterceptedRequest], Union[InterceptedRequest, Awaitable[InterceptedRequest]]]
SuccessHandler = Callable[[Response[Any]], Union[Response[Any], Awaitable[Response[Any]]]]
ErrorHandler = Callable[[BaseException], Any]


__all__ = [
    "ErrorHandler",
    "InterceptedRequest",
    "Method",
    "RequestConfig",
    "RequestInterceptor",
    "Response",
    "SuccessHandler",
]
