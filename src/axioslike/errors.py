# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from .http.models import TransportError


class AxiosLikeError(Exception):
    """Base class for errors raised by the adapter."""


class UpstreamError(AxiosLikeError):
    """The transport reported an error; the message is forwarded verbatim."""

    def __init__(self, message: str, *, status: int | None = None, transport_error: TransportError | None = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.transport_error = transport_error


class UnsupportedMethodError(AxiosLikeError, ValueError):
    """`request()` was given a method with no matching verb operation."""

    def __init__(self, method: str):
        super().__init__(f"Unsupported method: {method}")
        self.method = method


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    HTTP_ERROR = "HTTP_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


def _exception_chain(exc: BaseException) -> list[BaseException]:
    chain: list[BaseException] = []
    current: BaseException | None = exc
    while current is not None and current not in chain:
        chain.append(current)
        current = current.__cause__ or current.__context__
    return chain


def categorize_exception(exc: Exception) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.

    httpx wraps low-level socket/TLS failures, so the whole cause chain is inspected.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    chain = _exception_chain(exc)
    if any(isinstance(item, (ssl_module.SSLError, ssl_module.CertificateError)) for item in chain):
        return ErrorCategory.SSL_ERROR

    if any(isinstance(item, (socket.gaierror, socket.herror)) for item in chain):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


__all__ = [
    "AxiosLikeError",
    "ErrorCategory",
    "UnsupportedMethodError",
    "UpstreamError",
    "categorize_exception",
]
