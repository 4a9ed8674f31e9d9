# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
axioslike package entrypoint.

This package adapts an envelope-returning HTTP transport (one that reports
failures as values instead of raising) to an axios-style calling convention:
per-verb helpers, a generic `request()`, shared default headers, and ordered
request/response interceptors. The transport is abstracted behind an injectable
protocol, with an httpx-backed implementation as the default.
"""

from .adapter import (
    AxiosStyleClient,
    InterceptedRequest,
    Method,
    RequestConfig,
    Response,
    SimpleClient,
)
from .config import ClientSettings, load_settings
from .errors import AxiosLikeError, ErrorCategory, UnsupportedMethodError, UpstreamError
from .http import (
    HttpxTransport,
    StubTransportClient,
    TransportClient,
    TransportError,
    TransportResult,
    create_default_transport,
    encode_url,
)
from .log import setup_logging
from .runtime import create_client, create_simple_client
from .version import __version__

__all__ = [
    "AxiosLikeError",
    "AxiosStyleClient",
    "ClientSettings",
    "ErrorCategory",
    "HttpxTransport",
    "InterceptedRequest",
    "Method",
    "RequestConfig",
    "Response",
    "SimpleClient",
    "StubTransportClient",
    "TransportClient",
    "TransportError",
    "TransportResult",
    "UnsupportedMethodError",
    "UpstreamError",
    "create_client",
    "create_default_transport",
    "create_simple_client",
    "encode_url",
    "load_settings",
    "setup_logging",
    "__version__",
]
