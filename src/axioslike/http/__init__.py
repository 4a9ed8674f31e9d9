# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport client exports."""

from .adapters import StubTransportClient
from .client import TransportClient, TransportInterceptor, create_default_transport
from .headers import header_value, merge_headers, stringify_headers
from .httpx_client import HttpxTransport
from .models import Headers, TransportError, TransportRequest, TransportResult
from .url import encode_url

__all__ = [
    "Headers",
    "HttpxTransport",
    "StubTransportClient",
    "TransportClient",
    "TransportError",
    "TransportInterceptor",
    "TransportRequest",
    "TransportResult",
    "create_default_transport",
    "encode_url",
    "header_value",
    "merge_headers",
    "stringify_headers",
]
