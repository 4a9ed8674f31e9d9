# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Adapter exports: facades, interceptor registries and models."""

from .dispatch import Dispatcher
from .facade import AxiosStyleClient, ClientDefaults, HeaderDefaults
from .interceptors import (
    Interceptors,
    RequestInterceptorManager,
    ResponseInterceptor,
    ResponseInterceptorManager,
)
from .models import InterceptedRequest, Method, RequestConfig, Response
from .normalize import normalize_result
from .simple import SimpleClient

__all__ = [
    "AxiosStyleClient",
    "ClientDefaults",
    "Dispatcher",
    "HeaderDefaults",
    "InterceptedRequest",
    "Interceptors",
    "Method",
    "RequestConfig",
    "RequestInterceptorManager",
    "Response",
    "ResponseInterceptor",
    "ResponseInterceptorManager",
    "SimpleClient",
    "normalize_result",
]
