# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Convert transport envelopes into the adapter's Response shape."""

from __future__ import annotations

from typing import TypeVar

from ..errors import UpstreamError
from ..http.models import TransportResult
from .models import Response

T = TypeVar("T")


def raise_for_error(result: TransportResult[T]) -> None:
    """Raise UpstreamError when the envelope carries an error, whatever `content` holds."""
    if result.error is not None:
        raise UpstreamError(result.error.message, status=result.status, transport_error=result.error)


def normalize_result(result: TransportResult[T]) -> Response[T]:
    raise_for_error(result)
    return Response(data=result.content, status=result.status, headers=dict(result.headers or {}))


__all__ = ["normalize_result", "raise_for_error"]
